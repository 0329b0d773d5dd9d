"""Graphviz rendering of discovered applications."""

from appscanner.visualise.dot import render_dot, write_dot

__all__ = ["render_dot", "write_dot"]

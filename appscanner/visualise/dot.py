"""Graphviz DOT output for an application hierarchy.

One node per application name and one ``child -> parent`` edge per parent
relation.  Deduplication and ordering come from the parser; this module
only draws what it is given.
"""

from __future__ import annotations

from pathlib import Path

from appscanner.models.applications import Application


def dot_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def render_dot(apps: list[Application], graph_name: str = "applications") -> str:
    """Return a directed DOT graph of *apps* and their parents."""
    lines = [f'digraph "{dot_escape(graph_name)}" {{']
    seen: set[str] = set()
    edges: list[str] = []

    def node(name: str) -> None:
        if name not in seen:
            seen.add(name)
            lines.append(f'  "{dot_escape(name)}";')

    for app in apps:
        node(app.name)
    for app in apps:
        for parent in app.parents:
            node(parent.name)
            edges.append(f'  "{dot_escape(app.name)}" -> "{dot_escape(parent.name)}";')

    lines.extend(edges)
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(apps: list[Application], path: str | Path) -> None:
    """Write the DOT graph of *apps* to *path*."""
    Path(path).write_text(render_dot(apps), encoding="utf-8")

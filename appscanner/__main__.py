"""Entry point for `python -m appscanner`.

Usage:
    python -m appscanner applications --graphviz-file apps.dot
    uv run python -m appscanner pipelines
"""

from __future__ import annotations

from appscanner.cli import cli

cli(prog_name="appscanner")

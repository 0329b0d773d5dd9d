"""Tests for the Graphviz DOT renderer."""

from __future__ import annotations

from pathlib import Path

from appscanner.models.applications import Application
from appscanner.visualise import render_dot, write_dot

_WORDPRESS = Application(name="wordpress")
_APPS = [
    Application(name="mysql", parents=[_WORDPRESS]),
    Application(name="php", parents=[_WORDPRESS]),
    _WORDPRESS,
]


def test_empty_graph() -> None:
    assert render_dot([]) == 'digraph "applications" {\n}\n'


def test_nodes_and_edges() -> None:
    assert render_dot(_APPS) == (
        'digraph "applications" {\n'
        '  "mysql";\n'
        '  "php";\n'
        '  "wordpress";\n'
        '  "mysql" -> "wordpress";\n'
        '  "php" -> "wordpress";\n'
        "}\n"
    )


def test_one_node_per_name() -> None:
    dot = render_dot(_APPS)
    assert dot.count('  "wordpress";') == 1


def test_parent_missing_from_list_still_gets_a_node() -> None:
    dot = render_dot([Application(name="php", parents=[Application(name="wordpress")])])
    assert '  "wordpress";' in dot
    assert '  "php" -> "wordpress";' in dot


def test_names_are_escaped() -> None:
    dot = render_dot([Application(name='say "hi"')])
    assert '  "say \\"hi\\"";' in dot


def test_write_dot(tmp_path: Path) -> None:
    target = tmp_path / "apps.dot"
    write_dot(_APPS, target)
    assert target.read_text(encoding="utf-8") == render_dot(_APPS)

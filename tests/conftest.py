"""Shared fixtures for grnode tests."""

import pytest


@pytest.fixture
def record_files(tmp_path):
    """Nodes and edges files describing a small dependency graph."""
    nodes_file = tmp_path / "nodes.txt"
    nodes_file.write_text(
        "# name|path|synopsis|url\n"
        "main|cmd/main|Program entry point|https://example.com/main\n"
        'pkg1|internal/pkg1|Parses "record" files|https://example.com/pkg1\n',
        encoding="utf-8",
    )
    edges_file = tmp_path / "edges.txt"
    edges_file.write_text("main,pkg1,depends_on\n", encoding="utf-8")
    return nodes_file, edges_file


@pytest.fixture
def ghost_edges(tmp_path):
    """Edges file naming a node that does not exist."""
    edges_file = tmp_path / "ghost_edges.txt"
    edges_file.write_text("main,ghost\n", encoding="utf-8")
    return edges_file

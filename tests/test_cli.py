"""Tests for the grnode command-line interface."""

from unittest.mock import Mock, patch

from click.testing import CliRunner

from grnode.cli import cli

SVG_OUTPUT = b'<?xml version="1.0"?>\n<svg width="10pt" height="10pt"></svg>\n'


def _graphviz_source():
    source = Mock()
    source.pipe.return_value = SVG_OUTPUT
    return Mock(return_value=source)


def test_version():
    """Test the version flag."""
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "Graphviz Graph Generator version 0.1.0" in result.output


def test_dot_command(record_files):
    """Test the DOT document is printed to stdout."""
    nodes_file, edges_file = record_files

    result = CliRunner().invoke(
        cli,
        ["dot", "-n", str(nodes_file), "-e", str(edges_file), "--name", "Deps", "--bgcolor", "white"],
    )

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "digraph Deps {"
    assert lines[1] == '  bgcolor="white";'
    assert '  n0 -> n1 [label="depends_on"];' in lines
    assert lines[-1] == "}"


def test_dot_command_unknown_node(record_files, ghost_edges):
    """Test reference errors exit non-zero without printing a document."""
    nodes_file, _ = record_files

    result = CliRunner().invoke(cli, ["dot", "-n", str(nodes_file), "-e", str(ghost_edges)])

    assert result.exit_code == 1
    assert "ghost" in result.output
    assert "digraph" not in result.output


def test_dot_command_bad_record(tmp_path, record_files):
    """Test malformed records exit non-zero."""
    _, edges_file = record_files
    nodes_file = tmp_path / "bad_nodes.txt"
    nodes_file.write_text("main|only-two\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["dot", "-n", str(nodes_file), "-e", str(edges_file)])

    assert result.exit_code == 1
    assert "Invalid" in result.output


@patch("grnode.visualization.renderer.shutil.which", return_value="/usr/bin/dot")
def test_render_command(mock_which, record_files, tmp_path):
    """Test rendering writes the SVG and DOT files."""
    nodes_file, edges_file = record_files
    output_file = tmp_path / "graph.svg"
    dot_file = tmp_path / "graph.dot"

    with patch("grnode.visualization.renderer.graphviz.Source", _graphviz_source()):
        result = CliRunner().invoke(
            cli,
            [
                "render",
                "-n", str(nodes_file),
                "-e", str(edges_file),
                "-o", str(output_file),
                "--dot", str(dot_file),
            ],
        )

    assert result.exit_code == 0, result.output
    assert "Successfully wrote graph SVG" in result.output
    assert output_file.read_bytes().startswith(b"<svg")
    assert dot_file.read_text(encoding="utf-8").startswith("digraph MyGraph {")


@patch("grnode.visualization.renderer.shutil.which", return_value=None)
def test_render_command_without_graphviz(mock_which, record_files, tmp_path):
    """Test a missing Graphviz installation is reported."""
    nodes_file, edges_file = record_files

    result = CliRunner().invoke(
        cli,
        ["render", "-n", str(nodes_file), "-e", str(edges_file), "-o", str(tmp_path / "g.svg")],
    )

    assert result.exit_code == 1
    assert "Graphviz" in result.output
    assert not (tmp_path / "g.svg").exists()


def test_preview_command(record_files):
    """Test preview lists nodes and edges."""
    nodes_file, edges_file = record_files

    result = CliRunner().invoke(cli, ["preview", "-n", str(nodes_file), "-e", str(edges_file)])

    assert result.exit_code == 0, result.output
    assert "main" in result.output
    assert "pkg1" in result.output
    assert "depends_on" in result.output


@patch("grnode.visualization.renderer.shutil.which", return_value=None)
def test_validate_command_reports_failures(mock_which, record_files, ghost_edges):
    """Test validate fails on bad references and missing Graphviz."""
    nodes_file, _ = record_files

    result = CliRunner().invoke(cli, ["validate", "-n", str(nodes_file), "-e", str(ghost_edges)])

    assert result.exit_code == 1
    assert "FAILED" in result.output


@patch("grnode.visualization.renderer.shutil.which", return_value="/usr/bin/dot")
def test_validate_command_passes(mock_which, record_files):
    """Test validate succeeds for good records with Graphviz present."""
    nodes_file, edges_file = record_files

    result = CliRunner().invoke(cli, ["validate", "-n", str(nodes_file), "-e", str(edges_file)])

    assert result.exit_code == 0, result.output
    assert "All checks passed" in result.output


@patch("grnode.visualization.renderer.shutil.which", return_value="/usr/bin/dot")
def test_info_command(mock_which):
    """Test info lists formats and engines."""
    result = CliRunner().invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "svg" in result.output
    assert "html" in result.output
    assert "neato" in result.output


@patch("grnode.visualization.renderer.shutil.which", return_value="/usr/bin/dot")
def test_validate_command_non_utf8_records(mock_which, tmp_path, record_files):
    """Test undecodable record files show as a failed check."""
    _, edges_file = record_files
    nodes_file = tmp_path / "latin1_nodes.txt"
    nodes_file.write_bytes(b"main|p|caf\xe9|u\n")

    result = CliRunner().invoke(cli, ["validate", "-n", str(nodes_file), "-e", str(edges_file)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "FAILED" in result.output
    assert "Validation" in result.output


def test_debug_flag_prints_traceback(record_files, ghost_edges):
    """Test --debug adds a traceback to error output."""
    nodes_file, _ = record_files
    args = ["dot", "-n", str(nodes_file), "-e", str(ghost_edges)]

    plain = CliRunner().invoke(cli, args)
    debug = CliRunner().invoke(cli, ["--debug", *args])

    assert plain.exit_code == 1
    assert "Traceback" not in plain.output
    assert debug.exit_code == 1
    assert "Traceback" in debug.output

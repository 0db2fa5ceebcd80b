"""Tests for the GraphGenerator facade."""

from unittest.mock import Mock, patch

import pytest

from grnode.core import (
    EdgeRecord,
    ExportConfig,
    GraphGenerator,
    GraphMetadata,
    NodeRecord,
    NodeReferenceError,
    OutputFormat,
)

SVG_OUTPUT = b'<?xml version="1.0"?>\n<svg width="10pt" height="10pt"></svg>\n'


def _graphviz_source():
    source = Mock()
    source.pipe.return_value = SVG_OUTPUT
    return Mock(return_value=source)


def test_build_and_generate_dot():
    """Test the documented main/pkg1 example."""
    generator = GraphGenerator()
    model = generator.build_model(
        GraphMetadata(name="G"),
        [NodeRecord(name="main"), NodeRecord(name="pkg1")],
        [EdgeRecord(source="main", target="pkg1", relation="depends_on")],
    )

    dot = generator.generate_dot(model)

    assert 'n0 -> n1 [label="depends_on"];' in dot
    assert "bgcolor" not in dot
    assert "  fontname=" not in dot


def test_build_model_unknown_node():
    """Test the documented ghost example fails without a document."""
    generator = GraphGenerator()

    with pytest.raises(NodeReferenceError) as exc_info:
        generator.build_model(
            GraphMetadata(name="G"),
            [NodeRecord(name="main")],
            [EdgeRecord(source="main", target="ghost")],
        )

    assert exc_info.value.names == ("ghost",)


def test_load_model_from_files(record_files):
    """Test models are loaded from record files."""
    nodes_file, edges_file = record_files

    model = GraphGenerator().load_model(str(nodes_file), str(edges_file), GraphMetadata(name="Deps"))

    assert [node.name for node in model.nodes] == ["main", "pkg1"]
    assert model.metadata.name == "Deps"


@patch("grnode.visualization.renderer.shutil.which", return_value="/usr/bin/dot")
def test_export_diagram_svg(mock_which, record_files, tmp_path):
    """Test exporting writes the SVG payload and the optional DOT file."""
    nodes_file, edges_file = record_files
    config = ExportConfig(
        nodes_file=str(nodes_file),
        edges_file=str(edges_file),
        output_file=str(tmp_path / "out.svg"),
        graph_name="Deps",
        dot_file=str(tmp_path / "out.dot"),
    )
    source_cls = _graphviz_source()

    with patch("grnode.visualization.renderer.graphviz.Source", source_cls):
        output_path = GraphGenerator().export_diagram(config)

    assert output_path.read_bytes().startswith(b"<svg")
    dot = (tmp_path / "out.dot").read_text(encoding="utf-8")
    assert dot.startswith("digraph Deps {")
    assert 'tooltip="Parses \\"record\\" files"' in dot
    assert source_cls.call_args.args[0] == dot


@patch("grnode.visualization.renderer.shutil.which", return_value="/usr/bin/dot")
def test_export_diagram_html(mock_which, record_files, tmp_path):
    """Test exporting to HTML."""
    nodes_file, edges_file = record_files
    config = ExportConfig(
        nodes_file=str(nodes_file),
        edges_file=str(edges_file),
        output_file=str(tmp_path / "out.html"),
        output_format=OutputFormat.HTML,
    )

    with patch("grnode.visualization.renderer.graphviz.Source", _graphviz_source()):
        output_path = GraphGenerator().export_diagram(config)

    assert "<svg" in output_path.read_text(encoding="utf-8")


def test_export_diagram_reference_error_skips_renderer(record_files, ghost_edges, tmp_path):
    """Test reference errors abort before Graphviz is touched."""
    nodes_file, _ = record_files
    config = ExportConfig(
        nodes_file=str(nodes_file),
        edges_file=str(ghost_edges),
        output_file=str(tmp_path / "out.svg"),
    )

    with patch("grnode.core.generator.GraphRenderer") as renderer_cls:
        with pytest.raises(NodeReferenceError):
            GraphGenerator().export_diagram(config)

    renderer_cls.assert_not_called()
    assert not (tmp_path / "out.svg").exists()


@patch("grnode.visualization.renderer.shutil.which", return_value=None)
def test_validate_prerequisites_without_graphviz(mock_which):
    """Test missing Graphviz is reported rather than raised."""
    generator = GraphGenerator()

    assert generator.validate_prerequisites() == {"graphviz": False}
    assert generator.get_available_engines() == []


def test_get_supported_formats():
    """Test supported formats are listed."""
    assert GraphGenerator().get_supported_formats() == ["svg", "html"]

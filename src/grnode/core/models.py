"""Data models and enums for grnode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict


class OutputFormat(str, Enum):
    """Supported output formats."""

    SVG = "svg"
    HTML = "html"


@dataclass(frozen=True)
class NodeRecord:
    """One graph node as read from the nodes file."""

    name: str
    path: str = ""
    synopsis: str = ""
    url: str = ""


@dataclass(frozen=True)
class EdgeRecord:
    """One directed relationship as read from the edges file.

    Empty ``relation``, ``color`` and ``style`` mean the attribute is absent.
    """

    source: str
    target: str
    relation: str = ""
    color: str = ""
    style: str = ""


@dataclass(frozen=True)
class GraphMetadata:
    """Graph-level attributes."""

    name: str = "MyGraph"
    background_color: str = ""
    font_name: str = ""


@dataclass(frozen=True)
class GraphModel:
    """Metadata plus ordered nodes and edges.

    Node order is significant: the node at index ``i`` is emitted as ``n<i>``.
    Build instances with :class:`grnode.visualization.GraphBuilder`.
    """

    metadata: GraphMetadata
    nodes: tuple[NodeRecord, ...] = ()
    edges: tuple[EdgeRecord, ...] = ()


class RenderConfig(BaseModel):
    """Fixed styling applied to every document."""

    model_config = ConfigDict(frozen=True)

    node_style: str = 'shape=box, style=filled, fillcolor="#e0e0e0", fontname="Arial"'
    edge_style: str = 'color="#555555", fontname="Arial"'
    indent: str = "  "


class ExportConfig(BaseModel):
    """Configuration for a single export run."""

    nodes_file: str = "nodes.txt"
    edges_file: str = "edges.txt"
    output_file: str = "graph.svg"
    graph_name: str = "MyGraph"
    background_color: str = ""
    font_name: str = ""
    output_format: OutputFormat = OutputFormat.SVG
    engine: str = "dot"
    dot_file: str | None = None

    def metadata(self) -> GraphMetadata:
        """Graph metadata described by this configuration."""
        return GraphMetadata(
            name=self.graph_name,
            background_color=self.background_color,
            font_name=self.font_name,
        )

"""DOT language generation for Graphviz rendering."""

import logging
from typing import Dict, List, Optional, Tuple

from ..core.exceptions import NodeReferenceError
from ..core.models import EdgeRecord, GraphModel, RenderConfig
from .graph_builder import index_nodes, node_id, unresolved_names

logger = logging.getLogger(__name__)


def escape_quotes(text: str) -> str:
    """Escape double quotes for use inside a quoted DOT string.

    No other characters are touched.
    """
    return text.replace('"', '\\"')


class DOTGenerator:
    """Generates DOT language documents from graph models."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize DOT generator with configuration.

        Args:
            config: Render configuration. Defaults to the standard node and edge styling.
        """
        self.config = config or RenderConfig()

    def generate_dot(self, model: GraphModel) -> str:
        """Generate a DOT language string from a graph model.

        Nothing is returned unless every edge resolves.

        Args:
            model: Graph model to serialize.

        Returns:
            DOT language string.

        Raises:
            NodeReferenceError: If an edge names a node not in the model.
        """
        logger.info("Generating DOT language from graph")

        ids = index_nodes(model.nodes)

        lines = [self._generate_header(model)]
        lines.extend(self._generate_graph_attributes(model))
        lines.append(self._generate_node_defaults())
        lines.append(self._generate_edge_defaults())
        lines.extend(self._generate_nodes(model))
        lines.extend(self._generate_edges(model, ids))
        lines.append("}")

        logger.info("DOT language generation completed")
        return "\n".join(lines)

    def _generate_header(self, model: GraphModel) -> str:
        """Generate DOT file header."""
        return f"digraph {model.metadata.name} {{"

    def _generate_graph_attributes(self, model: GraphModel) -> List[str]:
        """Generate graph-level attributes that are set."""
        indent = self.config.indent
        metadata = model.metadata
        attributes = []
        if metadata.background_color:
            attributes.append(f'{indent}bgcolor="{metadata.background_color}";')
        if metadata.font_name:
            attributes.append(f'{indent}fontname="{metadata.font_name}";')
        return attributes

    def _generate_node_defaults(self) -> str:
        """Generate default node attributes."""
        return f"{self.config.indent}node [{self.config.node_style}];"

    def _generate_edge_defaults(self) -> str:
        """Generate default edge attributes."""
        return f"{self.config.indent}edge [{self.config.edge_style}];"

    def _generate_nodes(self, model: GraphModel) -> List[str]:
        indent = self.config.indent
        return [
            f'{indent}{node_id(index)} [label="{node.name}", URL="{node.url}", '
            f'tooltip="{escape_quotes(node.synopsis)}"];'
            for index, node in enumerate(model.nodes)
        ]

    def _generate_edges(self, model: GraphModel, ids: Dict[str, str]) -> List[str]:
        """Generate edge statements in input order.

        Args:
            model: Graph model being serialized.
            ids: Node name to positional identifier mapping.

        Returns:
            One statement per edge.
        """
        indent = self.config.indent
        statements = []
        for edge in model.edges:
            if edge.source not in ids or edge.target not in ids:
                raise NodeReferenceError(unresolved_names(ids, [edge]))

            statement = f"{indent}{ids[edge.source]} -> {ids[edge.target]}"
            attributes = self._edge_attributes(edge)
            if attributes:
                joined = ", ".join(f'{key}="{value}"' for key, value in attributes)
                statement = f"{statement} [{joined}]"
            statements.append(f"{statement};")
        return statements

    @staticmethod
    def _edge_attributes(edge: EdgeRecord) -> List[Tuple[str, str]]:
        """Present edge attributes, always ordered label, color, style."""
        candidates = [
            ("label", edge.relation),
            ("color", edge.color),
            ("style", edge.style),
        ]
        return [(key, value) for key, value in candidates if value]

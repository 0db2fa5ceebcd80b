"""Main GraphGenerator class tying record loading, DOT generation and rendering together."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import networkx as nx

from ..records import load_edges, load_nodes
from ..visualization import DOTGenerator, GraphBuilder, GraphRenderer
from .exceptions import RenderError
from .models import (
    EdgeRecord, ExportConfig, GraphMetadata, GraphModel, NodeRecord,
    OutputFormat, RenderConfig,
)

logger = logging.getLogger(__name__)


class GraphGenerator:
    """Main class for turning node and edge records into diagrams."""

    def __init__(self, render_config: Optional[RenderConfig] = None, verbose: bool = False):
        """Initialize GraphGenerator instance.

        Args:
            render_config: Fixed node and edge styling. If None, uses the defaults.
            verbose: Whether Graphviz warnings are shown when rendering.
        """
        self.render_config = render_config or RenderConfig()
        self.verbose = verbose
        self.graph_builder = GraphBuilder()
        self.dot_generator = DOTGenerator(self.render_config)

    def load_model(self, nodes_file: str, edges_file: str, metadata: GraphMetadata) -> GraphModel:
        """Read record files and build a validated graph model.

        Args:
            nodes_file: Path to the nodes file.
            edges_file: Path to the edges file.
            metadata: Graph-level attributes.

        Returns:
            Validated graph model.
        """
        nodes = load_nodes(nodes_file)
        edges = load_edges(edges_file)
        return self.build_model(metadata, nodes, edges)

    def build_model(
        self,
        metadata: GraphMetadata,
        nodes: Sequence[NodeRecord],
        edges: Sequence[EdgeRecord],
    ) -> GraphModel:
        """Build a validated graph model from records."""
        return self.graph_builder.build(metadata, nodes, edges)

    def generate_dot(self, model: GraphModel) -> str:
        """Serialize a graph model to DOT."""
        return self.dot_generator.generate_dot(model)

    def to_networkx(self, model: GraphModel) -> nx.MultiDiGraph:
        """NetworkX view of a graph model keyed by positional identifier."""
        return self.graph_builder.build_networkx(model)

    def export_diagram(self, config: ExportConfig) -> Path:
        """Export a diagram from record files.

        The model is built and serialized before Graphviz is invoked, so
        record and reference errors never reach the renderer.

        Args:
            config: Export configuration.

        Returns:
            Path to generated diagram file.
        """
        logger.info(f"Starting diagram export from {config.nodes_file} and {config.edges_file}")

        model = self.load_model(config.nodes_file, config.edges_file, config.metadata())
        dot_content = self.generate_dot(model)

        renderer = GraphRenderer(verbose=self.verbose)

        if config.dot_file:
            renderer.save_dot_file(dot_content, config.dot_file)

        output_path = renderer.render(
            dot_content,
            config.output_file,
            output_format=config.output_format,
            engine=config.engine,
            title=model.metadata.name,
        )

        logger.info(f"Diagram exported successfully: {output_path}")
        return output_path

    def validate_prerequisites(self) -> Dict[str, bool]:
        """Validate prerequisites for diagram generation.

        Returns:
            Dictionary with validation results.
        """
        results = {}

        try:
            GraphRenderer()
            results["graphviz"] = True
        except RenderError:
            results["graphviz"] = False

        return results

    def get_supported_formats(self) -> List[str]:
        """Get list of supported output formats."""
        return [fmt.value for fmt in OutputFormat]

    def get_available_engines(self) -> List[str]:
        """Get list of installed Graphviz layout engines."""
        try:
            return GraphRenderer().get_available_engines()
        except RenderError:
            return []

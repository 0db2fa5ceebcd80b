#!/usr/bin/env python3
"""Basic usage examples for grnode."""

from pathlib import Path

from grnode import EdgeRecord, GraphGenerator, GraphMetadata, NodeRecord, OutputFormat
from grnode.core import ExportConfig

DATA_DIR = Path(__file__).parent / "data"


def main():
    """Demonstrate basic grnode usage."""

    generator = GraphGenerator()

    # Example 1: Build a model in memory and print its DOT source
    print("Generating DOT for an in-memory graph...")
    model = generator.build_model(
        GraphMetadata(name="Deps"),
        nodes=[
            NodeRecord(name="main", synopsis="Program entry point"),
            NodeRecord(name="pkg1", synopsis='Parses "record" files'),
        ],
        edges=[EdgeRecord(source="main", target="pkg1", relation="depends_on")],
    )
    print(generator.generate_dot(model))

    # Example 2: Render the sample record files to SVG, keeping the DOT source
    print("Rendering sample records to SVG...")
    generator.export_diagram(
        ExportConfig(
            nodes_file=str(DATA_DIR / "nodes.txt"),
            edges_file=str(DATA_DIR / "edges.txt"),
            output_file="sample-graph.svg",
            graph_name="Sample",
            background_color="white",
            dot_file="sample-graph.dot",
        )
    )

    # Example 3: Same graph as a standalone HTML page
    print("Rendering sample records to HTML...")
    generator.export_diagram(
        ExportConfig(
            nodes_file=str(DATA_DIR / "nodes.txt"),
            edges_file=str(DATA_DIR / "edges.txt"),
            output_file="sample-graph.html",
            graph_name="Sample",
            output_format=OutputFormat.HTML,
        )
    )

    print("All examples completed!")


if __name__ == "__main__":
    main()

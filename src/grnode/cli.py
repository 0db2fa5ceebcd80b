"""Command-line interface for grnode."""

from __future__ import annotations

import logging
import sys
from typing import Callable

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .core import (
    ExportConfig,
    GraphGenerator,
    GraphMetadata,
    GraphModel,
    GrnodeError,
    OutputFormat,
)
from .visualization.graph_builder import node_id

# Setup rich consoles; diagnostics go to stderr so `grnode dot` output stays clean
console = Console()
err_console = Console(stderr=True)

DEFAULT_OUTPUT = "graph.svg"


# Configure logging
def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging with rich handler."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )

    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("grnode").setLevel(level)


def report_error(error: Exception) -> None:
    """Print an error and exit with status 1."""
    err_console.print(f"❌ Error: {escape(str(error))}", style="red")
    if logging.getLogger("grnode").isEnabledFor(logging.DEBUG):
        err_console.print_exception()
    sys.exit(1)


RECORD_OPTIONS = [
    click.option(
        "--nodes",
        "-n",
        "nodes_file",
        default="nodes.txt",
        show_default=True,
        help="File containing node information (name|path|synopsis|url)",
    ),
    click.option(
        "--edges",
        "-e",
        "edges_file",
        default="edges.txt",
        show_default=True,
        help="File containing edge information (from,to[,relation,color,style])",
    ),
    click.option("--name", "graph_name", default="MyGraph", show_default=True, help="Name of the graph"),
    click.option("--bgcolor", default="", help="Background color of the graph"),
    click.option("--fontname", default="", help="Font name for the graph"),
]


def record_options(func: Callable) -> Callable:
    """Options shared by every command that reads record files."""
    for option in reversed(RECORD_OPTIONS):
        func = option(func)
    return func


def load_model(
    generator: GraphGenerator,
    nodes_file: str,
    edges_file: str,
    graph_name: str,
    bgcolor: str,
    fontname: str,
) -> GraphModel:
    metadata = GraphMetadata(name=graph_name, background_color=bgcolor, font_name=fontname)
    return generator.load_model(nodes_file, edges_file, metadata)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--debug", is_flag=True, help="Enable debug logging and show tracebacks on errors")
@click.version_option(
    version=__version__,
    prog_name="grnode",
    message="Graphviz Graph Generator version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """grnode - Graphviz graph generator.

    Turn a nodes file and an edges file into an SVG diagram.

    \b
    File formats:
    - nodes: name|path|synopsis|url           (one node per line)
    - edges: from,to[,relation,color,style]   (one edge per line)
    - blank lines and lines starting with '#' are ignored

    \b
    Examples:
      grnode render                                  # nodes.txt + edges.txt -> graph.svg
      grnode render -n deps.txt -e links.txt -o deps.svg --bgcolor lightgray
      grnode render --format html -o graph.html
      grnode dot -n deps.txt -e links.txt > graph.dot
      grnode preview
    """
    setup_logging(verbose, debug)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@record_options
@click.option(
    "--output",
    "-o",
    default=DEFAULT_OUTPUT,
    help="File to write the diagram to (default: graph.svg, extension follows --format)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    default="svg",
    help="Output format (default: svg)",
)
@click.option("--engine", default="dot", help="Graphviz layout engine (default: dot)")
@click.option("--dot", "dot_file", help="File to write the DOT output for debugging")
@click.pass_context
def render(
    ctx: click.Context,
    nodes_file: str,
    edges_file: str,
    graph_name: str,
    bgcolor: str,
    fontname: str,
    output: str,
    output_format: str,
    engine: str,
    dot_file: str | None,
) -> None:
    """Render the graph to an SVG (or HTML) file.

    \b
    Examples:
      grnode render
      grnode render -n nodes.txt -e edges.txt -o graph.svg --name Deps
      grnode render --dot graph.dot        # Also keep the DOT source
      grnode render --engine neato
    """
    try:
        verbose_mode = ctx.obj.get("verbose", False)

        output_file = output
        if output == DEFAULT_OUTPUT and output_format == OutputFormat.HTML.value:
            output_file = "graph.html"

        config = ExportConfig(
            nodes_file=nodes_file,
            edges_file=edges_file,
            output_file=output_file,
            graph_name=graph_name,
            background_color=bgcolor,
            font_name=fontname,
            output_format=OutputFormat(output_format),
            engine=engine,
            dot_file=dot_file,
        )

        generator = GraphGenerator(verbose=verbose_mode)
        output_path = generator.export_diagram(config)

        if dot_file:
            console.print(f"DOT output written to {escape(dot_file)}", style="blue")
        console.print(
            f"Successfully wrote graph {output_format.upper()} to {escape(str(output_path))}",
            style="green",
        )

    except Exception as e:
        report_error(e)


@cli.command()
@record_options
def dot(
    nodes_file: str,
    edges_file: str,
    graph_name: str,
    bgcolor: str,
    fontname: str,
) -> None:
    """Print the DOT document to standard output without rendering."""
    try:
        generator = GraphGenerator()
        model = load_model(generator, nodes_file, edges_file, graph_name, bgcolor, fontname)
        click.echo(generator.generate_dot(model))

    except Exception as e:
        report_error(e)


@cli.command()
@record_options
@click.pass_context
def preview(
    ctx: click.Context,
    nodes_file: str,
    edges_file: str,
    graph_name: str,
    bgcolor: str,
    fontname: str,
) -> None:
    """Preview nodes and edges without rendering."""
    try:
        verbose_mode = ctx.obj.get("verbose", False)

        generator = GraphGenerator()
        model = load_model(generator, nodes_file, edges_file, graph_name, bgcolor, fontname)
        graph = generator.to_networkx(model)

        nodes_table = Table(title=f"Nodes in '{escape(model.metadata.name)}'")
        nodes_table.add_column("ID", style="yellow", no_wrap=True)
        nodes_table.add_column("Name", style="cyan", no_wrap=True)
        nodes_table.add_column("Path", style="magenta")
        nodes_table.add_column("In", style="green", justify="right")
        nodes_table.add_column("Out", style="green", justify="right")
        nodes_table.add_column("URL", style="blue")

        for index, node in enumerate(model.nodes):
            identifier = node_id(index)
            nodes_table.add_row(
                identifier,
                escape(node.name),
                escape(node.path),
                str(graph.in_degree(identifier)),
                str(graph.out_degree(identifier)),
                escape(node.url),
            )

        console.print(nodes_table)

        edges_table = Table(title="Edges")
        edges_table.add_column("From", style="cyan", no_wrap=True)
        edges_table.add_column("To", style="cyan", no_wrap=True)
        edges_table.add_column("Relation", style="magenta")
        edges_table.add_column("Color", style="green")
        edges_table.add_column("Style", style="blue")

        for edge in model.edges:
            edges_table.add_row(
                escape(edge.source),
                escape(edge.target),
                escape(edge.relation),
                escape(edge.color),
                escape(edge.style),
            )

        console.print(edges_table)
        if verbose_mode:
            console.print(
                f"\n📊 Total: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges",
                style="blue",
            )

    except Exception as e:
        report_error(e)


@cli.command()
@record_options
def validate(
    nodes_file: str,
    edges_file: str,
    graph_name: str,
    bgcolor: str,
    fontname: str,
) -> None:
    """Validate record files and prerequisites for rendering."""
    generator = GraphGenerator()

    checks = {}
    details = {}
    try:
        model = load_model(generator, nodes_file, edges_file, graph_name, bgcolor, fontname)
        checks["records"] = True
        details["records"] = f"{len(model.nodes)} nodes, {len(model.edges)} edges"
    except (GrnodeError, OSError) as e:
        checks["records"] = False
        details["records"] = str(e)

    prereqs = generator.validate_prerequisites()
    checks["graphviz"] = prereqs["graphviz"]
    details["graphviz"] = "Graphviz installation for rendering"

    table = Table(title="Validation")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="magenta")
    table.add_column("Description", style="green")

    for component, status in checks.items():
        status_str = "✅ OK" if status else "❌ FAILED"
        table.add_row(component.title(), status_str, escape(details[component]))

    console.print(table)

    if all(checks.values()):
        console.print("\n✅ All checks passed!", style="green bold")
        return

    if not checks["graphviz"]:
        console.print("💡 Install Graphviz: https://graphviz.org/download/", style="yellow")
    sys.exit(1)


@cli.command("info")
def show_info() -> None:
    """Show supported output formats and available layout engines."""
    generator = GraphGenerator()

    formats_table = Table(title="Supported Output Formats")
    formats_table.add_column("Format", style="cyan")
    formats_table.add_column("Description", style="green")

    format_descriptions = {
        "svg": "Scalable Vector Graphics (vector)",
        "html": "Standalone HTML page with embedded diagram",
    }

    for fmt in generator.get_supported_formats():
        formats_table.add_row(fmt, format_descriptions.get(fmt, ""))

    console.print(formats_table)

    engines_table = Table(title="Available Layout Engines")
    engines_table.add_column("Engine", style="cyan")

    engines = generator.get_available_engines()
    for engine in engines:
        engines_table.add_row(engine)

    console.print(engines_table)
    if not engines:
        console.print("No Graphviz engines found on PATH.", style="yellow")


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

"""Graph rendering using Graphviz."""

import html
import logging
import shutil
from pathlib import Path
from typing import List, Union

import graphviz

from ..core.exceptions import RenderError
from ..core.models import OutputFormat

logger = logging.getLogger(__name__)

SVG_MARKER = b"<svg"

LAYOUT_ENGINES = ["dot", "neato", "fdp", "sfdp", "circo", "twopi"]

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{
            margin: 0;
            padding: 20px;
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background-color: #f5f5f5;
        }}
        .container {{
            max-width: 100%;
            background: white;
            border-radius: 8px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
            padding: 20px;
        }}
        .diagram-container {{
            text-align: center;
            overflow: auto;
            max-height: 80vh;
        }}
        details pre {{
            background: #f8f9fa;
            border: 1px solid #dee2e6;
            border-radius: 4px;
            padding: 12px;
            overflow: auto;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="diagram-container">
            {svg_content}
        </div>
        <details>
            <summary>DOT source</summary>
            <pre>{dot_content}</pre>
        </details>
    </div>
</body>
</html>"""


def extract_svg(output: bytes) -> bytes:
    """Return Graphviz output from the first ``<svg`` marker onward.

    Raises:
        RenderError: If the marker is absent.
    """
    index = output.find(SVG_MARKER)
    if index < 0:
        raise RenderError("<svg not found in Graphviz output")
    return output[index:]


class GraphRenderer:
    """Renders DOT language to SVG or HTML using Graphviz."""

    def __init__(self, verbose: bool = False):
        """Initialize renderer and check Graphviz availability.

        Args:
            verbose: Whether to show Graphviz warnings on stderr.
        """
        self.verbose = verbose
        self._check_graphviz_installation()

    def _check_graphviz_installation(self) -> None:
        """Check if Graphviz is installed and accessible."""
        if not shutil.which("dot"):
            raise RenderError(
                "Graphviz 'dot' executable not found. Please install Graphviz:\n"
                "  Ubuntu/Debian: sudo apt-get install graphviz\n"
                "  macOS: brew install graphviz\n"
                "  Windows: Download from https://graphviz.org/download/"
            )

        logger.info("Graphviz installation verified")

    def render(
        self,
        dot_content: str,
        output_file: Union[str, Path],
        output_format: OutputFormat = OutputFormat.SVG,
        engine: str = "dot",
        title: str = "Graph",
    ) -> Path:
        """Render DOT content to a file.

        Args:
            dot_content: DOT language content.
            output_file: Output file path.
            output_format: Output format (SVG or HTML).
            engine: Graphviz engine to use (dot, neato, fdp, sfdp, circo, twopi).
            title: Page title for HTML output.

        Returns:
            Path to the generated file.
        """
        logger.info(f"Rendering graph to {output_format.value} format")

        output_path = Path(output_file)
        svg_content = self.render_svg(dot_content, engine=engine)

        try:
            if output_format == OutputFormat.SVG:
                output_path.write_bytes(svg_content)
            else:
                page = self._generate_html_page(svg_content.decode("utf-8"), dot_content, title)
                output_path.write_text(page, encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Failed to write {output_path}: {e}") from e

        logger.info(f"Graph rendered successfully to: {output_path}")
        return output_path

    def render_svg(self, dot_content: str, engine: str = "dot") -> bytes:
        """Render DOT content to an SVG payload in memory.

        Args:
            dot_content: DOT language content.
            engine: Graphviz engine to use.

        Returns:
            SVG bytes starting at the ``<svg`` element.

        Raises:
            RenderError: If Graphviz is missing, fails, or produces no SVG element.
        """
        source = graphviz.Source(dot_content, engine=engine)
        try:
            output = source.pipe(format="svg", quiet=not self.verbose)
        except graphviz.ExecutableNotFound as e:
            raise RenderError(f"Graphviz executable not found: {e}") from e
        except graphviz.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else ""
            raise RenderError(f"Graphviz failed to render graph: {stderr or e}") from e

        return extract_svg(output)

    def get_available_engines(self) -> List[str]:
        """Get list of available Graphviz layout engines.

        Returns:
            List of available engine names.
        """
        return [engine for engine in LAYOUT_ENGINES if shutil.which(engine)]

    def save_dot_file(self, dot_content: str, output_file: Union[str, Path]) -> Path:
        """Save DOT content to a file.

        Args:
            dot_content: DOT language content.
            output_file: Output file path, written as given.

        Returns:
            Path to the saved DOT file.
        """
        dot_path = Path(output_file)
        dot_path.write_text(dot_content, encoding="utf-8")
        logger.info(f"DOT file saved to: {dot_path}")
        return dot_path

    def _generate_html_page(self, svg_content: str, dot_content: str, title: str) -> str:
        """Generate a standalone HTML page with the diagram.

        Args:
            svg_content: The SVG content of the diagram.
            dot_content: The original DOT source code.
            title: Page title.

        Returns:
            Complete HTML page content.
        """
        return HTML_TEMPLATE.format(
            title=html.escape(title),
            svg_content=svg_content,
            dot_content=html.escape(dot_content, quote=False),
        )

"""grnode - Graphviz graph generator.

Turns flat node and edge record files into Graphviz DOT documents and
renders them to SVG.
"""

from .core.generator import GraphGenerator
from .core.models import EdgeRecord, GraphMetadata, NodeRecord, OutputFormat

__version__ = "0.1.0"
__all__ = ["EdgeRecord", "GraphGenerator", "GraphMetadata", "NodeRecord", "OutputFormat"]

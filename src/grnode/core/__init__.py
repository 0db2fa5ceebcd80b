"""Core grnode module."""

from .exceptions import GrnodeError, NodeReferenceError, RecordValidationError, RenderError
from .generator import GraphGenerator
from .models import (
    EdgeRecord,
    ExportConfig,
    GraphMetadata,
    GraphModel,
    NodeRecord,
    OutputFormat,
    RenderConfig,
)

__all__ = [
    "EdgeRecord",
    "ExportConfig",
    "GraphGenerator",
    "GraphMetadata",
    "GraphModel",
    "GrnodeError",
    "NodeRecord",
    "NodeReferenceError",
    "OutputFormat",
    "RecordValidationError",
    "RenderConfig",
    "RenderError",
]

"""Error types raised while loading, building and rendering graphs."""

from __future__ import annotations

from collections.abc import Iterable


class GrnodeError(Exception):
    """Base class for all grnode errors."""


class RecordValidationError(GrnodeError, ValueError):
    """A node or edge record is malformed."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ):
        self.source = source
        self.line_number = line_number
        self.line = line

        location = ""
        if source and line_number is not None:
            location = f"{source}:{line_number}: "
        elif source:
            location = f"{source}: "

        detail = f"{location}{message}"
        if line is not None:
            detail = f"{detail}: {line}"
        super().__init__(detail)


class NodeReferenceError(GrnodeError, ValueError):
    """One or more edges refer to node names that do not exist."""

    def __init__(self, names: Iterable[str]):
        # Keep first-seen order, drop repeats
        self.names = tuple(dict.fromkeys(names))
        quoted = ", ".join(f"'{name}'" for name in self.names)
        super().__init__(f"Edge refers to unknown node(s): {quoted}")


class RenderError(GrnodeError, RuntimeError):
    """Graphviz could not be run or its output could not be used."""

"""Parsing of node and edge record files."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from ..core.exceptions import RecordValidationError
from ..core.models import EdgeRecord, NodeRecord

logger = logging.getLogger(__name__)

NODE_SEPARATOR = "|"
EDGE_SEPARATOR = ","
NODE_FORMAT = "name|path|synopsis|url"
EDGE_FORMAT = "from_name,to_name[,relation,color,style]"


def _record_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield (line number, stripped line) for lines that carry a record."""
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        yield line_number, line


def parse_node_lines(lines: Iterable[str], source: str = "<nodes>") -> List[NodeRecord]:
    """Parse node records from text lines.

    Args:
        lines: Lines in ``name|path|synopsis|url`` format.
        source: Name used in error messages.

    Returns:
        Node records in input order.

    Raises:
        RecordValidationError: If a line does not have exactly four fields
            or its name field is empty.
    """
    nodes = []
    for line_number, line in _record_lines(lines):
        parts = [part.strip() for part in line.split(NODE_SEPARATOR)]
        if len(parts) != 4:
            raise RecordValidationError(
                f"Invalid node format (expected '{NODE_FORMAT}')",
                source=source,
                line_number=line_number,
                line=line,
            )
        name, path, synopsis, url = parts
        if not name:
            raise RecordValidationError(
                "Node name must not be empty",
                source=source,
                line_number=line_number,
                line=line,
            )
        nodes.append(NodeRecord(name=name, path=path, synopsis=synopsis, url=url))

    logger.info(f"Parsed {len(nodes)} node records from {source}")
    return nodes


def parse_edge_lines(lines: Iterable[str], source: str = "<edges>") -> List[EdgeRecord]:
    """Parse edge records from text lines.

    Fields past the fifth are ignored. Blank optional fields are treated as absent.

    Args:
        lines: Lines in ``from_name,to_name[,relation,color,style]`` format.
        source: Name used in error messages.

    Returns:
        Edge records in input order.

    Raises:
        RecordValidationError: If a line has fewer than two fields or an
            empty endpoint.
    """
    edges = []
    for line_number, line in _record_lines(lines):
        parts = [part.strip() for part in line.split(EDGE_SEPARATOR)]
        if len(parts) < 2:
            raise RecordValidationError(
                f"Invalid edge format (expected '{EDGE_FORMAT}')",
                source=source,
                line_number=line_number,
                line=line,
            )
        if not parts[0] or not parts[1]:
            raise RecordValidationError(
                "Edge endpoints must not be empty",
                source=source,
                line_number=line_number,
                line=line,
            )

        relation, color, style = (parts[2:5] + ["", "", ""])[:3]
        edges.append(
            EdgeRecord(
                source=parts[0],
                target=parts[1],
                relation=relation,
                color=color,
                style=style,
            )
        )

    logger.info(f"Parsed {len(edges)} edge records from {source}")
    return edges


def _read_lines(file_path: Path) -> List[str]:
    """Read a record file and split it on newlines only.

    Other line-break characters stay inside their record.

    Raises:
        RecordValidationError: If the file is not valid UTF-8.
    """
    data = file_path.read_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RecordValidationError(
            f"File is not valid UTF-8 (byte offset {e.start})",
            source=str(file_path),
        ) from e
    return text.split("\n")


def load_nodes(path: Union[str, Path]) -> List[NodeRecord]:
    """Read node records from a file."""
    file_path = Path(path)
    return parse_node_lines(_read_lines(file_path), source=str(file_path))


def load_edges(path: Union[str, Path]) -> List[EdgeRecord]:
    """Read edge records from a file."""
    file_path = Path(path)
    return parse_edge_lines(_read_lines(file_path), source=str(file_path))

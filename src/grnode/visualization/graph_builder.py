"""Graph model construction and validation."""

import logging
from typing import Dict, Iterable, List, Sequence

import networkx as nx

from ..core.exceptions import NodeReferenceError, RecordValidationError
from ..core.models import EdgeRecord, GraphMetadata, GraphModel, NodeRecord

logger = logging.getLogger(__name__)


def node_id(index: int) -> str:
    """Positional identifier of the node at ``index``."""
    return f"n{index}"


def index_nodes(nodes: Sequence[NodeRecord]) -> Dict[str, str]:
    """Map node names to positional identifiers.

    The first node carrying a name wins when names repeat.
    """
    ids: Dict[str, str] = {}
    for index, node in enumerate(nodes):
        ids.setdefault(node.name, node_id(index))
    return ids


def unresolved_names(ids: Dict[str, str], edges: Iterable[EdgeRecord]) -> List[str]:
    """Endpoint names of ``edges`` that are missing from ``ids``, in edge order."""
    missing = []
    for edge in edges:
        for name in (edge.source, edge.target):
            if name not in ids and name not in missing:
                missing.append(name)
    return missing


class GraphBuilder:
    """Builds validated graph models from node and edge records."""

    def build(
        self,
        metadata: GraphMetadata,
        nodes: Iterable[NodeRecord],
        edges: Iterable[EdgeRecord],
    ) -> GraphModel:
        """Build a graph model, checking that every edge resolves.

        Duplicate edges and self-loops are kept as given.

        Args:
            metadata: Graph-level attributes.
            nodes: Node records in output order.
            edges: Edge records in output order.

        Returns:
            Immutable graph model.

        Raises:
            RecordValidationError: If a node has an empty name.
            NodeReferenceError: If any edge names an unknown node.
        """
        node_records = tuple(nodes)
        edge_records = tuple(edges)

        for index, node in enumerate(node_records):
            if not node.name:
                raise RecordValidationError(f"Node at position {index} has an empty name")

        ids = index_nodes(node_records)
        if len(ids) != len(node_records):
            logger.warning(
                f"Graph '{metadata.name}' has {len(node_records) - len(ids)} duplicate node name(s); "
                "edges resolve to the first occurrence",
            )

        missing = unresolved_names(ids, edge_records)
        if missing:
            raise NodeReferenceError(missing)

        logger.info(
            f"Built graph '{metadata.name}' with {len(node_records)} nodes and {len(edge_records)} edges",
        )
        return GraphModel(metadata=metadata, nodes=node_records, edges=edge_records)

    def build_networkx(self, model: GraphModel) -> nx.MultiDiGraph:
        """Build a NetworkX view of a model keyed by positional identifier.

        Args:
            model: Graph model to convert.

        Returns:
            NetworkX multi-digraph with one node per record and one edge per edge record.
        """
        ids = index_nodes(model.nodes)
        graph = nx.MultiDiGraph(name=model.metadata.name)
        for index, node in enumerate(model.nodes):
            graph.add_node(
                node_id(index),
                name=node.name,
                path=node.path,
                synopsis=node.synopsis,
                url=node.url,
            )

        for edge in model.edges:
            if edge.source not in ids or edge.target not in ids:
                raise NodeReferenceError(unresolved_names(ids, [edge]))
            graph.add_edge(
                ids[edge.source],
                ids[edge.target],
                relation=edge.relation,
                color=edge.color,
                style=edge.style,
            )

        return graph

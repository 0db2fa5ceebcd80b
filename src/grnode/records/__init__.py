"""Node and edge record loading."""

from .parser import load_edges, load_nodes, parse_edge_lines, parse_node_lines

__all__ = ["load_edges", "load_nodes", "parse_edge_lines", "parse_node_lines"]

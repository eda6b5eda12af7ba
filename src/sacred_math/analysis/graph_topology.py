"""
Graph Topology Inspection
=========================

Read-only views over GeometryGraph pattern dicts. The builders never
deduplicate connections; these helpers report on the edge multiset
without changing it.

Date: Oct 2026
"""

from collections import Counter
from typing import Dict, List, Set, Tuple

from ..spec.structures import validate_pattern


def unique_connections(graph: dict) -> Set[Tuple[str, str]]:
    """Canonical undirected edge set: (a, b) with a <= b, duplicates folded."""
    return {conn.key() for conn in graph['connections']}


def duplicate_connection_count(graph: dict) -> int:
    """Number of connections beyond the first for each undirected pair."""
    return len(graph['connections']) - len(unique_connections(graph))


def node_degrees(graph: dict) -> Dict[str, int]:
    """
    Degree of each node over the UNIQUE edge set.

    Every node id appears, isolated nodes with degree 0.
    """
    degrees = Counter({node.id: 0 for node in graph['nodes']})
    for a, b in unique_connections(graph):
        degrees[a] += 1
        degrees[b] += 1
    return dict(degrees)


def isolated_nodes(graph: dict) -> List[str]:
    """Ids with no incident connection, in node insertion order."""
    degrees = node_degrees(graph)
    return [node.id for node in graph['nodes'] if degrees[node.id] == 0]


def verify_graph_structure(graph: dict) -> Dict:
    """
    Summarize a graph pattern.

    Returns:
        dict with verification results
    """
    is_valid, errors = validate_pattern(graph, strict=False)
    degrees = node_degrees(graph) if is_valid else {}
    n_unique = len(unique_connections(graph))

    return {
        'is_valid': is_valid,
        'errors': errors,
        'n_nodes': len(graph['nodes']),
        'n_connections': len(graph['connections']),
        'n_unique_connections': n_unique,
        'n_duplicate_connections': len(graph['connections']) - n_unique,
        'isolated_nodes': [i for i, d in degrees.items() if d == 0],
        'max_degree': max(degrees.values(), default=0),
    }

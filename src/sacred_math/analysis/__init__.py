"""Read-only inspection of generated patterns."""

from .graph_topology import (
    unique_connections,
    duplicate_connection_count,
    node_degrees,
    isolated_nodes,
    verify_graph_structure,
)

"""
Metatron's Cube Graph
=====================

Labeled node/edge graph built tier by tier (detail clamped to [1, 5]):

    TIER  IDS           POSITION                         EDGES
    0     center        center                           -
    1     hex1_0..5     hexagon, radius r                spoke to center + ring
    2     hex2_0..5     hexagon, radius 2r               radial to hex1_i + ring
    3     tetra_0..2    fixed offsets (TETRA_OFFSETS)    distance rule
    4     octa_0..3     cardinal offsets at 2r           distance rule
    5     ico_0..9      decagon, radius 1.8r, rot pi/10  distance rule

DISTANCE RULE (tiers 3-5):
    Each new node is compared with every node ALREADY in the graph at the
    moment of its insertion and linked when |p - q| < 2r (strict). Nodes
    of the same tier see each other in insertion order; a node never gains
    edges to nodes added after it.

KNOWN BEHAVIOUR:
    Connections are not deduplicated. A pair can carry one edge from the
    ring/spoke rules and another from the distance rule. Use
    analysis.graph_topology.unique_connections() for the edge set.

TOPOLOGY (r = 1, center at origin):
    detail   nodes   connections
    1        7       12
    2        13      24
    3        16      45
    4        20      68
    5        30      163
"""

import logging

import numpy as np
from scipy.spatial.distance import cdist
from typing import Iterable, List, Tuple

from ..spec.constants import (
    METATRON_DETAIL, METATRON_SIZES, METATRON_HEX2_FACTOR, METATRON_LINK_FACTOR,
    TETRA_OFFSETS, OCTA_OFFSETS, ICO_SIDES, ICO_RADIUS_FACTOR, ICO_ROTATION,
    CLASSIC_INNER_FACTOR, CLASSIC_STAR_STEPS,
    PATTERN_METATRON, PATTERN_METATRON_CLASSIC,
)
from ..spec.structures import Connection, Node, Point, ORIGIN, create_pattern, with_flags
from .polygon import generate_polygon_points, clamp

logger = logging.getLogger(__name__)


def _add_ring(nodes: List[Node], connections: List[Connection], prefix: str,
              points: List[Point], size: float, anchor) -> None:
    """
    Append a ring of nodes, each linked to its anchor and to the next ring node.

    anchor(i) returns the id the i-th ring node is linked to first.
    """
    n = len(points)
    for i, p in enumerate(points):
        node_id = f"{prefix}_{i}"
        nodes.append(Node(node_id, p.x, p.y, size))
        connections.append(Connection(anchor(i), node_id))
        connections.append(Connection(node_id, f"{prefix}_{(i + 1) % n}"))


def _add_by_distance(nodes: List[Node], connections: List[Connection],
                     candidates: Iterable[Node], threshold: float) -> None:
    """
    Insert nodes one at a time, linking each to every earlier node closer
    than `threshold`. Emit order: (new, existing) in existing insertion order.
    """
    for node in candidates:
        existing = np.array([[m.x, m.y] for m in nodes])
        dist = cdist([[node.x, node.y]], existing)[0]
        nodes.append(node)
        for idx in np.flatnonzero(dist < threshold):
            connections.append(Connection(node.id, nodes[idx].id))


def _tier_nodes(prefix: str, offsets: Tuple[Tuple[float, float], ...], radius: float,
                center: Point, size: float) -> List[Node]:
    return [
        Node(f"{prefix}_{i}", center.x + dx * radius, center.y + dy * radius, size)
        for i, (dx, dy) in enumerate(offsets)
    ]


def generate_metatrons_cube(radius: float, detail: int = 3,
                            center: Point = ORIGIN) -> dict:
    """
    Build the Metatron's Cube graph.

    Args:
        radius: first-hexagon radius r
        detail: number of tiers beyond the center, clamped to [1, 5]
        center: graph center

    Returns:
        pattern dict (GeometryGraph) with 'nodes' and 'connections'
    """
    lo, hi = METATRON_DETAIL
    bounded = clamp(detail, lo, hi, name="detail")

    nodes: List[Node] = [Node("center", center.x, center.y, radius * METATRON_SIZES["center"])]
    connections: List[Connection] = []

    # Tier 1: spokes + ring
    _add_ring(nodes, connections, "hex1",
              generate_polygon_points(6, radius, 0.0, center),
              radius * METATRON_SIZES["hex1"],
              anchor=lambda i: "center")

    # Tier 2: radials to tier 1 + ring
    if bounded >= 2:
        _add_ring(nodes, connections, "hex2",
                  generate_polygon_points(6, radius * METATRON_HEX2_FACTOR, 0.0, center),
                  radius * METATRON_SIZES["hex2"],
                  anchor=lambda i: f"hex1_{i}")

    # Tiers 3-5: Platonic solid vertices, linked by distance
    if bounded >= 3:
        extra = _tier_nodes("tetra", TETRA_OFFSETS, radius, center,
                            radius * METATRON_SIZES["tetra"])
        if bounded >= 4:
            extra += _tier_nodes("octa", OCTA_OFFSETS, radius, center,
                                 radius * METATRON_SIZES["octa"])
        if bounded >= 5:
            ico = generate_polygon_points(ICO_SIDES, radius * ICO_RADIUS_FACTOR, ICO_ROTATION, center)
            extra += [
                Node(f"ico_{i}", p.x, p.y, radius * METATRON_SIZES["ico"])
                for i, p in enumerate(ico)
            ]
        _add_by_distance(nodes, connections, extra, radius * METATRON_LINK_FACTOR)

    logger.debug("metatron's cube: detail=%s, %d nodes, %d connections",
                 bounded, len(nodes), len(connections))

    return create_pattern(PATTERN_METATRON, nodes=nodes, connections=connections)


def generate_classic_metatrons_cube(radius: float, center: Point = ORIGIN) -> dict:
    """
    Build the fixed 13-node Metatron's Cube used for navigation figures.

    TOPOLOGY:
        nodes = 13 (center, inner_0..5 at r/2, outer_0..5 at r)
        connections = 36:
            6 spokes, 6 inner ring, 6 inner->outer radials, 6 outer ring,
            12 star lines inner_k -> outer_{k+2}, outer_{k+4} (mod 6)

    Returns:
        pattern dict (GeometryGraph) with 'nodes' and 'connections'
    """
    nodes = [Node("center", center.x, center.y, radius * METATRON_SIZES["center"])]
    connections: List[Connection] = []

    _add_ring(nodes, connections, "inner",
              generate_polygon_points(6, radius * CLASSIC_INNER_FACTOR, 0.0, center),
              radius * METATRON_SIZES["hex1"],
              anchor=lambda i: "center")
    _add_ring(nodes, connections, "outer",
              generate_polygon_points(6, radius, 0.0, center),
              radius * METATRON_SIZES["hex2"],
              anchor=lambda i: f"inner_{i}")

    for k in range(6):
        for step in CLASSIC_STAR_STEPS:
            connections.append(Connection(f"inner_{k}", f"outer_{(k + step) % 6}"))

    if len(nodes) != 13:
        raise ValueError(f"Expected 13 nodes, got {len(nodes)}")
    if len(connections) != 36:
        raise ValueError(f"Expected 36 connections, got {len(connections)}")

    return create_pattern(PATTERN_METATRON_CLASSIC, nodes=nodes, connections=connections)


def mark_nodes(graph: dict, active: Iterable[str] = (), pulsing: Iterable[str] = ()) -> dict:
    """
    Return a copy of a graph pattern with presentation flags set.

    Nodes named in `active` / `pulsing` get the flag True, all others
    False. Unknown ids are ignored. The input graph is left untouched.
    """
    active = set(active)
    pulsing = set(pulsing)
    nodes = [
        with_flags(n, active=n.id in active, pulsing=n.id in pulsing)
        for n in graph['nodes']
    ]
    return create_pattern(graph['pattern'], nodes=nodes, connections=list(graph['connections']))

"""
Seed of Life / Flower of Life
=============================

SEED OF LIFE:
    1 center circle + 6 circles on the hexagon of radius r.
    All 7 circles share radius r. Order: center, then hexagon CCW from angle 0.

FLOWER OF LIFE:
    Breadth-first growth of the Seed. Every dequeued center spawns its 6
    hexagonal neighbours (distance r). A neighbour becomes a new circle only
    if its COORDINATE KEY (x, y rounded to COORD_DECIMALS) is unseen AND no
    accepted center lies within COORD_TOL. The visited set is what stops
    adjacent hexagons regenerating shared centers; the distance test covers
    copies whose float noise straddles a rounding boundary.

    Expansion stops below depth == iterations, iterations clamped to [1, 3]:

        iterations   circles
        1            7        (the Seed)
        2            19
        3            37       (centered hexagonal numbers 3k(k+1)+1)
"""

import logging
from collections import deque

import numpy as np
from scipy.spatial.distance import cdist
from typing import List, Tuple

from ..spec.constants import COORD_DECIMALS, COORD_TOL, FLOWER_ITERATIONS, PATTERN_FLOWER, PATTERN_SEED
from ..spec.structures import Circle, Point, ORIGIN, create_pattern
from .polygon import generate_polygon_points, clamp

logger = logging.getLogger(__name__)


def coord_key(point: Point) -> Tuple[float, float]:
    """Quantized coordinate key used for center deduplication."""
    return tuple(np.round(point.to_tuple(), COORD_DECIMALS).tolist())


def _near_accepted(point: Point, accepted: List[Tuple[float, float]]) -> bool:
    """True if an accepted center lies within COORD_TOL (keys can straddle a rounding boundary)."""
    return bool(cdist([point.to_tuple()], accepted).min() < COORD_TOL)


def generate_seed_of_life(radius: float, center: Point = ORIGIN) -> dict:
    """
    Build the Seed of Life.

    Returns:
        pattern dict with 'circles': 7 Circles of radius `radius`
    """
    circles = [Circle(center.x, center.y, radius)]
    for p in generate_polygon_points(6, radius, 0.0, center):
        circles.append(Circle(p.x, p.y, radius))

    if len(circles) != 7:
        raise ValueError(f"Expected 7 circles, got {len(circles)}")

    return create_pattern(PATTERN_SEED, circles=circles)


def generate_flower_of_life(iterations: int = 2, radius: float = 1.0,
                            center: Point = ORIGIN) -> dict:
    """
    Build the Flower of Life by BFS expansion with coordinate-key dedup.

    Args:
        iterations: growth depth, clamped to [1, 3]
        radius: circle radius (also the center spacing)
        center: center of the first circle

    Returns:
        pattern dict with 'circles' in BFS visitation order (center first)
    """
    lo, hi = FLOWER_ITERATIONS
    bounded = clamp(iterations, lo, hi, name="iterations")

    circles: List[Circle] = [Circle(center.x, center.y, radius)]
    visited = {coord_key(center)}
    accepted = [center.to_tuple()]

    queue = deque([(center, 0)])
    while queue:
        current, depth = queue.popleft()
        if depth >= bounded:
            continue

        for p in generate_polygon_points(6, radius, 0.0, current):
            key = coord_key(p)
            if key in visited or _near_accepted(p, accepted):
                continue
            visited.add(key)
            accepted.append(p.to_tuple())
            circles.append(Circle(p.x, p.y, radius))
            queue.append((p, depth + 1))

    logger.debug("flower of life: %d circles at iterations=%s", len(circles), bounded)

    return create_pattern(PATTERN_FLOWER, circles=circles)

"""
Sri Yantra (simplified 2D)
==========================

    4 upward triangles,   side s = 0.85 * size * (1.0 - 0.2 i),   i = 0..3
    5 downward triangles, side s = 1.00 * size * (0.9 - 0.18 i),  i = 0..4
    inner circle 0.4 * size, outer circle 0.95 * size
    bindu: circle of radius 0.05 * size at center

Vertex order is APEX FIRST, then base-left, base-right. Consumers read
orientation from the apex, so the order is part of the output contract.
Screen coordinates (y grows downward):

    upward:   apex (cx, cy - s/2), base at cy + s/2
    downward: apex (cx, cy + s/2), base at cy - s/2
"""

from typing import List

from ..spec.constants import (
    SRI_UPWARD_BASE, SRI_UPWARD_COUNT, SRI_UPWARD_START, SRI_UPWARD_STEP,
    SRI_DOWNWARD_BASE, SRI_DOWNWARD_COUNT, SRI_DOWNWARD_START, SRI_DOWNWARD_STEP,
    SRI_INNER_CIRCLE, SRI_OUTER_CIRCLE, SRI_BINDU, PATTERN_SRI_YANTRA,
)
from ..spec.structures import Circle, Point, Triangle, ORIGIN, create_pattern


def _triangle(center: Point, side: float, upward: bool) -> Triangle:
    half = side / 2
    sign = -1 if upward else 1
    return Triangle((
        Point(center.x, center.y + sign * half),
        Point(center.x - half, center.y - sign * half),
        Point(center.x + half, center.y - sign * half),
    ))


def generate_sri_yantra(size: float, center: Point = ORIGIN) -> dict:
    """
    Build the simplified Sri Yantra.

    Returns:
        pattern dict with 'triangles' (4 upward then 5 downward),
        'circles' (inner, outer) and 'bindu'
    """
    triangles: List[Triangle] = []

    upward = size * SRI_UPWARD_BASE
    for i in range(SRI_UPWARD_COUNT):
        scale = SRI_UPWARD_START - i * SRI_UPWARD_STEP
        triangles.append(_triangle(center, upward * scale, upward=True))

    downward = size * SRI_DOWNWARD_BASE
    for i in range(SRI_DOWNWARD_COUNT):
        scale = SRI_DOWNWARD_START - i * SRI_DOWNWARD_STEP
        triangles.append(_triangle(center, downward * scale, upward=False))

    circles = [
        Circle(center.x, center.y, size * SRI_INNER_CIRCLE),
        Circle(center.x, center.y, size * SRI_OUTER_CIRCLE),
    ]
    bindu = Circle(center.x, center.y, size * SRI_BINDU)

    if len(triangles) != 9:
        raise ValueError(f"Expected 9 triangles, got {len(triangles)}")

    return create_pattern(PATTERN_SRI_YANTRA, triangles=triangles, circles=circles, bindu=bindu)

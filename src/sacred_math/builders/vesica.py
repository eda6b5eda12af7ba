"""
Vesica Piscis
=============

Two circles of radius r on a horizontal axis through `center`, and the
two points where they cross.

    d = 2r (1 - overlap)                 center separation
    c1, c2 = center.x -/+ d/2
    h = sqrt(r^2 - (d/2)^2)              half chord
    intersections = (center.x, center.y + h), (center.x, center.y - h)

overlap is clamped to [0, 1], so d/2 <= r and h is always real:
    overlap = 0  ->  d = 2r, circles touch, h = 0
    overlap = 1  ->  d = 0,  circles coincide, h = r
"""

import math

from ..spec.constants import VESICA_OVERLAP, PATTERN_VESICA
from ..spec.structures import Circle, Point, ORIGIN, create_pattern
from .polygon import clamp


def generate_vesica_piscis(radius: float, overlap: float = 0.5,
                           center: Point = ORIGIN) -> dict:
    """
    Build a Vesica Piscis.

    Returns:
        pattern dict with 'circles' (left, right) and
        'intersection_points' (upper, lower)
    """
    lo, hi = VESICA_OVERLAP
    bounded = clamp(overlap, lo, hi, name="overlap")

    distance = radius * 2 * (1 - bounded)
    half = distance / 2

    h = math.sqrt(radius * radius - half * half)

    circles = [
        Circle(center.x - half, center.y, radius),
        Circle(center.x + half, center.y, radius),
    ]
    intersection_points = [
        Point(center.x, center.y + h),
        Point(center.x, center.y - h),
    ]

    return create_pattern(PATTERN_VESICA, circles=circles, intersection_points=intersection_points)

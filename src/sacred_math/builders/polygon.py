"""
Regular Polygon Points
======================

The one primitive every other builder stands on: N equally spaced
points on a circle.

    theta_i = i * (2*pi / sides) + rotation,   i = 0 .. sides-1
    p_i     = center + radius * (cos theta_i, sin theta_i)

PRECONDITIONS (documented, NOT validated):
    sides >= 3, radius >= 0
"""

import logging

import numpy as np
from typing import List

from ..spec.structures import Point, ORIGIN

logger = logging.getLogger(__name__)


def generate_polygon_points(sides: int, radius: float, rotation: float = 0.0,
                            center: Point = ORIGIN) -> List[Point]:
    """
    Generate the vertices of a regular polygon.

    Args:
        sides: number of vertices (>= 3, caller's responsibility)
        radius: circumradius (>= 0, caller's responsibility)
        rotation: angle of the first vertex in radians
        center: polygon center

    Returns:
        list of `sides` Points in ascending angular order from `rotation`
    """
    angle_step = (np.pi * 2) / sides
    angles = np.arange(sides) * angle_step + rotation

    xs = center.x + radius * np.cos(angles)
    ys = center.y + radius * np.sin(angles)

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def clamp(value, lo, hi, name: str = "value"):
    """
    Clamp value into [lo, hi].

    Out-of-range input is not an error: it is pulled to the nearest bound
    and the adjustment is logged at DEBUG.
    """
    bounded = max(lo, min(hi, value))
    if bounded != value:
        logger.debug("%s=%r clamped to %r (range [%r, %r])", name, value, bounded, lo, hi)
    return bounded

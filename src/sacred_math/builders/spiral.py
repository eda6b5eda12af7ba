"""
Fibonacci Spiral
================

Finite, restartable point sequence on an outward spiral:

    ratio_i = i / (n - 1)
    angle_i = ratio_i * turns * 2*pi
    r_i     = scale * sqrt(angle_i) * SPIRAL_GAIN
    p_i     = center + r_i * (cos angle_i, sin angle_i)

angle and radius both grow with i, so the curve never crosses itself.
p_0 is exactly `center` (angle 0 -> radius 0).

PRECONDITIONS (documented, NOT validated):
    turns >= 0, point_count >= 2
"""

import numpy as np
from typing import List

from ..spec.constants import (
    SPIRAL_GAIN, FIBONACCI_SIZES, GOLDEN_RECT_DIVISOR, PHI, PATTERN_GOLDEN_RECTANGLES,
)
from ..spec.structures import Point, Rectangle, ORIGIN, create_pattern


def generate_fibonacci_spiral(turns: float = 3, point_count: int = 100, scale: float = 1.0,
                              center: Point = ORIGIN) -> List[Point]:
    """
    Sample the spiral.

    Returns:
        list of `point_count` Points, in order of increasing angle
    """
    max_angle = turns * 2 * np.pi
    ratios = np.arange(point_count) / (point_count - 1)
    angles = ratios * max_angle
    radii = scale * np.sqrt(angles) * SPIRAL_GAIN

    xs = center.x + radii * np.cos(angles)
    ys = center.y + radii * np.sin(angles)

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def generate_golden_rectangles(radius: float, center: Point = ORIGIN) -> dict:
    """
    Golden rectangles drawn alongside the spiral.

    One rectangle per Fibonacci size (1, 2, 3, 5, 8, 13, 21), anchored at
    `center`: width = size * radius / 40, height = width * PHI.
    """
    rectangles = []
    for size in FIBONACCI_SIZES:
        width = size * radius / GOLDEN_RECT_DIVISOR
        rectangles.append(Rectangle(center.x, center.y, width, width * PHI))

    return create_pattern(PATTERN_GOLDEN_RECTANGLES, rectangles=rectangles)

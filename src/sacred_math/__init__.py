"""
SACRED_MATH - Pure sacred-geometry pattern kernel
=================================================

NO rendering. NO randomness. NO I/O.

Structure:
    builders/   - Pattern construction (polygon, flower, metatron, ...)
    analysis/   - Read-only graph inspection
    spec/       - Constants and pattern contract

All pattern builders return a PATTERN DICT with:
    - pattern: type name
    - the type's fields (circles, nodes/connections, triangles, ...)

Every builder is a pure function of its explicit numeric arguments:
same input, deep-equal output, no state kept between calls.
"""

import sys

# Python version check
if sys.version_info < (3, 9):
    raise ImportError(f"sacred_math requires Python >= 3.9, got {sys.version}")

# scipy version check (cdist for distance-threshold edges and center dedup)
import scipy
_scipy_version = tuple(int(p) for p in scipy.__version__.split('.')[:2] if p.isdigit())
if _scipy_version < (1, 11):
    raise ImportError(f"sacred_math requires scipy >= 1.11, got {scipy.__version__}")

# numpy version check
import numpy as np
_numpy_version = tuple(int(p) for p in np.__version__.split('.')[:2] if p.isdigit())
if _numpy_version < (1, 20):
    raise ImportError(f"sacred_math requires numpy >= 1.20, got {np.__version__}")

from . import builders
from . import analysis
from . import spec

from .spec.constants import PHI
from .spec.structures import Point, Circle, Node, Connection, Triangle, Rectangle, ORIGIN
from .builders import (
    generate_polygon_points,
    generate_seed_of_life,
    generate_flower_of_life,
    generate_metatrons_cube,
    generate_classic_metatrons_cube,
    generate_vesica_piscis,
    generate_sri_yantra,
    generate_fibonacci_spiral,
    generate_golden_rectangles,
    generate_pattern,
    mark_nodes,
    PATTERN_TYPES,
)

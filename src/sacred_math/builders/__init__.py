"""
Pattern builders - pure geometry construction, no rendering dependency.

EXPORTS:
- Primitive: generate_polygon_points
- Circle patterns: generate_seed_of_life, generate_flower_of_life, generate_vesica_piscis
- Graphs: generate_metatrons_cube, generate_classic_metatrons_cube, mark_nodes
- Triangles: generate_sri_yantra
- Curves: generate_fibonacci_spiral (bare point list), generate_golden_rectangles
- Dispatch: PATTERN_TYPES, generate_pattern
"""

import logging

from ..spec.constants import (
    PATTERN_FLOWER, PATTERN_SEED, PATTERN_METATRON, PATTERN_SRI_YANTRA,
    PATTERN_VESICA, PATTERN_SPIRAL,
)
from ..spec.structures import create_pattern

# === Primitive ===
from .polygon import generate_polygon_points, clamp

# === Patterns ===
from .flower import generate_seed_of_life, generate_flower_of_life, coord_key
from .metatron import generate_metatrons_cube, generate_classic_metatrons_cube, mark_nodes
from .vesica import generate_vesica_piscis
from .sri_yantra import generate_sri_yantra
from .spiral import generate_fibonacci_spiral, generate_golden_rectangles

logger = logging.getLogger(__name__)


def _spiral_pattern(**params) -> dict:
    return create_pattern(PATTERN_SPIRAL, points=generate_fibonacci_spiral(**params))


PATTERN_TYPES = {
    PATTERN_FLOWER: generate_flower_of_life,
    PATTERN_SEED: generate_seed_of_life,
    PATTERN_METATRON: generate_metatrons_cube,
    PATTERN_SRI_YANTRA: generate_sri_yantra,
    PATTERN_VESICA: generate_vesica_piscis,
    PATTERN_SPIRAL: _spiral_pattern,
}


def generate_pattern(pattern_type: str, **params) -> dict:
    """
    Build any registered pattern by name.

    Args:
        pattern_type: key of PATTERN_TYPES, e.g. 'flower-of-life'
        **params: keyword arguments of the matching builder

    Returns:
        Contract-compliant pattern dict

    Raises:
        KeyError: If pattern_type is not registered
    """
    builder = PATTERN_TYPES.get(pattern_type)
    if builder is None:
        available = ', '.join(PATTERN_TYPES)
        raise KeyError(f"Unknown pattern '{pattern_type}'. Available: {available}")

    logger.debug("generating %s with %s", pattern_type, params)
    return builder(**params)

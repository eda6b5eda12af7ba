"""Constants and the pattern contract."""

from .constants import (
    EPS_CLOSE,
    COORD_DECIMALS,
    COORD_TOL,
    PHI,
    PHI_EXACT,
    FLOWER_ITERATIONS,
    METATRON_DETAIL,
    VESICA_OVERLAP,
    PATTERN_FIELDS,
    PATTERN_FLOWER,
    PATTERN_SEED,
    PATTERN_METATRON,
    PATTERN_METATRON_CLASSIC,
    PATTERN_SRI_YANTRA,
    PATTERN_VESICA,
    PATTERN_SPIRAL,
    PATTERN_GOLDEN_RECTANGLES,
)
from .structures import (
    Point,
    Circle,
    Node,
    Connection,
    Triangle,
    Rectangle,
    ORIGIN,
    PatternContract,
    validate_pattern,
    create_pattern,
    to_plain,
)

"""
Global constants for sacred_math
================================

All tolerances and magic numbers in ONE place.
"""

import math

# Numerical tolerances
EPS_CLOSE = 1e-9       # For "are these equal?" (closed-form trig output)

# Coordinate key precision
COORD_DECIMALS = 3     # Flower of Life dedup key: round(x, 3), round(y, 3)
COORD_TOL = 10.0 ** -COORD_DECIMALS
# A center is a duplicate if its key was seen OR any accepted center lies
# within COORD_TOL. The distance test catches float noise that straddles a
# rounding boundary (x.xxx5), where equal points round to different keys.

# Golden ratio
PHI = 1.61803398875                      # Published constant, layout only
PHI_EXACT = (1 + math.sqrt(5)) / 2       # 1.618033988749895

# Clamping ranges (inclusive)
FLOWER_ITERATIONS = (1, 3)
METATRON_DETAIL = (1, 5)
VESICA_OVERLAP = (0.0, 1.0)

# Pattern type names
PATTERN_FLOWER = "flower-of-life"
PATTERN_SEED = "seed-of-life"
PATTERN_METATRON = "metatrons-cube"
PATTERN_METATRON_CLASSIC = "metatrons-cube-classic"
PATTERN_SRI_YANTRA = "sri-yantra"
PATTERN_VESICA = "vesica-piscis"
PATTERN_SPIRAL = "fibonacci-spiral"
PATTERN_GOLDEN_RECTANGLES = "golden-rectangles"

# Required fields by pattern type
PATTERN_FIELDS = {
    PATTERN_FLOWER: ("circles",),
    PATTERN_SEED: ("circles",),
    PATTERN_METATRON: ("nodes", "connections"),
    PATTERN_METATRON_CLASSIC: ("nodes", "connections"),
    PATTERN_SRI_YANTRA: ("triangles", "circles", "bindu"),
    PATTERN_VESICA: ("circles", "intersection_points"),
    PATTERN_SPIRAL: ("points",),
    PATTERN_GOLDEN_RECTANGLES: ("rectangles",),
}

# =============================================================================
# METATRON'S CUBE TIERS
# =============================================================================
#
# Tier 0: center                            size 0.15 r
# Tier 1: hexagon at r          (hex1_i)    size 0.12 r
# Tier 2: hexagon at 2r         (hex2_i)    size 0.10 r
# Tier 3: tetrahedron, 3 fixed  (tetra_i)   size 0.08 r
# Tier 4: octahedron, 4 fixed   (octa_i)    size 0.07 r
# Tier 5: decagon at 1.8r       (ico_i)     size 0.06 r
#
# Tiers 3-5 connect by distance: new node <-> every EARLIER node with
# |p - q| < METATRON_LINK_FACTOR * r. Order-dependent, never symmetric.
#
METATRON_SIZES = {
    "center": 0.15,
    "hex1": 0.12,
    "hex2": 0.10,
    "tetra": 0.08,
    "octa": 0.07,
    "ico": 0.06,
}
METATRON_HEX2_FACTOR = 2.0
METATRON_LINK_FACTOR = 2.0

# Offsets in units of r, relative to center
TETRA_OFFSETS = ((0.0, -1.5), (1.3, 0.75), (-1.3, 0.75))
OCTA_OFFSETS = ((0.0, -2.0), (2.0, 0.0), (0.0, 2.0), (-2.0, 0.0))

ICO_SIDES = 10
ICO_RADIUS_FACTOR = 1.8
ICO_ROTATION = math.pi / 10

# Classic (fixed 13-node) figure
CLASSIC_INNER_FACTOR = 0.5
CLASSIC_STAR_STEPS = (2, 4)      # inner_k -> outer_{(k + step) % 6}

# =============================================================================
# SRI YANTRA
# =============================================================================
SRI_UPWARD_BASE = 0.85
SRI_UPWARD_COUNT = 4
SRI_UPWARD_START, SRI_UPWARD_STEP = 1.0, 0.2
SRI_DOWNWARD_BASE = 1.0
SRI_DOWNWARD_COUNT = 5
SRI_DOWNWARD_START, SRI_DOWNWARD_STEP = 0.9, 0.18
SRI_INNER_CIRCLE = 0.4
SRI_OUTER_CIRCLE = 0.95
SRI_BINDU = 0.05

# =============================================================================
# SPIRAL
# =============================================================================
SPIRAL_GAIN = 5.0                               # r = scale * sqrt(angle) * GAIN
FIBONACCI_SIZES = (1, 2, 3, 5, 8, 13, 21)       # golden rectangle sides
GOLDEN_RECT_DIVISOR = 40.0                      # width = size * radius / 40

"""Constants and the input contract shared by every layer."""

from .constants import (
    EPS_CLOSE,
    WRAP_TOL,
    DELAUNAY_TOL,
    TWO_PI,
    SQRT3,
    HEX_SIDE,
    RHOMBUS_HEIGHT,
    MORPH_STAGES,
    STAGE_CYLINDER,
    STAGE_TWIST,
    STAGE_TORUS,
    ANCHOR_OFFSETS,
    TILE_SHAPES,
    SHAPE_HEXAGON,
    SHAPE_RHOMBUS,
)
from .structures import (
    as_points2d,
    as_phase_pairs,
    validate_ring_count,
    validate_finite,
    validate_positive,
    validate_non_negative,
    canonical_triangle,
)

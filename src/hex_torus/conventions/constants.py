"""
Global constants for hex_torus
==============================

All tolerances, lattice constants and default morph parameters in ONE place.
"""

import numpy as np

# Numerical tolerances
EPS_CLOSE = 1e-10      # For "are these equal?"

# Periodic wrapping
WRAP_TOL = 1e-10       # wrapped values this close to a period boundary snap to 0

# Triangulation
DELAUNAY_TOL = 1e-6    # added to the side-length limit of constrained_delaunay

# Geometry constants (derived, not arbitrary)
TWO_PI = 2.0 * np.pi
SQRT3 = 1.7320508075688772
HEX_SIDE = 1.0 / SQRT3          # side (= circumradius) of the hexagonal phase tile
RHOMBUS_HEIGHT = SQRT3 / 2.0    # height of the unit fundamental rhombus

# =============================================================================
# LATTICE CONVENTIONS
# =============================================================================
#
# Euclidean tile frame: lattice spacing 1, hexagon with two horizontal sides
# for grid_nodes(), corner-up hexagon for hex_phase_tile().
#
# Rhombic basis of the periodic tiling:
#   e1 = (1, 0)
#   e2 = (1/2, √3/2)
#
# Phase coordinates (t1, t2) are the e1/e2 components scaled by 2π:
#   x = t1/2π + t2/4π
#   y = (√3/2) · t2/2π
# and t3 = -(t1 + t2) is carried only for colouring.
#
# Triangles are 0-based index triples into the point array they came from.
# Edges are (i, j) tuples with i < j.
#
# =============================================================================

# Morph stages, in pipeline order
STAGE_CYLINDER = "cylinder"   # F01: flat -> cylinder
STAGE_TWIST = "twist"         # F12: cylinder -> half-twisted cylinder
STAGE_TORUS = "torus"         # F23: twisted cylinder -> torus
MORPH_STAGES = (STAGE_CYLINDER, STAGE_TWIST, STAGE_TORUS)

# Morph defaults
DEFAULT_CYLINDER_HEIGHT = TWO_PI
DEFAULT_TORUS_RADIUS = 1.0
DEFAULT_SHRINK_FACTOR = 2.0
DEFAULT_CENTERLINE_SCALE = 1.0   # RHOMBUS_HEIGHT gives the lattice-scaled centerline

# F23 anchor -> arc-length offset along the tube
ANCHOR_OFFSETS = {
    "bottom": 1.0,
    "center": 0.0,
    "top": -1.0,
}
DEFAULT_ANCHOR = "center"

# Tile shapes
SHAPE_HEXAGON = "hexagon"
SHAPE_RHOMBUS = "rhombus"
TILE_SHAPES = (SHAPE_HEXAGON, SHAPE_RHOMBUS)

# Viewer defaults
DEFAULT_TILE_RINGS = 30      # resolution of one phase tile
DEFAULT_TILING_RINGS = 5     # rings of neighbouring tiles around the central one

# Grid-cell demo: three cells, offsets given in units of the hexagon side
DEFAULT_GRID_SIGMA = 0.1
DEFAULT_GRID_PHASES = (
    (0.0 * HEX_SIDE, 0.3 * HEX_SIDE),
    (-0.4 * HEX_SIDE, 0.0 * HEX_SIDE),
    (0.6 * HEX_SIDE, 0.7 * HEX_SIDE),
)

"""
HEX_TORUS - hexagonal tile to torus morph engine
================================================

NO rendering. NO scene graph. NO animation timeline.

Structure:
    conventions/ - Constants and input contract
    builders/    - Lattices and triangulated phase tiles
    operators/   - Coordinate transforms, wrapping, triangulation
    analysis/    - Grid-cell fields and colour data
    morph/       - F01 / F12 / F23 morph stages

All point arrays are numpy (N, 2) / (N, 3) float arrays; triangles are
0-based (K, 3) int arrays.
"""

__version__ = "0.1.0"

from . import conventions
from . import builders
from . import operators
from . import analysis
from . import morph

from .builders import grid_nodes, hex_phase_tile, build_rhombus_mesh_grid, build_hex_tile
from .operators import rotate2d, euclidean2torus, wrap_to_rhombus, constrained_delaunay
from .analysis import grid_cell_pdf
from .morph import f01_morph, f12_morph, f23_morph, morph_stage

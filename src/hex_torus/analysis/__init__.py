"""
Scalar and colour fields over tile points.

Includes:
- grid_cells: synthetic grid-cell firing fields
- coloring: phase hues and grid-cell RGB
"""

from .grid_cells import grid_cell_pdf, grid_cell_fields
from .coloring import phase_hue, phase_to_rgb, grid_cells_to_rgb

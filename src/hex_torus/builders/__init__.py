"""
Point-set builders - lattices and triangulated phase tiles.

EXPORTS:
- Lattices: grid_nodes, hex_phase_tile, rhombus_phase_tile, build_rhombus_mesh_grid
- Helpers: interpolate_boundary, tile_offsets
- Tiles: HexTile, build_hex_tile
"""

from .lattice import (
    grid_nodes,
    hex_phase_tile,
    rhombus_phase_tile,
    build_rhombus_mesh_grid,
    interpolate_boundary,
    tile_offsets,
)
from .tiles import HexTile, build_hex_tile

"""
Phase Tiles
===========

One triangulated phase tile, ready to be pushed through the morph stages.

A tile bundles, index-aligned:
    - euclid:    (N, 2) lattice points of the tile
    - torus:     (N, 2) their (t1, t2) phases
    - triangles: (K, 3) 0-based faces from constrained_delaunay
and the closed tile outline in both coordinate systems.

SHAPES:
    hexagon: grid_nodes(n) scaled to circumradius 1/√3 and turned by π/6
             (corner-up), side-length limit = lattice spacing 1/(√3 n)
    rhombus: build_rhombus_mesh_grid(n), side-length limit = 1/n

Only geometry lives here; materials, buffers and scene graphs belong to
the rendering layer.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Tuple

from .lattice import grid_nodes, hex_phase_tile, rhombus_phase_tile, build_rhombus_mesh_grid
from ..conventions.constants import (
    HEX_SIDE, SHAPE_HEXAGON, SHAPE_RHOMBUS, TILE_SHAPES, DEFAULT_TILE_RINGS,
)
from ..conventions.structures import validate_ring_count, validate_positive
from ..operators.transforms import rotate2d, euclidean2torus
from ..operators.triangulation import constrained_delaunay, mesh_edges
from ..morph.stages import morph_stage


@dataclass
class HexTile:
    """Triangulated phase tile."""
    shape: str
    n_rings: int
    euclid: np.ndarray           # (N, 2)
    torus: np.ndarray            # (N, 2) t1, t2
    triangles: np.ndarray        # (K, 3) 0-based
    boundary_euclid: np.ndarray  # (B, 2), closed (first row repeated last)
    boundary_torus: np.ndarray   # (B, 2)

    @property
    def n_vertices(self) -> int:
        return len(self.euclid)

    @property
    def edges(self) -> List[Tuple[int, int]]:
        """Wireframe edges (i, j), i < j."""
        return mesh_edges(self.triangles)

    def morph(self, stage: str, p: float, scale: float = 1.0, **kwargs) -> np.ndarray:
        """
        Vertex positions of this tile at progress p of a morph stage.

        Output is divided by scale (the viewer draws tiles at scale 2π).
        """
        scale = validate_positive(scale, "scale")
        return morph_stage(stage, self.torus, p, **kwargs) / scale

    def morph_boundary(self, stage: str, p: float, scale: float = 1.0, **kwargs) -> np.ndarray:
        """Tile outline at progress p of a morph stage, divided by scale."""
        scale = validate_positive(scale, "scale")
        return morph_stage(stage, self.boundary_torus, p, **kwargs) / scale


def _close(vertices: np.ndarray) -> np.ndarray:
    return np.vstack([vertices, vertices[:1]])


def build_hex_tile(n_rings: int = DEFAULT_TILE_RINGS, shape: str = SHAPE_HEXAGON) -> HexTile:
    """
    Build one triangulated phase tile.

    Args:
        n_rings: tile resolution (rings for a hexagon, intervals per side
            for a rhombus), >= 1
        shape: "hexagon" or "rhombus"

    Returns:
        HexTile
    """
    n_rings = validate_ring_count(n_rings, "n_rings", minimum=1)
    if shape not in TILE_SHAPES:
        raise ValueError(f"shape must be one of {list(TILE_SHAPES)}, got {shape!r}")

    if shape == SHAPE_HEXAGON:
        euclid = grid_nodes(n_rings) / n_rings * HEX_SIDE
        euclid = rotate2d(euclid, np.pi / 6)
        spacing = HEX_SIDE / n_rings
        outline = hex_phase_tile()
    else:
        _, euclid = build_rhombus_mesh_grid(n_rings)
        spacing = 1.0 / n_rings
        outline = rhombus_phase_tile()

    triangles = constrained_delaunay(euclid, spacing)
    torus = euclidean2torus(euclid)[:, :2]

    boundary_euclid = _close(outline)
    boundary_torus = euclidean2torus(boundary_euclid)[:, :2]

    return HexTile(
        shape=shape,
        n_rings=n_rings,
        euclid=euclid,
        torus=torus,
        triangles=triangles,
        boundary_euclid=boundary_euclid,
        boundary_torus=boundary_torus,
    )

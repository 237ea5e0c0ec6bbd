"""
Hexagonal and Rhombic Lattices
==============================

Point sets for one phase tile of the hexagonal torus.

GEOMETRY:
    Triangular lattice with spacing 1 (basis e1 = (1,0), e2 = (1/2, √3/2)).
    One full period of the 2-torus is covered either by
        - a hexagon of circumradius 1/√3 (hex_phase_tile), or
        - the fundamental rhombus spanned by e1, e2 (rhombus_phase_tile).

RING PARAMETRISATION (grid_nodes):
    Ring a (a = 1..n) holds 6a nodes. Node b ∈ [0, 6a) sits on ring-side
    (b - c)/a at position c = b mod a along that side:
        r = √((a - c)² + a·c)
        θ = atan(√3·c / (2a - c)) + π(b - c)/(3a)
    This places every node in closed form, no axial-coordinate dedup needed.

    Count: 1 + 3n(n+1) nodes, first node always (0, 0).

Date: Oct 2026
"""

import numpy as np
from typing import Tuple

from ..conventions.constants import TWO_PI, SQRT3, HEX_SIDE, RHOMBUS_HEIGHT, DEFAULT_TILING_RINGS
from ..conventions.structures import as_points2d, validate_ring_count


def grid_nodes(n_rings: int) -> np.ndarray:
    """
    Generate XY coords of hexagonal grid nodes, hexagon oriented with two
    horizontal sides.

    Args:
        n_rings: number of rings around the center (>= 0)

    Returns:
        (1 + 3n(n+1), 2) array, starting with [0, 0]
    """
    n_rings = validate_ring_count(n_rings, "n_rings")

    rings = [np.zeros((1, 2))]
    for a in range(1, n_rings + 1):
        b = np.arange(6 * a)
        c = b % a
        theta = np.arctan(SQRT3 * c / (2 * a - c)) + np.pi * (b - c) / (3 * a)
        r = np.sqrt((a - c) ** 2 + a * c)
        rings.append(np.column_stack([r * np.cos(theta), r * np.sin(theta)]))

    return np.vstack(rings)


def hex_phase_tile() -> np.ndarray:
    """
    Vertices of the hexagonal phase tile (the area containing the full
    toroidal phase space), corner-up orientation (two sides vertical).

    Returns:
        (6, 2) array, first vertex (0, 1/√3), counter-clockwise
    """
    k = np.arange(1, 7)
    theta = np.pi / 6 + k * (np.pi / 3)
    return np.column_stack([HEX_SIDE * np.cos(theta), HEX_SIDE * np.sin(theta)])


def rhombus_phase_tile() -> np.ndarray:
    """Vertices of the fundamental rhombus spanned by e1, e2 (CCW from origin)."""
    return np.array([
        [0.0, 0.0],
        [1.0, 0.0],
        [1.5, RHOMBUS_HEIGHT],
        [0.5, RHOMBUS_HEIGHT],
    ])


def build_rhombus_mesh_grid(num_rings: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Uniform (num_rings+1)² sampling of phase space and its rhombic image.

    Phases t1, t2 run over linspace(0, 2π, num_rings+1) each (t1 varies
    fastest). Euclidean image:
        x = t1/2π + t2/4π
        y = (√3/2) · t2/2π

    Args:
        num_rings: number of grid intervals per side (>= 1)

    Returns:
        phase: ((num_rings+1)², 2) array of (t1, t2)
        euclid: ((num_rings+1)², 2) array of (x, y), index-aligned with phase
    """
    num_rings = validate_ring_count(num_rings, "num_rings", minimum=1)

    t = np.linspace(0.0, TWO_PI, num_rings + 1)
    T1, T2 = np.meshgrid(t, t)
    phase = np.column_stack([T1.ravel(), T2.ravel()])

    x = phase[:, 0] / TWO_PI + phase[:, 1] / (2 * TWO_PI)
    y = RHOMBUS_HEIGHT * phase[:, 1] / TWO_PI
    euclid = np.column_stack([x, y])

    return phase, euclid


def interpolate_boundary(vertices, n_per_edge: int) -> np.ndarray:
    """
    Densify a closed polygon for drawing its outline through a morph.

    Each side p_s -> p_{s+1} (last side closes back to the first vertex) is
    sampled at n_per_edge evenly spaced points, endpoints included.

    Returns:
        (n_sides * n_per_edge, 2) array
    """
    vertices = as_points2d(vertices, "vertices")
    n_per_edge = validate_ring_count(n_per_edge, "n_per_edge", minimum=2)
    if len(vertices) < 2:
        raise ValueError(f"vertices must hold at least 2 points, got {len(vertices)}")

    closed = np.vstack([vertices, vertices[:1]])
    t = np.linspace(0.0, 1.0, n_per_edge)[:, None]

    sides = [p0 * (1 - t) + p1 * t for p0, p1 in zip(closed[:-1], closed[1:])]
    return np.vstack(sides)


def tile_offsets(n_rings: int = DEFAULT_TILING_RINGS, scale: float = 1.0) -> np.ndarray:
    """
    Centres of phase tiles in a hexagonal tiling, central tile first.

    Neighbouring hexagonal phase tiles sit one lattice spacing apart, so the
    centres are simply grid_nodes(n_rings) scaled by the tile scale.
    """
    return grid_nodes(n_rings) * float(scale)

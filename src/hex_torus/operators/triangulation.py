"""
Length-Constrained Delaunay Triangulation
=========================================

Delaunay triangulation of a 2D point set, minus every triangle whose longest
side exceeds a limit.

WHY THE FILTER:
    The convex hull of a tile's point cloud closes up regions where the
    periodic tile conceptually wraps (and any concave outline), producing
    long sliver triangles between far-apart boundary points. Dropping
    triangles with a side longer than the lattice spacing leaves only
    locally supported faces.

CONVENTIONS:
    - Triangles are 0-based (K, 3) int arrays into the input point array.
    - Order is whatever scipy.spatial.Delaunay returns; compare triangle
      sets up to permutation and vertex rotation (see canonical_triangle).
    - Edges are (i, j) tuples with i < j, sorted.

NOTE: Uses scipy.spatial.Delaunay (Qhull). Degenerate input (< 3 points,
collinear points) yields an empty triangle list, not an error.
"""

import warnings

import numpy as np
from scipy.spatial import Delaunay, QhullError
from typing import List, Tuple

from ..conventions.constants import DELAUNAY_TOL
from ..conventions.structures import as_points2d, validate_non_negative


def _empty_triangles() -> np.ndarray:
    return np.zeros((0, 3), dtype=int)


def triangle_side_lengths(points, triangles) -> np.ndarray:
    """
    Side lengths of each triangle.

    Returns:
        (K, 3) array of |p1p2|, |p2p3|, |p3p1|
    """
    P = as_points2d(points)
    T = np.asarray(triangles, dtype=int).reshape(-1, 3)
    if len(T) and (T.min() < 0 or T.max() >= len(P)):
        raise ValueError(f"triangle index out of bounds [0, {len(P) - 1}]")

    p1, p2, p3 = P[T[:, 0]], P[T[:, 1]], P[T[:, 2]]
    d12 = np.linalg.norm(p2 - p1, axis=1)
    d23 = np.linalg.norm(p3 - p2, axis=1)
    d31 = np.linalg.norm(p1 - p3, axis=1)

    return np.column_stack([d12, d23, d31])


def constrained_delaunay(points, side_length_limit: float,
                         tol: float = DELAUNAY_TOL) -> np.ndarray:
    """
    2D Delaunay triangulation with a constraint on maximum triangle side length.

    Args:
        points: (N, 2) array-like of [x, y]
        side_length_limit: maximum allowed side length
        tol: tolerance added to side_length_limit

    Returns:
        (K, 3) int array of 0-based index triples; empty for degenerate input
    """
    P = as_points2d(points)
    side_length_limit = validate_non_negative(side_length_limit, "side_length_limit")
    tol = validate_non_negative(tol, "tol")

    if len(P) < 3:
        return _empty_triangles()

    try:
        tri = Delaunay(P)
    except QhullError as e:
        warnings.warn(
            f"Delaunay triangulation failed on degenerate input of {len(P)} points "
            f"({e.__class__.__name__}); returning no triangles.",
            UserWarning
        )
        return _empty_triangles()

    raw = np.asarray(tri.simplices, dtype=int)
    if len(raw) == 0:
        return _empty_triangles()

    d_max = triangle_side_lengths(P, raw).max(axis=1)
    return raw[d_max <= side_length_limit + tol]


def mesh_edges(triangles) -> List[Tuple[int, int]]:
    """
    Unique undirected edges of a triangle list (the mesh wireframe).

    Returns:
        sorted list of (i, j) tuples with i < j
    """
    T = np.asarray(triangles, dtype=int).reshape(-1, 3)

    edge_set = set()
    for a, b, c in T:
        for i, j in ((a, b), (b, c), (c, a)):
            edge_set.add((min(int(i), int(j)), max(int(i), int(j))))

    return sorted(edge_set)

"""
Input Contract
==============

Every public function coerces its inputs through these helpers, so the
invalid-argument taxonomy is enforced in ONE place:
    - point arrays must be finite and shaped (N, 2) (or (2,) where allowed)
    - ring counts must be non-negative integers (or >= a stated minimum)
    - widths, limits and morph progress must be finite numbers

All violations raise ValueError with the argument name and offending value.
"""

import numbers

import numpy as np
from typing import Sequence, Tuple


def as_points2d(points, name: str = "points", allow_single: bool = False) -> np.ndarray:
    """
    Coerce a point set to a finite float (N, 2) array.

    Args:
        points: array-like of [x, y] rows
        name: argument name used in error messages
        allow_single: accept a bare (2,) point and promote it to (1, 2)

    Returns:
        (N, 2) float64 array (a copy, never a view of the input)
    """
    arr = np.array(points, dtype=float)

    if arr.ndim == 1 and allow_single and arr.shape[0] == 2:
        arr = arr.reshape(1, 2)
    elif arr.ndim == 1 and arr.shape[0] == 0:
        arr = arr.reshape(0, 2)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"{name} must have shape (N, 2), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")

    return arr


def as_phase_pairs(tp, name: str = "tp") -> np.ndarray:
    """
    Coerce toroidal coordinates to a finite (N, 2) array of (t1, t2).

    Accepts (N, 2) pairs, (N, 3) triples (t3 is dropped, it is redundant)
    or a single (2,) / (3,) point.
    """
    arr = np.array(tp, dtype=float)

    if arr.ndim == 1 and arr.shape[0] in (2, 3):
        arr = arr.reshape(1, -1)
    elif arr.ndim == 1 and arr.shape[0] == 0:
        arr = arr.reshape(0, 2)

    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        raise ValueError(f"{name} must have shape (N, 2) or (N, 3), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")

    return arr[:, :2].copy()


def validate_ring_count(n, name: str = "n_rings", minimum: int = 0) -> int:
    """Ring counts are integers >= minimum (bools are rejected)."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        if isinstance(n, numbers.Real) and not isinstance(n, bool) and float(n).is_integer():
            n = int(n)
        else:
            raise ValueError(f"{name} must be an integer, got {n!r}")
    n = int(n)
    if n < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {n}")
    return n


def validate_finite(value, name: str) -> float:
    """Scalar must be a finite real number."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a real number, got {value!r}") from None
    if not np.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def validate_positive(value, name: str) -> float:
    """Scalar must be finite and > 0."""
    value = validate_finite(value, name)
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")
    return value


def validate_non_negative(value, name: str) -> float:
    """Scalar must be finite and >= 0."""
    value = validate_finite(value, name)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def canonical_triangle(tri: Sequence[int]) -> Tuple[tuple, int]:
    """
    Return canonical representation of a triangle and its relative orientation.

    The canonical form starts at the minimum vertex index and goes in the
    direction that makes the second element smaller.

    Returns:
        (canonical_tuple, orientation)
        - orientation: +1 if input matches canonical direction, -1 if reversed

    Use case:
        Comparing triangle lists up to permutation and vertex rotation
        (Delaunay output order is not guaranteed).
    """
    tri = [int(v) for v in tri]
    if len(tri) != 3:
        raise ValueError(f"Triangle must have 3 vertices, got {len(tri)}")

    min_idx = tri.index(min(tri))
    rotated = tri[min_idx:] + tri[:min_idx]
    reversed_rot = [rotated[0]] + rotated[1:][::-1]

    if tuple(rotated) < tuple(reversed_rot):
        return tuple(rotated), +1
    else:
        return tuple(reversed_rot), -1

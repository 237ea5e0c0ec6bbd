"""
Coordinate Transforms
=====================

Euclidean tile coordinates <-> toroidal phases, rotation and periodic
wrapping.

CHANGE OF BASIS:
    With r = tan(π/3) = √3,
        t1 = 2π (x - y/r)
        t2 = 2π (y / (r/2))
        t3 = -(t1 + t2)
    i.e. (t1, t2)/2π are the coordinates of (x, y) in the rhombic basis
    e1 = (1, 0), e2 = (1/2, √3/2). The map is linear and NOT wrapped: points
    outside the central tile get phases outside [-π, π].

WRAPPING:
    wrap_to_rhombus reduces a point into the fundamental rhombus
        {a·e1 + b·e2 : a, b ∈ [0, 1)}
    by counting vertical half-periods and shearing the horizontal
    coordinate back along e2 before wrapping it, so both lattice directions
    are respected (plain axis-aligned wrapping would not be invariant under
    the diagonal lattice vector e2).
"""

import numpy as np

from ..conventions.constants import TWO_PI, SQRT3, RHOMBUS_HEIGHT, WRAP_TOL
from ..conventions.structures import as_points2d, as_phase_pairs, validate_finite


# =============================================================================
# ROTATION
# =============================================================================

def rotate2d(points, alpha: float) -> np.ndarray:
    """
    Rotate 2D points about the origin by alpha (radians).

    Uses the polar form (ρ, θ) -> (ρ, θ + α); the origin stays at the origin
    because ρ = 0 there.

    Args:
        points: (N, 2) array-like
        alpha: rotation angle in radians

    Returns:
        (N, 2) array of rotated points
    """
    P = as_points2d(points)
    alpha = validate_finite(alpha, "alpha")

    theta = np.arctan2(P[:, 1], P[:, 0])
    rho = np.hypot(P[:, 0], P[:, 1])
    new_theta = theta + alpha

    return np.column_stack([rho * np.cos(new_theta), rho * np.sin(new_theta)])


# =============================================================================
# CHANGE OF BASIS
# =============================================================================

def euclidean2torus(points) -> np.ndarray:
    """
    Convert 2D Euclidean coordinates into (hexagonal) toroidal coordinates.

    Args:
        points: (N, 2) array-like of [x, y]

    Returns:
        (N, 3) array of [t1, t2, t3] in radians, t3 = -(t1 + t2)
    """
    P = as_points2d(points)
    r = np.tan(np.pi / 3)

    t1 = P[:, 0] - P[:, 1] / r
    t2 = P[:, 1] / (r / 2)
    t3 = -(t1 + t2)

    return TWO_PI * np.column_stack([t1, t2, t3])


def torus2euclidean(phases) -> np.ndarray:
    """
    Inverse of euclidean2torus on the (t1, t2) channels.

    Args:
        phases: (N, 2) or (N, 3) array-like; a third column is ignored

    Returns:
        (N, 2) array of [x, y]
    """
    T = as_phase_pairs(phases, "phases")

    x = T[:, 0] / TWO_PI + T[:, 1] / (2 * TWO_PI)
    y = RHOMBUS_HEIGHT * T[:, 1] / TWO_PI

    return np.column_stack([x, y])


def wrap_phase(phases) -> np.ndarray:
    """Reduce angles into [0, 2π). Works on any array shape."""
    arr = np.asarray(phases, dtype=float)
    wrapped = np.mod(arr, TWO_PI)
    return np.where(np.abs(wrapped - TWO_PI) < WRAP_TOL, 0.0, wrapped)


# =============================================================================
# PERIODIC WRAPPING
# =============================================================================

def _wrap_unit(x: np.ndarray) -> np.ndarray:
    """Wrap to [0, 1) with tolerance for numerical precision."""
    result = np.mod(x, 1.0)
    # Snap values that are a rounding error away from 0 or 1 back to 0, so
    # wrapping an already wrapped point cannot jump by a full period.
    return np.where((np.abs(result) < WRAP_TOL) | (np.abs(result - 1.0) < WRAP_TOL), 0.0, result)


def wrap_to_rhombus(point) -> np.ndarray:
    """
    Reduce Euclidean point(s) into the fundamental rhombus of the tiling.

    Steps:
        n_y   = floor(y / (√3/2))             full vertical half-periods
        y'    = y - n_y·√3/2                   in [0, √3/2)
        shear = y'/√3                          horizontal drift along e2
        s     = x - n_y/2 - shear              coordinate along e1
        x'    = wrap(s) + shear                s wrapped into [0, 1)

    Invariant: wrap_to_rhombus(p + m·e1 + n·e2) == wrap_to_rhombus(p).

    Args:
        point: a single (2,) point or an (N, 2) array

    Returns:
        same shape as the input
    """
    arr = np.array(point, dtype=float)
    single = arr.ndim == 1
    P = as_points2d(arr, "point", allow_single=True)

    b = P[:, 1] / RHOMBUS_HEIGHT
    n_y = np.floor(b)
    b_frac = _wrap_unit(b - n_y)
    # a whole number of half-periods absorbed by the snap
    n_y = np.where(b_frac == 0.0, np.round(b), n_y)

    y = b_frac * RHOMBUS_HEIGHT
    shear = y / SQRT3
    s = _wrap_unit(P[:, 0] - n_y / 2 - shear)

    out = np.column_stack([s + shear, y])
    return out[0] if single else out

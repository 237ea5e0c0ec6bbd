"""
Flat Tile -> Cylinder -> Twisted Cylinder -> Torus
==================================================

Three chained developable-surface morphs. Each stage maps toroidal
coordinates (t1, t2) and the stage's own progress p ∈ [0, 1] to 3D points:

    F01  flat sheet        -> cylinder            (f01_morph)
    F12  cylinder          -> half-twisted cyl.   (f12_morph)
    F23  twisted cylinder  -> torus               (f23_morph)

CONTINUITY (pipeline contract):
    f12_morph(tp, 0, H)  == f01_morph(tp, 1, H)
    f23_morph(tp, 0, R)  == f12_morph(tp, 1, 2πR)
Each stage builds on the previous stage evaluated at p = 1, by plain
function composition.

ISOMETRY:
    F01 bends the sheet around a circle of radius 1/p through the angle
    p·nphi, so the arc length along nphi is preserved for every p
    (a pipe bend, not a lerp between flat and round).
    F23 bends the tube axis the same way, radius R/p.

PROGRESS:
    p must be finite. p <= 0 takes the p = 0 branch, p > 1 is clamped to 1.
    Same rule for all three stages.

Date: Oct 2026
"""

import numpy as np
from typing import Callable, Dict

from ..conventions.constants import (
    TWO_PI, RHOMBUS_HEIGHT,
    DEFAULT_CYLINDER_HEIGHT, DEFAULT_TORUS_RADIUS, DEFAULT_SHRINK_FACTOR,
    DEFAULT_CENTERLINE_SCALE, ANCHOR_OFFSETS, DEFAULT_ANCHOR,
    STAGE_CYLINDER, STAGE_TWIST, STAGE_TORUS,
)
from ..conventions.structures import as_phase_pairs, validate_finite, validate_positive


def _progress(p) -> float:
    """Clamp morph progress into [0, 1]."""
    p = validate_finite(p, "p")
    return min(max(p, 0.0), 1.0)


def _anchor_offset(anchor: str) -> float:
    if not isinstance(anchor, str) or anchor.lower() not in ANCHOR_OFFSETS:
        raise ValueError(f"anchor must be one of {sorted(ANCHOR_OFFSETS)}, got {anchor!r}")
    return ANCHOR_OFFSETS[anchor.lower()]


# =============================================================================
# F01: FLAT -> CYLINDER
# =============================================================================

def f01_morph(tp, p: float, H: float = DEFAULT_CYLINDER_HEIGHT) -> np.ndarray:
    """
    Developable morph from flat sheet into cylinder.

    Args:
        tp: (N, 2) array-like of [t1, t2] (a third column is ignored)
        p: morph progress in [0, 1]
        H: cylinder height

    Returns:
        (N, 3) array of [x, y, z]

    p = 0 is the flat sheet in the X-Z plane at y = -1, so that it sits
    centred with the p = 1 cylinder, whose axis is the z axis.
    """
    T = as_phase_pairs(tp)
    p = _progress(p)
    H = validate_finite(H, "H")
    t1, t2 = T[:, 0], T[:, 1]

    # lattice-driven angle around the axis, and height along it
    nphi = t1 + t2 / 2
    v = (t2 / TWO_PI) * H * RHOMBUS_HEIGHT

    if p <= 0:
        return np.column_stack([nphi, -np.ones_like(nphi), v])

    R0 = 1.0 / p
    theta = p * nphi
    x = R0 * np.sin(theta)
    y = R0 * (1 - np.cos(theta)) - 1
    return np.column_stack([x, y, v])


# =============================================================================
# F12: CYLINDER -> HALF-TWISTED CYLINDER
# =============================================================================

def f12_morph(tp, p: float, H: float = DEFAULT_CYLINDER_HEIGHT) -> np.ndarray:
    """
    Morph from cylinder into half-twisted cylinder.

    The cross-section at height t2 turns about the z axis by
    p · (t2 + π)/2, so across one period of t2 the twist differs by a
    half turn.

    Args:
        tp: (N, 2) array-like of [t1, t2]
        p: morph progress in [0, 1]
        H: cylinder height

    Returns:
        (N, 3) array of [x, y, z]
    """
    T = as_phase_pairs(tp)
    p = _progress(p)
    base = f01_morph(T, 1, H)

    X1, Y1, Z1 = base[:, 0], base[:, 1], base[:, 2]
    theta_p = p * (T[:, 1] + np.pi) / 2

    c, s = np.cos(theta_p), np.sin(theta_p)
    x = X1 * c - Y1 * s
    y = X1 * s + Y1 * c
    return np.column_stack([x, y, Z1])


# =============================================================================
# F23: TWISTED CYLINDER -> TORUS
# =============================================================================

def f23_morph(tp, p: float, R: float = DEFAULT_TORUS_RADIUS,
              f: float = DEFAULT_SHRINK_FACTOR, anchor: str = DEFAULT_ANCHOR,
              centerline_scale: float = DEFAULT_CENTERLINE_SCALE) -> np.ndarray:
    """
    Morph from twisted cylinder into torus by isometric pipe bending.

    Args:
        tp: (N, 2) array-like of [t1, t2]
        p: morph progress in [0, 1]
        R: target torus major radius
        f: tube shrink factor, tube radius goes 1 -> 1/f as p goes 0 -> 1
        anchor: "bottom" | "center" | "top", where along the tube the bend
            is anchored
        centerline_scale: scale of the bent centerline; 1 keeps the bend
            radius R/p, √3/2 matches the lattice height of the tube

    Returns:
        (N, 3) array of [x, y, z]

    Regression: f23_morph([[0, 0]], 1) == [[-0.5, 0, 0]].
    """
    T = as_phase_pairs(tp)
    p = _progress(p)
    R = validate_positive(R, "R")
    f = validate_positive(f, "f")
    k = validate_finite(centerline_scale, "centerline_scale")
    uoffset = _anchor_offset(anchor)

    cylinder_height = R * TWO_PI
    base = f12_morph(T, 1, cylinder_height)

    if p <= 0:
        return base

    X2, Y2 = base[:, 0], base[:, 1]

    # arc-length coordinate along the tube, bend radius and angle
    u = (T[:, 1] / TWO_PI) * cylinder_height + uoffset
    Rt = R / p
    Theta = u / Rt

    # centerline of the bent pipe and its principal normal
    Cx = Rt * (1 - np.cos(Theta)) * k
    Cz = Rt * np.sin(Theta) * k
    Nx = np.cos(Theta)
    Nz = -np.sin(Theta)

    r_shrink = 1.0 / (1 + (f - 1) * p)

    x = Cx + r_shrink * Nx * X2
    y = r_shrink * Y2
    z = Cz + r_shrink * Nz * X2 - uoffset * (cylinder_height / 2)

    # remove the drift of the centre of mass in the X-Z plane
    x = x - p
    z = z + p * np.pi * uoffset

    return np.column_stack([x, y, z])


# =============================================================================
# STAGE DISPATCH
# =============================================================================

STAGE_FUNCTIONS: Dict[str, Callable[..., np.ndarray]] = {
    STAGE_CYLINDER: f01_morph,
    STAGE_TWIST: f12_morph,
    STAGE_TORUS: f23_morph,
}


def morph_stage(stage: str, tp, p: float, **kwargs) -> np.ndarray:
    """
    Evaluate one named stage ("cylinder", "twist" or "torus").

    Extra keyword arguments go to the stage function (H, or R/f/anchor).
    """
    if stage not in STAGE_FUNCTIONS:
        raise ValueError(f"stage must be one of {list(STAGE_FUNCTIONS)}, got {stage!r}")
    return STAGE_FUNCTIONS[stage](tp, p, **kwargs)

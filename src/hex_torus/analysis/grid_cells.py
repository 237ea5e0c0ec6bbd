"""
Synthetic Grid-Cell Firing Fields
=================================

Periodic firing-rate field of an artificial grid cell: a sum of isotropic
Gaussians centred on every node of the hexagonal lattice, shifted by the
cell's phase.

    Z(q) = Σ_n  exp(-½ (‖q - (phase + n)‖ / σ)²) / (√(2π) σ)

Lattice extent: n_rings = ceil(1.5 · max |coordinate|) over the query
points, enough rings to cover the query region with margin.

Used as a colouring signal only; nothing in the morph pipeline consumes it.
"""

import numpy as np
from scipy.spatial.distance import cdist

from ..builders.lattice import grid_nodes
from ..conventions.structures import as_points2d, validate_positive


def _as_phase(phase, name: str = "phase") -> np.ndarray:
    arr = np.asarray(phase, dtype=float).ravel()
    if arr.shape != (2,):
        raise ValueError(f"{name} must be a [phaseX, phaseY] pair, got shape {np.shape(phase)}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")
    return arr


def grid_cell_pdf(points, phase, sigma: float) -> np.ndarray:
    """
    Firing-rate PDF of an artificial grid cell at a set of points.

    Args:
        points: (..., 2) array-like of [x, y] (e.g. a stacked meshgrid)
        phase: [phaseX, phaseY] offset of the cell's lattice
        sigma: Gaussian width (> 0)

    Returns:
        array of shape (...) with one PDF value per query point
    """
    sigma = validate_positive(sigma, "sigma")
    phase = _as_phase(phase)

    arr = np.asarray(points, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 2:
        raise ValueError(f"points must have shape (..., 2), got {arr.shape}")
    out_shape = arr.shape[:-1]
    Q = as_points2d(arr.reshape(-1, 2))

    if len(Q) == 0:
        return np.zeros(out_shape)

    n_rings = int(np.ceil(1.5 * np.max(np.abs(Q))))
    centers = grid_nodes(n_rings) + phase

    norm_factor = 1.0 / (np.sqrt(2 * np.pi) * sigma)
    dd = cdist(Q, centers)
    Z = norm_factor * np.exp(-0.5 * (dd / sigma) ** 2).sum(axis=1)

    return Z.reshape(out_shape)


def grid_cell_fields(points, phases, sigma: float) -> np.ndarray:
    """
    Fields of several grid cells, each normalised to a peak of 1.

    Args:
        points: (N, 2) query points
        phases: (k, 2) lattice offsets, one per cell
        sigma: Gaussian width shared by all cells

    Returns:
        (N, k) array; column j is grid_cell_pdf(points, phases[j], sigma)
        divided by its maximum over the query points
    """
    P = as_points2d(points)
    phases = np.asarray(phases, dtype=float)
    if phases.ndim != 2 or phases.shape[1] != 2:
        raise ValueError(f"phases must have shape (k, 2), got {phases.shape}")

    columns = []
    for ph in phases:
        Z = grid_cell_pdf(P, ph, sigma)
        peak = Z.max() if len(Z) else 1.0
        columns.append(Z / peak if peak > 0 else Z)

    if not columns:
        return np.zeros((len(P), 0))
    return np.column_stack(columns)

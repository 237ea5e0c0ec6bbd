"""
Per-vertex colour data derived from phases and grid-cell fields.

Hue from a wrapped phase channel (t1, t2 or t3) at full saturation/value,
or RGB from three normalised grid-cell fields.
"""

import numpy as np
from matplotlib.colors import hsv_to_rgb

from ..conventions.constants import TWO_PI, DEFAULT_GRID_PHASES, DEFAULT_GRID_SIGMA
from ..operators.transforms import wrap_phase
from .grid_cells import grid_cell_fields


def phase_hue(phases, channel: int) -> np.ndarray:
    """
    Hue in [0, 1) of one phase channel.

    Args:
        phases: (N, 2) or (N, 3) toroidal coordinates; with two columns the
            third phase is computed as -(t1 + t2)
        channel: 0, 1 or 2 (t1, t2, t3)
    """
    T = np.asarray(phases, dtype=float)
    if T.ndim != 2 or T.shape[1] not in (2, 3):
        raise ValueError(f"phases must have shape (N, 2) or (N, 3), got {T.shape}")
    if channel not in (0, 1, 2):
        raise ValueError(f"channel must be 0, 1 or 2, got {channel!r}")

    if T.shape[1] == 2:
        T = np.column_stack([T, -(T[:, 0] + T[:, 1])])

    return wrap_phase(T[:, channel]) / TWO_PI


def phase_to_rgb(phases, channel: int) -> np.ndarray:
    """(N, 3) RGB in [0, 1] from HSV(hue(channel), 1, 1)."""
    h = phase_hue(phases, channel)
    hsv = np.column_stack([h, np.ones_like(h), np.ones_like(h)])
    return hsv_to_rgb(hsv)


def grid_cells_to_rgb(points, phases=DEFAULT_GRID_PHASES,
                      sigma: float = DEFAULT_GRID_SIGMA) -> np.ndarray:
    """(N, 3) RGB whose channels are three normalised grid-cell fields."""
    phases = np.asarray(phases, dtype=float)
    if phases.shape != (3, 2):
        raise ValueError(f"need exactly 3 grid-cell phases for RGB, got shape {phases.shape}")
    return grid_cell_fields(points, phases, sigma)

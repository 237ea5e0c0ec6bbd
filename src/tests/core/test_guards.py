"""
Guard and Edge Case Tests for hex_torus
=======================================

Invalid-argument handling across every layer. Separated from the
per-module suites to keep those focused on geometry.

Run: python -m pytest tests/core/test_guards.py -v
"""

import pytest
import numpy as np

from hex_torus.builders.lattice import (
    grid_nodes,
    build_rhombus_mesh_grid,
    interpolate_boundary,
)
from hex_torus.builders.tiles import build_hex_tile
from hex_torus.operators.transforms import rotate2d, euclidean2torus, torus2euclidean, wrap_to_rhombus
from hex_torus.operators.triangulation import constrained_delaunay, triangle_side_lengths
from hex_torus.analysis.grid_cells import grid_cell_pdf, grid_cell_fields
from hex_torus.analysis.coloring import phase_hue, grid_cells_to_rgb
from hex_torus.morph.stages import f01_morph, f12_morph, f23_morph, morph_stage
from hex_torus.conventions.structures import validate_ring_count, canonical_triangle


# =============================================================================
# Ring counts
# =============================================================================

@pytest.mark.parametrize("bad", [-1, 1.5, True, "3", None])
def test_grid_nodes_rejects_bad_ring_count(bad):
    with pytest.raises(ValueError, match="n_rings"):
        grid_nodes(bad)


def test_grid_nodes_accepts_integral_float():
    assert len(grid_nodes(3.0)) == 37


def test_rhombus_grid_needs_one_interval():
    with pytest.raises(ValueError, match=r"num_rings must be >= 1"):
        build_rhombus_mesh_grid(0)


def test_validate_ring_count_minimum():
    assert validate_ring_count(2, minimum=2) == 2
    with pytest.raises(ValueError, match=r">= 2, got 1"):
        validate_ring_count(1, minimum=2)


def test_interpolate_boundary_needs_two_samples():
    with pytest.raises(ValueError, match="n_per_edge"):
        interpolate_boundary([[0, 0], [1, 0], [0, 1]], 1)


# =============================================================================
# Point arrays
# =============================================================================

@pytest.mark.parametrize("bad", [
    [[0, 0, 0], [1, 1, 1]],
    [1.0, 2.0, 3.0],
    [[[0, 0]]],
])
def test_rotate2d_rejects_bad_shape(bad):
    with pytest.raises(ValueError, match=r"shape \(N, 2\)"):
        rotate2d(bad, 0.5)


def test_rotate2d_rejects_nan_angle():
    with pytest.raises(ValueError, match="alpha"):
        rotate2d([[1, 0]], np.nan)


def test_euclidean2torus_rejects_triples():
    with pytest.raises(ValueError):
        euclidean2torus([[0, 0, 0]])


def test_torus2euclidean_rejects_four_columns():
    with pytest.raises(ValueError, match="phases"):
        torus2euclidean(np.zeros((2, 4)))


def test_non_finite_points_rejected():
    with pytest.raises(ValueError, match="non-finite"):
        euclidean2torus([[0, np.inf]])
    with pytest.raises(ValueError, match="non-finite"):
        constrained_delaunay([[0, 0], [1, 0], [np.nan, 1]], 2.0)


def test_wrap_to_rhombus_rejects_bad_shape():
    with pytest.raises(ValueError):
        wrap_to_rhombus([1.0, 2.0, 3.0])


# =============================================================================
# Triangulation
# =============================================================================

def test_negative_side_length_limit():
    with pytest.raises(ValueError, match="side_length_limit"):
        constrained_delaunay([[0, 0], [1, 0], [0, 1]], -1.0)


def test_negative_tolerance():
    with pytest.raises(ValueError, match="tol"):
        constrained_delaunay([[0, 0], [1, 0], [0, 1]], 1.0, tol=-1e-3)


def test_zero_limit_keeps_nothing():
    assert len(constrained_delaunay([[0, 0], [1, 0], [0, 1]], 0.0)) == 0


def test_side_lengths_index_out_of_bounds():
    with pytest.raises(ValueError, match="out of bounds"):
        triangle_side_lengths([[0, 0], [1, 0], [0, 1]], [[0, 1, 3]])


def test_canonical_triangle_wrong_length():
    with pytest.raises(ValueError, match="3 vertices"):
        canonical_triangle([0, 1, 2, 3])


# =============================================================================
# Grid cells and colours
# =============================================================================

@pytest.mark.parametrize("sigma", [0.0, -0.1, np.nan])
def test_grid_cell_pdf_bad_sigma(sigma):
    with pytest.raises(ValueError, match="sigma"):
        grid_cell_pdf([[0, 0]], [0, 0], sigma)


def test_grid_cell_pdf_bad_phase():
    with pytest.raises(ValueError, match="phase"):
        grid_cell_pdf([[0, 0]], [0, 0, 0], 0.1)


def test_grid_cell_pdf_bad_points():
    with pytest.raises(ValueError, match="points"):
        grid_cell_pdf(np.zeros((3, 3)), [0, 0], 0.1)


def test_grid_cell_fields_needs_phase_rows():
    with pytest.raises(ValueError, match=r"\(k, 2\)"):
        grid_cell_fields([[0, 0]], [0.1, 0.2, 0.3], 0.1)


def test_grid_cells_to_rgb_needs_three_phases():
    with pytest.raises(ValueError, match="3 grid-cell phases"):
        grid_cells_to_rgb([[0, 0]], phases=[[0, 0], [0.1, 0]])


@pytest.mark.parametrize("channel", [3, -1])
def test_phase_hue_bad_channel(channel):
    with pytest.raises(ValueError, match="channel"):
        phase_hue([[0.0, 0.0]], channel)


# =============================================================================
# Morph stages
# =============================================================================

@pytest.mark.parametrize("fn", [f01_morph, f12_morph, f23_morph])
@pytest.mark.parametrize("p", [np.nan, np.inf, "half"])
def test_progress_must_be_finite(fn, p):
    with pytest.raises(ValueError, match="p"):
        fn([[0, 0]], p)


def test_f23_unknown_anchor():
    with pytest.raises(ValueError, match="anchor"):
        f23_morph([[0, 0]], 0.5, anchor="middle")


@pytest.mark.parametrize("kwargs", [{"R": 0}, {"R": -1}, {"f": 0}])
def test_f23_non_positive_sizes(kwargs):
    with pytest.raises(ValueError, match=r"must be > 0"):
        f23_morph([[0, 0]], 0.5, **kwargs)


def test_f01_non_finite_height():
    with pytest.raises(ValueError, match="H"):
        f01_morph([[0, 0]], 0.5, H=np.inf)


def test_unknown_stage():
    with pytest.raises(ValueError, match="stage"):
        morph_stage("sphere", [[0, 0]], 0.5)


def test_morph_rejects_bad_coordinates():
    with pytest.raises(ValueError, match="tp"):
        f01_morph(np.zeros((2, 4)), 0.5)


# =============================================================================
# Tiles
# =============================================================================

def test_tile_unknown_shape():
    with pytest.raises(ValueError, match="shape"):
        build_hex_tile(2, shape="square")


def test_tile_needs_one_ring():
    with pytest.raises(ValueError, match="n_rings"):
        build_hex_tile(0)


def test_tile_morph_bad_scale():
    tile = build_hex_tile(1)
    with pytest.raises(ValueError, match="scale"):
        tile.morph("torus", 0.5, scale=0)

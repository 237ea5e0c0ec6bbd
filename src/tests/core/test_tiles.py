"""
Tests for triangulated phase tiles.

Validates:
    - Hexagon tile: vertex/triangle/edge counts, disk topology, corner-up outline
    - Rhombus tile: counts, phases match the rhombus mesh grid
    - Closed outlines in both coordinate systems
    - Morphing a tile: scaling, lattice-equivalent corners glue on the torus

Run with:
    python3 -m pytest tests/core/test_tiles.py -v
"""

import pytest
import numpy as np

from hex_torus.builders.tiles import HexTile, build_hex_tile
from hex_torus.builders.lattice import hex_phase_tile, build_rhombus_mesh_grid
from hex_torus.morph.stages import f01_morph, f23_morph
from hex_torus.conventions.constants import EPS_CLOSE, TWO_PI, HEX_SIDE


@pytest.fixture(scope="module")
def hex3():
    return build_hex_tile(3)


# ============================================================================
# Hexagon tile
# ============================================================================

class TestHexagonTile:

    def test_single_ring_counts(self):
        tile = build_hex_tile(1)
        assert isinstance(tile, HexTile)
        assert tile.n_vertices == 7
        assert len(tile.triangles) == 6
        assert len(tile.edges) == 12

    def test_three_rings_counts(self, hex3):
        assert hex3.n_vertices == 37
        assert len(hex3.triangles) == 54, f"Expected 6·3² triangles, got {len(hex3.triangles)}"

    def test_disk_topology(self, hex3):
        V, E, F = hex3.n_vertices, len(hex3.edges), len(hex3.triangles)
        assert V - E + F == 1, f"χ = {V - E + F}, expected 1"

    def test_fits_phase_tile(self, hex3):
        r = np.hypot(hex3.euclid[:, 0], hex3.euclid[:, 1])
        assert np.all(r <= HEX_SIDE + EPS_CLOSE)

    def test_corners_are_phase_tile_vertices(self, hex3):
        """The π/6 turn puts the outer-ring corners on the corner-up hexagon."""
        for v in hex_phase_tile():
            d = np.linalg.norm(hex3.euclid - v, axis=1)
            assert d.min() < 1e-9, f"Corner {v} missing from tile vertices"

    def test_torus_matches_euclid(self, hex3):
        assert hex3.torus.shape == (hex3.n_vertices, 2)
        # centre vertex first, at phase (0, 0)
        assert np.allclose(hex3.torus[0], [0, 0], atol=EPS_CLOSE)

    def test_default_shape(self, hex3):
        assert hex3.shape == "hexagon"
        assert hex3.n_rings == 3


# ============================================================================
# Rhombus tile
# ============================================================================

class TestRhombusTile:

    def test_counts(self):
        tile = build_hex_tile(4, shape="rhombus")
        assert tile.n_vertices == 25
        assert len(tile.triangles) == 32
        assert len(tile.edges) == 56

    def test_phases_match_mesh_grid(self):
        tile = build_hex_tile(4, shape="rhombus")
        phase, _ = build_rhombus_mesh_grid(4)
        assert np.allclose(tile.torus, phase, atol=1e-9)


# ============================================================================
# Outline
# ============================================================================

@pytest.mark.parametrize("shape, rows", [("hexagon", 7), ("rhombus", 5)])
def test_boundary_closed(shape, rows):
    tile = build_hex_tile(2, shape=shape)
    assert tile.boundary_euclid.shape == (rows, 2)
    assert tile.boundary_torus.shape == (rows, 2)
    assert np.allclose(tile.boundary_euclid[0], tile.boundary_euclid[-1])
    assert np.allclose(tile.boundary_torus[0], tile.boundary_torus[-1])


# ============================================================================
# Morphing a tile
# ============================================================================

class TestTileMorph:

    def test_morph_scaled(self, hex3):
        out = hex3.morph("torus", 1, scale=TWO_PI)
        assert out.shape == (hex3.n_vertices, 3)
        assert np.allclose(out, f23_morph(hex3.torus, 1) / TWO_PI)

    def test_morph_forwards_kwargs(self, hex3):
        out = hex3.morph("cylinder", 0.5, H=3.0)
        assert np.allclose(out, f01_morph(hex3.torus, 0.5, 3.0))

    def test_morph_boundary_shape(self, hex3):
        assert hex3.morph_boundary("twist", 0.5).shape == (7, 3)

    def test_flat_sheet_at_start(self, hex3):
        out = hex3.morph("cylinder", 0)
        assert np.allclose(out[:, 1], -1.0)

    @pytest.mark.parametrize("anchor", ["bottom", "center", "top"])
    def test_equivalent_corners_glue_on_torus(self, hex3, anchor):
        """Alternate hexagon corners differ by lattice vectors and meet at p = 1."""
        corners = hex3.morph_boundary("torus", 1, anchor=anchor)[:6]
        assert np.allclose(corners[0], corners[2], atol=1e-9)
        assert np.allclose(corners[0], corners[4], atol=1e-9)
        assert np.allclose(corners[1], corners[3], atol=1e-9)
        assert np.allclose(corners[1], corners[5], atol=1e-9)

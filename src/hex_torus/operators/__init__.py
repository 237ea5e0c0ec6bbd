"""Coordinate transforms, periodic wrapping and constrained triangulation."""

from .transforms import (
    rotate2d,
    euclidean2torus,
    torus2euclidean,
    wrap_phase,
    wrap_to_rhombus,
)
from .triangulation import (
    constrained_delaunay,
    mesh_edges,
    triangle_side_lengths,
)

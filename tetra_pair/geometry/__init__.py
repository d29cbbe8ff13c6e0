# tetra_pair/geometry - Tetrahedron solving and placement
"""
GEOMETRY: CLOSED-FORM TETRAHEDRON
=================================

Stages 1-3 of the evaluator:
- solver.py     edge lengths, face angles, law-of-sines validation
- placement.py  3D vertex coordinates and mirroring
- model.py      immutable records passed between stages

USAGE:
------
    from tetra_pair.geometry import solve_edge_lengths, solve_vertex_angles, place_vertices

    edges = solve_edge_lengths(params)
    angles = solve_vertex_angles(edges, params.angle_ABC)
    check_law_of_sines(angles)
    coords = place_vertices(edges)
"""

from .model import Vertex3D, EdgeLengths, VertexAngles, VertexCoords
from .solver import (
    solve_edge_lengths,
    solve_vertex_angles,
    check_law_of_sines,
    law_of_sines_residuals,
)
from .placement import place_vertices

__all__ = [
    'Vertex3D', 'EdgeLengths', 'VertexAngles', 'VertexCoords',
    'solve_edge_lengths', 'solve_vertex_angles', 'check_law_of_sines',
    'law_of_sines_residuals', 'place_vertices',
]

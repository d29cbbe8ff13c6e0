# File: tests/test_placement.py
"""
Test the 3D vertex placement.

The placed vertices must reproduce every solved edge length, put the shared
apex on the mirror plane, and mirror the first tetrahedron exactly.
"""

import math

import numpy as np
import pytest

from tetra_pair.errors import GeometryInconsistencyError
from tetra_pair.geometry.model import EdgeLengths, Vertex3D
from tetra_pair.geometry.placement import place_vertices
from tetra_pair.geometry.solver import solve_edge_lengths
from tetra_pair.model import InputParameters, get_default_input_parameters


def dist(p: Vertex3D, q: Vertex3D) -> float:
    return float(np.linalg.norm(p.as_array() - q.as_array()))


VALID_INPUTS = [
    get_default_input_parameters(),
    InputParameters(square_side_length=12.0, base_cut_back_length=1.0, angle_ABC=math.radians(80.0)),
    InputParameters(square_side_length=20.0, base_cut_back_length=3.0, angle_ABC=math.radians(140.0)),
    InputParameters(square_side_length=10.0, base_cut_back_length=0.0, angle_ABC=math.radians(45.0)),
]


class TestEdgeReproduction:
    """Distances between placed vertices equal the solved edges."""

    @pytest.mark.parametrize("params", VALID_INPUTS)
    def test_edges_match(self, params):
        edges = solve_edge_lengths(params)
        c = place_vertices(edges)

        for suffix in ('0', '1'):
            A = getattr(c, 'A' + suffix)
            B = getattr(c, 'B' + suffix)
            C = getattr(c, 'C' + suffix)

            assert np.isclose(dist(c.O, A), edges.OA), f"OA{suffix}"
            assert np.isclose(dist(c.O, C), edges.OA), f"OC{suffix}"
            assert np.isclose(dist(c.O, B), edges.OB), f"OB{suffix}"
            assert np.isclose(dist(B, A), edges.BA), f"BA{suffix}"
            assert np.isclose(dist(B, C), edges.BA), f"BC{suffix}"
            assert np.isclose(dist(A, C), edges.AC), f"AC{suffix}"


class TestMirrorSymmetry:

    @pytest.mark.parametrize("params", VALID_INPUTS)
    def test_second_tetrahedron_is_z_mirror(self, params):
        c = place_vertices(solve_edge_lengths(params))

        for name in ('A', 'B', 'C'):
            v0 = getattr(c, name + '0').as_array()
            v1 = getattr(c, name + '1').as_array()
            assert np.array_equal(v1, v0 * np.array([1.0, 1.0, -1.0])), name

    @pytest.mark.parametrize("params", VALID_INPUTS)
    def test_apex_on_mirror_plane(self, params):
        c = place_vertices(solve_edge_lengths(params))

        assert c.O.x == 0.0
        assert c.O.z == 0.0
        assert c.O.y > 0.0

    def test_base_on_ground(self):
        c = place_vertices(solve_edge_lengths(get_default_input_parameters()))

        for v in (c.A0, c.B0, c.C0, c.A1, c.B1, c.C1):
            assert v.y == 0.0

    def test_a_and_c_symmetric_about_x(self):
        c = place_vertices(solve_edge_lengths(get_default_input_parameters()))

        assert c.A0.x == -c.C0.x
        assert c.A0.z == c.C0.z
        assert c.B0.x == 0.0


class TestUnrealizableGeometry:
    """Edges that cannot stand on the ground raise instead of producing NaN."""

    def test_apex_below_ground(self):
        params = InputParameters(angle_ABC=math.radians(175.0))
        with pytest.raises(GeometryInconsistencyError, match="apex O"):
            place_vertices(solve_edge_lengths(params))

    def test_chord_longer_than_legs(self):
        edges = EdgeLengths(OB=16.0, BA=10.0, OA=22.0, AC=25.0)
        with pytest.raises(GeometryInconsistencyError, match="B cannot be placed"):
            place_vertices(edges)

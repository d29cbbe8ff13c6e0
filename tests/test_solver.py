# File: tests/test_solver.py
"""
Test the edge & angle solver and the law-of-sines validation.

WHY THESE TESTS?
---------------
The solver is the only place where the tetrahedron is actually "solved".
Every later stage trusts its edges and angles, so we check:
1. The closed-form edge lengths against hand calculations
2. Congruence of OBA/OBC and the isoceles base angles
3. Law-of-sines closure over a grid of inputs
4. That a corrupted angle set is rejected
"""

import dataclasses
import math

import numpy as np
import pytest

from tetra_pair.errors import GeometryInconsistencyError
from tetra_pair.geometry.solver import (
    solve_edge_lengths,
    solve_vertex_angles,
    check_law_of_sines,
    law_of_sines_residuals,
)
from tetra_pair.model import InputParameters, get_default_input_parameters


def solve(params: InputParameters):
    edges = solve_edge_lengths(params)
    return edges, solve_vertex_angles(edges, params.angle_ABC)


class TestEdgeLengths:
    """Closed-form edge lengths."""

    def test_default_edge_lengths(self):
        """16 ft square, 2 ft cut back, 110 degrees at B."""
        edges = solve_edge_lengths(get_default_input_parameters())

        assert np.isclose(edges.OA, math.sqrt(2.0) * 16.0), f"OA={edges.OA}"
        assert np.isclose(edges.OA, 22.627, atol=1e-3)
        assert edges.BA == 14.0
        assert np.isclose(edges.OB, math.sqrt(16.0**2 + 2.0**2))
        assert np.isclose(edges.OB, 16.125, atol=1e-3)
        assert np.isclose(edges.AC, 2.0 * 14.0 * math.sin(math.radians(55.0)))
        assert np.isclose(edges.AC, 22.936, atol=1e-3)

    def test_no_cut_back_makes_ob_equal_square_side(self):
        params = InputParameters(square_side_length=10.0, base_cut_back_length=0.0)
        edges = solve_edge_lengths(params)

        assert np.isclose(edges.OB, 10.0)
        assert np.isclose(edges.BA, 10.0)

    def test_right_angle_chord(self):
        """At 90 degrees, ABC is a right isoceles triangle: AC = BA * sqrt(2)."""
        params = InputParameters(angle_ABC=math.pi / 2)
        edges = solve_edge_lengths(params)

        assert np.isclose(edges.AC, edges.BA * math.sqrt(2.0))


class TestVertexAngles:
    """Face angles of tetrahedron OABC."""

    def test_congruent_scalene_triangles(self):
        _, a = solve(get_default_input_parameters())

        assert a.angle_OAB == a.angle_OCB
        assert a.angle_AOB == a.angle_COB
        assert a.angle_ABO == a.angle_CBO

    def test_isoceles_base_angles(self):
        _, a = solve(get_default_input_parameters())

        assert a.angle_BAC == a.angle_BCA
        assert a.angle_OAC == a.angle_OCA
        assert np.isclose(a.angle_BAC, math.radians(35.0))

    def test_triangle_angle_sums(self):
        """Each face's angles add up to pi."""
        _, a = solve(get_default_input_parameters())

        assert np.isclose(a.angle_OAB + a.angle_AOB + a.angle_ABO, math.pi)
        assert np.isclose(a.angle_ABC + a.angle_BAC + a.angle_BCA, math.pi)
        assert np.isclose(a.angle_AOC + a.angle_OAC + a.angle_OCA, math.pi)

    def test_law_of_cosines_against_law_of_sines(self):
        """Angles of OBA satisfy the planar law of sines with the solved edges."""
        edges, a = solve(get_default_input_parameters())

        ratio_O = edges.BA / math.sin(a.angle_AOB)
        ratio_A = edges.OB / math.sin(a.angle_OAB)
        ratio_B = edges.OA / math.sin(a.angle_ABO)

        assert np.isclose(ratio_O, ratio_A)
        assert np.isclose(ratio_A, ratio_B)

    def test_square_without_cut_back_has_right_angle_at_b(self):
        """With no cut back, OBA is half the square: right angle at B, 45 at A."""
        params = InputParameters(square_side_length=10.0, base_cut_back_length=0.0)
        _, a = solve(params)

        assert np.isclose(a.angle_ABO, math.pi / 2)
        assert np.isclose(a.angle_OAB, math.pi / 4)


class TestLawOfSines:
    """3D law-of-sines closure."""

    @pytest.mark.parametrize("side", [8.0, 16.0, 30.0])
    @pytest.mark.parametrize("cut_fraction", [0.0, 0.125, 0.5])
    @pytest.mark.parametrize("angle_deg", [20.0, 60.0, 110.0, 160.0])
    def test_closure_for_valid_inputs(self, side, cut_fraction, angle_deg):
        params = InputParameters(
            square_side_length=side,
            base_cut_back_length=side * cut_fraction,
            angle_ABC=math.radians(angle_deg),
        )
        _, a = solve(params)

        residuals = law_of_sines_residuals(a)
        assert set(residuals) == {'O,ABC', 'A,OBC', 'B,AOC', 'C,ABO'}
        for key, r in residuals.items():
            assert r <= 1e-3, f"{key}: residual {r:.3e}"

        check_law_of_sines(a)

    def test_corrupted_angle_is_rejected(self):
        _, a = solve(get_default_input_parameters())
        bad = dataclasses.replace(a, angle_AOC=a.angle_AOC + 0.3)

        with pytest.raises(GeometryInconsistencyError, match="Invalid tetrahedron"):
            check_law_of_sines(bad)

    def test_tolerance_is_respected(self):
        """A tiny perturbation passes at 1e-3 but fails at a tighter tolerance."""
        _, a = solve(get_default_input_parameters())
        nudged = dataclasses.replace(a, angle_AOC=a.angle_AOC + 1e-4)

        check_law_of_sines(nudged, tolerance=1e-3)
        with pytest.raises(GeometryInconsistencyError):
            check_law_of_sines(nudged, tolerance=1e-9)

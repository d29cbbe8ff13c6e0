# tetra_pair/geometry/solver.py
"""
EDGE & ANGLE SOLVER: Closed-Form Tetrahedron From Three Inputs
==============================================================

PURPOSE:
--------
Turn the square side, the base cut back and the ground-plane angle at B
into every edge length and face angle of tetrahedron OABC.

DERIVATION:
-----------
Triangle OBA is cut from a square of side s whose base is cut back by c:

    OB = sqrt(s² + c²)      (hypotenuse over the cut back)
    BA = s - c              (remaining base)
    OA = sqrt(2) · s        (diagonal of the square)

Triangle ABC is isoceles (BA = BC) with apex angle ABC, so the chord is

    AC = 2 · BA · sin(ABC / 2)

Angles of OBA come from the law of cosines; OBC is congruent so its angles
are copies. ABC and AOC are isoceles, so their base angles are
(pi - apex) / 2.

VALIDATION:
-----------
For a tetrahedron, the law of sines applied around each vertex gives

    product of (edge ratios) around vertex V = 1

which, written with the face angles, is a relation between two products
of three sines. If any of the four relations fails by more than the
tolerance, the faces cannot close into a tetrahedron and evaluation stops
before coordinates are synthesized.
"""

import math
from typing import Dict

from ..config import CONFIG
from ..errors import GeometryInconsistencyError
from ..kernel.vecmath import sq, safe_acos, safe_asin
from ..model import InputParameters
from .model import EdgeLengths, VertexAngles


def solve_edge_lengths(params: InputParameters) -> EdgeLengths:
    """
    Compute the four distinct edge lengths of one tetrahedron.

    Parameters:
    -----------
    params : InputParameters
        Uses square_side_length, base_cut_back_length and angle_ABC

    Returns:
    --------
    EdgeLengths
        OB, BA, OA, AC in feet

    Example:
    --------
    >>> edges = solve_edge_lengths(InputParameters())
    >>> round(edges.BA, 3), round(edges.OA, 3)
    (14.0, 22.627)
    """
    s = params.square_side_length
    c = params.base_cut_back_length

    length_OB = math.sqrt(sq(s) + sq(c))
    length_BA = s - c
    length_OA = math.sqrt(2.0 * sq(s))
    length_AC = 2.0 * length_BA * math.sin(params.angle_ABC * 0.5)

    return EdgeLengths(OB=length_OB, BA=length_BA, OA=length_OA, AC=length_AC)


def solve_vertex_angles(edges: EdgeLengths, angle_ABC: float) -> VertexAngles:
    """
    Compute every face angle of tetrahedron OABC.

    Parameters:
    -----------
    edges : EdgeLengths
        Output of solve_edge_lengths()
    angle_ABC : float
        Apex angle of isoceles triangle ABC (radians)

    Returns:
    --------
    VertexAngles
        All twelve face angles (radians)

    Raises:
    -------
    GeometryInconsistencyError
        If an inverse-trig argument falls outside [-1, 1], meaning the
        edges cannot form the required triangles.
    """
    OA, BA, OB, AC = edges.OA, edges.BA, edges.OB, edges.AC

    try:
        # Scalene triangles OBA and OBC: law of cosines
        angle_OAB = safe_acos((sq(OA) + sq(BA) - sq(OB)) / (2.0 * OA * BA))
        angle_AOB = safe_acos((sq(OA) + sq(OB) - sq(BA)) / (2.0 * OA * OB))

        # Isoceles triangle AOC: half the chord over the leg
        angle_AOC = 2.0 * safe_asin(AC / (2.0 * OA))
    except (ValueError, ZeroDivisionError) as e:
        raise GeometryInconsistencyError(f"Invalid tetrahedron: {e}") from e

    angle_ABO = math.pi - angle_OAB - angle_AOB

    # Isoceles triangle ABC
    angle_BAC = (math.pi - angle_ABC) * 0.5

    angle_OAC = (math.pi - angle_AOC) * 0.5

    return VertexAngles(
        angle_OAB=angle_OAB,
        angle_AOB=angle_AOB,
        angle_ABO=angle_ABO,
        angle_OCB=angle_OAB,
        angle_COB=angle_AOB,
        angle_CBO=angle_ABO,
        angle_ABC=angle_ABC,
        angle_BAC=angle_BAC,
        angle_BCA=angle_BAC,
        angle_AOC=angle_AOC,
        angle_OAC=angle_OAC,
        angle_OCA=angle_OAC,
    )


def _sine_products(a: VertexAngles) -> Dict[str, tuple]:
    """(lhs, rhs) sine products of the law of sines around each vertex."""
    sin = math.sin
    return {
        'O,ABC': (
            sin(a.angle_OAC) * sin(a.angle_OCB) * sin(a.angle_ABO),
            sin(a.angle_OCA) * sin(a.angle_CBO) * sin(a.angle_OAB),
        ),
        'A,OBC': (
            sin(a.angle_AOC) * sin(a.angle_BCA) * sin(a.angle_ABO),
            sin(a.angle_OCA) * sin(a.angle_ABC) * sin(a.angle_AOB),
        ),
        'B,AOC': (
            sin(a.angle_BAC) * sin(a.angle_OCB) * sin(a.angle_AOB),
            sin(a.angle_BCA) * sin(a.angle_COB) * sin(a.angle_OAB),
        ),
        'C,ABO': (
            sin(a.angle_OAC) * sin(a.angle_COB) * sin(a.angle_ABC),
            sin(a.angle_AOC) * sin(a.angle_CBO) * sin(a.angle_BAC),
        ),
    }


def law_of_sines_residuals(angles: VertexAngles) -> Dict[str, float]:
    """
    Absolute mismatch of each of the four tetrahedral law-of-sines relations.

    Keys name the apex vertex and the opposite face, e.g. ``'A,OBC'``.
    """
    return {key: abs(lhs - rhs) for key, (lhs, rhs) in _sine_products(angles).items()}


def check_law_of_sines(angles: VertexAngles,
                       tolerance: float = CONFIG.law_of_sines_tolerance) -> None:
    """
    Validate the face angles with the 3D law of sines.

    Raises:
    -------
    GeometryInconsistencyError
        On the first relation whose residual exceeds ``tolerance``
        (or is NaN).
    """
    for key, residual in law_of_sines_residuals(angles).items():
        if not residual <= tolerance:
            raise GeometryInconsistencyError(
                f"Invalid tetrahedron: law of sines fails at {key} "
                f"(residual {residual:.3e} > {tolerance:.0e})"
            )

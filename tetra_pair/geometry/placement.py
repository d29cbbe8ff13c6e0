# tetra_pair/geometry/placement.py
"""
VERTEX PLACEMENT: From Edge Lengths to 3D Coordinates
=====================================================

PURPOSE:
--------
Place the vertices of the first tetrahedron so every solved edge length
holds, then mirror it to get the second one.

CONSTRUCTION:
-------------
M, the midpoint of AC, sits at the origin and AC lies on the x axis:

    A = (-AC/2, 0, 0)
    C = (+AC/2, 0, 0)
    B = (0, 0, sqrt(BA² - (AC/2)²))          (on the ground, along z)

O lies in the x = 0 plane (OA = OC). Subtracting the sphere equations
|O - A|² = OA² and |O - B|² = OB² eliminates O.y and leaves O.z:

    O.z = (OB² - OA² + (AC/2)² - B.z²) / (-2 · B.z)
    O.y = sqrt(OA² - (AC/2)² - O.z²)

Finally the whole tetrahedron slides along z so that O.z = 0, which puts
the shared apex on the mirror plane. The second tetrahedron is the first
with z negated.
"""

import math

from ..errors import GeometryInconsistencyError
from ..kernel.vecmath import sq
from .model import EdgeLengths, Vertex3D, VertexCoords


def place_vertices(edges: EdgeLengths) -> VertexCoords:
    """
    Synthesize 3D coordinates for both tetrahedra.

    Parameters:
    -----------
    edges : EdgeLengths
        Solved edge lengths

    Returns:
    --------
    VertexCoords
        O on the mirror plane (O.x = O.z = 0), A0/B0/C0 for the first
        tetrahedron and their z-mirrored copies A1/B1/C1

    Raises:
    -------
    GeometryInconsistencyError
        If B or O would need the square root of a non-positive number,
        i.e. the edges cannot be realized as a tetrahedron standing on
        the ground plane.
    """
    length_AM = edges.AC * 0.5  # M is the midpoint of AC

    radicand_B = sq(edges.BA) - sq(length_AM)
    if not radicand_B > 0.0:
        raise GeometryInconsistencyError(
            f"Invalid tetrahedron: B cannot be placed (BA={edges.BA:.3f}, AC/2={length_AM:.3f})"
        )
    B_z = math.sqrt(radicand_B)

    O_z = (sq(edges.OB) - sq(edges.OA) + sq(length_AM) - sq(B_z)) / (-2.0 * B_z)

    radicand_O = sq(edges.OA) - sq(length_AM) - sq(O_z)
    if not radicand_O > 0.0:
        raise GeometryInconsistencyError(
            f"Invalid tetrahedron: apex O falls on or below the ground plane "
            f"(O.y² = {radicand_O:.3e})"
        )
    O_y = math.sqrt(radicand_O)

    # Translate so the apex lies on the mirror plane
    O = Vertex3D(0.0, O_y, 0.0)
    A0 = Vertex3D(-length_AM, 0.0, -O_z)
    B0 = Vertex3D(0.0, 0.0, B_z - O_z)
    C0 = Vertex3D(+length_AM, 0.0, -O_z)

    return VertexCoords(
        O=O,
        A0=A0,
        B0=B0,
        C0=C0,
        A1=A0.mirrored(),
        B1=B0.mirrored(),
        C1=C0.mirrored(),
    )

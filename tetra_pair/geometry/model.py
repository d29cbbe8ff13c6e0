# tetra_pair/geometry/model.py
"""
GEOMETRY RECORDS: Vertices, Edges and Angles
============================================

PURPOSE:
--------
Immutable records produced by the first three evaluation stages:
- EdgeLengths: the four distinct edge lengths of one tetrahedron
- VertexAngles: every face angle of tetrahedron OABC
- Vertex3D / VertexCoords: the placed vertices of both tetrahedra

NAMING:
-------
Angles are named after the three vertices of the angle with the vertex
in the middle, so ``angle_OAB`` is the angle at A between AO and AB.
Vertices of the first tetrahedron carry a 0 suffix (A0, B0, C0), the
mirrored copies a 1 suffix. The apex O is shared.

COORDINATE SYSTEM:
------------------
    x: along AC (A at -x, C at +x)
    y: up (the ground plane is y = 0)
    z: along the walkway, the mirror axis between the two tetrahedra
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vertex3D:
    """
    A vertex in 3D space (ft).

    frozen=True keeps vertices hashable and comparable by value, which a
    numpy array is not.
    """
    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, v) -> "Vertex3D":
        return cls(float(v[0]), float(v[1]), float(v[2]))

    def mirrored(self) -> "Vertex3D":
        """Reflect across the base plane z = 0."""
        return Vertex3D(self.x, self.y, -self.z)


@dataclass(frozen=True)
class EdgeLengths:
    """
    Edge lengths of one tetrahedron (ft).

    OC equals OA and BC equals BA by symmetry, so they are not stored.
    """
    OB: float
    BA: float
    OA: float
    AC: float


@dataclass(frozen=True)
class VertexAngles:
    """Face angles of tetrahedron OABC (radians)."""
    # Scalene triangle OBA
    angle_OAB: float
    angle_AOB: float
    angle_ABO: float
    # Scalene triangle OBC (congruent to OBA)
    angle_OCB: float
    angle_COB: float
    angle_CBO: float
    # Isoceles triangle ABC
    angle_ABC: float
    angle_BAC: float
    angle_BCA: float
    # Isoceles triangle AOC
    angle_AOC: float
    angle_OAC: float
    angle_OCA: float


@dataclass(frozen=True)
class VertexCoords:
    """Placed vertices of both tetrahedra."""
    O: Vertex3D
    A0: Vertex3D
    B0: Vertex3D
    C0: Vertex3D
    A1: Vertex3D
    B1: Vertex3D
    C1: Vertex3D

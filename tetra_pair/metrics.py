# tetra_pair/metrics.py
"""
AGGREGATE METRICS: Shape, Frame, Mirror, Wind and Totals
========================================================

PURPOSE:
--------
Stage 4 and 5 of the evaluator. Everything here is plain arithmetic on
the solved edges and placed vertices; no further geometric solving.

METRIC GROUPS:
--------------
- OverallStructure: footprint, height, face area, walkway clearances
- DihedralAngles: between the two faces at B, and face to ground
- FrameMetrics: tube length, metal mass and cost, hole drilling/tapping
- MirrorMetrics: mirror sheet area and cost, mirror fasteners
- WindSurfaces: projected areas seen by side and head winds
- Totals: mass and cost roll-up

ENGINEERING ASSUMPTIONS:
------------------------
- Reinforcement is estimated, not designed: about three braces per
  triangle (1.6 x BA per face) plus one cross bar between B0 and B1.
- Mirrors are fastened from both sides of the frame, so every drilled
  hole is tapped twice and gets two bolts.
- Only frame metal contributes to mass; mirror and bolt mass are not
  modelled.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .config import CONFIG
from .geometry.model import EdgeLengths, VertexCoords
from .kernel.vecmath import (
    cross, normalize, safe_acos, triangle_area, project, vec3, XY_PLANE, YZ_PLANE,
)
from .model import InputParameters, UnitCosts

INCHES_PER_FOOT = 12.0


@dataclass(frozen=True)
class OverallStructure:
    """
    Overall shape of the tetrahedron pair.

    footprint : Tuple[float, float]
        Extent along x (A to C) and along z (A0 to A1), ft
    walkway_top_angle : float
        Angle at O subtended by the walkway between B0 and B1 (radians)
    walkway_shoulder_width : float
        Walkway width at ``shoulder_height`` above the ground, ft
    """
    footprint: Tuple[float, float]
    footprint_area: float
    footprint_aspect_ratio: float
    height: float
    triangle_area: float
    walkway_top_angle: float
    walkway_base_width: float
    walkway_shoulder_width: float
    shoulder_height: float


@dataclass(frozen=True)
class DihedralAngles:
    """Dihedral angles (radians)."""
    angle_BOA_BOC: float  # between the two faces meeting along OB
    angle_BOA_ABC: float  # between face BOA and the ground


@dataclass(frozen=True)
class FrameMetrics:
    """Frame tube quantities. Lengths in ft, section in in, mass in lb, cost in $."""
    perimeter_length: float
    reinforce_length: float
    total_length: float
    cross_section: Tuple[float, float]
    wall_thickness: float
    cross_section_metal_area: float  # in^2
    metal_volume: float  # in^3
    metal_density: float  # lb/in^3
    metal_mass: float
    metal_cost: float
    drill_count: float
    drill_cost: float
    tap_count: float
    tap_cost: float


@dataclass(frozen=True)
class MirrorMetrics:
    """Mirror sheet and fastener quantities."""
    surface_area: float  # ft^2
    cost: float
    bolt_count: float
    bolt_cost: float


@dataclass(frozen=True)
class WindSurfaces:
    """Projected areas of the structure (ft^2)."""
    total_surface_area_XY: float  # seen by wind along z
    total_surface_area_YZ: float  # seen by wind along x


@dataclass(frozen=True)
class Totals:
    mass: float  # lb
    cost: float  # $


def compute_overall_structure(coords: VertexCoords, shoulder_height: float) -> OverallStructure:
    """
    Footprint, height, face area and walkway clearances.

    The walkway runs along z between B0 and B1; its width at a given height
    shrinks linearly from ``walkway_base_width`` at the ground to zero at O.
    """
    O = coords.O.as_array()
    A0 = coords.A0.as_array()
    B0 = coords.B0.as_array()

    footprint = (coords.C0.x - coords.A0.x, coords.A1.z - coords.A0.z)
    footprint_area = footprint[0] * footprint[1]
    footprint_aspect_ratio = footprint[0] / footprint[1] if footprint[1] else math.inf

    height = coords.O.y
    face_area = triangle_area(B0, O, A0)

    walkway_top_angle = math.atan(coords.B1.z / coords.O.y) * 2.0
    walkway_base_width = coords.B1.z - coords.B0.z
    walkway_shoulder_width = ((coords.O.y - shoulder_height) * coords.B1.z * 2.0) / coords.O.y

    return OverallStructure(
        footprint=footprint,
        footprint_area=footprint_area,
        footprint_aspect_ratio=footprint_aspect_ratio,
        height=height,
        triangle_area=face_area,
        walkway_top_angle=walkway_top_angle,
        walkway_base_width=walkway_base_width,
        walkway_shoulder_width=walkway_shoulder_width,
        shoulder_height=shoulder_height,
    )


def compute_dihedral_angles(coords: VertexCoords) -> DihedralAngles:
    """
    Dihedral angles from face normals.

    Both face normals are built from edges leaving B0, so they share an
    orientation convention and the angle between them is the angle
    between the faces.
    """
    O = coords.O.as_array()
    A0 = coords.A0.as_array()
    B0 = coords.B0.as_array()
    C0 = coords.C0.as_array()

    BO = B0 - O
    BA = B0 - A0
    BC = B0 - C0

    norm_BOA = normalize(cross(BO, BA))
    norm_BOC = normalize(cross(BO, BC))
    norm_ground = vec3(0.0, 1.0, 0.0)

    return DihedralAngles(
        angle_BOA_BOC=safe_acos(float(norm_BOA @ norm_BOC)),
        angle_BOA_ABC=safe_acos(float(norm_BOA @ norm_ground)),
    )


def compute_frame_metrics(
    edges: EdgeLengths,
    overall: OverallStructure,
    params: InputParameters,
    reinforce_factor: float = CONFIG.reinforce_factor,
) -> FrameMetrics:
    """
    Tube length, metal mass and cost, and hole counts for the frame.

    Each tetrahedron contributes the perimeter of its two scalene faces,
    so the pair needs 4 x (BA + OA + OB) of tube. Bolts are spaced at
    ``mirror_bolt_spacing`` along the whole frame.
    """
    perimeter_length = 4.0 * (edges.BA + edges.OA + edges.OB)
    reinforce_length = (edges.BA * reinforce_factor * 4.0) + overall.walkway_base_width
    total_length = perimeter_length + reinforce_length

    outer_w, outer_h = params.frame_cross_section
    wall = params.frame_wall_thickness
    outer_area = outer_w * outer_h
    inner_area = (outer_w - 2.0 * wall) * (outer_h - 2.0 * wall)
    metal_area = outer_area - inner_area

    metal_volume = metal_area * (total_length * INCHES_PER_FOOT)
    metal_mass = metal_volume * params.metal_density
    metal_cost = total_length * params.unit_cost.frame_metal

    drill_count = total_length / params.mirror_bolt_spacing
    tap_count = 2.0 * drill_count  # mirrors on both sides of the frame

    return FrameMetrics(
        perimeter_length=perimeter_length,
        reinforce_length=reinforce_length,
        total_length=total_length,
        cross_section=(outer_w, outer_h),
        wall_thickness=wall,
        cross_section_metal_area=metal_area,
        metal_volume=metal_volume,
        metal_density=params.metal_density,
        metal_mass=metal_mass,
        metal_cost=metal_cost,
        drill_count=drill_count,
        drill_cost=drill_count * params.unit_cost.frame_through_hole_drill,
        tap_count=tap_count,
        tap_cost=tap_count * params.unit_cost.frame_through_hole_tap,
    )


def compute_mirror_metrics(
    overall: OverallStructure,
    frame: FrameMetrics,
    unit_cost: UnitCosts,
) -> MirrorMetrics:
    """Mirror area over 8 triangular faces, one bolt per tapped hole."""
    surface_area = overall.triangle_area * 8.0
    bolt_count = frame.tap_count
    return MirrorMetrics(
        surface_area=surface_area,
        cost=surface_area * unit_cost.mirror,
        bolt_count=bolt_count,
        bolt_cost=bolt_count * unit_cost.mirror_bolt,
    )


def compute_wind_surfaces(coords: VertexCoords) -> WindSurfaces:
    """
    Project face O, B0, A0 onto the XY and YZ planes.

    Each projected area is doubled: two faces of the pair present the same
    projection to a wind from either direction.
    """
    O = coords.O.as_array()
    A0 = coords.A0.as_array()
    B0 = coords.B0.as_array()

    area_XY = triangle_area(project(B0, XY_PLANE), project(A0, XY_PLANE), project(O, XY_PLANE))
    area_YZ = triangle_area(project(B0, YZ_PLANE), project(A0, YZ_PLANE), project(O, YZ_PLANE))

    return WindSurfaces(
        total_surface_area_XY=area_XY * 2.0,
        total_surface_area_YZ=area_YZ * 2.0,
    )


def compute_totals(frame: FrameMetrics, mirror: MirrorMetrics) -> Totals:
    """Mass is frame metal only; cost sums metal, holes, mirror and bolts."""
    return Totals(
        mass=frame.metal_mass,
        cost=(frame.metal_cost
              + frame.drill_cost
              + frame.tap_cost
              + mirror.cost
              + mirror.bolt_cost),
    )

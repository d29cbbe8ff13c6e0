# tetra_pair/evaluate.py
"""
EVALUATE: The Structure Evaluation Pipeline
===========================================

PURPOSE:
--------
One pure function, evaluate_structure(), turns an InputParameters record
into a freshly built OutputParameters record:

    1. Validate inputs                      (InvalidInputError)
    2. Solve edge lengths and face angles
    3. Check the 3D law of sines            (GeometryInconsistencyError)
    4. Place vertices, mirror the tetrahedron
    5. Aggregate shape, dihedral, frame, mirror and wind metrics
    6. Roll up totals

Nothing is cached or mutated here; see structure.StructureModel for the
memoizing wrapper.
"""

from dataclasses import dataclass

from .config import CONFIG
from .geometry.model import EdgeLengths, VertexAngles, VertexCoords
from .geometry.placement import place_vertices
from .geometry.solver import solve_edge_lengths, solve_vertex_angles, check_law_of_sines
from .metrics import (
    OverallStructure,
    DihedralAngles,
    FrameMetrics,
    MirrorMetrics,
    WindSurfaces,
    Totals,
    compute_overall_structure,
    compute_dihedral_angles,
    compute_frame_metrics,
    compute_mirror_metrics,
    compute_wind_surfaces,
    compute_totals,
)
from .model import InputParameters, validate_input_parameters


@dataclass(frozen=True)
class OutputParameters:
    """Everything derived from one InputParameters record."""
    edge_length: EdgeLengths
    vertex_angle: VertexAngles
    vertex_coord: VertexCoords
    overall_structure: OverallStructure
    dihedral_angle: DihedralAngles
    frame: FrameMetrics
    mirror: MirrorMetrics
    wind: WindSurfaces
    total: Totals


def evaluate_structure(
    params: InputParameters,
    tolerance: float = CONFIG.law_of_sines_tolerance,
) -> OutputParameters:
    """
    Evaluate the tetrahedron pair for one set of inputs.

    Parameters:
    -----------
    params : InputParameters
        Physical inputs
    tolerance : float
        Absolute tolerance of the law-of-sines check

    Returns:
    --------
    OutputParameters
        Immutable result tree

    Raises:
    -------
    InvalidInputError
        If an input is outside its physical domain
    GeometryInconsistencyError
        If the solved faces do not close into a tetrahedron; raised before
        any coordinates are synthesized
    """
    validate_input_parameters(params)

    edges = solve_edge_lengths(params)
    angles = solve_vertex_angles(edges, params.angle_ABC)
    check_law_of_sines(angles, tolerance)

    coords = place_vertices(edges)

    overall = compute_overall_structure(coords, params.shoulder_height)
    dihedral = compute_dihedral_angles(coords)
    frame = compute_frame_metrics(edges, overall, params)
    mirror = compute_mirror_metrics(overall, frame, params.unit_cost)
    wind = compute_wind_surfaces(coords)

    return OutputParameters(
        edge_length=edges,
        vertex_angle=angles,
        vertex_coord=coords,
        overall_structure=overall,
        dihedral_angle=dihedral,
        frame=frame,
        mirror=mirror,
        wind=wind,
        total=compute_totals(frame, mirror),
    )

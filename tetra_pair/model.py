# tetra_pair/model.py
"""
INPUT MODEL: Structure Parameters and Unit Costs
================================================

PURPOSE:
--------
This module defines the input record the evaluator consumes:
- UnitCosts: per-unit prices for frame stock, mirror sheet and fasteners
- InputParameters: geometry, frame section, material and cost inputs

THE STRUCTURE:
--------------
Two congruent tetrahedra share apex O and are mirrored across their base
plane. Each tetrahedron is cut from a square of side ``square_side_length``:

                        O
                       /|\\
                      / | \\
                     /  |  \\
                    /  -B-  \\
                   / -/   \\- \\
                  /-/       \\-\\
                 A . . . . . . C

- OBA and OBC are congruent scalene triangles (OA = OC, BA = BC)
- ABC is isoceles with apex angle ``angle_ABC`` on the ground plane
- AOC is isoceles

UNITS:
------
Lengths in feet, except frame section dimensions and wall thickness which
are in inches (that is how tube stock is sold). Density is lb/in^3.

WHY FROZEN DATACLASSES?
-----------------------
Inputs compare by value and are hashable, so the memoizing model can tell
whether its cached output still belongs to the current input.
"""

import math
from dataclasses import dataclass, field, fields
from typing import Tuple

from .errors import InvalidInputError
from .kernel.vecmath import deg_to_rad


@dataclass(frozen=True)
class UnitCosts:
    """
    Per-unit costs used by the frame and mirror cost roll-up.

    Parameters:
    -----------
    frame_metal : float
        Tube stock price ($ / ft)
    mirror : float
        Mirror sheet price ($ / ft^2)
    mirror_bolt : float
        Countersunk stainless screw holding the mirror ($ each)
    frame_through_hole_drill : float
        Drilling one through-hole in the frame ($ each)
    frame_through_hole_tap : float
        Tapping one side of a through-hole ($ each)
    """
    frame_metal: float = 4.4
    mirror: float = 220.0 / (8.0 * 4.0)  # one 4x8 ft sheet
    mirror_bolt: float = 3.67 / 10.0  # pack of 10
    frame_through_hole_drill: float = 695.0 / 160.0
    frame_through_hole_tap: float = 480.0 / 320.0


@dataclass(frozen=True)
class InputParameters:
    """
    Physical inputs of one evaluation.

    Parameters:
    -----------
    square_side_length : float
        Side of the starting square forming triangle OBA (ft)
    base_cut_back_length : float
        Cut back on the base of the square to form the triangle (ft)
    angle_ABC : float
        Angle on the ground plane between the two triangles at B (radians)
    frame_cross_section : Tuple[float, float]
        Outer dimensions of the rectangular tube (in)
    frame_wall_thickness : float
        Tube wall thickness (in)
    metal_density : float
        Frame metal density (lb/in^3), 0.289 for steel
    shoulder_height : float
        Height at which the walkway shoulder width is measured (ft)
    mirror_bolt_spacing : float
        Spacing of mirror fasteners along the frame (ft)
    unit_cost : UnitCosts
        Per-unit prices
    """
    square_side_length: float = 16.0
    base_cut_back_length: float = 2.0
    angle_ABC: float = deg_to_rad(110.0)
    frame_cross_section: Tuple[float, float] = (0.75, 1.5)
    frame_wall_thickness: float = 1.0 / 16.0
    metal_density: float = 0.289
    shoulder_height: float = 5.0
    mirror_bolt_spacing: float = 2.0
    unit_cost: UnitCosts = field(default_factory=UnitCosts)


def get_default_input_parameters() -> InputParameters:
    """Return the reference design: 16 ft square, 2 ft cut back, 110 degrees at B."""
    return InputParameters()


def _check_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    if value < 0.0:
        raise InvalidInputError(f"{name} must be non-negative, got {value!r}")


def validate_input_parameters(params: InputParameters) -> None:
    """
    Reject inputs outside the physical domain of the model.

    Checks:
    -------
    - every length, density and cost is finite and non-negative
    - square_side_length > base_cut_back_length >= 0
    - 0 < angle_ABC < pi
    - the tube wall leaves a hollow core (2 * wall < each outer dimension)
    - mirror_bolt_spacing > 0 (fastener counts divide by it)

    Raises:
    -------
    InvalidInputError
        On the first violated constraint, naming the offending field.
    """
    for name in ('square_side_length', 'base_cut_back_length', 'frame_wall_thickness',
                 'metal_density', 'shoulder_height', 'mirror_bolt_spacing'):
        _check_non_negative(name, getattr(params, name))

    for f in fields(params.unit_cost):
        _check_non_negative(f"unit_cost.{f.name}", getattr(params.unit_cost, f.name))

    if len(params.frame_cross_section) != 2:
        raise InvalidInputError(
            f"frame_cross_section must have 2 dimensions, got {params.frame_cross_section!r}"
        )
    for dim in params.frame_cross_section:
        _check_non_negative("frame_cross_section", dim)
        if dim <= 2.0 * params.frame_wall_thickness:
            raise InvalidInputError(
                f"frame_wall_thickness {params.frame_wall_thickness} leaves no hollow core "
                f"in cross section {params.frame_cross_section}"
            )

    if params.square_side_length <= params.base_cut_back_length:
        raise InvalidInputError(
            f"square_side_length ({params.square_side_length}) must exceed "
            f"base_cut_back_length ({params.base_cut_back_length})"
        )

    if not math.isfinite(params.angle_ABC) or not (0.0 < params.angle_ABC < math.pi):
        raise InvalidInputError(
            f"angle_ABC must lie strictly between 0 and pi radians, got {params.angle_ABC!r}"
        )

    if params.mirror_bolt_spacing <= 0.0:
        raise InvalidInputError(
            f"mirror_bolt_spacing must be positive, got {params.mirror_bolt_spacing!r}"
        )

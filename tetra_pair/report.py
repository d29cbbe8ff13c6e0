# tetra_pair/report.py
"""Plain-text report of an evaluated structure, including the wind sweep."""

import sys
from typing import List, Optional, TextIO

from .evaluate import OutputParameters
from .kernel.vecmath import rad_to_deg
from .wind import wind_force_sweep


def _vertex_line(name: str, v) -> str:
    return f"   {name:<2} = [{v.x:+.3f}, {v.y:+.3f}, {v.z:+.3f}]"


def format_output_parameters(output: OutputParameters) -> str:
    """Render every output field, then the wind force sweep for both planes."""
    e = output.edge_length
    a = output.vertex_angle
    c = output.vertex_coord
    s = output.overall_structure
    d = output.dihedral_angle
    f = output.frame
    m = output.mirror
    w = output.wind
    t = output.total

    lines: List[str] = []
    add = lines.append

    add("Edge lengths:")
    add(f"   length_OB = {e.OB:.3f} ft")
    add(f"   length_BA = {e.BA:.3f} ft")
    add(f"   length_OA = {e.OA:.3f} ft")
    add(f"   length_AC = {e.AC:.3f} ft")

    add("Scalene triangle OBA and OBC vertex angles:")
    add(f"   angle_OAB = angle_OCB = {rad_to_deg(a.angle_OAB):.3f} degrees")
    add(f"   angle_AOB = angle_COB = {rad_to_deg(a.angle_AOB):.3f} degrees")
    add(f"   angle_ABO = angle_CBO = {rad_to_deg(a.angle_ABO):.3f} degrees")
    add("Isoceles triangle ABC vertex angles:")
    add(f"   angle_ABC             = {rad_to_deg(a.angle_ABC):.3f} degrees")
    add(f"   angle_BAC = angle_BCA = {rad_to_deg(a.angle_BAC):.3f} degrees")
    add("Isoceles triangle AOC vertex angles:")
    add(f"   angle_AOC             = {rad_to_deg(a.angle_AOC):.3f} degrees")
    add(f"   angle_OAC = angle_OCA = {rad_to_deg(a.angle_OAC):.3f} degrees")

    add("Vertex coordinates:")
    for name in ('O', 'B0', 'A0', 'C0', 'B1', 'A1', 'C1'):
        add(_vertex_line(name, getattr(c, name)))

    add("Structural shape summary:")
    add(f"   Footprint dimensions   = [{s.footprint[0]:.3f}, {s.footprint[1]:.3f}] ft")
    add(f"   Footprint surface area = {s.footprint_area:.3f} ft^2")
    add(f"   Footprint aspect ratio = {s.footprint_aspect_ratio:.3f}")
    add(f"   Height                 = {s.height:.3f} ft")
    add(f"   Triangle surface area  = {s.triangle_area:.3f} ft^2")
    add(f"   Walkway top angle      = {rad_to_deg(s.walkway_top_angle):.3f} degrees")
    add(f"   Walkway base width     = {s.walkway_base_width:.3f} ft")
    add(f"   Walkway shoulder width = {s.walkway_shoulder_width:.3f} ft "
        f"(at {s.shoulder_height:.3f} ft shoulder height)")

    add("Important dihedral angles:")
    add(f"   Between triangle pairs (angle_BOA_BOC)      = {rad_to_deg(d.angle_BOA_BOC):.3f} degrees")
    add(f"   Between triangle and ground (angle_BOA_ABC) = {rad_to_deg(d.angle_BOA_ABC):.3f} degrees")

    add("Frame info:")
    add(f"   Perimeter length         = {f.perimeter_length:.3f} ft")
    add(f"   Reinforce length         = {f.reinforce_length:.3f} ft")
    add(f"   Total length             = {f.total_length:.3f} ft")
    add(f"   Cross-section dimensions = [{f.cross_section[0]:.3f}, {f.cross_section[1]:.3f}] in")
    add(f"   Wall thickness           = {f.wall_thickness:.3f} in")
    add(f"   Cross-section metal area = {f.cross_section_metal_area:.3f} in^2")
    add(f"   Metal volume             = {f.metal_volume:.3f} in^3 "
        f"({f.metal_volume / (12.0 * 12.0 * 12.0):.3f} ft^3)")
    add(f"   Metal density            = {f.metal_density:.3f} lb/in^3")
    add(f"   Mass                     = {f.metal_mass:.3f} lb")
    add(f"   Cost                     = ${f.metal_cost:.3f}")
    add(f"   Through-hole drill count = {f.drill_count:.3f}")
    add(f"   Through-hole drill cost  = ${f.drill_cost:.3f}")
    add(f"   Through-hole tap count   = {f.tap_count:.3f}")
    add(f"   Through-hole tap cost    = ${f.tap_cost:.3f}")

    add("Mirror coating info:")
    add(f"   Total surface area       = {m.surface_area:.3f} ft^2")
    add(f"   Mirror cost              = ${m.cost:.3f}")
    add(f"   Mirror bolt count        = {m.bolt_count:.3f}")
    add(f"   Mirror bolt cost         = ${m.bolt_cost:.3f}")

    sweep = wind_force_sweep(w)
    add("Wind:")
    for plane, area, column in (("XY", w.total_surface_area_XY, 'force_xy_lbf'),
                                ("YZ", w.total_surface_area_YZ, 'force_yz_lbf')):
        add(f"   {plane} plane:")
        add(f"      Total surface area = {area:.3f} ft^2")
        for mph, force in zip(sweep['speed_mph'], sweep[column]):
            add(f"      Side force at {mph:5.1f} MPH = {force:.0f} lbs")

    add("Totals:")
    add(f"   Mass                     = {t.mass:.3f} lb")
    add(f"   Cost                     = ${t.cost:.3f}")

    return "\n".join(lines)


def print_output_parameters(output: OutputParameters, file: Optional[TextIO] = None) -> None:
    """Print the full report to ``file`` (standard output by default)."""
    print(format_output_parameters(output), file=file if file is not None else sys.stdout)

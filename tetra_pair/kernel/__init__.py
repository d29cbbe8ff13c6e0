# tetra_pair/kernel - Stateless math helpers
"""
KERNEL: SHARED MATH
===================

Pure helpers used by the geometry solver, the vertex placement and the
aggregate metrics. No state lives here.
"""

from .vecmath import (
    sq,
    deg_to_rad,
    rad_to_deg,
    safe_acos,
    safe_asin,
    vec3,
    cross,
    length,
    normalize,
    triangle_area,
    project,
    XY_PLANE,
    YZ_PLANE,
)

__all__ = [
    'sq', 'deg_to_rad', 'rad_to_deg', 'safe_acos', 'safe_asin',
    'vec3', 'cross', 'length', 'normalize', 'triangle_area', 'project',
    'XY_PLANE', 'YZ_PLANE',
]

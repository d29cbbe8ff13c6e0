# tetra_pair/kernel/vecmath.py
"""
VECMATH: Stateless Scalar and Vector Helpers
============================================

PURPOSE:
--------
Small pure functions shared by every stage of the evaluator:

- Scalar helpers: sq, clamped inverse trig, unit conversions
- Vector helpers: cross products, normalization, triangle areas, projections

Vectors are plain numpy arrays of shape (3,). Nothing in this module keeps
state, so every function can be called from anywhere.

CONVENTIONS:
------------
- Angles are radians unless a name says otherwise (``deg``).
- Lengths are whatever unit the caller passes in (feet in this package).
"""

import math

import numpy as np

# Inverse-trig arguments this close outside [-1, 1] are treated as rounding noise
DOMAIN_SLACK = 1e-9


def sq(x: float) -> float:
    """Return x squared."""
    return x * x


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def clamp_unit(value: float, slack: float = DOMAIN_SLACK) -> float:
    """
    Clamp a cosine/sine argument into [-1, 1].

    Values outside the interval by more than ``slack`` are not rounding noise,
    they mean the caller handed us an impossible triangle.

    Raises:
        ValueError: If |value| > 1 + slack, or value is NaN.
    """
    if math.isnan(value) or abs(value) > 1.0 + slack:
        raise ValueError(f"Argument {value!r} is outside the inverse-trig domain [-1, 1]")
    return min(1.0, max(-1.0, value))


def safe_acos(value: float) -> float:
    return math.acos(clamp_unit(value))


def safe_asin(value: float) -> float:
    return math.asin(clamp_unit(value))


def vec3(x: float, y: float, z: float) -> np.ndarray:
    return np.array([x, y, z], dtype=float)


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.cross(a, b)


def length(v: np.ndarray) -> float:
    return float(np.linalg.norm(v))


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Return v scaled to unit length.

    Raises:
        ValueError: If v has zero length (no direction to keep).
    """
    L = length(v)
    if L <= 0.0:
        raise ValueError(f"Cannot normalize zero-length vector {v}")
    return v / L


def triangle_area(p0: np.ndarray, p1: np.ndarray, p2: np.ndarray) -> float:
    """
    Area of the triangle p0, p1, p2 as half the cross-product magnitude
    of the two edges leaving p0.
    """
    return length(cross(p1 - p0, p2 - p0)) * 0.5


# Component masks for projecting onto the coordinate planes
XY_PLANE = vec3(1.0, 1.0, 0.0)
YZ_PLANE = vec3(0.0, 1.0, 1.0)


def project(v: np.ndarray, plane_mask: np.ndarray) -> np.ndarray:
    """Project a point onto a coordinate plane by zeroing the masked component."""
    return v * plane_mask

"""Angle and coordinate primitives for coordinate-conversion tooling."""

from __future__ import annotations

from coordmath.config import Settings, get_settings
from coordmath.core import (
    Frame2D,
    PolarCoord,
    Vec2,
    acosd,
    asind,
    atan2d,
    atand,
    compute_rotation_matrix,
    cosd,
    hypot,
    is_rotation_matrix,
    polar_from_xy,
    rot_2d,
    sind,
    skew,
    tand,
    wrap_ctr,
    wrap_near,
    wrap_pos,
    xy_from_polar,
)
from coordmath.errors import CoordMathError, InvalidAxisError

__version__ = "0.1.0"

__all__ = [
    "CoordMathError",
    "Frame2D",
    "InvalidAxisError",
    "PolarCoord",
    "Settings",
    "Vec2",
    "acosd",
    "asind",
    "atan2d",
    "atand",
    "compute_rotation_matrix",
    "cosd",
    "get_settings",
    "hypot",
    "is_rotation_matrix",
    "polar_from_xy",
    "rot_2d",
    "sind",
    "skew",
    "tand",
    "wrap_ctr",
    "wrap_near",
    "wrap_pos",
    "xy_from_polar",
]

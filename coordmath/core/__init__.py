"""Pure angle and coordinate primitives."""

from __future__ import annotations

from coordmath.core.angles import wrap_ctr, wrap_near, wrap_pos
from coordmath.core.planar import Frame2D, rot_2d
from coordmath.core.polar import PolarCoord, Vec2, hypot, polar_from_xy, xy_from_polar
from coordmath.core.rotation import (
    compute_rotation_matrix,
    is_rotation_matrix,
    skew,
)
from coordmath.core.trig import acosd, asind, atan2d, atand, cosd, sind, tand

__all__ = [
    "Frame2D",
    "PolarCoord",
    "Vec2",
    "acosd",
    "asind",
    "atan2d",
    "atand",
    "compute_rotation_matrix",
    "cosd",
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

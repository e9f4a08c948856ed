# coordmath/core/polar.py
"""Cartesian <-> polar conversion with an explicit degeneracy flag."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
import numpy.typing as npt

from coordmath.config import POLAR_DEGENERATE_THRESHOLD
from coordmath.core._scalar import BoolOrArray, FloatOrArray, as_bool, as_float
from coordmath.core.trig import atan2d, cosd, sind
from coordmath.utils.logger import get_logger

LOGGER = get_logger(__name__)


class Vec2(NamedTuple):
    """Planar vector (x, y) in shared arbitrary units."""

    x: FloatOrArray
    y: FloatOrArray


class PolarCoord(NamedTuple):
    """Polar form of a planar vector.

    Attributes:
        r: Magnitude, same units as x and y; always >= 0
        theta: Angle from the x axis toward y (deg), in (-180, 180]
        degenerate: True if r is too small to define theta; theta is then 0
    """

    r: FloatOrArray
    theta: FloatOrArray
    degenerate: BoolOrArray


def hypot(x: npt.ArrayLike, y: npt.ArrayLike) -> FloatOrArray:
    """Hypotenuse of a right triangle, safe against overflow and underflow."""
    return as_float(np.hypot(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)))


def polar_from_xy(x: npt.ArrayLike, y: npt.ArrayLike) -> PolarCoord:
    """Convert cartesian coordinates to polar coordinates.

    The vector is degenerate when both |x| and |y| are below
    ``POLAR_DEGENERATE_THRESHOLD`` (the smallest normal double), i.e. both
    components are zero or subnormal.

    Args:
        x: x component of vector (arbitrary units)
        y: y component of vector (same units as x)

    Returns:
        PolarCoord(r, theta, degenerate)
    """
    x_arr = np.asarray(x, dtype=np.float64)
    # -0.0 + 0.0 is +0.0, so a negative x axis gives theta = 180, never -180
    y_arr = np.asarray(y, dtype=np.float64) + 0.0
    degenerate = (np.abs(x_arr) < POLAR_DEGENERATE_THRESHOLD) & (
        np.abs(y_arr) < POLAR_DEGENERATE_THRESHOLD
    )
    theta = np.where(degenerate, 0.0, atan2d(y_arr, x_arr))
    r = hypot(x_arr, y_arr)
    if np.any(degenerate):
        LOGGER.debug("polar_from_xy: {} degenerate vector(s); theta set to 0", int(np.sum(degenerate)))
    return PolarCoord(r=r, theta=as_float(theta), degenerate=as_bool(degenerate))


def xy_from_polar(r: npt.ArrayLike, theta: npt.ArrayLike) -> Vec2:
    """Convert polar coordinates to cartesian coordinates.

    Args:
        r: Magnitude of vector (arbitrary units)
        theta: Angle of vector from x axis (deg)

    Returns:
        Vec2(x, y) in the units of r
    """
    r_arr = np.asarray(r, dtype=np.float64)
    return Vec2(x=as_float(r_arr * cosd(theta)), y=as_float(r_arr * sind(theta)))


__all__ = ["PolarCoord", "Vec2", "hypot", "polar_from_xy", "xy_from_polar"]

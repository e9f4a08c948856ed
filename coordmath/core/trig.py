# coordmath/core/trig.py
"""Trigonometric functions taking or returning degrees.

No range reduction is applied; wrap separately where needed.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from coordmath.config import RAD_PER_DEG
from coordmath.core._scalar import FloatOrArray, as_float


def sind(ang: npt.ArrayLike) -> FloatOrArray:
    """Sine of angle in degrees."""
    with np.errstate(invalid="ignore"):
        return as_float(np.sin(np.asarray(ang, dtype=np.float64) * RAD_PER_DEG))


def cosd(ang: npt.ArrayLike) -> FloatOrArray:
    """Cosine of angle in degrees."""
    with np.errstate(invalid="ignore"):
        return as_float(np.cos(np.asarray(ang, dtype=np.float64) * RAD_PER_DEG))


def tand(ang: npt.ArrayLike) -> FloatOrArray:
    """Tangent of angle in degrees."""
    with np.errstate(invalid="ignore"):
        return as_float(np.tan(np.asarray(ang, dtype=np.float64) * RAD_PER_DEG))


def asind(x: npt.ArrayLike) -> FloatOrArray:
    """Arcsine in degrees."""
    with np.errstate(invalid="ignore"):
        return as_float(np.arcsin(np.asarray(x, dtype=np.float64)) / RAD_PER_DEG)


def acosd(x: npt.ArrayLike) -> FloatOrArray:
    """Arccosine in degrees."""
    with np.errstate(invalid="ignore"):
        return as_float(np.arccos(np.asarray(x, dtype=np.float64)) / RAD_PER_DEG)


def atand(x: npt.ArrayLike) -> FloatOrArray:
    """Arctangent in degrees."""
    return as_float(np.arctan(np.asarray(x, dtype=np.float64)) / RAD_PER_DEG)


def atan2d(y: npt.ArrayLike, x: npt.ArrayLike) -> FloatOrArray:
    """Two-argument arctangent in degrees, in (-180, 180]; ``atan2d(0, 0) == 0``."""
    return as_float(
        np.arctan2(np.asarray(y, dtype=np.float64), np.asarray(x, dtype=np.float64))
        / RAD_PER_DEG
    )


__all__ = ["acosd", "asind", "atan2d", "atand", "cosd", "sind", "tand"]

# coordmath/core/angles.py
"""Angle wrapping into canonical degree ranges.

All functions reduce with a single ``numpy.fmod`` (exact in IEEE arithmetic)
followed by at most one correction of 360 degrees. Non-finite input yields
NaN and never raises.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from coordmath.core._scalar import FloatOrArray, as_float


def _fmod360(ang: npt.ArrayLike) -> npt.NDArray[np.float64]:
    with np.errstate(invalid="ignore"):
        return np.fmod(np.asarray(ang, dtype=np.float64), 360.0)


def wrap_pos(ang: npt.ArrayLike) -> FloatOrArray:
    """Wrap angle into 0 <= wrapped < 360 deg.

    Args:
        ang: Angle to wrap (deg)

    Returns:
        Wrapped angle (deg)
    """
    wrapped = _fmod360(ang)
    with np.errstate(invalid="ignore"):
        wrapped = np.where(wrapped < 0.0, wrapped + 360.0, wrapped)
        # tiny negative inputs round up to exactly 360
        wrapped = np.where(wrapped >= 360.0, 0.0, wrapped)
    return as_float(wrapped)


def wrap_ctr(ang: npt.ArrayLike) -> FloatOrArray:
    """Wrap angle into -180 <= wrapped < 180 deg.

    Args:
        ang: Angle to wrap (deg)

    Returns:
        Wrapped angle (deg)
    """
    wrapped = _fmod360(ang)
    # both corrections are exact: |wrapped| is within a factor 2 of 360
    with np.errstate(invalid="ignore"):
        wrapped = np.where(wrapped < -180.0, wrapped + 360.0, wrapped)
        wrapped = np.where(wrapped >= 180.0, wrapped - 360.0, wrapped)
    return as_float(wrapped)


def wrap_near(ang: npt.ArrayLike, ref_ang: npt.ArrayLike) -> FloatOrArray:
    """Wrap angle into ref_ang - 180 <= wrapped < ref_ang + 180 deg.

    Args:
        ang: Angle to wrap (deg)
        ref_ang: Result is wrapped to be near this reference angle (deg)

    Returns:
        Wrapped angle (deg)
    """
    ang = np.asarray(ang, dtype=np.float64)
    ref = np.asarray(ref_ang, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        # reduce both operands exactly first; ang - ref at full magnitude rounds
        diff = np.asarray(wrap_ctr(ang), dtype=np.float64) - np.asarray(
            wrap_ctr(ref), dtype=np.float64
        )
        wrapped = ref + np.asarray(wrap_ctr(diff), dtype=np.float64)
        lower = ref - 180.0
        upper = ref + 180.0
        wrapped = np.where(wrapped >= upper, wrapped - 360.0, wrapped)
        wrapped = np.where(wrapped < lower, wrapped + 360.0, wrapped)
    return as_float(wrapped)


__all__ = ["wrap_ctr", "wrap_near", "wrap_pos"]

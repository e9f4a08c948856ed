# coordmath/core/_scalar.py
"""Scalar-or-array return handling shared by the core functions."""

from __future__ import annotations

from typing import Union

import numpy as np
import numpy.typing as npt

FloatOrArray = Union[float, npt.NDArray[np.float64]]
BoolOrArray = Union[bool, npt.NDArray[np.bool_]]


def as_float(value: npt.ArrayLike) -> FloatOrArray:
    """Return a Python float for 0-d input, else a float64 array."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim == 0:
        return float(arr)
    return arr


def as_bool(value: npt.ArrayLike) -> BoolOrArray:
    """Return a Python bool for 0-d input, else a bool array."""
    arr = np.asarray(value, dtype=np.bool_)
    if arr.ndim == 0:
        return bool(arr)
    return arr


__all__ = ["BoolOrArray", "FloatOrArray", "as_bool", "as_float"]

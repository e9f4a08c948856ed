"""Formatting helpers for NumPy arrays in log messages."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def format_matrix(arr: npt.ArrayLike, precision: int = 6) -> str:
    """Format an array as a single-line string.

    Leaves numpy's global print options untouched.

    Args:
        arr: Array-like to format
        precision: Number of decimal places

    Returns:
        Rows joined by ``; `` so one log record stays on one line
    """
    mat = np.atleast_2d(np.asarray(arr, dtype=np.float64))
    return "; ".join(
        np.array2string(row, precision=precision, suppress_small=True) for row in mat
    )


__all__ = ["format_matrix"]

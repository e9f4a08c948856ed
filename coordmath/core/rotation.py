# coordmath/core/rotation.py
"""3D rotation matrices from axis and angle (Rodrigues' formula)."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from coordmath.config import AXIS_MIN_COMPONENT, RAD_PER_DEG, ROTATION_TOL
from coordmath.errors import InvalidAxisError
from coordmath.utils.format import format_matrix
from coordmath.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _unit_axis(axis: npt.ArrayLike) -> npt.NDArray[np.float64]:
    try:
        vec = np.asarray(axis, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidAxisError(axis, "not numeric") from exc
    if vec.shape != (3,):
        raise InvalidAxisError(axis, f"expected shape (3,), got {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise InvalidAxisError(axis, "non-finite component")
    scale = float(np.max(np.abs(vec)))
    if scale < AXIS_MIN_COMPONENT:
        raise InvalidAxisError(axis, "magnitude too small to normalize")
    # pre-scale so the norm cannot overflow or underflow
    scaled = vec / scale
    return scaled / np.linalg.norm(scaled)


def skew(vec: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Cross-product matrix K of a 3-vector, so that ``K @ w == cross(vec, w)``."""
    kx, ky, kz = np.asarray(vec, dtype=np.float64)
    return np.array(
        [
            [0.0, -kz, ky],
            [kz, 0.0, -kx],
            [-ky, kx, 0.0],
        ],
        dtype=np.float64,
    )


def compute_rotation_matrix(axis: npt.ArrayLike, rot_angle: float) -> npt.NDArray[np.float64]:
    """Compute a rotation matrix given an axis and rotation angle.

    Right-handed rotation, built with Rodrigues' formula::

        R = I cos(a) + (k k^T)(1 - cos(a)) + K sin(a)

    Args:
        axis: Axis of rotation; magnitude is ignored but must be finite and nonzero
        rot_angle: Rotation angle (deg)

    Returns:
        3x3 proper rotation matrix

    Raises:
        InvalidAxisError: If axis is zero, too small, non-finite, or not a 3-vector
    """
    try:
        k = _unit_axis(axis)
    except InvalidAxisError as exc:
        LOGGER.warning("compute_rotation_matrix rejected axis: {}", exc.reason)
        raise

    angle_rad = float(rot_angle) * RAD_PER_DEG
    cos_a = np.cos(angle_rad)
    sin_a = np.sin(angle_rad)
    rot_mat = np.eye(3) * cos_a + np.outer(k, k) * (1.0 - cos_a) + skew(k) * sin_a
    LOGGER.opt(lazy=True).debug(
        "Rotation matrix for axis {} angle {} deg: {}",
        lambda: format_matrix(k),
        lambda: rot_angle,
        lambda: format_matrix(rot_mat),
    )
    return rot_mat


def is_rotation_matrix(mat: npt.ArrayLike, tol: float = ROTATION_TOL) -> bool:
    """Check that mat is 3x3, orthogonal and has determinant +1 within tol."""
    arr = np.asarray(mat, dtype=np.float64)
    if arr.shape != (3, 3) or not np.all(np.isfinite(arr)):
        return False
    orthogonality = float(np.max(np.abs(arr @ arr.T - np.eye(3))))
    determinant = float(np.linalg.det(arr))
    return orthogonality <= tol and abs(determinant - 1.0) <= tol


__all__ = [
    "compute_rotation_matrix",
    "is_rotation_matrix",
    "skew",
]

# coordmath/core/planar.py
"""Planar rotation and change of 2D coordinate frame."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from coordmath.core._scalar import as_float
from coordmath.core.polar import Vec2
from coordmath.core.trig import cosd, sind


def rot_2d(x: npt.ArrayLike, y: npt.ArrayLike, ang: npt.ArrayLike) -> Vec2:
    """Rotate a 2-dimensional vector counter-clockwise by a given angle.

    Args:
        x: Unrotated x value
        y: Unrotated y value
        ang: Angle by which to rotate (deg)

    Returns:
        Vec2 of the rotated vector

    Using rot_2d to change coordinate systems: if frame B has its origin at
    B_A_xy in frame A and orientation B_A_ang in A, then

        P_B = rot_2d(P_A - B_A_xy, -B_A_ang)
        P_A = B_A_xy + rot_2d(P_B, +B_A_ang)

    ``Frame2D`` wraps exactly these two formulas.
    """
    x_arr = np.asarray(x, dtype=np.float64)
    y_arr = np.asarray(y, dtype=np.float64)
    sin_ang = np.asarray(sind(ang))
    cos_ang = np.asarray(cosd(ang))
    rot_x = x_arr * cos_ang - y_arr * sin_ang
    rot_y = x_arr * sin_ang + y_arr * cos_ang
    return Vec2(x=as_float(rot_x), y=as_float(rot_y))


@dataclass(frozen=True)
class Frame2D:
    """Frame B described in frame A: origin B_A_xy and orientation B_A_ang (deg)."""

    origin: Vec2 = Vec2(0.0, 0.0)
    ang: float = 0.0

    def __post_init__(self) -> None:
        """Coerce origin given as any 2-sequence."""
        ox, oy = self.origin
        object.__setattr__(self, "origin", Vec2(float(ox), float(oy)))
        object.__setattr__(self, "ang", float(self.ang))

    def to_frame(self, x: npt.ArrayLike, y: npt.ArrayLike) -> Vec2:
        """Map a point from frame A into frame B."""
        dx = np.asarray(x, dtype=np.float64) - self.origin.x
        dy = np.asarray(y, dtype=np.float64) - self.origin.y
        return rot_2d(dx, dy, -self.ang)

    def from_frame(self, x: npt.ArrayLike, y: npt.ArrayLike) -> Vec2:
        """Map a point from frame B back into frame A."""
        rot_x, rot_y = rot_2d(x, y, self.ang)
        return Vec2(x=as_float(self.origin.x + rot_x), y=as_float(self.origin.y + rot_y))

    def inverse(self) -> Frame2D:
        """Return frame A described in frame B."""
        ox, oy = rot_2d(-self.origin.x, -self.origin.y, -self.ang)
        return Frame2D(origin=Vec2(ox, oy), ang=-self.ang)


__all__ = ["Frame2D", "rot_2d"]

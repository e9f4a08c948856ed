"""Exception hierarchy for coordmath."""

from __future__ import annotations


class CoordMathError(Exception):
    """Base class for errors raised by coordmath."""


class InvalidAxisError(CoordMathError, ValueError):
    """Rotation axis is zero, too small to normalize, non-finite, or not a 3-vector."""

    def __init__(self, axis: object, reason: str) -> None:
        super().__init__(f"invalid rotation axis {axis!r}: {reason}")
        self.axis = axis
        self.reason = reason


__all__ = ["CoordMathError", "InvalidAxisError"]

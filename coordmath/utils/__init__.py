"""Utility package re-exporting shared helpers for coordmath."""

from coordmath.utils.format import format_matrix
from coordmath.utils.logger import configure, current_log_file, get_logger, reset

__all__ = [
    "configure",
    "current_log_file",
    "format_matrix",
    "get_logger",
    "reset",
]

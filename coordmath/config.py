"""Centralized configuration for the coordmath toolkit.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, Optional

import numpy as np


def _env_path(key: str, default: Optional[Path]) -> Optional[Path]:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


# ============================================================================
# UNIT CONVERSION CONSTANTS
# ============================================================================

RAD_PER_DEG: Final[float] = math.pi / 180.0

# ============================================================================
# FLOATING POINT CONSTANTS
# ============================================================================

DOUBLE_EPSILON: Final[float] = float(np.finfo(np.float64).eps)
DOUBLE_MAX: Final[float] = float(np.finfo(np.float64).max)
DOUBLE_MIN: Final[float] = float(np.finfo(np.float64).tiny)
DOUBLE_NAN: Final[float] = float("nan")

# ============================================================================
# NUMERIC THRESHOLDS
# ============================================================================

# Both |x| and |y| below this: direction is undefined.
POLAR_DEGENERATE_THRESHOLD: Final[float] = DOUBLE_MIN
# Largest |component| of a rotation axis must reach this.
AXIS_MIN_COMPONENT: Final[float] = DOUBLE_MIN
ROTATION_TOL: Final[float] = 1e-9

# ============================================================================
# LOGGING CONSTANTS
# ============================================================================

LOG_DEFAULT_LEVEL: Final[str] = "WARNING"
LOG_FILE_PREFIX: Final[str] = "coordmath"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration.

    Attributes:
        level: Minimum level for all sinks
        log_dir: Directory for the file sink; ``None`` disables file output
    """

    level: LogLevel = LogLevel(LOG_DEFAULT_LEVEL)
    log_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        """Normalize level given as plain string."""
        if not isinstance(self.level, LogLevel):
            object.__setattr__(self, "level", LogLevel(str(self.level).upper()))


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        COORDMATH_LOG_LEVEL: Logging level
        COORDMATH_LOG_DIR: Directory for log files (unset: console only)
    """
    logging_cfg = LoggingConfig(
        level=LogLevel(_env_str("COORDMATH_LOG_LEVEL", LOG_DEFAULT_LEVEL).upper()),
        log_dir=_env_path("COORDMATH_LOG_DIR", None),
    )
    return Settings(logging=logging_cfg)


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    # Main config
    "Settings",
    # Config sections
    "LoggingConfig",
    # Enums
    "LogLevel",
    # Constants
    "AXIS_MIN_COMPONENT",
    "DOUBLE_EPSILON",
    "DOUBLE_MAX",
    "DOUBLE_MIN",
    "DOUBLE_NAN",
    "LOG_DEFAULT_LEVEL",
    "LOG_FILE_PREFIX",
    "POLAR_DEGENERATE_THRESHOLD",
    "RAD_PER_DEG",
    "ROTATION_TOL",
]

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for randomized property checks."""
    return np.random.default_rng(20240611)


@pytest.fixture
def random_axes(rng: np.random.Generator) -> np.ndarray:
    """Nonzero axes of widely varying magnitude, shape (N, 3)."""
    directions = rng.normal(size=(64, 3))
    scales = 10.0 ** rng.uniform(-6.0, 6.0, size=(64, 1))
    return directions * scales


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop coordmath environment overrides."""
    monkeypatch.delenv("COORDMATH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COORDMATH_LOG_DIR", raising=False)


@pytest.fixture
def log_dir(tmp_path: Path, clean_env: None) -> Iterator[Path]:
    """Route coordmath logs to a temporary directory at DEBUG level."""
    from coordmath.utils.logger import configure, reset

    logs = tmp_path / "logs"
    configure(level="DEBUG", log_dir=logs)
    yield logs
    reset()

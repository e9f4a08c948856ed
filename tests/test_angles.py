"""Tests for angle wrapping."""

from __future__ import annotations

import math
import warnings

import numpy as np
import pytest

from coordmath.core.angles import wrap_ctr, wrap_near, wrap_pos


@pytest.mark.parametrize(
    ("ang", "expected"),
    [
        (0.0, 0.0),
        (360.0, 0.0),
        (-1.0, 359.0),
        (720.5, 0.5),
        (-725.0, 355.0),
        (359.5, 359.5),
        (-360.0, 0.0),
    ],
)
def test_wrap_pos_values(ang: float, expected: float) -> None:
    assert wrap_pos(ang) == expected


@pytest.mark.parametrize(
    ("ang", "expected"),
    [
        (180.0, -180.0),
        (-180.0, -180.0),
        (0.0, 0.0),
        (179.5, 179.5),
        (190.0, -170.0),
        (-190.0, 170.0),
        (540.0, -180.0),
    ],
)
def test_wrap_ctr_values(ang: float, expected: float) -> None:
    assert wrap_ctr(ang) == expected


def test_wrap_pos_tiny_negative_stays_in_range() -> None:
    """-1e-20 + 360 rounds to 360, which must become 0."""
    wrapped = wrap_pos(-1e-20)
    assert 0.0 <= wrapped < 360.0
    assert wrapped == 0.0


def test_wrap_ctr_is_exact_for_tiny_values() -> None:
    assert wrap_ctr(-1e-20) == -1e-20
    assert wrap_ctr(1e-20) == 1e-20


def test_wrap_large_magnitude_in_range() -> None:
    for ang in (1e15, -1e15, 1e300, -1e300, 12345678.9):
        assert 0.0 <= wrap_pos(ang) < 360.0
        assert -180.0 <= wrap_ctr(ang) < 180.0


@pytest.mark.parametrize(
    ("ang", "ref", "expected"),
    [
        (350.0, 0.0, -10.0),
        (10.0, 360.0, 370.0),
        (180.0, 0.0, -180.0),
        (-180.0, 0.0, -180.0),
        (5.0, 1000.0, 1085.0),
    ],
)
def test_wrap_near_values(ang: float, ref: float, expected: float) -> None:
    assert wrap_near(ang, ref) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize("func", [wrap_pos, wrap_ctr])
@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
def test_non_finite_propagates_nan(func, bad: float) -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isnan(func(bad))


def test_wrap_near_non_finite() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isnan(wrap_near(math.inf, 0.0))
        assert math.isnan(wrap_near(0.0, math.nan))


def test_scalar_input_returns_float() -> None:
    assert type(wrap_pos(10)) is float
    assert type(wrap_ctr(10)) is float
    assert type(wrap_near(10, 0)) is float


def test_array_input_matches_scalar() -> None:
    angles = np.array([-725.0, -1.0, 0.0, 180.0, 360.0, 1e6 + 0.25])
    np.testing.assert_array_equal(wrap_pos(angles), [wrap_pos(a) for a in angles])
    np.testing.assert_array_equal(wrap_ctr(angles), [wrap_ctr(a) for a in angles])
    np.testing.assert_array_equal(
        wrap_near(angles, 90.0), [wrap_near(a, 90.0) for a in angles]
    )


def _is_congruent(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    turns = (a - b) / 360.0
    return np.abs(turns - np.round(turns)) < 1e-9


@pytest.mark.slow
def test_wrap_properties_random(rng: np.random.Generator) -> None:
    angles = rng.uniform(-1e6, 1e6, size=2000)
    refs = rng.uniform(-1e4, 1e4, size=2000)

    pos = wrap_pos(angles)
    ctr = wrap_ctr(angles)
    near = wrap_near(angles, refs)

    assert np.all((pos >= 0.0) & (pos < 360.0))
    assert np.all((ctr >= -180.0) & (ctr < 180.0))
    assert np.all((near >= refs - 180.0) & (near < refs + 180.0))
    assert np.all(_is_congruent(pos, angles))
    assert np.all(_is_congruent(ctr, angles))
    assert np.all(_is_congruent(near, angles))


@pytest.mark.parametrize(
    ("ang", "ref"),
    [(1e16, 0.3), (-1e16, 0.3), (1e18 + 2048.0, -12.75), (123456789012.5, 1000.1)],
)
def test_wrap_near_large_angle_stays_congruent(ang: float, ref: float) -> None:
    """Huge angles are reduced before the reference is subtracted."""
    wrapped = wrap_near(ang, ref)

    assert ref - 180.0 <= wrapped < ref + 180.0
    assert wrap_ctr(wrapped) == pytest.approx(wrap_ctr(ang), abs=1e-9)


def test_wrap_near_1e16_matches_wrap_ctr() -> None:
    # wrap_ctr(1e16) == -80 already lies in [-179.7, 180.3)
    assert wrap_ctr(1e16) == -80.0
    assert wrap_near(1e16, 0.3) == pytest.approx(-80.0, abs=1e-12)

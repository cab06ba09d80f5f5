import math

import numpy as np
import pytest

from planetscatter.core.noise import noise

# fract(sin(x * 12.9898 + y * 78.233) * 43758.5453), evaluated in IEEE doubles.
REFERENCE = [
    (1.0, 2.0, 0.073904103617678629),
    (0.0, 0.0, 0.0),
    (0.5, 0.25, 0.20307068413239904),
    (-1.0, 0.3, 0.48290419906697934),
    (3.7, 4.3, 0.73743602347531123),
    (0.25, 0.0, 0.48283170071135828),
    (10.0, 0.0, 0.97151235306955641),
]


@pytest.mark.parametrize("x,y,expected", REFERENCE)
def test_noise_matches_reference_values(x: float, y: float, expected: float) -> None:
    assert noise(x, y) == pytest.approx(expected, abs=1e-6)


def test_noise_returns_python_float_for_scalars() -> None:
    assert isinstance(noise(1.0, 2.0), float)


def test_noise_range_is_half_open_unit_interval() -> None:
    rng = np.random.default_rng(7)
    xs = rng.uniform(-1e3, 1e3, size=20_000)
    ys = rng.uniform(-1e3, 1e3, size=20_000)
    vals = noise(xs, ys)
    assert vals.shape == xs.shape
    assert np.all(vals >= 0.0)
    assert np.all(vals < 1.0)


def test_noise_is_deterministic() -> None:
    a = [noise(i * 0.37, i * -1.9) for i in range(100)]
    b = [noise(i * 0.37, i * -1.9) for i in range(100)]
    assert a == b


def test_noise_broadcasts_like_scalar_calls() -> None:
    xs = np.array([1.0, 0.5, -1.0])
    vals = noise(xs, 0.3)
    for x, v in zip(xs, vals):
        assert v == pytest.approx(noise(float(x), 0.3), abs=1e-12)


def test_noise_propagates_non_finite_inputs() -> None:
    assert math.isnan(noise(float("nan"), 1.0))
    assert math.isnan(noise(float("inf"), 0.0))
    assert math.isnan(noise(0.0, float("-inf")))

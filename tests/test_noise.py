"""
QBayes Tests: noise
Shape, bounds and reproducibility of the synthetic signal generators.
"""

from __future__ import annotations

import numpy as np
import pytest

from qbayes.core.errors import InvalidInputError
from qbayes.quantum.noise import (
    gaussian_noise,
    generate_noise,
    perlin_like_noise,
    uniform_noise,
)


def test_default_length_is_fifty() -> None:
    assert gaussian_noise(1.0, 1.0, 0.0).shape == (50,)
    assert perlin_like_noise(1.0, 1.0, 0.0).shape == (50,)
    assert uniform_noise(1.0).shape == (50,)


def test_gaussian_is_sine_plus_bounded_jitter() -> None:
    out = gaussian_noise(2.0, 0.3, 0.1, points=200, random_state=5)
    carrier = 2.0 * np.sin(0.3 * np.arange(200) + 0.1)
    jitter = out - carrier
    assert np.all(jitter >= -0.2)
    assert np.all(jitter <= 0.2)


def test_zero_amplitude_leaves_only_jitter() -> None:
    out = gaussian_noise(0.0, 1.0, 0.0, points=100, random_state=1)
    assert np.all(np.abs(out) <= 0.2)


def test_seeded_generators_are_reproducible() -> None:
    a = gaussian_noise(1.0, 1.0, 0.0, points=30, random_state=42)
    b = gaussian_noise(1.0, 1.0, 0.0, points=30, random_state=42)
    np.testing.assert_array_equal(a, b)

    rng_a = np.random.default_rng(9)
    rng_b = np.random.default_rng(9)
    np.testing.assert_array_equal(uniform_noise(3.0, 10, rng_a), uniform_noise(3.0, 10, rng_b))


def test_perlin_like_smooths_interior_only() -> None:
    raw = gaussian_noise(1.5, 2.0 / 5.0, 0.3, points=12, random_state=7)
    smooth = perlin_like_noise(1.5, 2.0, 0.3, points=12, random_state=7)

    assert smooth[0] == pytest.approx(raw[0])
    assert smooth[-1] == pytest.approx(raw[-1])
    for i in range(1, 11):
        assert smooth[i] == pytest.approx((raw[i - 1] + raw[i] + raw[i + 1]) / 3.0)


def test_perlin_like_short_sequences_are_unsmoothed() -> None:
    raw = gaussian_noise(1.0, 0.2, 0.0, points=2, random_state=3)
    smooth = perlin_like_noise(1.0, 1.0, 0.0, points=2, random_state=3)
    np.testing.assert_allclose(smooth, raw)


def test_uniform_bounds_and_negative_amplitude() -> None:
    out = uniform_noise(2.5, points=500, random_state=0)
    assert np.all(np.abs(out) <= 2.5)

    flipped = uniform_noise(-2.5, points=500, random_state=0)
    np.testing.assert_allclose(flipped, -out)


@pytest.mark.parametrize("points", [0, -3, 2.5, True])
def test_points_must_be_positive_integer(points) -> None:
    with pytest.raises(InvalidInputError):
        gaussian_noise(1.0, 1.0, 0.0, points=points)
    with pytest.raises(InvalidInputError):
        uniform_noise(1.0, points=points)


def test_generate_noise_dispatches_by_name() -> None:
    np.testing.assert_array_equal(
        generate_noise("uniform", amplitude=2.0, points=8, random_state=4),
        uniform_noise(2.0, 8, 4),
    )
    np.testing.assert_array_equal(
        generate_noise("perlin", points=8, random_state=4),
        perlin_like_noise(1.0, 1.0, 0.0, 8, 4),
    )
    with pytest.raises(InvalidInputError):
        generate_noise("pink")

"""
QBayes Tests: projection
Deviation distance, cosine projection and the tanh action selector.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from qbayes.core.errors import InvalidInputError
from qbayes.quantum.noise import gaussian_noise, uniform_noise
from qbayes.quantum.projection import (
    cosine_projection,
    deviation_distance,
    project_sequence,
    projection_cosines,
    select_action,
)


def test_deviation_distance_is_absolute_offset_from_reference_mean() -> None:
    out = deviation_distance([1.0, 2.0, 3.0], [0.0, 2.0, 5.0])
    np.testing.assert_allclose(out, [2.0, 0.0, 3.0])


def test_deviation_distance_validates_both_inputs() -> None:
    with pytest.raises(InvalidInputError, match="reference_states"):
        deviation_distance([], [1.0])
    with pytest.raises(InvalidInputError, match="target_states"):
        deviation_distance([1.0], [float("nan")])


def test_projection_cosines() -> None:
    cos_x, cos_y, cos_z = projection_cosines(math.pi / 2, 0.7)
    assert cos_x == pytest.approx(0.0, abs=1e-12)
    assert cos_y == pytest.approx(1.0)
    assert cos_z == 0.7


def test_zero_entropy_projection_is_uniform() -> None:
    # sin(0) = 0 collapses projection B, so every distance equals |mean(A)|
    out = cosine_projection([1.0, 2.0, 3.0], entropy=0.0, coherence=0.9)
    np.testing.assert_allclose(out, [1 / 3, 1 / 3, 1 / 3])


def test_projection_matches_hand_computed_softmax() -> None:
    states = np.array([0.5, 1.0, 2.0])
    entropy, coherence = 1.2, 0.6
    a = states * math.cos(entropy)
    b = states * math.sin(entropy) * coherence
    d = np.abs(b - a.mean())
    expected = np.exp(d) / np.exp(d).sum()

    np.testing.assert_allclose(cosine_projection(states, entropy, coherence), expected)


@pytest.mark.parametrize("seed", range(8))
def test_projection_is_a_distribution(seed) -> None:
    states = gaussian_noise(3.0, 0.7, 0.2, points=25, random_state=seed)
    entropy = float(seed) / 3.0
    out = cosine_projection(states, entropy, coherence=0.4)
    assert out.shape == states.shape
    assert np.all(out >= 0.0)
    assert out.sum() == pytest.approx(1.0)


def test_projection_survives_large_distances() -> None:
    states = uniform_noise(1e4, points=10, random_state=3)
    out = cosine_projection(states, entropy=1.0, coherence=1.0)
    assert np.all(np.isfinite(out))
    assert out.sum() == pytest.approx(1.0)


def test_select_action_threshold() -> None:
    low = select_action(0.2, 0.5)
    assert low.action == 0
    assert low.probabilities["action_1"] == pytest.approx(math.tanh(0.1))
    assert low.probabilities["action_0"] == pytest.approx(1 - math.tanh(0.1))

    high = select_action(2.0, 1.0)
    assert high.action == 1
    assert high.probabilities["action_1"] == pytest.approx(math.tanh(2.0))


def test_project_sequence_uses_magnitude_entropy() -> None:
    result = project_sequence([1.0, 1.0, 2.0])
    assert result.entropy == pytest.approx(1.5)
    assert len(result.projections) == 3
    assert sum(result.projections) == pytest.approx(1.0)
    np.testing.assert_allclose(
        result.projections, cosine_projection([1.0, 1.0, 2.0], 1.5, 0.5)
    )


def test_deviation_distance_near_float_max_stays_finite() -> None:
    out = deviation_distance([1e308, 1e308, -1e308], [1e308, -1e308])
    assert np.all(np.isfinite(out))
    # mean is 1e308 / 3
    assert out[0] == pytest.approx(2e308 / 3)
    assert out[1] == pytest.approx(4e308 / 3)


def test_deviation_distance_past_float_max_is_inf_not_nan() -> None:
    out = deviation_distance([-1.7e308], [1.7e308])
    assert out[0] == math.inf


def test_projection_near_float_max_is_a_distribution() -> None:
    out = cosine_projection([1e308, 1e308, -1e308], entropy=0.0, coherence=1.0)
    assert np.all(np.isfinite(out))
    assert np.all(out >= 0.0)
    assert out.sum() == pytest.approx(1.0)


def test_projection_huge_spread_puts_all_mass_on_farthest_state() -> None:
    out = cosine_projection([1e300, -2e300, 0.0], entropy=math.pi / 4, coherence=1.0)
    assert out.sum() == pytest.approx(1.0)
    assert np.argmax(out) == 1
    assert out[1] == pytest.approx(1.0)


@pytest.mark.parametrize("entropy, coherence", [(math.nan, 0.5), (1.0, math.inf)])
def test_projection_rejects_non_finite_angles(entropy, coherence) -> None:
    with pytest.raises(InvalidInputError):
        cosine_projection([1.0, 2.0], entropy, coherence)


def test_projection_rejects_coherence_that_overflows_the_states() -> None:
    with pytest.raises(InvalidInputError, match="overflow"):
        cosine_projection([1e308, 1.0], entropy=math.pi / 2, coherence=1e10)

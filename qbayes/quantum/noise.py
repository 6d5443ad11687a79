"""
QBayes Quantum: synthetic noise signals.

Small generators that produce demo / test input sequences for the
entropy, Bayes and collapse tools.

- gaussian_noise: a sine carrier plus uniform jitter (the name is
  historical, the jitter is uniform, not normal).
- perlin_like_noise: slower carrier with a 3-point moving average. It is
  an approximation, not real Perlin gradient noise.
- uniform_noise: i.i.d. uniform samples.

Every generator takes `random_state` (int seed, numpy Generator or None)
so results can be reproduced.
"""

from __future__ import annotations

from numbers import Integral
from typing import Optional, Union

import numpy as np

from qbayes.core.config import DEFAULT_POINTS, NOISE_JITTER, PERLIN_FREQUENCY_DIVISOR
from qbayes.core.errors import InvalidInputError

RandomState = Optional[Union[int, np.random.Generator]]


def _check_points(points) -> int:
    if isinstance(points, bool) or not isinstance(points, Integral) or points < 1:
        raise InvalidInputError(f"points must be an integer >= 1, got {points!r}")
    return int(points)


def gaussian_noise(
    amplitude: float,
    frequency: float,
    phase: float,
    points: int = DEFAULT_POINTS,
    random_state: RandomState = None,
) -> np.ndarray:
    """
    amplitude * sin(frequency * i + phase) + U(-0.2, 0.2) for i in [0, points).
    """
    n = _check_points(points)
    rng = np.random.default_rng(random_state)

    i = np.arange(n, dtype=float)
    carrier = amplitude * np.sin(frequency * i + phase)
    jitter = rng.uniform(-NOISE_JITTER, NOISE_JITTER, size=n)
    return carrier + jitter


def perlin_like_noise(
    amplitude: float,
    frequency: float,
    phase: float,
    points: int = DEFAULT_POINTS,
    random_state: RandomState = None,
) -> np.ndarray:
    """
    Gaussian noise at frequency / 5, smoothed with a 3-point moving average.

    Interior points average the *unsmoothed* neighbours; the two endpoints
    are kept as generated.
    """
    raw = gaussian_noise(
        amplitude,
        frequency / PERLIN_FREQUENCY_DIVISOR,
        phase,
        points=points,
        random_state=random_state,
    )
    smoothed = raw.copy()
    if raw.size > 2:
        smoothed[1:-1] = (raw[:-2] + raw[1:-1] + raw[2:]) / 3.0
    return smoothed


def uniform_noise(
    amplitude: float,
    points: int = DEFAULT_POINTS,
    random_state: RandomState = None,
) -> np.ndarray:
    """Each element uniform in [-amplitude, amplitude] (negative amplitude flips sign)."""
    n = _check_points(points)
    rng = np.random.default_rng(random_state)
    return rng.uniform(-1.0, 1.0, size=n) * amplitude


NOISE_KINDS = ("gaussian", "perlin", "uniform")


def generate_noise(
    kind: str,
    amplitude: float = 1.0,
    frequency: float = 1.0,
    phase: float = 0.0,
    points: int = DEFAULT_POINTS,
    random_state: RandomState = None,
) -> np.ndarray:
    """Dispatch to a generator by name ("gaussian", "perlin" or "uniform")."""
    if kind == "gaussian":
        return gaussian_noise(amplitude, frequency, phase, points, random_state)
    if kind == "perlin":
        return perlin_like_noise(amplitude, frequency, phase, points, random_state)
    if kind == "uniform":
        return uniform_noise(amplitude, points, random_state)
    raise InvalidInputError(f"unknown noise kind {kind!r}; expected one of {NOISE_KINDS}")

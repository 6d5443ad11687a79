"""
QBayes Quantum: cosine projection engine.

Core idea:
    Rotate a state sequence two ways using angles derived from its
    entropy and coherence, measure how far one rotation sits from the
    mean of the other, and softmax those distances into a
    probability-shaped vector.

The "Mahalanobis" distance used here is a 1-D proxy: absolute deviation
from the reference mean, with no covariance matrix. It keeps the reduced
algorithm on purpose and should not be read as a real Mahalanobis metric.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

import numpy as np

from qbayes.core.config import ACTION_THRESHOLD, DEFAULT_PROJECTION_COHERENCE
from qbayes.core.errors import InvalidInputError
from qbayes.core.validation import require_numeric_sequence
from qbayes.quantum.entropy import magnitude_entropy


@dataclass(frozen=True)
class ActionSelection:
    """Output of the tanh action selector."""

    action: int
    probabilities: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {"action": self.action, "probabilities": dict(self.probabilities)}


@dataclass(frozen=True)
class SequenceProjection:
    """Magnitude entropy of a raw sequence plus its cosine projection."""

    entropy: float
    projections: Tuple[float, ...]

    def to_dict(self) -> Dict:
        return {"entropy": self.entropy, "projections": list(self.projections)}


def _power_of_two_scale(*arrays: np.ndarray) -> float:
    """Largest power of two <= the biggest magnitude across `arrays` (1.0 if all zero)."""
    biggest = max(float(np.abs(a).max()) for a in arrays)
    if biggest == 0.0:
        return 1.0
    _, exponent = np.frexp(biggest)
    return float(np.ldexp(1.0, int(exponent) - 1))


def _scaled_deviation(ref: np.ndarray, tgt: np.ndarray) -> Tuple[float, np.ndarray]:
    """
    (scale, |tgt / scale - mean(ref / scale)|).

    Dividing by a power of two is exact, so the scaled deviations equal the
    plain ones divided by `scale`, but the mean can no longer overflow.
    """
    scale = _power_of_two_scale(ref, tgt)
    return scale, np.abs(tgt / scale - np.mean(ref / scale))


def deviation_distance(
    reference_states: Sequence[float],
    target_states: Sequence[float],
) -> np.ndarray:
    """
    |target_i - mean(reference_states)| for every target element.

    Parameters
    ----------
    reference_states : array-like
        Sequence whose mean is the reference point.
    target_states : array-like
        Sequence measured against that mean.

    Returns
    -------
    numpy array, same length as `target_states`. The mean is taken on
    rescaled values, so it stays finite for any finite input; a distance
    whose true value exceeds the float range comes back as inf, never NaN.
    """
    ref = require_numeric_sequence(reference_states, label="reference_states")
    tgt = require_numeric_sequence(target_states, label="target_states")
    scale, scaled = _scaled_deviation(ref, tgt)
    with np.errstate(over="ignore"):
        return scaled * scale


def projection_cosines(entropy: float, coherence: float) -> Tuple[float, float, float]:
    """(cos(entropy), sin(entropy), coherence) rotation factors."""
    return math.cos(entropy), math.sin(entropy), float(coherence)


def _scaled_softmax(scale: float, scaled: np.ndarray) -> np.ndarray:
    # softmax of scale * scaled, max-shifted before rescaling so exp() never sees inf
    with np.errstate(over="ignore"):
        shifted = np.exp(scale * (scaled - scaled.max()))
    return shifted / shifted.sum()


def cosine_projection(
    states: Sequence[float],
    entropy: float,
    coherence: float,
) -> np.ndarray:
    """
    Project `states` onto two rotated axes and softmax their deviations.

    A_i = s_i * cos(entropy)
    B_i = s_i * sin(entropy) * coherence
    d_i = |B_i - mean(A)|
    out = softmax(d)

    Returns
    -------
    numpy array of non-negative values summing to 1, len(states) long.

    Raises
    ------
    InvalidInputError
        If `states` is invalid, or entropy / coherence are not finite or
        push the rotated states past the float range.
    """
    s = require_numeric_sequence(states, label="states")
    if not (math.isfinite(entropy) and math.isfinite(coherence)):
        raise InvalidInputError(
            f"entropy and coherence must be finite, got {entropy!r}, {coherence!r}"
        )
    cos_x, cos_y, cos_z = projection_cosines(entropy, coherence)

    with np.errstate(over="ignore"):
        projected_a = s * cos_x
        projected_b = s * cos_y * cos_z
    if not (np.all(np.isfinite(projected_a)) and np.all(np.isfinite(projected_b))):
        raise InvalidInputError("rotated states overflow the float range; lower coherence")

    scale, scaled = _scaled_deviation(projected_a, projected_b)
    return _scaled_softmax(scale, scaled)


def select_action(entropy: float, coherence: float) -> ActionSelection:
    """
    p = tanh(entropy * coherence); pick action 1 when p > 0.5.

    Returns a two-outcome distribution {"action_0": 1 - p, "action_1": p}.
    """
    p = math.tanh(entropy * coherence)
    action = 1 if p > ACTION_THRESHOLD else 0
    return ActionSelection(
        action=action,
        probabilities={"action_0": 1.0 - p, "action_1": p},
    )


def project_sequence(
    data: Sequence[float],
    coherence: float = DEFAULT_PROJECTION_COHERENCE,
) -> SequenceProjection:
    """
    Magnitude entropy of `data`, then the cosine projection at that entropy.

    This is the quick "analyze a raw data list" path: no collapse, fixed
    coherence.
    """
    entropy = magnitude_entropy(data)
    projected = cosine_projection(data, entropy, coherence)
    return SequenceProjection(
        entropy=entropy,
        projections=tuple(float(p) for p in projected),
    )

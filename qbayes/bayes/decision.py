"""
Weighted decision rule.

Blends clamped entropy, coherence and an external PRN-influence signal
into one probability, then turns it into a binary action plus a
confidence that grows with distance from the 0.5 boundary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Mapping, Optional, Union

from qbayes.core.config import DECISION_THRESHOLD, DecisionWeights, get_config


@dataclass(frozen=True)
class NormalizedInputs:
    entropy: float
    coherence: float
    prn_influence: float


@dataclass(frozen=True)
class WeightedDecision:
    """
    Attributes
    ----------
    weighted_probability : float
        sum(weight_i * clamped_i). In [0, 1] when the weights sum to 1.
    recommended_action : int
        1 if weighted_probability > 0.5 else 0.
    confidence : float
        |weighted_probability - 0.5| * 2.
    normalized_inputs : NormalizedInputs
        The three inputs after clamping to [0, 1].
    """

    weighted_probability: float
    recommended_action: int
    confidence: float
    normalized_inputs: NormalizedInputs

    def to_dict(self) -> Dict:
        return asdict(self)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, float(x)))


def weigh_decision(
    entropy: float,
    coherence: float,
    prn_influence: float,
    weights: Optional[Union[DecisionWeights, Mapping[str, float]]] = None,
) -> WeightedDecision:
    """
    Weighted probability, recommended action and confidence for three signals.

    Parameters
    ----------
    entropy, coherence, prn_influence : float
        Raw signals; each is clamped to [0, 1] before weighting.
    weights : DecisionWeights or mapping, optional
        Keys ``entropy``, ``coherence``, ``prn_influence``. Defaults to the
        configured weights (0.4 / 0.3 / 0.3).
    """
    if weights is None:
        weights = get_config().weights
    elif not isinstance(weights, DecisionWeights):
        weights = DecisionWeights.from_dict(weights)

    normalized = NormalizedInputs(
        entropy=_clamp01(entropy),
        coherence=_clamp01(coherence),
        prn_influence=_clamp01(prn_influence),
    )

    weighted = (
        weights.entropy * normalized.entropy
        + weights.coherence * normalized.coherence
        + weights.prn_influence * normalized.prn_influence
    )

    return WeightedDecision(
        weighted_probability=weighted,
        recommended_action=1 if weighted > DECISION_THRESHOLD else 0,
        confidence=abs(weighted - DECISION_THRESHOLD) * 2,
        normalized_inputs=normalized,
    )

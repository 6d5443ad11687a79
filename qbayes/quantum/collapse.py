"""
QBayes Quantum: wave-collapse simulator.

One pass over a state sequence:

    entropy      = categorical entropy of the states
    distance     = |states[0] - mean(states)|
    coherence    = exp(-distance)              (clamped to [COHERENCE_FLOOR, 1])
    action       = tanh(entropy * coherence) > 0.5
    projection   = cosine projection of the states
    collapsed    = sum(projection)

Because the projection is a softmax, `collapsed_state` always comes out
at ~1.0. That is kept as-is; tests pin it so any change is deliberate.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Sequence

import numpy as np

from qbayes.core.config import COHERENCE_FLOOR, get_config
from qbayes.core.validation import require_numeric_sequence
from qbayes.logging_utils import qstep
from qbayes.quantum.entropy import categorical_entropy
from qbayes.quantum.projection import cosine_projection, deviation_distance, select_action


@dataclass(frozen=True)
class CollapseResult:
    """
    Attributes
    ----------
    collapsed_state : float
        Sum of the projected distribution (~1.0).
    action : int
        0 or 1 from the tanh selector.
    entropy : float
        Categorical entropy of the input states (bits).
    coherence : float
        exp(-mahalanobis_distance), clamped to [COHERENCE_FLOOR, 1] so
        a far-off first state never reports exactly zero.
    mahalanobis_distance : float
        Deviation of the first state from the mean (1-D proxy).
    """

    collapsed_state: float
    action: int
    entropy: float
    coherence: float
    mahalanobis_distance: float

    def to_dict(self) -> Dict:
        return asdict(self)


class WaveCollapseSimulator:
    """
    Runs the collapse pipeline with a fixed PRN-influence setting.

    `prn_influence` is carried for callers that configure it, but the
    current decision rule does not read it.
    """

    def __init__(self, prn_influence: Optional[float] = None):
        if prn_influence is None:
            prn_influence = get_config().prn_influence
        self.prn_influence = float(prn_influence)

    def collapse(self, states: Sequence[float], previous_action: int = 0) -> CollapseResult:
        # previous_action is part of the call signature only; the rule ignores it
        s = require_numeric_sequence(states, label="states")

        entropy = categorical_entropy(s)
        distance = float(deviation_distance(s, s)[0])
        coherence = max(math.exp(-distance), COHERENCE_FLOOR)

        selection = select_action(entropy, coherence)
        projected = cosine_projection(s, entropy, coherence)
        collapsed_state = float(np.sum(projected))

        qstep(
            f"Collapsed {s.size} states: entropy={entropy:.4f} "
            f"coherence={coherence:.4f} action={selection.action}"
        )

        return CollapseResult(
            collapsed_state=collapsed_state,
            action=selection.action,
            entropy=entropy,
            coherence=coherence,
            mahalanobis_distance=distance,
        )


def collapse(
    states: Sequence[float],
    previous_action: int = 0,
    prn_influence: Optional[float] = None,
) -> CollapseResult:
    """Convenience wrapper: one-off WaveCollapseSimulator(prn_influence).collapse(...)."""
    return WaveCollapseSimulator(prn_influence).collapse(states, previous_action)

"""
QBayes Module: config.py
Tunable defaults for the probabilistic sandbox, plus the config dataclasses
that carry them.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple

from qbayes.core.errors import ConfigError
from qbayes.logging_utils import qwarn

# =============================================================================
# DECISION WEIGHTING
# =============================================================================

# Weighted-probability blend of entropy / coherence / PRN influence
DEFAULT_ENTROPY_WEIGHT = 0.4
DEFAULT_COHERENCE_WEIGHT = 0.3
DEFAULT_PRN_INFLUENCE_WEIGHT = 0.3

# Above this weighted probability the recommended action is 1
DECISION_THRESHOLD = 0.5

# Tolerance used by strict weight validation (sum == 1)
WEIGHT_SUM_TOLERANCE = 1e-9


# =============================================================================
# WAVE COLLAPSE
# =============================================================================

# External pseudo-random-number influence used by the collapse simulator
DEFAULT_PRN_INFLUENCE = 0.5

# Smallest positive normal float; exp(-distance) is clamped here so coherence stays > 0
COHERENCE_FLOOR = sys.float_info.min

# tanh(entropy * coherence) above this selects action 1
ACTION_THRESHOLD = 0.5

# Coherence used when projecting a raw data sequence
DEFAULT_PROJECTION_COHERENCE = 0.5


# =============================================================================
# BAYES FACTOR LADDER
# =============================================================================

# (exclusive upper bound, label); first match wins, last bucket catches all
BAYES_FACTOR_LADDER: Tuple[Tuple[float, str], ...] = (
    (1.0, "anecdotal"),
    (3.0, "substantial"),
    (10.0, "strong"),
    (math.inf, "decisive"),
)


# =============================================================================
# NOISE + STORAGE
# =============================================================================

DEFAULT_POINTS = 50        # samples per generated noise sequence
NOISE_JITTER = 0.2         # half-width of the uniform jitter on gaussian noise
PERLIN_FREQUENCY_DIVISOR = 5.0

STORE_CAPACITY = 100       # FIFO cap for ResultStore

# Digits used by the text report layer
REPORT_DIGITS = 4


@dataclass(frozen=True)
class DecisionWeights:
    """
    Weights for the entropy / coherence / PRN-influence blend.

    Attributes
    ----------
    entropy : float
        Weight on the clamped entropy input.
    coherence : float
        Weight on the clamped coherence input.
    prn_influence : float
        Weight on the clamped pseudo-random-number influence.
    strict : bool
        If True, each weight must lie in [0, 1] and the three must sum
        to 1. If False (default) any finite weights are accepted, so the
        weighted probability can leave [0, 1] when they are miscalibrated.
    """

    entropy: float = DEFAULT_ENTROPY_WEIGHT
    coherence: float = DEFAULT_COHERENCE_WEIGHT
    prn_influence: float = DEFAULT_PRN_INFLUENCE_WEIGHT
    strict: bool = field(default=False, compare=False)

    def __post_init__(self):
        for name in ("entropy", "coherence", "prn_influence"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"weight {name!r} must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"weight {name!r} must be finite, got {value!r}")
            object.__setattr__(self, name, float(value))

        total = self.total
        if self.strict:
            out_of_range = [
                n for n in ("entropy", "coherence", "prn_influence")
                if not 0.0 <= getattr(self, n) <= 1.0
            ]
            if out_of_range:
                raise ConfigError(f"weights outside [0, 1]: {out_of_range}")
            if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
                raise ConfigError(f"weights must sum to 1 in strict mode, got {total:.6f}")
        elif abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            qwarn(
                f"decision weights sum to {total:.4f}; weighted probability "
                "and confidence may leave [0, 1]"
            )

    @property
    def total(self) -> float:
        return self.entropy + self.coherence + self.prn_influence

    @classmethod
    def from_dict(cls, data: Mapping, strict: bool = False) -> "DecisionWeights":
        allowed = {"entropy", "coherence", "prn_influence"}
        unknown = set(data) - allowed
        if unknown:
            raise ConfigError(f"unknown weight keys: {sorted(unknown)}")
        return cls(**dict(data), strict=strict)

    def to_dict(self) -> Dict[str, float]:
        return {
            "entropy": self.entropy,
            "coherence": self.coherence,
            "prn_influence": self.prn_influence,
        }


@dataclass
class QBayesConfig:
    """Master configuration bundling the defaults used across the package."""

    weights: DecisionWeights = field(default_factory=DecisionWeights)
    prn_influence: float = DEFAULT_PRN_INFLUENCE
    store_capacity: int = STORE_CAPACITY
    noise_points: int = DEFAULT_POINTS
    report_digits: int = REPORT_DIGITS

    def __post_init__(self):
        if isinstance(self.store_capacity, bool) or not isinstance(self.store_capacity, int) \
                or self.store_capacity < 1:
            raise ConfigError(f"store_capacity must be a positive int, got {self.store_capacity!r}")
        if isinstance(self.prn_influence, bool) or not isinstance(self.prn_influence, (int, float)) \
                or not math.isfinite(self.prn_influence):
            raise ConfigError(f"prn_influence must be finite, got {self.prn_influence!r}")

    @classmethod
    def from_dict(cls, data: Dict) -> "QBayesConfig":
        data = dict(data)
        weights = data.pop("weights", None)
        if isinstance(weights, Mapping):
            weights = DecisionWeights.from_dict(weights)
        if weights is not None:
            data["weights"] = weights
        return cls(**data)

    def to_dict(self) -> Dict:
        out = self.__dict__.copy()
        out["weights"] = self.weights.to_dict()
        return out


# Global default config
DEFAULT_CONFIG = QBayesConfig()


def get_config() -> QBayesConfig:
    """Get the default configuration."""
    return DEFAULT_CONFIG

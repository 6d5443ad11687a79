"""Bayesian evidence scoring for the QBayes sandbox.

Two tools:

- **bayes_factor**: a quick evidence-strength score for a data list,
  approximated as the absolute mean (not a ratio of model likelihoods),
  labelled with a fixed interpretation ladder and reported together with
  the list's categorical entropy.
- **bayesian_update**: iterative posterior update over a discrete set of
  named hypotheses, one evidence round at a time.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Mapping, Sequence

from qbayes.core.config import BAYES_FACTOR_LADDER
from qbayes.core.errors import DivisionByZeroError, InvalidInputError
from qbayes.core.validation import require_numeric_sequence, require_probability_mapping
from qbayes.quantum.entropy import categorical_entropy


@dataclass(frozen=True)
class BayesFactorResult:
    bayes_factor: float
    interpretation: str
    entropy: float

    def to_dict(self) -> Dict:
        return asdict(self)


def interpret_bayes_factor(factor: float) -> str:
    """First ladder label whose (exclusive) upper bound exceeds `factor`."""
    for upper, label in BAYES_FACTOR_LADDER:
        if factor < upper:
            return label
    # only reachable for NaN, which validation already rules out
    return BAYES_FACTOR_LADDER[-1][1]


def bayes_factor(data: Sequence[float]) -> BayesFactorResult:
    """
    |mean(data)| with its interpretation and the categorical entropy of `data`.

    Raises
    ------
    InvalidInputError
        If `data` is empty or contains non-finite values.
    """
    x = require_numeric_sequence(data, label="bayes factor data")
    factor = abs(float(x.mean()))
    return BayesFactorResult(
        bayes_factor=factor,
        interpretation=interpret_bayes_factor(factor),
        entropy=categorical_entropy(x),
    )


def _require_rounds(evidence_rounds) -> Iterable:
    # a single mapping or a string would otherwise be iterated key by key
    if isinstance(evidence_rounds, (str, bytes, Mapping)) or not isinstance(evidence_rounds, Iterable):
        raise InvalidInputError(
            f"evidence_rounds must be an iterable of mappings, got {evidence_rounds!r}"
        )
    return evidence_rounds


def _apply_round(
    posteriors: Dict[str, float],
    evidence: Mapping[str, float],
    round_index: int,
) -> None:
    likelihoods = require_probability_mapping(evidence, label=f"evidence round {round_index}")
    missing = [h for h in posteriors if h not in likelihoods]
    if missing:
        raise InvalidInputError(
            f"evidence round {round_index} is missing hypotheses: {missing}"
        )

    total = sum(posteriors[h] * likelihoods[h] for h in posteriors)
    if total == 0.0:
        raise DivisionByZeroError(
            f"evidence round {round_index} leaves zero total probability mass"
        )

    for h in posteriors:
        posteriors[h] = posteriors[h] * likelihoods[h] / total


def bayesian_update_trace(
    priors: Mapping[str, float],
    evidence_rounds: Iterable[Mapping[str, float]],
) -> List[Dict[str, float]]:
    """
    Posterior after every evidence round, in order.

    The first element is NOT the prior; an empty `evidence_rounds`
    yields an empty list.
    """
    posteriors = require_probability_mapping(priors, label="priors")
    trace: List[Dict[str, float]] = []
    for idx, evidence in enumerate(_require_rounds(evidence_rounds)):
        _apply_round(posteriors, evidence, idx)
        trace.append(dict(posteriors))
    return trace


def bayesian_update(
    priors: Mapping[str, float],
    evidence_rounds: Iterable[Mapping[str, float]],
) -> Dict[str, float]:
    """
    Apply each evidence round in turn and return the final posterior.

    For every round:
        total = sum_h post[h] * evidence[h]
        post[h] = post[h] * evidence[h] / total

    Parameters
    ----------
    priors : mapping
        Hypothesis name -> prior probability. Not modified.
    evidence_rounds : iterable of mappings
        Hypothesis name -> likelihood, one mapping per round.

    Raises
    ------
    InvalidInputError
        Malformed priors, evidence_rounds that is not an iterable of
        mappings, or a round missing a hypothesis.
    DivisionByZeroError
        A round's likelihood-weighted total is exactly zero.
    """
    posteriors = require_probability_mapping(priors, label="priors")
    for idx, evidence in enumerate(_require_rounds(evidence_rounds)):
        _apply_round(posteriors, evidence, idx)
    return posteriors

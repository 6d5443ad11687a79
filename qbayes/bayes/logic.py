"""Scalar Bayes building blocks used around the collapse heuristic."""

from __future__ import annotations

import math

from qbayes.core.errors import DivisionByZeroError


def high_coherence_prior(coherence: float) -> float:
    """exp(-coherence)."""
    return math.exp(-coherence)


def joint_probability(coherence: float, event: float, projection: float) -> float:
    return coherence * event * projection


def conditional_probability(joint_prob: float, prior: float) -> float:
    """joint / prior; a zero prior raises DivisionByZeroError."""
    if prior == 0:
        raise DivisionByZeroError("conditional probability with a zero prior")
    return joint_prob / prior


def posterior_probability(prior: float, prior_coherence: float, conditional: float) -> float:
    return prior * prior_coherence * conditional

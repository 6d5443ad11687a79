"""
QBayes Quantum: Shannon entropy measures.

Two flavours live here and they are NOT interchangeable:

- categorical_entropy: `data` is a list of draws. Probabilities come from
  how often each exact value occurs.
- magnitude_entropy: `data` is a vector of weights / magnitudes. Each
  element is divided by the sum to get its probability.

Higher entropy ~ more unpredictable. Both return bits by default.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from qbayes.core.errors import InvalidInputError
from qbayes.core.validation import require_numeric_sequence


def discrete_entropy(
    probs: np.ndarray,
    base: float = 2.0,
) -> float:
    """
    Compute entropy of a discrete distribution.

    Parameters
    ----------
    probs : array-like
        Probabilities that sum to 1 (or very close).
    base : float
        Logarithm base. base=2 -> bits; base=e -> nats.

    Returns
    -------
    float entropy value.
    """
    p = np.asarray(probs, dtype=float)
    p = p[p > 0.0]  # ignore zero-probability bins
    if p.size == 0:
        return 0.0

    log_base = np.log(base) if base is not None else 1.0
    h = -np.sum(p * np.log(p)) / log_base
    # -0.0 for a single certain outcome
    return float(h) + 0.0


def categorical_entropy(
    data: Sequence[float],
    base: float = 2.0,
) -> float:
    """
    Entropy of the empirical distribution of `data`.

    Values are grouped by exact equality, so [1, 1, 2, 2] has two
    equiprobable symbols and entropy 1.0 bit.

    Raises
    ------
    InvalidInputError
        If `data` is empty or holds anything but finite numbers.
    """
    x = require_numeric_sequence(data, label="entropy data")
    _, counts = np.unique(x, return_counts=True)
    probs = counts / counts.sum()
    return discrete_entropy(probs, base=base)


def magnitude_entropy(
    data: Sequence[float],
    base: float = 2.0,
) -> float:
    """
    Entropy of `data` read as magnitudes: p_i = x_i / sum(x).

    Non-positive probabilities are skipped. A negative total is allowed
    (the elements with the same sign as the total carry the mass).

    Raises
    ------
    InvalidInputError
        If `data` is invalid or sums to exactly zero.
    """
    x = require_numeric_sequence(data, label="magnitude data")
    total = x.sum()
    if total == 0.0:
        raise InvalidInputError("magnitude data sums to zero; no distribution can be formed")
    return discrete_entropy(x / total, base=base)

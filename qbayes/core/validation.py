"""Lightweight input validators for the QBayes computation core.

Each ``require_*`` helper raises an ``InvalidInputError`` with the label of
the offending argument, so callers fail before any statistic is computed
instead of letting NaN leak through.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Dict, Mapping

import numpy as np

from qbayes.core.errors import InvalidInputError

_HTML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
}


def _is_finite_real(x: Any) -> bool:
    if isinstance(x, (bool, np.bool_)):
        return False
    if not isinstance(x, (Real, np.number)) or isinstance(x, np.complexfloating):
        return False
    try:
        return math.isfinite(float(x))
    except OverflowError:
        return False


def is_valid_numeric_sequence(data: Any) -> bool:
    """
    True iff `data` is a non-empty list / tuple / 1-D array of finite reals.
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 1 or data.size == 0:
            return False
        if data.dtype.kind in "iu":
            return True
        if data.dtype.kind == "f":
            return bool(np.all(np.isfinite(data)))
        if data.dtype.kind != "O":
            return False
        return all(_is_finite_real(x) for x in data)

    if not isinstance(data, (list, tuple)) or len(data) == 0:
        return False
    return all(_is_finite_real(x) for x in data)


def require_numeric_sequence(data: Any, label: str = "data") -> np.ndarray:
    """Validate `data` and return it as a float array."""
    if not is_valid_numeric_sequence(data):
        raise InvalidInputError(
            f"{label} must be a non-empty sequence of finite numbers, got {data!r}"
        )
    return np.asarray(data, dtype=float)


def require_probability_mapping(mapping: Any, label: str = "mapping") -> Dict[str, float]:
    """Validate a string-keyed mapping of finite reals and return a plain dict copy."""
    if not isinstance(mapping, Mapping) or len(mapping) == 0:
        raise InvalidInputError(f"{label} must be a non-empty mapping, got {mapping!r}")

    bad_keys = [k for k in mapping if not isinstance(k, str)]
    if bad_keys:
        raise InvalidInputError(f"{label} keys must be strings: {bad_keys}")

    bad_values = [k for k, v in mapping.items() if not _is_finite_real(v)]
    if bad_values:
        raise InvalidInputError(f"{label} has non-finite or non-numeric values for: {bad_values}")

    return {k: float(v) for k, v in mapping.items()}


def sanitize_text(text: str) -> str:
    """HTML-escape the characters that could break out of rendered markup."""
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in str(text))

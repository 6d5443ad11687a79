"""
QBayes Module: report.py
Text / HTML rendering of core results and parsing of user-entered text.

Nothing in the computation core imports this module; it sits on the
outside and only formats what the core returns.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from qbayes.bayes.decision import WeightedDecision
from qbayes.bayes.scoring import BayesFactorResult
from qbayes.core.config import REPORT_DIGITS
from qbayes.core.errors import InvalidInputError
from qbayes.core.validation import sanitize_text
from qbayes.quantum.collapse import CollapseResult
from qbayes.quantum.projection import SequenceProjection


# ---------------------------------------------------------------------------
# 1. Parsing user input
# ---------------------------------------------------------------------------

def parse_numeric_list(text: str) -> List[float]:
    """'0.1, 0.2,0.3' -> [0.1, 0.2, 0.3]. Blank or non-numeric items are rejected."""
    items = [part.strip() for part in str(text).split(",")]
    values: List[float] = []
    for item in items:
        try:
            values.append(float(item))
        except ValueError:
            raise InvalidInputError(f"not a number: {item!r}") from None
    return values


def parse_json_mapping(text: str) -> Dict[str, Any]:
    """Parse a JSON object such as '{"A": 0.5, "B": 0.5}'."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"invalid JSON: {e}") from None
    if not isinstance(data, dict):
        raise InvalidInputError(f"expected a JSON object, got {type(data).__name__}")
    return data


def parse_json_rounds(text: str) -> List[Dict[str, Any]]:
    """
    Parse evidence rounds: a JSON list of objects, or a single object
    (treated as one round).
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"invalid JSON: {e}") from None
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise InvalidInputError("expected a JSON list of objects for evidence rounds")
    return data


# ---------------------------------------------------------------------------
# 2. Text formatting
# ---------------------------------------------------------------------------

def format_value(x: float, digits: int = REPORT_DIGITS) -> str:
    return f"{float(x):.{digits}f}"


def format_sequence(values: Sequence[float], digits: int = REPORT_DIGITS) -> str:
    return ", ".join(format_value(v, digits) for v in values)


def format_collapse(result: CollapseResult, digits: int = REPORT_DIGITS) -> str:
    return "\n".join([
        f"Collapsed State: {format_value(result.collapsed_state, digits)}",
        f"Action: {result.action}",
        f"Entropy: {format_value(result.entropy, digits)}",
        f"Coherence: {format_value(result.coherence, digits)}",
        f"Mahalanobis Distance: {format_value(result.mahalanobis_distance, digits)}",
    ])


def format_bayes_factor(result: BayesFactorResult, digits: int = REPORT_DIGITS) -> str:
    return "\n".join([
        f"Bayes Factor: {format_value(result.bayes_factor, digits)}",
        f"Interpretation: {result.interpretation}",
        f"Entropy: {format_value(result.entropy, digits)}",
    ])


def format_sequence_projection(result: SequenceProjection, digits: int = REPORT_DIGITS) -> str:
    return "\n".join([
        f"Entropy: {format_value(result.entropy, digits)}",
        f"Quantum Projections: {format_sequence(result.projections, digits)}",
    ])


def format_decision(result: WeightedDecision, digits: int = REPORT_DIGITS) -> str:
    inputs = result.normalized_inputs
    return "\n".join([
        f"Weighted Probability: {format_value(result.weighted_probability, digits)}",
        f"Recommended Action: {result.recommended_action}",
        f"Confidence: {format_value(result.confidence, digits)}",
        f"Inputs: entropy={format_value(inputs.entropy, digits)} "
        f"coherence={format_value(inputs.coherence, digits)} "
        f"prn_influence={format_value(inputs.prn_influence, digits)}",
    ])


def format_posteriors(frame: pd.DataFrame, digits: int = REPORT_DIGITS) -> str:
    lines = []
    for hypothesis, row in frame.iterrows():
        lines.append(
            f"{hypothesis}: prior={format_value(row['prior'], digits)} "
            f"posterior={format_value(row['posterior'], digits)}"
        )
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# 3. Tables + HTML
# ---------------------------------------------------------------------------

def posterior_frame(priors: Mapping[str, float], posteriors: Mapping[str, float]) -> pd.DataFrame:
    """
    Prior vs posterior table indexed by hypothesis, with a `shift` column
    (posterior - prior).
    """
    frame = pd.DataFrame(
        {
            "prior": pd.Series(dict(priors), dtype=float),
            "posterior": pd.Series(dict(posteriors), dtype=float),
        }
    )
    frame.index.name = "hypothesis"
    frame["shift"] = frame["posterior"] - frame["prior"]
    return frame


def to_html(text: str) -> str:
    """Escape each line and join them with <br> for embedding in a page."""
    return "<br>".join(sanitize_text(line) for line in str(text).splitlines())

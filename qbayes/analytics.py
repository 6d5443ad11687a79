"""
QBayes Module: analytics.py
-----------------------------
Stateful front door over the pure scoring functions.

Holds one set of decision weights and one ResultStore, so a session can
compute entropy / Bayes factors / posteriors / decisions and keep a
bounded history of what it computed.

Usage:
    analytics = BayesAnalytics()
    analytics.bayes_factor([0.1, 0.2, 0.3, 0.4], record=True)
    analytics.get_stored_results("bayes")
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from qbayes.bayes.decision import WeightedDecision, weigh_decision
from qbayes.bayes.scoring import BayesFactorResult, bayes_factor, bayesian_update
from qbayes.core.config import DecisionWeights, get_config
from qbayes.core.result_store import ResultStore, StoredResult
from qbayes.logging_utils import qstep
from qbayes.quantum.entropy import categorical_entropy


class BayesAnalytics:
    """
    Parameters
    ----------
    weights : DecisionWeights or mapping, optional
        Weights for :meth:`calculate_probabilities`. Defaults to config.
    store : ResultStore, optional
        History store. A fresh store with the configured capacity is
        created when omitted, so two instances never share history.
    """

    def __init__(
        self,
        weights: Optional[Union[DecisionWeights, Mapping[str, float]]] = None,
        store: Optional[ResultStore] = None,
    ):
        cfg = get_config()
        if weights is None:
            weights = cfg.weights
        elif not isinstance(weights, DecisionWeights):
            weights = DecisionWeights.from_dict(weights)
        self.weights = weights
        self.store = store if store is not None else ResultStore(capacity=cfg.store_capacity)

    def _maybe_record(self, result_type: str, result: Any, record: bool) -> None:
        if record:
            identifier = self.store.store(result_type, result)
            qstep(f"Stored {result_type} result as {identifier}")

    def shannon_entropy(self, data: Sequence[float], record: bool = False) -> float:
        h = categorical_entropy(data)
        self._maybe_record("entropy", h, record)
        return h

    def bayes_factor(self, data: Sequence[float], record: bool = False) -> BayesFactorResult:
        result = bayes_factor(data)
        self._maybe_record("bayes", result, record)
        return result

    def bayesian_inference(
        self,
        priors: Mapping[str, float],
        likelihoods: Iterable[Mapping[str, float]],
        record: bool = False,
    ) -> Dict[str, float]:
        posteriors = bayesian_update(priors, likelihoods)
        self._maybe_record("inference", posteriors, record)
        return posteriors

    def calculate_probabilities(
        self,
        entropy: float,
        coherence: float,
        prn_influence: float,
        record: bool = False,
    ) -> WeightedDecision:
        decision = weigh_decision(entropy, coherence, prn_influence, self.weights)
        self._maybe_record("decision", decision, record)
        return decision

    def store_result(self, result_type: str, result: Any) -> str:
        return self.store.store(result_type, result)

    def get_stored_results(self, result_type: Optional[str] = None) -> List[Tuple[str, StoredResult]]:
        return self.store.query(result_type)

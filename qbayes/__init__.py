"""
QBayes - Quantum-flavoured Bayesian sandbox
===========================================

A small probabilistic-reasoning toolkit:
- Shannon entropy (categorical draws and magnitude vectors)
- Bayes-factor scoring and iterative posterior updates
- A weighted entropy / coherence / PRN decision rule
- A cosine-projection "wave collapse" heuristic
- Synthetic noise generators and a bounded result history

Quick Start:
-----------
    from qbayes import bayes_factor, bayesian_update, collapse

    bayes_factor([0.1, 0.2, 0.3, 0.4]).interpretation      # 'anecdotal'
    bayesian_update({"A": 0.5, "B": 0.5}, [{"A": 0.8, "B": 0.2}])
    collapse([0.2, 0.5, 0.3]).collapsed_state                # ~1.0
"""

__version__ = "0.1.0"

# Core
from qbayes.core.config import DecisionWeights, QBayesConfig, get_config
from qbayes.core.errors import (
    ConfigError,
    DivisionByZeroError,
    InvalidInputError,
    QBayesError,
)
from qbayes.core.result_store import ResultStore, StoredResult
from qbayes.core.validation import is_valid_numeric_sequence

# Quantum
from qbayes.quantum.collapse import CollapseResult, WaveCollapseSimulator, collapse
from qbayes.quantum.entropy import categorical_entropy, magnitude_entropy
from qbayes.quantum.noise import gaussian_noise, perlin_like_noise, uniform_noise
from qbayes.quantum.projection import (
    cosine_projection,
    deviation_distance,
    project_sequence,
    select_action,
)

# Bayes
from qbayes.bayes.decision import WeightedDecision, weigh_decision
from qbayes.bayes.scoring import BayesFactorResult, bayes_factor, bayesian_update

from qbayes.analytics import BayesAnalytics

__all__ = [
    '__version__',

    # Config / errors
    'DecisionWeights',
    'QBayesConfig',
    'get_config',
    'QBayesError',
    'InvalidInputError',
    'DivisionByZeroError',
    'ConfigError',

    # Storage
    'ResultStore',
    'StoredResult',

    # Validation
    'is_valid_numeric_sequence',

    # Quantum
    'categorical_entropy',
    'magnitude_entropy',
    'gaussian_noise',
    'perlin_like_noise',
    'uniform_noise',
    'deviation_distance',
    'cosine_projection',
    'select_action',
    'project_sequence',
    'CollapseResult',
    'WaveCollapseSimulator',
    'collapse',

    # Bayes
    'BayesFactorResult',
    'bayes_factor',
    'bayesian_update',
    'WeightedDecision',
    'weigh_decision',

    # Facade
    'BayesAnalytics',
]

"""QBayes Core - configuration, errors, validation and the result store."""

from qbayes.core.config import DecisionWeights, QBayesConfig, get_config
from qbayes.core.errors import ConfigError, DivisionByZeroError, InvalidInputError, QBayesError
from qbayes.core.result_store import ResultStore, StoredResult
from qbayes.core.validation import is_valid_numeric_sequence, require_numeric_sequence

__all__ = [
    'DecisionWeights',
    'QBayesConfig',
    'get_config',
    'QBayesError',
    'InvalidInputError',
    'DivisionByZeroError',
    'ConfigError',
    'ResultStore',
    'StoredResult',
    'is_valid_numeric_sequence',
    'require_numeric_sequence',
]

"""
QBayes Bayes tools.

- scoring: Bayes factor ladder and iterative posterior updates
- decision: weighted entropy / coherence / PRN decision rule
- logic: scalar prior / joint / conditional / posterior helpers
"""

from . import decision
from . import logic
from . import scoring

__all__ = ["decision", "logic", "scoring"]

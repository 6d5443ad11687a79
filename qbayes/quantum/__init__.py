"""
QBayes quantum-inspired utilities.

This package holds small, focused tools that implement the
"quantum-flavored" pieces of the sandbox:

- entropy: categorical and magnitude Shannon entropy
- noise: synthetic demo signals (sine + jitter, smoothed, uniform)
- projection: cosine projection, deviation distance, tanh action selector
- collapse: the end-to-end wave-collapse pipeline
"""

from . import collapse
from . import entropy
from . import noise
from . import projection

__all__ = ["collapse", "entropy", "noise", "projection"]

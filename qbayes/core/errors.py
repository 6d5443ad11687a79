"""
QBayes Module: errors.py
Exception types raised by the computation core.

Every error derives from ``QBayesError`` and from the matching builtin,
so callers can catch either ``ValueError`` / ``ZeroDivisionError`` or the
specific QBayes type.
"""


class QBayesError(Exception):
    """Base class for all QBayes errors."""


class InvalidInputError(QBayesError, ValueError):
    """Input sequence or mapping rejected before any computation ran."""


class DivisionByZeroError(QBayesError, ZeroDivisionError):
    """A normalizing total (or prior) was exactly zero."""


class ConfigError(QBayesError, ValueError):
    """A configuration object was built with unusable values."""

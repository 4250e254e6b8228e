"""Exception hierarchy for transitsim."""

from __future__ import annotations


class TransitSimError(Exception):
    """Base class for all transitsim errors."""


class InvalidParameterError(TransitSimError, ValueError):
    """Raised when a request cannot be satisfied with the given arguments."""


class InvalidCurveError(TransitSimError, ValueError):
    """Raised when a phase curve is empty or its arrays do not line up."""


class ConfigError(TransitSimError):
    """Raised when a configuration file cannot be turned into defaults."""

"""Core models and exceptions for transitsim."""

from transitsim.core.exceptions import (
    ConfigError,
    InvalidCurveError,
    InvalidParameterError,
    TransitSimError,
)
from transitsim.core.models import ModelKind, PhaseCurve, TransitPoint

__all__ = [
    "ConfigError",
    "InvalidCurveError",
    "InvalidParameterError",
    "ModelKind",
    "PhaseCurve",
    "TransitPoint",
    "TransitSimError",
]

"""Physical transit parameters with documented fallbacks."""

from __future__ import annotations

import logging
import math
import warnings
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from transitsim.config import DEFAULTS, SimulationDefaults
from transitsim.noise import estimate_noise

logger = logging.getLogger(__name__)


def _is_missing(value: Optional[float]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


@dataclass(kw_only=True)
class TransitParameters:
    """
    Transit parameters as supplied by a caller; any of them may be missing.

    Missing values are filled in by ``resolve`` from ``SimulationDefaults``:
    depth 0.1 %, duration 0.02 of the period, rprs = sqrt(depth), b = 0.3,
    aRs = 10, u1 = u2 = 0, ingress = duration / 6, noise from ``vmag``.
    """

    depth: Optional[float] = None  # fractional
    duration: Optional[float] = None  # fraction of the period
    ingress_duration: Optional[float] = None

    rprs: Optional[float] = None  # Rp/R*
    b: Optional[float] = None  # impact parameter
    aRs: Optional[float] = None  # a/R*

    u1: Optional[float] = None
    u2: Optional[float] = None

    vmag: Optional[float] = None
    photometric_noise: Optional[float] = None  # overrides the vmag estimate

    def __post_init__(self) -> None:
        # Basic sanity checks (non-fatal, warn only)
        if not _is_missing(self.depth) and not 0.0 < self.depth < 1.0:
            warnings.warn("TransitParameters.depth outside (0, 1) is not physical.", RuntimeWarning)
        if not _is_missing(self.duration) and self.duration <= 0:
            warnings.warn("TransitParameters.duration <= 0 is not physical.", RuntimeWarning)
        if not _is_missing(self.rprs) and self.rprs < 0:
            warnings.warn("TransitParameters.rprs < 0 is not physical.", RuntimeWarning)
        if not _is_missing(self.aRs) and self.aRs <= 1:
            warnings.warn("TransitParameters.aRs <= 1 puts the planet inside the star.", RuntimeWarning)
        u1 = 0.0 if _is_missing(self.u1) else self.u1
        u2 = 0.0 if _is_missing(self.u2) else self.u2
        if u1 + u2 > 1:
            warnings.warn("TransitParameters.u1 + u2 > 1 gives negative intensity at the limb.", RuntimeWarning)

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "TransitParameters":
        """Build from a mapping, ignoring keys that are not parameters."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in mapping.items() if k in names})

    def resolve(self, defaults: SimulationDefaults = DEFAULTS) -> "ResolvedParameters":
        """Fill every missing value from ``defaults``."""

        def pick(name: str, fallback: float) -> float:
            value = getattr(self, name)
            if _is_missing(value):
                logger.debug("Parameter %s missing, using %g", name, fallback)
                return float(fallback)
            return float(value)

        depth = pick("depth", defaults.depth)
        duration = pick("duration", defaults.duration)
        rprs = pick("rprs", math.sqrt(max(depth, 0.0)))

        if _is_missing(self.photometric_noise):
            noise = estimate_noise(self.vmag, defaults)
        else:
            noise = float(self.photometric_noise)

        return ResolvedParameters(
            depth=depth,
            duration=duration,
            ingress_duration=pick("ingress_duration", duration * defaults.ingress_fraction),
            rprs=max(rprs, 0.0),
            b=pick("b", defaults.impact_parameter),
            aRs=pick("aRs", defaults.a_rs),
            u1=pick("u1", defaults.u1),
            u2=pick("u2", defaults.u2),
            photometric_noise=noise,
        )


@dataclass(frozen=True)
class ResolvedParameters:
    """Complete parameter set; every field is a concrete float."""

    depth: float
    duration: float
    ingress_duration: float
    rprs: float
    b: float
    aRs: float
    u1: float
    u2: float
    photometric_noise: float

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

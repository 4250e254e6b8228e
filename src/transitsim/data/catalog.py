"""Exoplanet archive records and their translation into transit parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from astropy import units as u

from transitsim.parameters import TransitParameters


def _clean(value: Any) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    value = float(value)
    return None if math.isnan(value) else value


@dataclass
class PlanetRecord:
    """Container for one planet row; archive columns are nullable."""

    pl_name: str = ""
    pl_trandep: Optional[float] = None  # transit depth (%)
    pl_trandur: Optional[float] = None  # transit duration (hours)
    pl_orbper: Optional[float] = None  # orbital period (days)
    pl_ratror: Optional[float] = None  # Rp/R*
    pl_imppar: Optional[float] = None  # impact parameter
    pl_ratdor: Optional[float] = None  # a/R*
    pl_rade: Optional[float] = None  # planet radius (Earth radii)
    pl_eqt: Optional[float] = None  # equilibrium temperature (K)
    sy_vmag: Optional[float] = None  # V magnitude
    ld_u1: Optional[float] = None
    ld_u2: Optional[float] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name != "pl_name":
                setattr(self, f.name, _clean(getattr(self, f.name)))

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "PlanetRecord":
        """Build from an archive row; unknown columns are ignored."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in row.items() if k in names})

    @property
    def depth(self) -> Optional[float]:
        """Fractional transit depth."""
        if self.pl_trandep is None:
            return None
        return self.pl_trandep / 100.0

    @property
    def duration_phase(self) -> Optional[float]:
        """Transit duration as a fraction of the orbital period."""
        if not (self.pl_trandur and self.pl_orbper):
            return None
        if self.pl_trandur <= 0 or self.pl_orbper <= 0:
            return None
        ratio = (self.pl_trandur * u.hour) / (self.pl_orbper * u.day)
        return float(ratio.decompose().value)

    def to_parameters(self) -> TransitParameters:
        return TransitParameters(
            depth=self.depth,
            duration=self.duration_phase,
            rprs=self.pl_ratror,
            b=self.pl_imppar,
            aRs=self.pl_ratdor,
            u1=self.ld_u1,
            u2=self.ld_u2,
            vmag=self.sy_vmag,
        )

    @property
    def planet_type(self) -> str:
        return planet_type(self.pl_rade)

    @property
    def habitable(self) -> bool:
        return in_habitable_zone(self.pl_eqt)


def planet_type(radius_earth: Optional[float]) -> str:
    """Size class from the planet radius in Earth radii."""
    if radius_earth is None:
        return "Unknown"
    if radius_earth < 1.25:
        return "Terrestrial"
    if radius_earth < 2.0:
        return "Super-Earth"
    if radius_earth < 4.0:
        return "Sub-Neptune"
    if radius_earth < 10.0:
        return "Neptune-like"
    return "Gas Giant"


def in_habitable_zone(eq_temp: Optional[float]) -> bool:
    """Crude habitable-zone test on equilibrium temperature (K)."""
    if eq_temp is None:
        return False
    return 200.0 <= eq_temp <= 320.0

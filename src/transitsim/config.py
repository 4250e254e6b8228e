"""Configuration defaults for transitsim."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import yaml

from transitsim.core.exceptions import ConfigError


@dataclass(frozen=True)
class SimulationDefaults:
    """Every literal the models and the noise synthesizer fall back on."""

    # Physical parameters
    depth: float = 0.001  # 0.1 %
    duration: float = 0.02  # fraction of the orbital period
    impact_parameter: float = 0.3
    a_rs: float = 10.0
    u1: float = 0.0
    u2: float = 0.0
    ingress_fraction: float = 1.0 / 6.0  # ingress duration / transit duration

    # Model grids
    analytic_num_points: int = 300
    analytic_phase_range: float = 0.1
    trapezoid_num_points: int = 200
    trapezoid_phase_range: float = 0.15

    # Noise synthesizer
    photometric_noise: float = 0.001
    red_noise_factor: float = 0.3
    red_noise_decay: float = 0.95
    noisy_num_points: int = 150
    gap_fraction: float = 0.05
    phase_jitter: float = 0.02  # full width, as a fraction of the domain
    trend_amplitude: float = 0.0002
    trend_frequency: float = 10.0

    # Folding
    fold_bins_per_phase: int = 500

    # Noise estimator
    noise_base: float = 0.0001
    noise_reference_vmag: float = 10.0
    noise_vmag_slope: float = 0.15
    noise_cap: float = 0.005

    def replace(self, **overrides: Any) -> "SimulationDefaults":
        return dataclasses.replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


DEFAULTS = SimulationDefaults()


def load_config(
    input_file: Union[str, os.PathLike], base: Optional[SimulationDefaults] = None
) -> SimulationDefaults:
    """Read a YAML file of overrides on top of ``base`` (the defaults).

    The file must hold a single mapping whose keys are ``SimulationDefaults``
    field names. Entries that are empty or ``"None"`` keep the base value;
    other values are converted to the type of the field they override.
    """
    if not (os.path.exists(input_file) and os.path.isfile(input_file)):
        raise FileNotFoundError(f"configuration file not found: {input_file}")

    with open(input_file) as in_f:
        try:
            params = yaml.safe_load(in_f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"could not parse {input_file}: {exc}") from exc

    if params is None:
        params = {}
    if not isinstance(params, dict):
        raise ConfigError(f"{input_file} must contain a mapping of defaults")

    # Blank entries keep the base value.
    params = {k: v for k, v in params.items() if v is not None and v != "None"}

    known = {f.name for f in dataclasses.fields(SimulationDefaults)}
    unknown = sorted(set(params) - known)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {unknown}")

    base = base or DEFAULTS
    return base.replace(**{k: _coerce(k, v, getattr(base, k)) for k, v in params.items()})


def _coerce(name: str, value: Any, current: Any) -> Any:
    """Convert ``value`` to the type of the field it overrides."""
    kind = type(current)
    if isinstance(value, bool) or (kind is int and isinstance(value, float) and not value.is_integer()):
        raise ConfigError(f"{name} must be of type {kind.__name__}, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be of type {kind.__name__}, got {value!r}") from exc

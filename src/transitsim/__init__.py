"""
transitsim - Synthetic Transit Photometry
=========================================

Model the dip in starlight as a planet crosses its star, add realistic
noise, and fold many noisy transits to recover the signal.

Quick Start:
    >>> from transitsim import TransitParameters, TransitSimulator
    >>> sim = TransitSimulator(TransitParameters(rprs=0.1, b=0.05, aRs=10.0), rng=42)
    >>> model = sim.model_curve()
    >>> folded = sim.folded_curve(num_transits=20)

Modules:
    geometry    - Circle-circle overlap
    transit     - Analytic and trapezoid transit models, interpolation
    noise       - Noise synthesizer and noise estimate from V magnitude
    folding     - Stacking and phase binning of noisy transits
    parameters  - Parameters with documented defaults
    analysis    - Fold diagnostics
    simulator   - One-stop front end
"""

from transitsim.version import __version__

from transitsim.analysis import (
    FoldStatistics,
    expected_bin_noise,
    fold_scatter,
    residuals,
    transit_snr,
)
from transitsim.config import DEFAULTS, SimulationDefaults, load_config
from transitsim.core import (
    ConfigError,
    InvalidCurveError,
    InvalidParameterError,
    ModelKind,
    PhaseCurve,
    TransitPoint,
    TransitSimError,
)
from transitsim.data import PlanetRecord, in_habitable_zone, planet_type
from transitsim.folding import bin_by_phase, fold_transits
from transitsim.geometry import circle_overlap
from transitsim.noise import estimate_noise, gaussian_random, generate_noisy_data
from transitsim.parameters import ResolvedParameters, TransitParameters
from transitsim.simulator import TransitSimulator
from transitsim.transit import (
    analytic_transit,
    blocked_fraction,
    generate_analytic_curve,
    generate_transit_curve,
    interpolate_model,
    projected_separation,
    simplified_transit,
)

# What gets exported with `from transitsim import *`
__all__ = [
    "__version__",
    # Data model
    "TransitPoint",
    "PhaseCurve",
    "ModelKind",
    # Errors
    "TransitSimError",
    "InvalidParameterError",
    "InvalidCurveError",
    "ConfigError",
    # Configuration
    "SimulationDefaults",
    "DEFAULTS",
    "load_config",
    # Models
    "circle_overlap",
    "projected_separation",
    "blocked_fraction",
    "analytic_transit",
    "generate_analytic_curve",
    "simplified_transit",
    "generate_transit_curve",
    "interpolate_model",
    # Noise and folding
    "gaussian_random",
    "generate_noisy_data",
    "estimate_noise",
    "bin_by_phase",
    "fold_transits",
    # Parameters
    "TransitParameters",
    "ResolvedParameters",
    "PlanetRecord",
    "planet_type",
    "in_habitable_zone",
    # Diagnostics
    "FoldStatistics",
    "residuals",
    "fold_scatter",
    "expected_bin_noise",
    "transit_snr",
    # Front end
    "TransitSimulator",
]

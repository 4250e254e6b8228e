"""Synthetic photometric noise for clean transit models.

Provides:
- gaussian_random: Box-Muller normal deviate from an injectable generator
- generate_noisy_data: white + correlated (red) noise, a slow trend and gaps
- estimate_noise: photometric sigma assumed for a star of given V magnitude

Every function draws from an explicit ``numpy.random.Generator`` (or a seed
for one); the legacy global numpy random state is never touched.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from transitsim.config import DEFAULTS, SimulationDefaults
from transitsim.core.exceptions import InvalidCurveError, InvalidParameterError
from transitsim.core.models import PhaseCurve
from transitsim.transit import as_curve

logger = logging.getLogger(__name__)

RandomLike = Union[np.random.Generator, int, None]


def make_rng(rng: RandomLike = None) -> np.random.Generator:
    """Return ``rng`` unchanged if it is a Generator, else seed a new one."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _nonzero_uniform(rng: np.random.Generator) -> float:
    u = 0.0
    while u == 0.0:
        u = float(rng.random())
    return u


def gaussian_random(rng: RandomLike = None) -> float:
    """
    Standard normal deviate via the Box-Muller transform.

    Uniform draws of exactly zero are resampled so that log(u) is always
    defined.
    """
    rng = make_rng(rng)
    u = _nonzero_uniform(rng)
    v = _nonzero_uniform(rng)
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


def generate_noisy_data(
    model_curve: Union[PhaseCurve, Iterable[Tuple[float, float]]],
    photometric_noise: float = DEFAULTS.photometric_noise,
    red_noise_factor: float = DEFAULTS.red_noise_factor,
    num_points: int = DEFAULTS.noisy_num_points,
    gap_fraction: float = DEFAULTS.gap_fraction,
    rng: RandomLike = None,
    defaults: SimulationDefaults = DEFAULTS,
) -> PhaseCurve:
    """
    Draw one synthetic set of observations of a clean model curve.

    Parameters
    ----------
    model_curve : PhaseCurve or iterable of (phase, flux)
        Clean model sorted by ascending phase
    photometric_noise : float
        White noise sigma in fractional flux
    red_noise_factor : float
        Red noise innovation sigma relative to ``photometric_noise``
    num_points : int
        Number of nominal samples before gaps are removed
    gap_fraction : float
        Probability that any one sample is missing
    rng : Generator, int or None
        Random source or seed
    defaults : SimulationDefaults
        Source of the red-noise decay, jitter and trend constants

    Returns
    -------
    noisy : PhaseCurve
        Observed samples; the grid is jittered so phases are only roughly
        ascending.
    """
    curve = as_curve(model_curve)
    if len(curve) == 0:
        raise InvalidCurveError("model curve is empty")
    if int(num_points) != num_points or num_points < 0:
        raise InvalidParameterError(f"num_points must be a non-negative integer, got {num_points}")
    if not 0.0 <= gap_fraction <= 1.0:
        raise InvalidParameterError(f"gap_fraction must lie in [0, 1], got {gap_fraction}")

    rng = make_rng(rng)
    num_points = int(num_points)

    min_phase, max_phase = curve.domain
    phase_range = max_phase - min_phase
    step = phase_range / (num_points - 1) if num_points > 1 else 0.0

    phases = []
    fluxes = []
    red_noise = 0.0

    for i in range(num_points):
        if rng.random() < gap_fraction:
            continue

        base_phase = min_phase + step * i
        phase = base_phase + (rng.random() - 0.5) * phase_range * defaults.phase_jitter

        model_flux = curve.interpolate(phase)
        white_noise = gaussian_random(rng) * photometric_noise
        red_noise = (
            red_noise * defaults.red_noise_decay
            + gaussian_random(rng) * photometric_noise * red_noise_factor
        )
        # Imperfect baseline removal
        trend = defaults.trend_amplitude * math.sin(defaults.trend_frequency * phase)

        phases.append(phase)
        fluxes.append(model_flux + white_noise + red_noise + trend)

    logger.debug("Synthesized %d of %d samples (sigma=%g)", len(phases), num_points, photometric_noise)
    return PhaseCurve(phase=phases, flux=fluxes)


def estimate_noise(
    vmag: Optional[float], defaults: SimulationDefaults = DEFAULTS
) -> float:
    """
    Photometric noise assumed for a star of apparent V magnitude ``vmag``.

    Fainter stars are noisier: roughly 100 ppm at V=10 and 400 ppm at V=14,
    capped at 0.5 %. A missing magnitude gives the default noise.
    """
    if vmag is None or (isinstance(vmag, float) and math.isnan(vmag)):
        return defaults.photometric_noise

    mag_factor = 10.0 ** ((float(vmag) - defaults.noise_reference_vmag) * defaults.noise_vmag_slope)
    return min(defaults.noise_cap, defaults.noise_base * mag_factor)

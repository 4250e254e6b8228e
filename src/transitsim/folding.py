"""Phase folding of repeated noisy transits.

Stacking N independent observations of the same transit and averaging them
in narrow phase bins beats the noise down by roughly sqrt(N) per bin, which
is how shallow transits become visible in survey photometry.
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple, Union

import numpy as np

from transitsim.config import DEFAULTS, SimulationDefaults
from transitsim.core.exceptions import InvalidParameterError
from transitsim.core.models import PhaseCurve
from transitsim.noise import RandomLike, generate_noisy_data, make_rng
from transitsim.transit import as_curve

logger = logging.getLogger(__name__)


def bin_by_phase(
    phase: Iterable[float],
    flux: Iterable[float],
    bins_per_phase: int = DEFAULTS.fold_bins_per_phase,
) -> PhaseCurve:
    """
    Average flux in phase bins of width ``1 / bins_per_phase``.

    Each phase is rounded (half up) to the nearest bin centre. Only populated
    bins are returned, sorted by phase.
    """
    if bins_per_phase <= 0:
        raise InvalidParameterError(f"bins_per_phase must be positive, got {bins_per_phase}")

    phase = np.asarray(phase, dtype=float).reshape(-1)
    flux = np.asarray(flux, dtype=float).reshape(-1)
    if phase.size == 0:
        return PhaseCurve(phase=np.empty(0), flux=np.empty(0))

    bin_index = np.floor(phase * bins_per_phase + 0.5).astype(np.int64)
    occupied, inverse = np.unique(bin_index, return_inverse=True)

    sums = np.bincount(inverse, weights=flux)
    counts = np.bincount(inverse)

    return PhaseCurve(phase=occupied / bins_per_phase, flux=sums / counts)


def fold_transits(
    model_curve: Union[PhaseCurve, Iterable[Tuple[float, float]]],
    num_transits: int,
    photometric_noise: float = DEFAULTS.photometric_noise,
    red_noise_factor: float = DEFAULTS.red_noise_factor,
    num_points: int = DEFAULTS.noisy_num_points,
    gap_fraction: float = DEFAULTS.gap_fraction,
    rng: RandomLike = None,
    defaults: SimulationDefaults = DEFAULTS,
) -> PhaseCurve:
    """
    Simulate ``num_transits`` noisy transits and stack them in phase.

    Parameters
    ----------
    model_curve : PhaseCurve or iterable of (phase, flux)
        Clean model sorted by ascending phase
    num_transits : int
        Number of transits to stack; one (or fewer) returns a single
        unbinned noisy realisation
    photometric_noise, red_noise_factor, num_points, gap_fraction
        Passed to ``generate_noisy_data`` for every transit
    rng : Generator, int or None
        Random source shared by all realisations
    defaults : SimulationDefaults
        Noise constants and the fold bin width

    Returns
    -------
    folded : PhaseCurve
        One point per populated phase bin, ascending in phase
    """
    curve = as_curve(model_curve)
    rng = make_rng(rng)

    def realise() -> PhaseCurve:
        return generate_noisy_data(
            curve,
            photometric_noise=photometric_noise,
            red_noise_factor=red_noise_factor,
            num_points=num_points,
            gap_fraction=gap_fraction,
            rng=rng,
            defaults=defaults,
        )

    if num_transits <= 1:
        return realise()

    realisations = [realise() for _ in range(int(num_transits))]
    all_phase = np.concatenate([r.phase for r in realisations])
    all_flux = np.concatenate([r.flux for r in realisations])

    folded = bin_by_phase(all_phase, all_flux, defaults.fold_bins_per_phase)
    logger.debug(
        "Folded %d transits (%d samples) into %d bins",
        int(num_transits),
        all_phase.size,
        len(folded),
    )
    return folded

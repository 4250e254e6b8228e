# analysis.py - Fold diagnostics
"""
Statistics for judging how well a noisy or folded curve recovers its model.
Includes residuals, robust scatter and the noise expected after folding.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

import numpy as np
from scipy import stats

from transitsim.config import DEFAULTS
from transitsim.core.models import PhaseCurve
from transitsim.transit import as_curve, interpolate_model

CurveLike = Union[PhaseCurve, Iterable[Tuple[float, float]]]


@dataclass(frozen=True)
class FoldStatistics:
    """Scatter of a data curve about its model."""

    rms: float
    robust_std: float
    mean_offset: float
    n_points: int

    def to_dict(self) -> Dict[str, float]:
        return {
            "rms": self.rms,
            "robust_std": self.robust_std,
            "mean_offset": self.mean_offset,
            "n_points": self.n_points,
        }


def residuals(curve: CurveLike, model_curve: CurveLike) -> np.ndarray:
    """Data flux minus model flux interpolated at the data phases."""
    curve = as_curve(curve)
    model_flux = interpolate_model(model_curve, curve.phase)
    return curve.flux - np.asarray(model_flux, dtype=float)


def fold_scatter(curve: CurveLike, model_curve: CurveLike) -> FoldStatistics:
    """
    Scatter of ``curve`` about ``model_curve``.

    The robust standard deviation is the normal-scaled median absolute
    deviation, which ignores the occasional outlying bin.
    """
    resid = residuals(curve, model_curve)
    if resid.size == 0:
        return FoldStatistics(rms=float("nan"), robust_std=float("nan"), mean_offset=float("nan"), n_points=0)

    return FoldStatistics(
        rms=float(np.sqrt(np.mean(resid**2))),
        robust_std=float(stats.median_abs_deviation(resid, scale="normal")),
        mean_offset=float(np.mean(resid)),
        n_points=int(resid.size),
    )


def per_sample_noise(
    sigma: float,
    red_noise_factor: float = DEFAULTS.red_noise_factor,
    red_noise_decay: float = DEFAULTS.red_noise_decay,
) -> float:
    """Stationary sigma of white noise plus the AR(1) red-noise process."""
    red_variance = (sigma * red_noise_factor) ** 2 / (1.0 - red_noise_decay**2)
    return float(np.sqrt(sigma**2 + red_variance))


def expected_bin_noise(
    sigma: float,
    num_transits: int,
    red_noise_factor: float = DEFAULTS.red_noise_factor,
    red_noise_decay: float = DEFAULTS.red_noise_decay,
    samples_per_transit: float = 1.0,
) -> float:
    """
    Noise expected in one folded bin.

    Each transit contributes ``samples_per_transit`` samples to the bin and
    transits are independent, so the stationary per-sample sigma falls as the
    square root of the total sample count. Correlation between neighbouring
    samples of the same transit is ignored.
    """
    n = max(int(num_transits), 1) * samples_per_transit
    return per_sample_noise(sigma, red_noise_factor, red_noise_decay) / float(np.sqrt(n))


def transit_snr(depth: float, sigma: float, n_in_transit: int) -> float:
    """Signal-to-noise of a transit of given depth sampled ``n_in_transit`` times."""
    if sigma <= 0:
        return float("inf")
    return float(depth / sigma * np.sqrt(max(n_in_transit, 0)))

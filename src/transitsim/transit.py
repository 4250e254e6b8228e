"""Clean transit light curve models"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

import numpy as np

from transitsim.config import DEFAULTS
from transitsim.core.exceptions import InvalidCurveError, InvalidParameterError
from transitsim.core.models import PhaseCurve
from transitsim.geometry import circle_overlap

ArrayLike = Union[float, np.ndarray]


def _scalar_or_array(values: np.ndarray, scalar: bool) -> ArrayLike:
    return float(values) if scalar else values


def phase_grid(num_points: int, phase_range: float) -> np.ndarray:
    """Uniform phase grid covering [-phase_range, phase_range]."""
    if int(num_points) != num_points or num_points < 2:
        raise InvalidParameterError(f"num_points must be an integer >= 2, got {num_points}")
    if not phase_range > 0:
        raise InvalidParameterError(f"phase_range must be positive, got {phase_range}")
    return np.linspace(-phase_range, phase_range, int(num_points))


# =============================================================================
# Trapezoid approximation
# =============================================================================

def simplified_transit(
    phase: ArrayLike,
    depth: float,
    duration: float,
    ingress_duration: Optional[float] = None,
) -> ArrayLike:
    """
    Trapezoid transit approximation.

    Parameters
    ----------
    phase : float or array
        Orbital phase, 0 at mid-transit
    depth : float
        Transit depth (fractional, e.g. 0.015 for 1.5%)
    duration : float
        Transit duration as a fraction of the period
    ingress_duration : float, optional
        Duration of ingress (and of egress); defaults to duration / 6

    Returns
    -------
    flux : float or array
        Relative flux
    """
    if ingress_duration is None:
        ingress_duration = duration * DEFAULTS.ingress_fraction

    scalar = np.ndim(phase) == 0
    abs_phase = np.abs(np.asarray(phase, dtype=float))

    half_dur = duration / 2.0
    half_ingress = ingress_duration / 2.0
    full_edge = half_dur - half_ingress

    if half_ingress > 0:
        # 0 at the edge of the flat bottom, 1 at first/last contact
        t = (abs_phase - full_edge) / half_ingress
    else:
        t = np.zeros_like(abs_phase)
    ramp = 1.0 - depth * (1.0 - t)

    flux = np.where(
        abs_phase > half_dur,
        1.0,
        np.where(abs_phase < full_edge, 1.0 - depth, ramp),
    )
    return _scalar_or_array(flux, scalar)


def generate_transit_curve(
    depth: float,
    duration: float,
    num_points: int = DEFAULTS.trapezoid_num_points,
    phase_range: float = DEFAULTS.trapezoid_phase_range,
    ingress_duration: Optional[float] = None,
) -> PhaseCurve:
    """Discretize the trapezoid model over [-phase_range, phase_range]."""
    phase = phase_grid(num_points, phase_range)
    flux = simplified_transit(phase, depth, duration, ingress_duration)
    return PhaseCurve(phase=phase, flux=flux)


# =============================================================================
# Analytic model
# =============================================================================

def projected_separation(phase: ArrayLike, b: float, aRs: float) -> ArrayLike:
    """Sky-projected star-planet separation in stellar radii."""
    scalar = np.ndim(phase) == 0
    angle = 2.0 * np.pi * np.asarray(phase, dtype=float)
    z = aRs * np.sqrt(np.sin(angle) ** 2 + (b * np.cos(angle)) ** 2)
    return _scalar_or_array(z, scalar)


def blocked_fraction(z: ArrayLike, rprs: float) -> ArrayLike:
    """Fraction of the uniform stellar disk covered by the planet."""
    scalar = np.ndim(z) == 0
    z = np.asarray(z, dtype=float)
    p = float(rprs)

    blocked = np.where(z <= 1.0 - p, p * p, circle_overlap(z, p))
    return _scalar_or_array(blocked, scalar)


def analytic_transit(
    phase: ArrayLike,
    rprs: float,
    b: float = DEFAULTS.impact_parameter,
    aRs: float = DEFAULTS.a_rs,
    u1: float = DEFAULTS.u1,
    u2: float = DEFAULTS.u2,
) -> ArrayLike:
    """
    Transit light curve with an approximate quadratic limb-darkening correction.

    The blocked area is exact for a uniform disk; limb darkening is applied
    by weighting it with the intensity I(mu) = 1 - u1(1-mu) - u2(1-mu)^2 at
    the planet centre, normalised by the disk-integrated intensity.

    Parameters
    ----------
    phase : float or array
        Orbital phase, 0 at mid-transit
    rprs : float
        Planet to star radius ratio
    b : float
        Impact parameter
    aRs : float
        Semi-major axis in stellar radii
    u1, u2 : float
        Quadratic limb-darkening coefficients

    Returns
    -------
    flux : float or array
        Relative flux, exactly 1.0 out of transit
    """
    scalar = np.ndim(phase) == 0
    z = np.asarray(projected_separation(phase, b, aRs), dtype=float)
    p = float(rprs)

    blocked = np.asarray(blocked_fraction(z, p), dtype=float)

    mu = np.sqrt(np.maximum(0.0, 1.0 - z * z))
    # Intensity is clamped at zero when u1 + u2 > 1
    limb_darkening = np.maximum(1.0 - u1 * (1.0 - mu) - u2 * (1.0 - mu) ** 2, 0.0)
    disk_integral = 1.0 - u1 / 3.0 - u2 / 6.0

    flux = np.where(z > 1.0 + p, 1.0, 1.0 - blocked * limb_darkening / disk_integral)
    return _scalar_or_array(flux, scalar)


def generate_analytic_curve(
    rprs: float,
    b: float = DEFAULTS.impact_parameter,
    aRs: float = DEFAULTS.a_rs,
    u1: float = DEFAULTS.u1,
    u2: float = DEFAULTS.u2,
    num_points: int = DEFAULTS.analytic_num_points,
    phase_range: float = DEFAULTS.analytic_phase_range,
) -> PhaseCurve:
    """Discretize the analytic model over [-phase_range, phase_range]."""
    phase = phase_grid(num_points, phase_range)
    flux = analytic_transit(phase, rprs, b, aRs, u1, u2)
    return PhaseCurve(phase=phase, flux=flux)


# =============================================================================
# Interpolation
# =============================================================================

def as_curve(curve: Union[PhaseCurve, Iterable[Tuple[float, float]]]) -> PhaseCurve:
    """Accept a PhaseCurve or any iterable of (phase, flux) pairs."""
    if isinstance(curve, PhaseCurve):
        return curve
    return PhaseCurve.from_points(curve)


def interpolate_model(
    curve: Union[PhaseCurve, Iterable[Tuple[float, float]]], phase: ArrayLike
) -> ArrayLike:
    """
    Evaluate a discretized model at arbitrary phase.

    Queries outside the curve's phase domain take the flux of the nearest
    end point; inside, the two bracketing samples are interpolated linearly.
    The curve must be sorted by ascending phase.
    """
    curve = as_curve(curve)
    if len(curve) == 0:
        raise InvalidCurveError("cannot interpolate an empty model curve")
    return curve.interpolate(phase)

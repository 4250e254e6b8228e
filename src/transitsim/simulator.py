"""Simulation front end tying parameters, models and noise together."""

from __future__ import annotations

from typing import Optional, Union

from transitsim.config import DEFAULTS, SimulationDefaults
from transitsim.core.exceptions import InvalidParameterError
from transitsim.core.models import ModelKind, PhaseCurve
from transitsim.folding import fold_transits
from transitsim.noise import RandomLike, make_rng
from transitsim.parameters import ResolvedParameters, TransitParameters
from transitsim.transit import generate_analytic_curve, generate_transit_curve


class TransitSimulator:
    """Coordinate clean models, noisy draws and folding for one planet."""

    def __init__(
        self,
        parameters: Optional[TransitParameters] = None,
        defaults: SimulationDefaults = DEFAULTS,
        rng: RandomLike = None,
    ) -> None:
        self.defaults = defaults
        self.parameters = parameters if parameters is not None else TransitParameters()
        self.resolved: ResolvedParameters = self.parameters.resolve(defaults)
        self.rng = make_rng(rng)
        self.models = {
            ModelKind.ANALYTIC: self._analytic_curve,
            ModelKind.TRAPEZOID: self._trapezoid_curve,
        }

    @property
    def noise_sigma(self) -> float:
        return self.resolved.photometric_noise

    def model_curve(
        self,
        kind: Union[ModelKind, str] = ModelKind.ANALYTIC,
        num_points: Optional[int] = None,
        phase_range: Optional[float] = None,
    ) -> PhaseCurve:
        """Discretized clean model of the requested kind."""
        try:
            kind = ModelKind(kind)
        except ValueError as exc:
            raise InvalidParameterError(f"Unknown model kind: {kind}") from exc
        return self.models[kind](num_points, phase_range)

    def noisy_curve(
        self,
        kind: Union[ModelKind, str] = ModelKind.ANALYTIC,
        num_points: Optional[int] = None,
        phase_range: Optional[float] = None,
        red_noise_factor: Optional[float] = None,
        gap_fraction: Optional[float] = None,
    ) -> PhaseCurve:
        """One noisy realisation of the clean model."""
        return self.folded_curve(
            1,
            kind=kind,
            num_points=num_points,
            phase_range=phase_range,
            red_noise_factor=red_noise_factor,
            gap_fraction=gap_fraction,
        )

    def folded_curve(
        self,
        num_transits: int,
        kind: Union[ModelKind, str] = ModelKind.ANALYTIC,
        num_points: Optional[int] = None,
        phase_range: Optional[float] = None,
        red_noise_factor: Optional[float] = None,
        gap_fraction: Optional[float] = None,
    ) -> PhaseCurve:
        """Average of ``num_transits`` noisy realisations binned in phase."""
        d = self.defaults
        model = self.model_curve(kind, phase_range=phase_range)
        kwargs = dict(
            photometric_noise=self.noise_sigma,
            red_noise_factor=d.red_noise_factor if red_noise_factor is None else red_noise_factor,
            num_points=d.noisy_num_points if num_points is None else num_points,
            gap_fraction=d.gap_fraction if gap_fraction is None else gap_fraction,
            rng=self.rng,
            defaults=d,
        )
        return fold_transits(model, num_transits, **kwargs)

    def _analytic_curve(self, num_points: Optional[int], phase_range: Optional[float]) -> PhaseCurve:
        p = self.resolved
        return generate_analytic_curve(
            p.rprs,
            p.b,
            p.aRs,
            p.u1,
            p.u2,
            num_points=self.defaults.analytic_num_points if num_points is None else num_points,
            phase_range=self.defaults.analytic_phase_range if phase_range is None else phase_range,
        )

    def _trapezoid_curve(self, num_points: Optional[int], phase_range: Optional[float]) -> PhaseCurve:
        p = self.resolved
        return generate_transit_curve(
            p.depth,
            p.duration,
            num_points=self.defaults.trapezoid_num_points if num_points is None else num_points,
            phase_range=self.defaults.trapezoid_phase_range if phase_range is None else phase_range,
            ingress_duration=p.ingress_duration,
        )

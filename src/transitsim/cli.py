"""Command line interface for transitsim."""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import Callable, Optional

import click

from transitsim import __version__
from transitsim.config import DEFAULTS, SimulationDefaults, load_config
from transitsim.core.exceptions import ConfigError, TransitSimError
from transitsim.core.models import ModelKind, PhaseCurve
from transitsim.noise import estimate_noise
from transitsim.parameters import TransitParameters
from transitsim.simulator import TransitSimulator


def render_curve(curve: PhaseCurve, fmt: str) -> str:
    """Serialize a curve as JSON or CSV text."""
    if fmt == "csv":
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["phase", "flux"])
        for point in curve:
            writer.writerow([repr(point.phase), repr(point.flux)])
        return buffer.getvalue()
    return json.dumps(curve.to_dict())


def emit(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text if text.endswith("\n") else text + "\n")
    else:
        click.echo(text.rstrip("\n"))


def physical_options(func: Callable) -> Callable:
    """Attach the shared physical-parameter options to a command."""
    options = [
        click.option("--depth", type=float, help="Fractional transit depth."),
        click.option("--duration", type=float, help="Transit duration as a fraction of the period."),
        click.option("--ingress", "ingress_duration", type=float, help="Ingress duration (phase units)."),
        click.option("--rprs", type=float, help="Planet to star radius ratio."),
        click.option("--b", "b", type=float, help="Impact parameter."),
        click.option("--ars", "a_rs", type=float, help="Semi-major axis in stellar radii."),
        click.option("--u1", type=float, help="Linear limb-darkening coefficient."),
        click.option("--u2", type=float, help="Quadratic limb-darkening coefficient."),
        click.option(
            "--kind",
            type=click.Choice([k.value for k in ModelKind]),
            default=ModelKind.ANALYTIC.value,
            show_default=True,
        ),
        click.option("--phase-range", type=click.FloatRange(min=0.0, min_open=True)),
        click.option("--format", "fmt", type=click.Choice(["json", "csv"]), default="json", show_default=True),
        click.option("--output", type=click.Path(dir_okay=False)),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _parameters(a_rs: Optional[float] = None, **values) -> TransitParameters:
    return TransitParameters.from_mapping(dict(values, aRs=a_rs))


@click.group()
@click.version_option(__version__, prog_name="transitsim")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file overriding simulation defaults.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Optional[str]) -> None:
    """transitsim command line interface."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    defaults = DEFAULTS
    if config_path:
        try:
            defaults = load_config(config_path)
        except ConfigError as exc:
            raise click.BadParameter(str(exc), param_hint="--config") from exc
    ctx.obj = defaults


@main.command()
@physical_options
@click.option("--num-points", type=click.IntRange(min=2))
@click.pass_obj
def model(
    defaults: SimulationDefaults,
    kind: str,
    phase_range: Optional[float],
    fmt: str,
    output: Optional[str],
    num_points: Optional[int],
    **physical,
) -> None:
    """Print a clean model light curve."""
    try:
        simulator = TransitSimulator(_parameters(**physical), defaults=defaults)
        curve = simulator.model_curve(kind, num_points=num_points, phase_range=phase_range)
    except TransitSimError as exc:
        raise click.ClickException(str(exc)) from exc
    emit(render_curve(curve, fmt), output)


@main.command()
@physical_options
@click.option("--vmag", type=float, help="V magnitude used to estimate the noise.")
@click.option("--noise", "photometric_noise", type=click.FloatRange(min=0.0), help="White noise sigma.")
@click.option("--transits", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--num-points", type=click.IntRange(min=0), help="Samples per transit before gaps.")
@click.option("--gap-fraction", type=click.FloatRange(0.0, 1.0))
@click.option("--red-noise", "red_noise_factor", type=click.FloatRange(min=0.0))
@click.option("--seed", type=int, help="Seed for reproducible noise.")
@click.pass_obj
def simulate(
    defaults: SimulationDefaults,
    kind: str,
    phase_range: Optional[float],
    fmt: str,
    output: Optional[str],
    transits: int,
    num_points: Optional[int],
    gap_fraction: Optional[float],
    red_noise_factor: Optional[float],
    seed: Optional[int],
    **physical,
) -> None:
    """Print noisy observations, folded over several transits."""
    try:
        simulator = TransitSimulator(_parameters(**physical), defaults=defaults, rng=seed)
        curve = simulator.folded_curve(
            transits,
            kind=kind,
            num_points=num_points,
            phase_range=phase_range,
            red_noise_factor=red_noise_factor,
            gap_fraction=gap_fraction,
        )
    except TransitSimError as exc:
        raise click.ClickException(str(exc)) from exc
    emit(render_curve(curve, fmt), output)


@main.command()
@click.option("--vmag", type=float, help="V magnitude; omit for the default noise.")
@click.pass_obj
def noise(defaults: SimulationDefaults, vmag: Optional[float]) -> None:
    """Print the photometric noise assumed for a star."""
    click.echo(f"{estimate_noise(vmag, defaults):.6g}")

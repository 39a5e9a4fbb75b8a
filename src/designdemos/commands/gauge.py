"""Command group: gauge rendering and scrubbing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from designdemos.commands._base import DemoGroup

if TYPE_CHECKING:
    from designdemos.commands._context import AppContext


@click.group(
    cls=DemoGroup,
    examples="""\
  designdemos gauge render --value 5
  designdemos gauge render --style inside-out --value 2.5 --value 7.5
  designdemos gauge sweep --style uber --steps 4
  designdemos gauge styles""",
)
def gauge() -> None:
    """Render gauges and drive the scrubber."""


@gauge.command(
    examples="""\
  designdemos gauge render --value 5
  designdemos gauge render --style simple --value 0.25 --min 0 --max 1
  designdemos gauge render --style inside-out --value 3 --value 8
  designdemos --json gauge render --style clock --value 40 --max 60 --tick-step 5""",
)
@click.option("--style", default=None, help="Gauge style (see 'gauge styles').")
@click.option(
    "--value",
    "values",
    type=float,
    multiple=True,
    help="Reading to display (repeatable).",
)
@click.option("--min", "lower", type=float, default=None, help="Range lower bound.")
@click.option("--max", "upper", type=float, default=None, help="Range upper bound.")
@click.option("--tick-step", type=float, default=None, help="Distance between ticks.")
@click.option("--size", type=float, default=None, help="Frame size.")
@click.pass_obj
def render(
    app: AppContext,
    style: str | None,
    values: tuple[float, ...],
    lower: float | None,
    upper: float | None,
    tick_step: float | None,
    size: float | None,
) -> None:
    """Render one gauge and report its derived values and layers."""
    from designdemos.services.gauge import GaugeService

    app.load_plugins()
    svc = GaugeService(app.settings)
    app.emit(
        svc.render(
            style,
            values or None,
            lower=lower,
            upper=upper,
            tick_step=tick_step,
            size=size,
        )
    )


@gauge.command(
    examples="""\
  designdemos gauge sweep
  designdemos gauge sweep --style uber --steps 4
  designdemos gauge sweep --steps 20 --increment 1""",
)
@click.option("--style", default=None, help="Gauge style (see 'gauge styles').")
@click.option("--steps", type=int, default=None, help="Number of scrub intervals.")
@click.option("--increment", type=float, default=None, help="Snap values to this step.")
@click.option("--min", "lower", type=float, default=None, help="Range lower bound.")
@click.option("--max", "upper", type=float, default=None, help="Range upper bound.")
@click.pass_obj
def sweep(
    app: AppContext,
    style: str | None,
    steps: int | None,
    increment: float | None,
    lower: float | None,
    upper: float | None,
) -> None:
    """Scrub the first value across the range, re-rendering on each change."""
    from designdemos.services.gauge import GaugeService

    app.load_plugins()
    svc = GaugeService(app.settings)
    app.emit(svc.sweep(style, steps=steps, increment=increment, lower=lower, upper=upper))


@gauge.command(
    examples="""\
  designdemos gauge styles
  designdemos -q gauge styles""",
)
@click.pass_obj
def styles(app: AppContext) -> None:
    """List registered gauge styles."""
    from designdemos.services.gauge import GaugeService

    plugins = app.load_plugins()
    app.emit(GaugeService(app.settings).styles(plugins.styles))

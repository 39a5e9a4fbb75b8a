"""Built-in clock-face gauge style.

Loaded through the ``designdemos.plugins`` entry point like any external
plugin, so it exercises the same registration path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from designdemos.domain.color import BLACK, GRAY, WHITE
from designdemos.domain.components import (
    background,
    line_needle,
    outline,
    radial_needles,
    radial_ticks,
    stack,
    tick_line,
)
from designdemos.plugins.hookspecs import hookimpl

if TYPE_CHECKING:
    from designdemos.domain.drawing import DrawCommand, GaugeGeometry, Layer
    from designdemos.domain.gauge import GaugeModel, Notch
    from designdemos.domain.gauges import GaugeBuilder

CLOCK_STYLE = "clock"


def clock_gauge(model: GaugeModel, geom: GaugeGeometry) -> list[Layer]:
    """Plain dial with long ticks at the ends of the range and thin hands."""
    last = len(model.ticks) - 1

    def tick(notch: Notch) -> list[DrawCommand]:
        major = notch.index in (0, last)
        return tick_line(geom, length=0.15 if major else 0.07, width=3.0 if major else 1.0)

    return stack(
        background(geom, WHITE),
        radial_ticks(geom, model, tick),
        outline(geom, GRAY, width=2.0),
        radial_needles(geom, model, line_needle(geom, length=0.85, width=1.5, color=BLACK)),
    )


class ClockGaugePlugin:
    """Contributes the ``clock`` gauge style."""

    @hookimpl
    def register_gauge_styles(self) -> dict[str, GaugeBuilder]:
        return {CLOCK_STYLE: clock_gauge}

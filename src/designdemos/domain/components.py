"""Composable gauge parts.

Each part takes only the geometry and model slice it needs and returns a
``Layer``.  Parts never know about each other; callers decide the order by
passing layers to ``stack``.  New capabilities are new parts, not new
parameters on an existing one.

Parts that place caller content accept a callback:

* ``Indicator(model, width)`` draws around ``(0, 0)``; the part moves it
  into place.
* ``NeedleMark(index)`` draws in frame coordinates pointing at 12 o'clock;
  the part rotates it to the needle angle.
* ``TickMark(notch)`` draws in frame coordinates at 12 o'clock; the part
  rotates it to the notch angle.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from designdemos.domain.color import BLACK, RED, Color
from designdemos.domain.drawing import (
    Circle,
    DrawCommand,
    GaugeGeometry,
    Group,
    Label,
    Layer,
    Line,
    Point,
)
from designdemos.domain.gauge import GaugeModel, Notch

Indicator = Callable[[GaugeModel, float], list[DrawCommand]]
NeedleMark = Callable[[int], list[DrawCommand]]
TickMark = Callable[[Notch], list[DrawCommand]]

INDICATOR_OFFSET = 0.4
INDICATOR_WIDTH = 0.5


# ── Backgrounds ──────────────────────────────────────────────────────


def background(geom: GaugeGeometry, color: Color) -> Layer:
    """Filled dial face."""
    return Layer(
        name="background",
        commands=[Circle(center=geom.center, radius=geom.radius, fill=color)],
    )


def outline(geom: GaugeGeometry, color: Color = BLACK, width: float = 1.0) -> Layer:
    """Unfilled rim stroke."""
    return Layer(
        name="outline",
        commands=[Circle(center=geom.center, radius=geom.radius, stroke=color, line_width=width)],
    )


# ── Indicators ───────────────────────────────────────────────────────


def default_indicator(label: str, width: float) -> list[DrawCommand]:
    """A single centred label sized to *width*."""
    return [Label(position=Point(x=0.0, y=0.0), text=label, size=width * 0.4)]


def value_indicator(model: GaugeModel, width: float) -> list[DrawCommand]:
    return default_indicator(f"{model.value(0):g}", width)


def radial_indicators(
    geom: GaugeGeometry,
    model: GaugeModel,
    indicator: Indicator = value_indicator,
) -> Layer:
    """Place the indicator content below the dial centre."""
    width = geom.size * INDICATOR_WIDTH
    content = indicator(model, width)
    group = Group(offset=geom.center.offset(dy=geom.radius * INDICATOR_OFFSET), children=content)
    return Layer(name="indicators", commands=[group])


# ── Needles ──────────────────────────────────────────────────────────


def line_needle(
    geom: GaugeGeometry,
    *,
    length: float = 0.75,
    width: float = 4.0,
    color: Color = RED,
) -> NeedleMark:
    """Needle callback drawing a straight line from the centre."""

    def draw(_index: int) -> list[DrawCommand]:
        return [
            Line(
                start=geom.center,
                end=geom.point_at(0.0, length),
                color=color,
                width=width,
            )
        ]

    return draw


def radial_needles(
    geom: GaugeGeometry,
    model: GaugeModel,
    needle: NeedleMark | None = None,
    *,
    clockwise: bool = True,
) -> Layer:
    """Rotate whatever *needle* draws to each value's needle angle."""
    draw = needle or line_needle(geom)
    direction = 1.0 if clockwise else -1.0
    commands: list[DrawCommand] = [
        Group(
            rotation=direction * model.needle_angle_degrees(i),
            origin=geom.center,
            children=draw(i),
        )
        for i in range(len(model))
    ]
    return Layer(name="needles", commands=commands)


# ── Ticks ────────────────────────────────────────────────────────────


def tick_line(
    geom: GaugeGeometry,
    *,
    length: float = 0.1,
    width: float = 2.0,
    color: Color = BLACK,
) -> list[DrawCommand]:
    """Radial stroke at 12 o'clock, *length* of the radius long."""
    return [
        Line(
            start=geom.point_at(0.0, 1.0),
            end=geom.point_at(0.0, 1.0 - length),
            color=color,
            width=width,
        )
    ]


def tick_text(geom: GaugeGeometry, text: str, length: float = 0.25) -> list[DrawCommand]:
    """Text centred in the outer *length* band of the dial at 12 o'clock."""
    return [
        Label(
            position=geom.point_at(0.0, 1.0 - length / 2),
            text=text,
            size=geom.radius * length * 0.8,
        )
    ]


def radial_ticks(
    geom: GaugeGeometry,
    model: GaugeModel,
    tick: TickMark | None = None,
    notches: Sequence[Notch] | None = None,
) -> Layer:
    """Draw *tick* once per notch, rotated to the notch angle."""

    def default_tick(_notch: Notch) -> list[DrawCommand]:
        return tick_line(geom)

    draw = tick or default_tick
    commands: list[DrawCommand] = [
        Group(rotation=notch.angle, origin=geom.center, children=draw(notch))
        for notch in (notches if notches is not None else model.ticks)
    ]
    return Layer(name="ticks", commands=commands)


# ── Stationary hands ─────────────────────────────────────────────────


def seconds_hand(
    geom: GaugeGeometry,
    radius: float = 0.7,
    color: Color = BLACK,
    *,
    angle: float = 0.0,
) -> Layer:
    """Thin clock hand with a short tail and a hub."""
    return Layer(
        name="seconds_hand",
        commands=[
            Line(
                start=geom.point_at(angle + 180.0, radius * 0.2),
                end=geom.point_at(angle, radius),
                color=color,
                width=1.5,
            ),
            Circle(center=geom.center, radius=geom.radius * 0.04, fill=color),
        ],
    )


# ── Composition ──────────────────────────────────────────────────────


def stack(*layers: Layer) -> list[Layer]:
    """Layers bottom to top, exactly as given."""
    return list(layers)

"""Finished gauges, and the registry that names them.

``simple_gauge`` and ``uber_gauge`` draw everything themselves: the first
has fixed constants, the second turns each constant into a parameter, so
every new visual feature widens its signature.

``standard_gauge`` and ``inside_out_gauge`` are assembled from the parts in
:mod:`designdemos.domain.components` and take nothing but the model and the
frame.  Further styles are added by registering another builder.
"""

from __future__ import annotations

from collections.abc import Callable

from designdemos.domain.color import BLACK, BLUE, RED, WHITE, Color
from designdemos.domain.components import (
    background,
    default_indicator,
    line_needle,
    outline,
    radial_indicators,
    radial_needles,
    radial_ticks,
    seconds_hand,
    stack,
    tick_line,
    tick_text,
)
from designdemos.domain.drawing import (
    Circle,
    DrawCommand,
    GaugeGeometry,
    Group,
    Layer,
    Line,
    Point,
)
from designdemos.domain.emotion import color_for_mood, face
from designdemos.domain.gauge import FACE_SCALE, FULL_TURN_DEGREES, GaugeModel, Notch
from designdemos.domain.types import GaugeStyle

GaugeBuilder = Callable[[GaugeModel, GaugeGeometry], list[Layer]]


# ── Monolithic renderers ─────────────────────────────────────────────


def simple_gauge(value: float) -> list[Layer]:
    """A red needle on a blue 200-unit dial."""
    center = Point(x=100.0, y=100.0)
    needle = Line(start=center, end=center.offset(dy=-75.0), color=RED, width=4.0)
    return [
        Layer(name="background", commands=[Circle(center=center, radius=100.0, fill=BLUE)]),
        Layer(
            name="needle",
            commands=[Group(rotation=FULL_TURN_DEGREES * value, origin=center, children=[needle])],
        ),
    ]


def uber_gauge(
    value: float,
    background_size: float = 200.0,
    background_color: Color = BLUE,
    needle_width: float = 4.0,
    needle_length: float = 75.0,
    needle_color: Color = RED,
) -> list[Layer]:
    """``simple_gauge`` with every constant promoted to a parameter."""
    radius = background_size / 2
    center = Point(x=radius, y=radius)
    needle = Line(
        start=center,
        end=center.offset(dy=-needle_length),
        color=needle_color,
        width=needle_width,
    )
    return [
        Layer(
            name="background",
            commands=[Circle(center=center, radius=radius, fill=background_color)],
        ),
        Layer(
            name="needle",
            commands=[Group(rotation=FULL_TURN_DEGREES * value, origin=center, children=[needle])],
        ),
    ]


# ── Composed gauges ──────────────────────────────────────────────────


def standard_gauge(model: GaugeModel, geom: GaugeGeometry) -> list[Layer]:
    """White dial, labelled ticks, red needle, value readout."""

    def tick(notch: Notch) -> list[DrawCommand]:
        return [*tick_line(geom), *tick_text(geom, f"{notch.value:g}", length=0.3)]

    return stack(
        background(geom, WHITE),
        radial_ticks(geom, model, tick),
        radial_needles(geom, model, line_needle(geom)),
        radial_indicators(geom, model),
        outline(geom),
    )


def inside_out_gauge(model: GaugeModel, geom: GaugeGeometry) -> list[Layer]:
    """The dial turns under a stationary hand.

    The face ring rotates counter-clockwise by the needle angle so the
    current mood glyph arrives under the fixed hand at 12 o'clock.
    """

    def indicator(m: GaugeModel, width: float) -> list[DrawCommand]:
        return [
            *default_indicator("Inside Out", width / 2),
            *default_indicator(m.mood_face(0), width),
        ]

    def face_ring(_index: int) -> list[DrawCommand]:
        ring = radial_ticks(
            geom,
            model,
            lambda notch: tick_text(geom, face(notch.normalized * FACE_SCALE), length=0.25),
        )
        return ring.commands

    return stack(
        background(geom, color_for_mood(model.normalized(0))),
        radial_indicators(geom, model, indicator),
        outline(geom),
        radial_needles(geom, model, face_ring, clockwise=False),
        seconds_hand(geom, radius=0.70, color=BLACK),
    )


def _simple_builder(model: GaugeModel, geom: GaugeGeometry) -> list[Layer]:
    return simple_gauge(model.normalized(0))


def _uber_builder(model: GaugeModel, geom: GaugeGeometry) -> list[Layer]:
    return uber_gauge(model.normalized(0), background_size=geom.size)


# ── Registry ─────────────────────────────────────────────────────────


def _builtin_builders() -> dict[str, GaugeBuilder]:
    return {
        GaugeStyle.SIMPLE: _simple_builder,
        GaugeStyle.UBER: _uber_builder,
        GaugeStyle.STANDARD: standard_gauge,
        GaugeStyle.INSIDE_OUT: inside_out_gauge,
    }


GAUGE_REGISTRY: dict[str, GaugeBuilder] = {}


def get_gauge_builder(style: str) -> GaugeBuilder:
    """Look up the builder for *style*.

    Raises:
        KeyError: If no builder is registered under that name.
    """
    if style in GAUGE_REGISTRY:
        return GAUGE_REGISTRY[style]
    msg = f"No gauge style registered as {style!r}"
    raise KeyError(msg)


def register_gauge_style(name: str, builder: GaugeBuilder) -> None:
    """Register an additional gauge style.

    Built-in names are reserved and cannot be overridden.
    """
    normalized_name = name.strip()
    if not normalized_name:
        msg = "Gauge style name must not be empty"
        raise ValueError(msg)

    if not callable(builder):
        msg = f"Gauge style {normalized_name!r} must be callable"
        raise TypeError(msg)

    if normalized_name in _builtin_builders():
        msg = f"Gauge style {normalized_name!r} conflicts with a built-in style"
        raise ValueError(msg)

    existing = GAUGE_REGISTRY.get(normalized_name)
    if existing is not None and existing is not builder:
        msg = f"Gauge style {normalized_name!r} is already registered"
        raise ValueError(msg)

    GAUGE_REGISTRY[normalized_name] = builder


def builtin_gauge_styles() -> list[str]:
    """Names reserved for the built-in styles, in declaration order."""
    return [str(s) for s in _builtin_builders()]


def list_gauge_styles() -> list[str]:
    """Built-in styles first, then plugin styles sorted by name."""
    builtins = builtin_gauge_styles()
    extras = sorted(name for name in GAUGE_REGISTRY if name not in builtins)
    return builtins + extras


def _init_registry() -> None:
    GAUGE_REGISTRY.update({str(k): v for k, v in _builtin_builders().items()})


_init_registry()

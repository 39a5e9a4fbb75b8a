"""GaugeService — build gauge models, render them, and drive the scrubber."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog
from pydantic import ValidationError

from designdemos.domain.color import parse_color
from designdemos.domain.drawing import GaugeGeometry, Layer, count_commands
from designdemos.domain.emotion import Emotion, color_for_mood
from designdemos.domain.gauge import FACE_SCALE, GaugeModel, GaugeRange
from designdemos.domain.gauges import (
    builtin_gauge_styles,
    get_gauge_builder,
    list_gauge_styles,
    uber_gauge,
)
from designdemos.domain.scrubber import Scrubber, sweep_positions
from designdemos.domain.types import GaugeStyle
from designdemos.services.base import BaseService
from designdemos.services.contracts import (
    EmotionScaleData,
    GaugeRenderData,
    GaugeStylesData,
    GaugeSweepData,
    dump_validated,
)
from designdemos.services.result import ErrorCode, ServiceResult
from designdemos.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)

_MONOLITHIC = {GaugeStyle.SIMPLE, GaugeStyle.UBER}


def _validation_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    return str(first.get("msg", exc))


class GaugeService(BaseService):
    """Gauge rendering over the configured defaults."""

    # ------------------------------------------------------------------
    # Model construction
    # ------------------------------------------------------------------

    def build_model(
        self,
        values: Sequence[float] | None = None,
        *,
        lower: float | None = None,
        upper: float | None = None,
        tick_step: float | None = None,
    ) -> GaugeModel:
        """Model from explicit arguments, falling back to ``[gauge]`` settings.

        Without *values* the single reading starts at the resolved lower bound.

        Raises:
            pydantic.ValidationError: For empty values or an inverted range.
        """
        cfg = self._settings.gauge
        rng = GaugeRange(
            lower=cfg.range_min if lower is None else lower,
            upper=cfg.range_max if upper is None else upper,
        )
        return GaugeModel(
            values=tuple(values) if values else (rng.lower,),
            range=rng,
            tick_step=cfg.tick_step if tick_step is None else tick_step,
        )

    def draw(self, style: str, model: GaugeModel, geom: GaugeGeometry) -> list[Layer]:
        """Layers for *style*; the Über gauge takes its parameters from ``[uber]``.

        Raises:
            KeyError: If *style* is not registered.
        """
        if style == GaugeStyle.UBER:
            cfg = self._settings.uber
            return uber_gauge(
                model.normalized(0),
                background_size=cfg.background_size,
                background_color=parse_color(cfg.background_color),
                needle_width=cfg.needle_width,
                needle_length=cfg.needle_length,
                needle_color=parse_color(cfg.needle_color),
            )
        return get_gauge_builder(style)(model, geom)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @traced
    def render(
        self,
        style: str | None = None,
        values: Sequence[float] | None = None,
        *,
        lower: float | None = None,
        upper: float | None = None,
        tick_step: float | None = None,
        size: float | None = None,
    ) -> ServiceResult:
        """Derived values and the full layer stack for one model."""
        op = "gauge_render"
        style = style or self._settings.gauge.style
        try:
            model = self.build_model(values, lower=lower, upper=upper, tick_step=tick_step)
            geom = GaugeGeometry(size=self._settings.gauge.size if size is None else size)
        except ValidationError as exc:
            return self._fail(op, ErrorCode.INVALID_MODEL, _validation_message(exc))

        try:
            with trace_span("draw") as span:
                layers = self.draw(style, model, geom)
                if span is not None:
                    span.annotate("layers", len(layers))
        except KeyError:
            return self._fail(
                op,
                ErrorCode.UNKNOWN_STYLE,
                f"No gauge style named {style!r}",
                available=list_gauge_styles(),
            )

        warnings: list[str] = []
        if style in _MONOLITHIC and len(model) > 1:
            warnings.append(f"{style} gauge draws values[0] only; {len(model) - 1} ignored")

        log.debug("gauge.render", style=style, values=len(model), layers=len(layers))
        data = dump_validated(
            GaugeRenderData,
            {
                "style": style,
                "size": geom.size,
                "range": {"lower": model.range.lower, "upper": model.range.upper},
                "tick_values": list(model.tick_values),
                "readings": [{"index": i, **model.derived(i)} for i in range(len(model))],
                "command_counts": count_commands(layers),
                "layer_counts": [
                    {"name": layer.name, "counts": count_commands([layer])} for layer in layers
                ],
                "layers": [layer.model_dump(mode="json") for layer in layers],
            },
        )
        return self._ok(op, data, warnings=warnings)

    @traced
    def sweep(
        self,
        style: str | None = None,
        *,
        steps: int | None = None,
        increment: float | None = None,
        lower: float | None = None,
        upper: float | None = None,
    ) -> ServiceResult:
        """Drive the scrubber across the range, re-rendering on every change."""
        op = "gauge_sweep"
        style = style or self._settings.gauge.style
        if steps is None:
            steps = self._settings.gauge.sweep_steps
        try:
            model = self.build_model(lower=lower, upper=upper)
            geom = GaugeGeometry(size=self._settings.gauge.size)
            get_gauge_builder(style)
        except ValidationError as exc:
            return self._fail(op, ErrorCode.INVALID_MODEL, _validation_message(exc))
        except KeyError:
            return self._fail(
                op,
                ErrorCode.UNKNOWN_STYLE,
                f"No gauge style named {style!r}",
                available=list_gauge_styles(),
            )

        renders: list[list[Layer]] = []
        current = model

        def on_change(value: float) -> None:
            nonlocal current
            current = current.with_value(0, value)
            renders.append(self.draw(style, current, geom))

        try:
            scrubber = Scrubber(model.range, on_change, value=model.value(0), increment=increment)
            positions = list(sweep_positions(model.range.lower, model.range.upper, steps))
        except ValueError as exc:
            return self._fail(op, ErrorCode.INVALID_INPUT, str(exc))
        if scrubber.value != current.value(0):
            current = current.with_value(0, scrubber.value)

        items: list[dict[str, object]] = []
        with trace_span("scrub"):
            for step, requested in enumerate(positions):
                emitted = scrubber.scrub(requested)
                items.append({"step": step, "requested": requested, "emitted": emitted})
                items[-1].update(current.derived(0))

        data = dump_validated(
            GaugeSweepData,
            {
                "style": style,
                "steps": len(positions),
                "emitted": sum(1 for item in items if item["emitted"]),
                "renders": len(renders),
                "items": items,
            },
        )
        return self._ok(op, data)

    @traced
    def styles(self, sources: Mapping[str, str] | None = None) -> ServiceResult:
        """Every registered gauge style.

        *sources* maps plugin styles to the plugin that added them.
        """
        builtins = set(builtin_gauge_styles())
        sources = sources or {}
        items = [
            {
                "name": name,
                "builtin": name in builtins,
                "plugin": sources.get(name),
                "composed": name not in _MONOLITHIC,
            }
            for name in list_gauge_styles()
        ]
        data = dump_validated(GaugeStylesData, {"count": len(items), "items": items})
        return self._ok("gauge_styles", data)

    @traced
    def emotions(self) -> ServiceResult:
        """The emotion scale with the reading each glyph starts at."""
        items = []
        for index, emotion in enumerate(Emotion):
            reading = index / FACE_SCALE
            items.append(
                {
                    "index": index,
                    "name": emotion.name.lower(),
                    "glyph": emotion.value,
                    "reading": reading,
                    "color": color_for_mood(reading).to_hex(),
                }
            )
        data = dump_validated(EmotionScaleData, {"count": len(items), "items": items})
        return self._ok("emotion_scale", data)

"""Typed payload contracts for service results.

Each operation validates its payload against one of these models before
returning, so renamed or missing keys fail in tests rather than in the
renderers.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


# ── Dispatch ─────────────────────────────────────────────────────────


class RuntimeCase(BaseModel):
    """One ``(cat, owner)`` outcome under the runtime rule."""

    cat: str
    owner: str
    result: Literal["purr", "hiss", "hisspu"]
    purred: bool
    line: str


class PurrRuntimeData(BaseModel):
    """Payload contract for ``DispatchService.runtime``."""

    strategy: Literal["runtime"]
    caption: str
    count: int
    failures: int
    cases: list[RuntimeCase]


class PurrCompileTimeData(BaseModel):
    """Payload contract for ``DispatchService.compile_time``."""

    strategy: Literal["compile-time"]
    caption: str
    cat: str
    owner: str
    result: Literal["purr"]
    line: str


class PairItem(BaseModel):
    cat: str
    owner: str


class RejectedPair(PairItem):
    reason: str


class PairingsData(BaseModel):
    """Payload contract for ``DispatchService.pairs``."""

    count: int
    items: list[PairItem]
    rejected: list[RejectedPair]


# ── Gauge ────────────────────────────────────────────────────────────


class GaugeReading(BaseModel):
    """Derived values for one model entry."""

    index: int
    value: float
    normalized: float = Field(ge=0.0, le=1.0)
    needle_angle: float = Field(ge=0.0, le=360.0)
    mood_color: str
    mood_face: str


class RangeData(BaseModel):
    lower: float
    upper: float


class LayerCounts(BaseModel):
    """Draw commands per kind within one layer, groups included."""

    name: str
    counts: dict[str, int]


class GaugeRenderData(BaseModel):
    """Payload contract for ``GaugeService.render``."""

    model_config = ConfigDict(extra="forbid")

    style: str
    size: float
    range: RangeData
    tick_values: list[float]
    readings: list[GaugeReading]
    command_counts: dict[str, int]
    layer_counts: list[LayerCounts]
    layers: list[dict[str, Any]]


class SweepStep(BaseModel):
    """One scrubber input and what it produced."""

    step: int
    requested: float
    emitted: bool
    value: float
    normalized: float
    needle_angle: float
    mood_color: str
    mood_face: str


class GaugeSweepData(BaseModel):
    """Payload contract for ``GaugeService.sweep``."""

    style: str
    steps: int
    emitted: int
    renders: int
    items: list[SweepStep]


class StyleItem(BaseModel):
    name: str
    builtin: bool
    plugin: str | None = None
    composed: bool


class GaugeStylesData(BaseModel):
    """Payload contract for ``GaugeService.styles``."""

    count: int
    items: list[StyleItem]


class EmotionItem(BaseModel):
    index: int
    name: str
    glyph: str
    reading: float
    color: str


class EmotionScaleData(BaseModel):
    """Payload contract for ``GaugeService.emotions``."""

    count: int
    items: list[EmotionItem]

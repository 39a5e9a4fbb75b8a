"""Gauge model — raw values over a shared range, plus derived geometry.

Every derived value (normalized reading, needle angle, mood color, mood
face, tick marks) is a pure function of the model.  Models are frozen;
``with_value`` returns a new model with the same number of values.
"""

from __future__ import annotations

import math
from typing import Self

from pydantic import BaseModel, Field, model_validator

from designdemos.domain.color import Color
from designdemos.domain.emotion import color_for_mood, face

FULL_TURN_DEGREES = 360.0
FACE_SCALE = 10.0

# Shared by gauges built with ``GaugeModel.standard``.
STANDARD_LOWER = 0.0
STANDARD_UPPER = 10.0
STANDARD_TICK_STEP = 1.0

# Upper bound on tick intervals per dial; every tick becomes several draw commands.
MAX_TICKS = 1000


def _clean(value: float) -> float:
    """Drop float noise from stepped arithmetic (e.g. 0.30000000000000004)."""
    return round(value, 10)


class GaugeRange(BaseModel):
    """Closed interval ``[lower, upper]`` with ``lower < upper``."""

    model_config = {"frozen": True, "allow_inf_nan": False}

    lower: float = STANDARD_LOWER
    upper: float = STANDARD_UPPER

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if not self.lower < self.upper:
            msg = f"Range lower bound {self.lower} must be below upper bound {self.upper}"
            raise ValueError(msg)
        return self

    @property
    def span(self) -> float:
        return self.upper - self.lower

    def clamp(self, value: float) -> float:
        return min(max(value, self.lower), self.upper)

    def normalize(self, value: float) -> float:
        """Rescale *value* into ``[0, 1]``, clamping values outside the range."""
        return min(max((value - self.lower) / self.span, 0.0), 1.0)


class Notch(BaseModel):
    """One tick mark on the dial."""

    model_config = {"frozen": True}

    index: int
    value: float
    normalized: float
    angle: float


class GaugeModel(BaseModel):
    """Raw readings sharing one range.

    Attributes:
        values: One or more raw readings; the count is fixed.
        range: Interval applied uniformly to every value.
        tick_step: Distance between consecutive tick values.
    """

    model_config = {"frozen": True, "allow_inf_nan": False}

    values: tuple[float, ...] = Field(min_length=1)
    range: GaugeRange = Field(default_factory=GaugeRange)
    tick_step: float = Field(default=STANDARD_TICK_STEP, gt=0.0)

    @model_validator(mode="after")
    def _check_tick_count(self) -> Self:
        if not self.range.span / self.tick_step <= MAX_TICKS:
            msg = (
                f"Tick step {self.tick_step} over range [{self.range.lower}, {self.range.upper}] "
                f"would need more than {MAX_TICKS} tick intervals"
            )
            raise ValueError(msg)
        return self

    @classmethod
    def standard(cls, *values: float) -> GaugeModel:
        """A 0-10 gauge with one tick per unit (defaults to a single 0.0 value)."""
        return cls(values=values or (0.0,))

    def __len__(self) -> int:
        return len(self.values)

    def value(self, index: int = 0) -> float:
        return self.values[index]

    def normalized(self, index: int = 0) -> float:
        return self.range.normalize(self.values[index])

    def needle_angle_degrees(self, index: int = 0) -> float:
        return FULL_TURN_DEGREES * self.normalized(index)

    def mood_color(self, index: int = 0) -> Color:
        return color_for_mood(self.normalized(index))

    def mood_face(self, index: int = 0) -> str:
        return face(self.normalized(index) * FACE_SCALE)

    @property
    def tick_values(self) -> tuple[float, ...]:
        """Tick values from ``lower`` to ``upper`` (inclusive) every ``tick_step``."""
        count = math.floor(self.range.span / self.tick_step + 1e-9)
        return tuple(_clean(self.range.lower + k * self.tick_step) for k in range(count + 1))

    @property
    def ticks(self) -> tuple[Notch, ...]:
        notches: list[Notch] = []
        for i, value in enumerate(self.tick_values):
            norm = self.range.normalize(value)
            notches.append(
                Notch(index=i, value=value, normalized=norm, angle=FULL_TURN_DEGREES * norm)
            )
        return tuple(notches)

    def with_value(self, index: int, value: float) -> GaugeModel:
        """Return a copy with ``values[index]`` replaced."""
        values = list(self.values)
        values[index] = value
        return type(self)(values=tuple(values), range=self.range, tick_step=self.tick_step)

    def derived(self, index: int = 0) -> dict[str, object]:
        """Snapshot of every derived value for *index*."""
        return {
            "value": self.values[index],
            "normalized": self.normalized(index),
            "needle_angle": self.needle_angle_degrees(index),
            "mood_color": self.mood_color(index).to_hex(),
            "mood_face": self.mood_face(index),
        }

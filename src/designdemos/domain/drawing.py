"""Draw commands and gauge geometry.

A rendered gauge is an ordered list of ``Layer`` objects, each holding
draw commands in frame coordinates (origin top-left, y down).  ``Group``
translates its children by ``offset`` and then rotates them by ``rotation``
degrees clockwise about ``origin``.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from designdemos.domain.color import Color


class Point(BaseModel):
    model_config = {"frozen": True}

    x: float
    y: float

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> Point:
        return Point(x=self.x + dx, y=self.y + dy)


ORIGIN = Point(x=0.0, y=0.0)


class Circle(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["circle"] = "circle"
    center: Point
    radius: float
    fill: Color | None = None
    stroke: Color | None = None
    line_width: float = 1.0


class Line(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["line"] = "line"
    start: Point
    end: Point
    color: Color
    width: float = 1.0


class Label(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["text"] = "text"
    position: Point
    text: str
    size: float = 12.0
    color: Color | None = None


class Group(BaseModel):
    """Transformed container for any other commands."""

    model_config = {"frozen": True}

    kind: Literal["group"] = "group"
    rotation: float = 0.0
    origin: Point = ORIGIN
    offset: Point = ORIGIN
    children: list[DrawCommand] = Field(default_factory=list)


DrawCommand = Annotated[Circle | Line | Label | Group, Field(discriminator="kind")]

Group.model_rebuild()


class Layer(BaseModel):
    """A named slice of the drawing, stacked in caller order."""

    model_config = {"frozen": True}

    name: str
    commands: list[DrawCommand] = Field(default_factory=list)


class GaugeGeometry(BaseModel):
    """Square frame the gauge is drawn into.

    Angles follow a clock face: 0 degrees points to 12 o'clock and positive
    angles turn clockwise.
    """

    model_config = {"frozen": True}

    size: float = Field(default=200.0, gt=0.0)

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def center(self) -> Point:
        return Point(x=self.radius, y=self.radius)

    def point_at(self, angle: float, fraction: float = 1.0) -> Point:
        """Point at *fraction* of the radius along the clock-face *angle*."""
        theta = math.radians(angle)
        distance = self.radius * fraction
        return Point(
            x=self.center.x + distance * math.sin(theta),
            y=self.center.y - distance * math.cos(theta),
        )


def walk(commands: list[DrawCommand]) -> Iterator[DrawCommand]:
    """Yield every command depth-first, groups before their children."""
    for command in commands:
        yield command
        if isinstance(command, Group):
            yield from walk(command.children)


def count_commands(layers: list[Layer]) -> dict[str, int]:
    """Count commands by kind across every layer."""
    counts: dict[str, int] = {}
    for layer in layers:
        for command in walk(layer.commands):
            counts[command.kind] = counts.get(command.kind, 0) + 1
    return counts

"""RGB color values with per-channel linear interpolation."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Color(BaseModel):
    """An RGB color with opacity; every component lies in ``[0, 1]``."""

    model_config = {"frozen": True}

    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)

    @property
    def components(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.opacity)

    def lerp(self, other: Color, t: float) -> Color:
        """Blend toward *other*; ``t`` is clamped to ``[0, 1]``."""
        t = min(max(t, 0.0), 1.0)
        return Color(
            red=self.red + t * (other.red - self.red),
            green=self.green + t * (other.green - self.green),
            blue=self.blue + t * (other.blue - self.blue),
            opacity=self.opacity + t * (other.opacity - self.opacity),
        )

    def to_hex(self) -> str:
        """``#rrggbb`` form (opacity dropped)."""
        r, g, b = (round(c * 255) for c in (self.red, self.green, self.blue))
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` or ``rrggbb``."""
        raw = value.strip().removeprefix("#")
        if len(raw) != 6:
            msg = f"Expected a 6-digit hex color, got {value!r}"
            raise ValueError(msg)
        try:
            r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
        except ValueError as exc:
            msg = f"Invalid hex color {value!r}"
            raise ValueError(msg) from exc
        return cls(red=r / 255, green=g / 255, blue=b / 255)


BLACK = Color(red=0.0, green=0.0, blue=0.0)
WHITE = Color(red=1.0, green=1.0, blue=1.0)
RED = Color(red=1.0, green=0.0, blue=0.0)
YELLOW = Color(red=1.0, green=1.0, blue=0.0)
BLUE = Color(red=0.0, green=0.0, blue=1.0)
GRAY = Color(red=0.5, green=0.5, blue=0.5)
CLEAR = Color(red=0.0, green=0.0, blue=0.0, opacity=0.0)

NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "yellow": YELLOW,
    "blue": BLUE,
    "gray": GRAY,
    "clear": CLEAR,
}


def parse_color(value: str | Color) -> Color:
    """Resolve a color name or hex string."""
    if isinstance(value, Color):
        return value
    named = NAMED_COLORS.get(value.strip().lower())
    if named is not None:
        return named
    return Color.from_hex(value)

"""The emotion scale: eleven glyphs from ecstatic to enraged."""

from __future__ import annotations

import math
from enum import StrEnum

from designdemos.domain.color import RED, YELLOW, Color

MOOD_START = YELLOW
MOOD_END = RED


class Emotion(StrEnum):
    """Ordered mood levels; the value is the glyph.

    ``NEUTRAL`` sits at index 5, the midpoint of a 0-10 reading.
    """

    ECSTATIC = "😄"
    JOY = "☺️"
    HAPPY = "😊"
    CONTENT = "🙂"
    UNCERTAIN = "😕"
    NEUTRAL = "😐"
    ANNOYED = "🙁"
    FRUSTRATED = "😠"
    ANGRY = "😡"
    FURIOUS = "🤬"
    ENRAGED = "🔥"


_SCALE: tuple[Emotion, ...] = tuple(Emotion)


def emotion_at(value: float) -> Emotion:
    """Truncate *value* to an index into the scale, clamped to its ends."""
    if math.isnan(value):
        return _SCALE[0]
    clamped = min(max(value, 0.0), float(len(_SCALE) - 1))
    return _SCALE[math.floor(clamped)]


def face(value: float) -> str:
    """Glyph for a reading on the 0-10 scale (truncation, not rounding)."""
    return emotion_at(value).value


def color_for_mood(value: float) -> Color:
    """Yellow at 0, red at 1, linear per channel in between."""
    return MOOD_START.lerp(MOOD_END, value)

"""Variant and result enums shared by the dispatch and gauge demonstrations."""

from __future__ import annotations

from enum import StrEnum


class CatVariant(StrEnum):
    """The two cats of the dispatch demonstration."""

    SPOILED_INDOOR = "spoiled"
    FERAL = "feral"


class OwnerVariant(StrEnum):
    """Candidate purring partners."""

    HUMAN = "human"
    NO_OWNER = "none"


class DispatchResult(StrEnum):
    """Every string the runtime rule can produce.

    ``HISSPU`` is the copy-paste defect carried by the shared default.
    """

    PURR = "purr"
    HISS = "hiss"
    HISSPU = "hisspu"


class Strategy(StrEnum):
    """How the purr decision is made."""

    RUNTIME = "runtime"
    COMPILE_TIME = "compile-time"


class GaugeStyle(StrEnum):
    """Built-in gauge renderers."""

    SIMPLE = "simple"
    UBER = "uber"
    STANDARD = "standard"
    INSIDE_OUT = "inside-out"

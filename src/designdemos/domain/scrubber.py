"""Range-constrained scalar input.

A ``Scrubber`` holds one value inside a ``GaugeRange``.  Every accepted
change is clamped (and optionally snapped to an increment) and reported
through exactly one ``on_change`` call.  Inputs that leave the value
unchanged emit nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from designdemos.domain.gauge import GaugeRange


class Scrubber:
    """Slider-like control over a fixed numeric range."""

    def __init__(
        self,
        range: GaugeRange,  # noqa: A002
        on_change: Callable[[float], None],
        *,
        value: float | None = None,
        increment: float | None = None,
    ) -> None:
        if increment is not None and increment <= 0:
            msg = f"Increment must be positive, got {increment}"
            raise ValueError(msg)
        self.range = range
        self.increment = increment
        self._on_change = on_change
        self._value = self._constrain(range.lower if value is None else value)

    @property
    def value(self) -> float:
        return self._value

    def _constrain(self, value: float) -> float:
        if self.increment is not None:
            steps = round((value - self.range.lower) / self.increment)
            value = round(self.range.lower + steps * self.increment, 10)
        return self.range.clamp(value)

    def scrub(self, value: float) -> bool:
        """Move to *value*; return whether a change was emitted."""
        constrained = self._constrain(value)
        if constrained == self._value:
            return False
        self._value = constrained
        self._on_change(constrained)
        return True


def sweep_positions(lower: float, upper: float, steps: int) -> Iterator[float]:
    """``steps + 1`` evenly spaced positions from *lower* to *upper*."""
    if steps < 1:
        msg = f"Sweep needs at least one step, got {steps}"
        raise ValueError(msg)
    for k in range(steps + 1):
        yield lower + (upper - lower) * k / steps

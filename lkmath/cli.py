"""Console progress reporting."""

from __future__ import annotations

import math
import sys
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, TextIO

REPORT_INTERVAL = 10.0


def _format_float(value: float) -> str:
    """Shortest round-trip decimal text, without exponent or trailing zeros."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(float(value))).normalize(), "f")


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass
class ProgressBar:
    """A twenty-character text bar for a fraction between 0 and 1."""

    progress: float

    WIDTH = 20

    def __str__(self) -> str:
        p = self.progress
        if p >= 1.0:
            current = self.WIDTH
        elif p <= 0.0 or math.isnan(p):
            current = 0
        else:
            current = math.floor(self.WIDTH * p + 0.5)
        return "[" + "#" * current + " " * (self.WIDTH - current) + "]"


@dataclass
class Duration:
    """A number of seconds shown in the largest fitting unit."""

    seconds: float

    def __str__(self) -> str:
        s = self.seconds
        if not s > 60.0:
            return f"{_format_float(s)} seconds"
        s /= 60.0
        if not s > 60.0:
            return f"{_format_float(s)} minutes"
        s /= 60.0
        if not s > 24.0:
            return f"{_format_float(s)} hours"
        s /= 24.0
        if s > 365.0:
            return f"{_format_float(s / 365.242196)} years"
        if s > 50.0:
            return f"{_format_float(s / 30.4368496667)} months"
        if s > 14.0:
            return f"{_format_float(s / 7.0)} weeks"
        return f"{_format_float(s)} days"


class Progress:
    """Prints progress and an estimate of the remaining time every ten seconds."""

    def __init__(
        self,
        maximum: int,
        *,
        clock: Callable[[], float] = time.monotonic,
        out: TextIO | None = None,
    ) -> None:
        self.maximum = maximum
        self.calls = 0
        self._clock = clock
        self._out = out
        self._start_time = clock()
        self._last_print_time = clock()

    def progress(self, current: int) -> None:
        """Record one call at position ``current``; report if enough time has passed."""
        self.calls += 1
        if self._clock() - self._last_print_time < REPORT_INTERVAL:
            return
        self._last_print_time = self._clock()

        elapsed = self._clock() - self._start_time
        fraction = _divide(current, self.maximum)
        total = _divide(elapsed, fraction)
        time_left = total - elapsed

        print(
            f"{ProgressBar(fraction)} Calls since last print: {self.calls}"
            f"  Elapsed: {Duration(elapsed)}"
            f"  Progress: {_format_float(100.0 * fraction)}%"
            f"  ETA: {Duration(time_left)}",
            file=self._out if self._out is not None else sys.stdout,
        )
        self.calls = 0
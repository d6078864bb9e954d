"""Half-open intervals and the universal bounds of numeric types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .ord_float import OrdF32, OrdF64


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class Interval:
    """The half-open interval ``[start, end)``."""

    start: Any
    end: Any

    def __contains__(self, value: Any) -> bool:
        return self.start <= value < self.end

    def _ordered(self, other: Interval) -> tuple[Interval, Interval]:
        return (other, self) if self.start > other.start else (self, other)

    def intersection(self, other: Interval) -> Interval | None:
        """The common part, or None when the intervals share no point."""
        a, b = self._ordered(other)
        if a.end <= b.start:
            return None
        return Interval(b.start, min(a.end, b.end))

    def union(self, other: Interval) -> Interval | None:
        """The joined interval, or None when there is a gap between them."""
        a, b = self._ordered(other)
        if a.end < b.start:
            return None
        return Interval(a.start, max(a.end, b.end))

    def overlaps(self, other: Interval) -> bool:
        return self.end > other.start and self.start < other.end

    def touches(self, other: Interval) -> bool:
        return self.end >= other.start and self.start <= other.end

    def dominates(self, other: Interval) -> bool:
        """Tell whether this interval contains all of ``other``."""
        return self.start <= other.start and self.end >= other.end

    def dominates_or_is_dominated_by(self, other: Interval) -> bool:
        return _sign(other.start, self.start) * _sign(other.end, self.end) <= 0


@dataclass(frozen=True)
class UniversalBounds:
    """The most extreme values of a numeric type."""

    infinum: Any
    supremum: Any

    def interval(self) -> Interval:
        return Interval(self.infinum, self.supremum)

    def is_infinum(self, value: Any) -> bool:
        return value == self.infinum

    def is_supremum(self, value: Any) -> bool:
        return value == self.supremum


def _signed(bits: int) -> UniversalBounds:
    return UniversalBounds(-(2 ** (bits - 1)), 2 ** (bits - 1) - 1)


def _unsigned(bits: int) -> UniversalBounds:
    return UniversalBounds(0, 2**bits - 1)


I8_BOUNDS = _signed(8)
I16_BOUNDS = _signed(16)
I32_BOUNDS = _signed(32)
I64_BOUNDS = _signed(64)
I128_BOUNDS = _signed(128)
ISIZE_BOUNDS = _signed(64)
U8_BOUNDS = _unsigned(8)
U16_BOUNDS = _unsigned(16)
U32_BOUNDS = _unsigned(32)
U64_BOUNDS = _unsigned(64)
U128_BOUNDS = _unsigned(128)
USIZE_BOUNDS = _unsigned(64)
F32_BOUNDS = UniversalBounds(-math.inf, math.inf)
F64_BOUNDS = UniversalBounds(-math.inf, math.inf)
ORD_F32_BOUNDS = UniversalBounds(OrdF32.NEG_INFINITY, OrdF32.INFINITY)
ORD_F64_BOUNDS = UniversalBounds(OrdF64.NEG_INFINITY, OrdF64.INFINITY)
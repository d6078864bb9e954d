"""Sorted sets of disjoint half-open intervals."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Iterator

from .interval import Interval, UniversalBounds


@dataclass
class IntervalSet:
    """A sorted list of disjoint, non-touching half-open intervals.

    The bounds need only be totally ordered; floats can be wrapped in
    ``OrdF32`` or ``OrdF64``.
    """

    intervals: list[Interval] = field(default_factory=list)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def intersect(self, interval: Interval) -> None:
        """Keep only the parts of the set that lie inside ``interval``."""
        self.intervals = [
            part
            for part in (x.intersection(interval) for x in self.intervals)
            if part is not None
        ]

    def retain_intersecting(self, interval: Interval) -> None:
        """Remove all intervals that do not intersect with ``interval``."""
        self.intervals = [
            x for x in self.intervals if x.intersection(interval) is not None
        ]

    def union(self, interval: Interval) -> None:
        """Add ``interval`` to the set, merging it with what it touches."""
        if interval.start >= interval.end:
            return

        if not self.intervals:
            self.intervals.append(interval)
            return

        index0 = bisect_left(self.intervals, interval.start, key=lambda x: x.start)
        index1 = bisect_left(self.intervals, interval.end, key=lambda x: x.end)

        if index0 > index1:
            # Already covered by a single existing interval.
            return

        if index0 < index1:
            del self.intervals[index0:index1]

        index = index0

        if index > 0:
            merged = self.intervals[index - 1].union(interval)
            if merged is not None:
                if index < len(self.intervals):
                    all_three = self.intervals[index].union(merged)
                    if all_three is not None:
                        merged = all_three
                        del self.intervals[index]
                self.intervals[index - 1] = merged
                return

        if index < len(self.intervals):
            merged = self.intervals[index].union(interval)
            if merged is not None:
                self.intervals[index] = merged
                return

        self.intervals.insert(index, interval)

    def measure(self) -> Any:
        """The total length of all intervals."""
        return sum(x.end - x.start for x in self.intervals)

    def bounds(self) -> Interval | None:
        """The smallest interval covering the whole set, or None if it is empty."""
        if not self.intervals:
            return None
        return Interval(self.intervals[0].start, self.intervals[-1].end)

    def _gaps(self) -> list[Interval]:
        return [
            Interval(left.end, right.start)
            for left, right in zip(self.intervals, self.intervals[1:])
        ]

    def negation(self, universe: UniversalBounds) -> IntervalSet:
        """The complement of the set within the whole domain given by ``universe``.

        The complement of the empty set is the universal interval itself.
        """
        if not self.intervals:
            return IntervalSet([universe.interval()])

        negated: list[Interval] = []
        first = self.intervals[0]
        if not universe.is_infinum(first.start):
            negated.append(Interval(universe.infinum, first.start))
        negated.extend(self._gaps())
        last = self.intervals[-1]
        if not universe.is_supremum(last.end):
            negated.append(Interval(last.end, universe.supremum))
        return IntervalSet(negated)

    def negation_within_bounds(self) -> IntervalSet:
        """The complement of the set within its own bounds: the gaps between intervals."""
        return IntervalSet(self._gaps())

    def containing_interval(self, value: Any) -> Interval | None:
        """The interval that holds ``value``, or None."""
        index = bisect_left(self.intervals, value, key=lambda x: x.end)
        if index < len(self.intervals):
            candidate = self.intervals[index]
            if value in candidate:
                return candidate
        return None

    def contains(self, value: Any) -> bool:
        return self.containing_interval(value) is not None
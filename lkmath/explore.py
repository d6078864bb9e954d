"""Generic graph exploration driven by user callbacks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, Callable, Hashable

from .sketch import Bag, QueueBag


class ExploreSignal(Enum):
    """What the goal callback asks the exploration to do with a point."""

    REACHED_GOAL = auto()
    EXPLORE = auto()
    SKIP = auto()


class PointKeyValue(ABC):
    """A state split into a key and a value whose quality can be compared.

    States with the same key and a worse value can be dropped.
    """

    @abstractmethod
    def get_key(self) -> Hashable:
        """The part of the state that identifies it, e.g. a position."""

    @abstractmethod
    def get_value(self) -> Any:
        """The part of the state that measures its quality, e.g. health."""

    @staticmethod
    @abstractmethod
    def compare_values(key: Any, a: Any, b: Any) -> int | None:
        """Compare ``a`` with ``b`` for ``key``.

        Negative means ``a`` is worse and should not be explored, zero means
        equal, positive means better. None means the values are incomparable.
        """


def _sign(ordering: int | None) -> int | None:
    if ordering is None:
        return None
    return (ordering > 0) - (ordering < 0)


GoalFn = Callable[[Any, Any, Any], ExploreSignal]
FilterFn = Callable[[Any, Any, Any, Any], bool]


class Exploration:
    """Explores points reachable from a start point through their neighbours.

    Points must provide ``neighbours(context)``. The bag class decides the
    order: ``QueueBag`` gives breadth-first, ``StackBag`` depth-first search.
    """

    def __init__(self, context: Any, extra_data: Any = None) -> None:
        self.context = context
        self.extra_data = extra_data

    def explore(
        self,
        start: Any,
        goal: GoalFn,
        filter_neighbours: FilterFn,
        bag: type[Bag] = QueueBag,
    ) -> None:
        """Explore with ``goal(p, context, extra)`` and ``filter_neighbours(p, n, context, extra)``."""
        self.explore_advanced(
            start,
            None,
            lambda p, _data, context, extra: goal(p, context, extra),
            lambda p, n, _data, context, extra: filter_neighbours(p, n, context, extra),
            bag,
        )

    def explore_avoid_identical(
        self,
        start: Any,
        goal: GoalFn,
        filter_neighbours: FilterFn,
        bag: type[Bag] = QueueBag,
    ) -> None:
        """Like ``explore``, but every distinct point is handled at most once."""
        seen: set[Any] = set()

        def checked_goal(p: Any, data: set[Any], context: Any, extra: Any) -> ExploreSignal:
            if p in data:
                return ExploreSignal.SKIP
            data.add(p)
            return goal(p, context, extra)

        def checked_filter(p: Any, n: Any, data: set[Any], context: Any, extra: Any) -> bool:
            return n not in data and filter_neighbours(p, n, context, extra)

        self.explore_advanced(start, seen, checked_goal, checked_filter, bag)

    def explore_advanced(
        self,
        start: Any,
        data: Any,
        goal: Callable[[Any, Any, Any, Any], ExploreSignal],
        filter_neighbours: Callable[[Any, Any, Any, Any, Any], bool],
        bag: type[Bag] = QueueBag,
    ) -> None:
        """Explore with callbacks that also receive the shared ``data``."""
        open_points = bag()
        open_points.put(start)
        while not open_points.is_empty():
            p = open_points.get()
            signal = goal(p, data, self.context, self.extra_data)
            if signal is ExploreSignal.REACHED_GOAL:
                break
            if signal is ExploreSignal.SKIP:
                continue
            for n in p.neighbours(self.context):
                if filter_neighbours(p, n, data, self.context, self.extra_data):
                    open_points.put(n)

    def explore_avoid_worse(
        self,
        start: Any,
        goal: GoalFn,
        filter_neighbours: FilterFn,
        bag: type[Bag] = QueueBag,
    ) -> None:
        """Like ``explore``, but drop states worse than the best seen for their key.

        Points must implement ``PointKeyValue``.
        """
        best: dict[Any, Any] = {}

        def checked_goal(p: Any, data: dict[Any, Any], context: Any, extra: Any) -> ExploreSignal:
            k = p.get_key()
            v = p.get_value()
            if k in data:
                ordering = _sign(type(p).compare_values(k, v, data[k]))
                if ordering == -1:
                    return ExploreSignal.SKIP
                if ordering == 1:
                    data[k] = v
            else:
                data[k] = v
            return goal(p, context, extra)

        def checked_filter(
            p: Any, n: Any, data: dict[Any, Any], context: Any, extra: Any
        ) -> bool:
            k = n.get_key()
            v = n.get_value()
            if k in data and _sign(type(n).compare_values(k, v, data[k])) == -1:
                return False
            return filter_neighbours(p, n, context, extra)

        self.explore_advanced(start, best, checked_goal, checked_filter, bag)
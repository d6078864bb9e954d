"""Walk the grid cells between two integer points."""

from __future__ import annotations

from typing import Iterator

from .vector import Vector


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class LineIterator:
    """Iterate integer points from ``start`` towards ``end``.

    The start point is always produced. The end point is produced only when
    ``inclusive`` is true. At each step the move that best follows the
    remaining direction is taken; on ties the last candidate wins.
    """

    def __init__(self, start: Vector, end: Vector, inclusive: bool = True) -> None:
        self.start = start
        self.end = end
        self.inclusive = inclusive

    def _step_options(self) -> list[Vector]:
        direction = (self.end - self.start).elementwise_unary(_sign)
        size = len(direction)
        options: list[tuple[int, ...]] = []
        for axis, d in enumerate(direction):
            if d:
                extended = [opt[:axis] + (d,) + opt[axis + 1 :] for opt in options]
                unit = tuple(d if k == axis else 0 for k in range(size))
                options.extend(extended)
                options.append(unit)
        return [Vector(*option) for option in options]

    def __iter__(self) -> Iterator[Vector]:
        at, end = self.start, self.end
        if at == end:
            if self.inclusive:
                yield at
            return

        steps = self._step_options()
        yield at
        while at != end:
            delta = end - at
            best = steps[0]
            best_score = delta.inner(best)
            for step in steps[1:]:
                score = delta.inner(step)
                if score >= best_score:
                    best, best_score = step, score
            at = at + best
            if at == end and not self.inclusive:
                return
            yield at
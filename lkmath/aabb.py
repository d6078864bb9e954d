"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .vector import Vector


@dataclass
class Aabb:
    """An axis-aligned box spanned by the corners ``min`` and ``max``."""

    min: Vector
    max: Vector

    def cover(self, point: Vector) -> None:
        """Grow the box so that it contains ``point``."""
        self.min = self.min.elementwise_min(point)
        self.max = self.max.elementwise_max(point)

    @classmethod
    def covering(cls, points: Iterable[Vector]) -> Aabb | None:
        """The smallest box containing all ``points``, or None if there are none."""
        iterator = iter(points)
        first = next(iterator, None)
        if first is None:
            return None
        result = cls(first, first)
        for point in iterator:
            result.cover(point)
        return result

    def dim(self) -> Vector:
        """The extent of the box along each axis."""
        return self.max - self.min
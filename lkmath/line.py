"""Line segments between two points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .line_iterator import LineIterator


@dataclass(frozen=True)
class Line:
    """A segment from ``start`` to ``end``."""

    start: Any
    end: Any

    def delta(self) -> Any:
        return self.end - self.start

    def offset(self, offset: Any) -> Line:
        """The segment moved by ``offset``."""
        return Line(self.start + offset, self.end + offset)

    def scale(self, scale: Any) -> Line:
        """The segment with both endpoints multiplied by ``scale``."""
        return Line(self.start * scale, self.end * scale)

    def iter(self, inclusive: bool = True) -> LineIterator:
        """Iterate the integer points of the segment."""
        return LineIterator(self.start, self.end, inclusive)
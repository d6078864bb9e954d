"""Mapping between multi-dimensional positions and flat indices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class LinearIndex(ABC):
    """Something that maps positions of some kind onto flat, zero-based indices."""

    @abstractmethod
    def index_unchecked(self, i: Any) -> int | None:
        """Return the flat index of ``i`` without checking bounds."""

    @abstractmethod
    def unindex(self, i: int) -> Any:
        """Return the position that sits at flat index ``i``, or None."""

    @abstractmethod
    def is_in_bounds(self, i: Any) -> bool:
        """Tell whether ``i`` is a valid position."""

    @abstractmethod
    def cardinality(self) -> int | None:
        """Return the number of valid positions."""

    def index(self, i: Any) -> int | None:
        """Return the flat index of ``i``, or None when it is out of bounds."""
        if self.is_in_bounds(i):
            return self.index_unchecked(i)
        return None
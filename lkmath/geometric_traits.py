"""Shared behaviour for objects that move on a grid."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

_M = TypeVar("_M", bound="Movement4Directions")


class Movement4Directions(ABC):
    """An immutable position that can step one unit in four directions.

    Each step returns the new position, or None when the step is impossible.
    """

    @abstractmethod
    def step_right(self: _M) -> _M | None:
        """Step one unit along the positive x axis."""

    @abstractmethod
    def step_up(self: _M) -> _M | None:
        """Step one unit along the positive y axis."""

    @abstractmethod
    def step_left(self: _M) -> _M | None:
        """Step one unit along the negative x axis."""

    @abstractmethod
    def step_down(self: _M) -> _M | None:
        """Step one unit along the negative y axis."""

    def _repeat(self: _M, step: Callable[[_M], _M | None], n: int) -> _M | None:
        if n < 0:
            raise ValueError(f"step count must not be negative, got {n}")
        result: _M | None = self
        for _ in range(n):
            result = step(result)
            if result is None:
                return None
        return result

    def step_right_n(self: _M, n: int) -> _M | None:
        """Step ``n`` units right, or return None if any step fails."""
        return self._repeat(type(self).step_right, n)

    def step_up_n(self: _M, n: int) -> _M | None:
        """Step ``n`` units up, or return None if any step fails."""
        return self._repeat(type(self).step_up, n)

    def step_left_n(self: _M, n: int) -> _M | None:
        """Step ``n`` units left, or return None if any step fails."""
        return self._repeat(type(self).step_left, n)

    def step_down_n(self: _M, n: int) -> _M | None:
        """Step ``n`` units down, or return None if any step fails."""
        return self._repeat(type(self).step_down, n)
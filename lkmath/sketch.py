"""Containers that hand back items in some fixed order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Iterable


class Bag(ABC):
    """A container that items are put into and taken out of one by one."""

    @abstractmethod
    def put(self, item: Any) -> None:
        """Add ``item`` to the bag."""

    @abstractmethod
    def get(self) -> Any:
        """Remove and return the next item; raise IndexError when empty."""

    @abstractmethod
    def __len__(self) -> int:
        """The number of items held."""

    def is_empty(self) -> bool:
        return len(self) == 0


class StackBag(Bag):
    """A bag that returns the most recently added item first."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def put(self, item: Any) -> None:
        self._items.append(item)

    def get(self) -> Any:
        if not self._items:
            raise IndexError("get from an empty bag")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class QueueBag(Bag):
    """A bag that returns the earliest added item first."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def put(self, item: Any) -> None:
        self._items.append(item)

    def get(self) -> Any:
        if not self._items:
            raise IndexError("get from an empty bag")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)
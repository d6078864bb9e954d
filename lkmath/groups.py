"""Finite groups given by their identity, operation and inverse."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class Group(ABC):
    """A finite group whose elements can be listed."""

    @abstractmethod
    def identity(self) -> Any:
        """The neutral element."""

    @abstractmethod
    def op(self, a: Any, b: Any) -> Any:
        """The group operation applied to ``a`` and ``b``."""

    @abstractmethod
    def inverse(self, a: Any) -> Any:
        """The element that combines with ``a`` to the identity."""

    @abstractmethod
    def elements(self) -> list[Any]:
        """All elements of the group."""

    def __len__(self) -> int:
        return len(self.elements())


class TrivialGroup(Group):
    """The group with a single element, represented by None."""

    def identity(self) -> None:
        return None

    def op(self, a: None, b: None) -> None:
        return None

    def inverse(self, a: None) -> None:
        return None

    def elements(self) -> list[None]:
        return [None]


class BoolGroup(Group):
    """The cyclic group of order two on booleans under exclusive or."""

    def identity(self) -> bool:
        return False

    def op(self, a: bool, b: bool) -> bool:
        return a != b

    def inverse(self, a: bool) -> bool:
        return a

    def elements(self) -> list[bool]:
        return [False, True]


class ThreeElement(Enum):
    """Elements of the cyclic group of order three."""

    E = 0
    A = 1
    B = 2


class ThreeGroup(Group):
    """The cyclic group of order three, where ``A * A = B`` and ``A * B = E``."""

    def identity(self) -> ThreeElement:
        return ThreeElement.E

    def op(self, a: ThreeElement, b: ThreeElement) -> ThreeElement:
        return ThreeElement((a.value + b.value) % 3)

    def inverse(self, a: ThreeElement) -> ThreeElement:
        return ThreeElement(-a.value % 3)

    def elements(self) -> list[ThreeElement]:
        return list(ThreeElement)


class KleinElement(Enum):
    """Elements of the Klein four-group."""

    E = 0
    A = 1
    B = 2
    C = 3


class KleinFourGroup(Group):
    """The Klein four-group: every element is its own inverse and ``A * B = C``."""

    def identity(self) -> KleinElement:
        return KleinElement.E

    def op(self, a: KleinElement, b: KleinElement) -> KleinElement:
        return KleinElement(a.value ^ b.value)

    def inverse(self, a: KleinElement) -> KleinElement:
        return a

    def elements(self) -> list[KleinElement]:
        return list(KleinElement)


def _wrap_i8(value: int) -> int:
    return (value + 128) % 256 - 128


class Int8Group(Group):
    """Signed 8-bit integers under wrapping addition."""

    def identity(self) -> int:
        return 0

    def op(self, a: int, b: int) -> int:
        return _wrap_i8(a + b)

    def inverse(self, a: int) -> int:
        return _wrap_i8(-a)

    def elements(self) -> list[int]:
        return list(range(-128, 128))
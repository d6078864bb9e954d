"""Permutations of a fixed number of elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .symmetric_group import group_element


@dataclass(frozen=True)
class Perm:
    """A permutation of ``0..n`` stored as the tuple of images."""

    values: tuple[int, ...]

    def __init__(self, values: Iterable[int]) -> None:
        values = tuple(values)
        if sorted(values) != list(range(len(values))):
            raise ValueError(f"not a permutation: {values}")
        object.__setattr__(self, "values", values)

    @classmethod
    def from_id(cls, index: int, size: int) -> Perm:
        """The ``index``-th permutation of ``size`` elements in lexicographic order."""
        return cls(group_element(index, size))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, i: int) -> int:
        return self.values[i]

    def chain(self, other: Perm) -> Perm:
        """The composition whose ``i``-th entry is ``self[other[i]]``."""
        if len(other) != len(self):
            raise ValueError(f"sizes differ: {len(self)} and {len(other)}")
        return Perm(self.values[x] for x in other.values)

    def __mul__(self, other: object) -> Perm:
        if not isinstance(other, Perm):
            return NotImplemented
        return self.chain(other)
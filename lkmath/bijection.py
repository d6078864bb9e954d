"""A permutation of ``0..n`` together with its inverse."""

from __future__ import annotations

from .modular import add_n


class Bijection:
    """A bijection ``f`` on ``0..n`` kept in sync with its inverse ``g``."""

    def __init__(self, length: int) -> None:
        self.f = list(range(length))
        self.g = list(range(length))

    def __len__(self) -> int:
        return len(self.f)

    def __repr__(self) -> str:
        return f"Bijection(f={self.f!r}, g={self.g!r})"

    def valid(self) -> bool:
        """Tell whether ``f`` and ``g`` are inverse to each other."""
        return all(self.g[j] == i for i, j in enumerate(self.f)) and all(
            self.f[i] == j for j, i in enumerate(self.g)
        )

    def swap(self, a_i: int, b_i: int) -> None:
        """Exchange the images of ``a_i`` and ``b_i``."""
        a_j = self.f[a_i]
        b_j = self.f[b_i]
        self.f[a_i], self.f[b_i] = self.f[b_i], self.f[a_i]
        self.g[a_j], self.g[b_j] = self.g[b_j], self.g[a_j]

    def swap_adj(self, a_i: int, offset: int) -> None:
        """Swap ``a_i`` with the element whose image is ``offset`` further, cyclically."""
        a_j = self.f[a_i]
        b_j = add_n(a_j, offset, len(self))
        b_i = self.g[b_j]
        self.swap(a_i, b_i)

    def swap_with_right(self, a_i: int) -> None:
        self.swap_adj(a_i, 1)

    def swap_with_left(self, a_i: int) -> None:
        self.swap_adj(a_i, len(self) - 1)
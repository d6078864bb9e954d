"""Elements of the symmetric group numbered in lexicographic order."""

from __future__ import annotations


def identity(size: int) -> tuple[int, ...]:
    """The identity permutation of ``size`` elements."""
    return tuple(range(size))


def group_element(index: int, size: int) -> tuple[int, ...]:
    """The ``index``-th permutation of ``size`` elements in lexicographic order.

    Raises ValueError when ``index`` is not below ``size!``.
    """
    if index < 0:
        raise ValueError(f"id must not be negative, got {index}")
    remaining = index
    digits = [0]
    for base in range(2, size + 1):
        digits.append(remaining % base)
        remaining //= base
    if remaining != 0:
        raise ValueError("id was larger than group size")
    digits.reverse()

    elements = list(range(size))
    return tuple(elements.pop(d) for d in digits[:size])
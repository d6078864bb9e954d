"""Small integer helpers: triangle numbers, gcd and lcm."""

from __future__ import annotations

import math


def triangle_numbers(n: int) -> int:
    """Return the ``n``-th triangle number, ``n * (n + 1) / 2``."""
    return n * (n + 1) // 2


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers.

    ``gcd(0, x)`` is ``x``. Negative arguments are rejected.
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd needs non-negative arguments, got {a} and {b}")
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple, computed as ``a * (b / gcd(a, b))``.

    Raises ZeroDivisionError when both arguments are zero.
    """
    return a * (b // gcd(a, b))
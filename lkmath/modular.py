"""Euclidean modular arithmetic on integers, vectors and residue values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .vector import Vector


def modular_decompose(value: Any, n: Any) -> tuple[Any, Any]:
    """Euclidean division: return ``(quotient, remainder)`` with a non-negative remainder."""
    if isinstance(value, Modular):
        value = value.value
    if isinstance(value, Vector):
        return value.modular_decompose(n)
    if n == 0:
        raise ZeroDivisionError("modulus must not be zero")
    remainder = value % abs(n)
    return (value - remainder) // n, remainder


def mod_n(value: Any, n: Any) -> Any:
    """The Euclidean remainder of ``value`` modulo ``n``."""
    return modular_decompose(value, n)[1]


def _componentwise(op: Callable[[Any, Any, Any], Any], value: Vector, rhs: Vector, n: Vector) -> Vector:
    if not len(value) == len(rhs) == len(n):
        raise ValueError("dimension mismatch in modular vector operation")
    return Vector(*(op(a, b, m) for a, b, m in zip(value, rhs, n)))


def add_n(value: Any, rhs: Any, n: Any) -> Any:
    """``(value + rhs) mod n``, componentwise for vectors."""
    if isinstance(value, Vector):
        return _componentwise(add_n, value, rhs, n)
    return mod_n(mod_n(value, n) + mod_n(rhs, n), n)


def sub_n(value: Any, rhs: Any, n: Any) -> Any:
    """``(value - rhs) mod n``, componentwise for vectors."""
    if isinstance(value, Vector):
        return _componentwise(sub_n, value, rhs, n)
    return mod_n(mod_n(value, n) + (n - mod_n(rhs, n)), n)


def mul_n(value: Any, rhs: Any, n: Any) -> Any:
    """``(value * rhs) mod n``, componentwise for vectors."""
    if isinstance(value, Vector):
        return _componentwise(mul_n, value, rhs, n)
    return mod_n(mod_n(value, n) * mod_n(rhs, n), n)


@dataclass(frozen=True)
class Modular:
    """An integer residue modulo a fixed ``modulus``; the value is always reduced."""

    value: int
    modulus: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", mod_n(self.value, self.modulus))

    def _other(self, other: object) -> int:
        if not isinstance(other, Modular):
            raise TypeError(f"expected Modular, got {type(other).__name__}")
        if other.modulus != self.modulus:
            raise ValueError(f"moduli differ: {self.modulus} and {other.modulus}")
        return other.value

    def __add__(self, other: Modular) -> Modular:
        return Modular(add_n(self.value, self._other(other), self.modulus), self.modulus)

    def __sub__(self, other: Modular) -> Modular:
        return Modular(sub_n(self.value, self._other(other), self.modulus), self.modulus)

    def __mul__(self, other: Modular) -> Modular:
        return Modular(mul_n(self.value, self._other(other), self.modulus), self.modulus)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value} (mod {self.modulus})"
"""Immutable fixed-size vectors with arithmetic and grid helpers."""

from __future__ import annotations

import math
from functools import reduce
from typing import Any, Callable, ClassVar, Iterator

from .geometric_traits import Movement4Directions
from .linear_index import LinearIndex

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
F32_EPSILON = 1.1920929e-07


def _checked(value: Any) -> Any:
    """Return ``value`` if it fits a signed 32-bit integer, else None."""
    return value if I32_MIN <= value <= I32_MAX else None


def _div_rem_euclid(a: Any, n: Any) -> tuple[Any, Any]:
    if n == 0:
        raise ZeroDivisionError("modulus must not be zero")
    remainder = a % abs(n)
    return (a - remainder) // n, remainder


class Vector(LinearIndex, Movement4Directions):
    """An immutable vector of a fixed number of components."""

    ZERO: ClassVar[Vector]
    ONE: ClassVar[Vector]
    X: ClassVar[Vector]
    Y: ClassVar[Vector]

    def __init__(self, *values: Any) -> None:
        self._values = tuple(values)

    @classmethod
    def all(cls, value: Any, dimension: int) -> Vector:
        """A vector of ``dimension`` components all equal to ``value``."""
        return cls(*([value] * dimension))

    @classmethod
    def from_xy(cls, x: Any, y: Any) -> Vector:
        return cls(x, y)

    @classmethod
    def from_xyz(cls, x: Any, y: Any, z: Any) -> Vector:
        return cls(x, y, z)

    @classmethod
    def from_xyzw(cls, x: Any, y: Any, z: Any, w: Any) -> Vector:
        return cls(x, y, z, w)

    @classmethod
    def parse(cls, text: str, convert: Callable[[str], Any] = int) -> Vector:
        """Parse comma separated components, e.g. ``"1, 2, 3"``."""
        try:
            return cls(*(convert(part.strip()) for part in text.split(",")))
        except ValueError as exc:
            raise ValueError(f"invalid vector: {text!r}") from exc

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    @property
    def x(self) -> Any:
        return self._values[0]

    @property
    def y(self) -> Any:
        return self._values[1]

    @property
    def z(self) -> Any:
        return self._values[2]

    @property
    def w(self) -> Any:
        return self._values[3]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __getitem__(self, axis: int) -> Any:
        return self._values[axis]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __str__(self) -> str:
        return "Vector(" + ", ".join(str(v) for v in self._values) + ")"

    __repr__ = __str__

    def _replace(self, axis: int, value: Any) -> Vector:
        values = list(self._values)
        values[axis] = value
        return Vector(*values)

    def _require_dimension(self, dimension: int) -> None:
        if len(self._values) != dimension:
            raise ValueError(
                f"operation needs a {dimension}-dimensional vector, got {len(self._values)}"
            )

    def elementwise_unary(self, f: Callable[[Any], Any]) -> Vector:
        return Vector(*(f(v) for v in self._values))

    def aggregate(self, f: Callable[[Any, Any], Any]) -> Any:
        """Fold the components from left to right with ``f``."""
        return reduce(f, self._values)

    def elementwise_binary(self, rhs: Vector, f: Callable[[Any, Any], Any]) -> Vector:
        if len(rhs) != len(self):
            raise ValueError(f"dimension mismatch: {len(self)} and {len(rhs)}")
        return Vector(*(f(a, b) for a, b in zip(self._values, rhs._values)))

    def elementwise_min(self, rhs: Vector) -> Vector:
        return self.elementwise_binary(rhs, min)

    def elementwise_max(self, rhs: Vector) -> Vector:
        return self.elementwise_binary(rhs, max)

    def __add__(self, rhs: Vector) -> Vector:
        if not isinstance(rhs, Vector):
            return NotImplemented
        return self.elementwise_binary(rhs, lambda a, b: a + b)

    def __sub__(self, rhs: Vector) -> Vector:
        if not isinstance(rhs, Vector):
            return NotImplemented
        return self.elementwise_binary(rhs, lambda a, b: a - b)

    def __mul__(self, scalar: Any) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        return self.elementwise_unary(lambda a: a * scalar)

    __rmul__ = __mul__

    def inner(self, rhs: Vector) -> Any:
        """Dot product."""
        return self.elementwise_binary(rhs, lambda a, b: a * b).aggregate(
            lambda acc, v: acc + v
        )

    def winding(self, rhs: Vector) -> Any:
        """The 2D cross product ``x1*y2 - y1*x2``."""
        self._require_dimension(2)
        return self.x * rhs.y - self.y * rhs.x

    def perp(self) -> Vector:
        """The 2D vector rotated a quarter turn counter-clockwise."""
        self._require_dimension(2)
        return Vector(-self.y, self.x)

    def magn(self) -> float:
        return math.sqrt(self.inner(self))

    def normalized(self) -> Vector:
        """Unit vector in the same direction, or the zero vector if too short."""
        magnitude = self.magn()
        if magnitude > F32_EPSILON:
            return self * (1.0 / magnitude)
        return self * 0.0

    def modular_decompose(self, n: Vector) -> tuple[Vector, Vector]:
        """Euclidean division per component: returns (quotients, remainders)."""
        if len(n) != len(self):
            raise ValueError(f"dimension mismatch: {len(self)} and {len(n)}")
        pairs = [_div_rem_euclid(a, m) for a, m in zip(self._values, n._values)]
        return Vector(*(q for q, _ in pairs)), Vector(*(r for _, r in pairs))

    def manhattan_distance(self, other: Vector) -> Any:
        delta = other - self
        return delta.elementwise_unary(abs).aggregate(lambda acc, v: acc + v)

    def euclidean_distance_squared(self, other: Vector) -> Any:
        delta = other - self
        return delta.inner(delta)

    def neighbours(self, context: Any = None) -> list[Vector]:
        """Axis-aligned unit neighbours, optionally filtered by ``context.is_in_bounds``."""
        result = []
        for axis, value in enumerate(self._values):
            for delta in (1, -1):
                moved = _checked(value + delta)
                if moved is not None:
                    result.append(self._replace(axis, moved))
        if context is not None:
            result = [n for n in result if context.is_in_bounds(n)]
        return result

    def _step(self, axis: int, delta: int) -> Vector | None:
        self._require_dimension(2)
        moved = _checked(self._values[axis] + delta)
        return None if moved is None else self._replace(axis, moved)

    def step_right(self) -> Vector | None:
        return self._step(0, 1)

    def step_up(self) -> Vector | None:
        return self._step(1, 1)

    def step_left(self) -> Vector | None:
        return self._step(0, -1)

    def step_down(self) -> Vector | None:
        return self._step(1, -1)

    # Used as a LinearIndex, the vector holds the dimensions of a grid.

    def index_unchecked(self, i: Vector) -> int:
        if any(v < 0 for v in i):
            raise ValueError(f"cannot index with negative components: {i}")
        result = 0
        for size, value in zip(reversed(self._values), reversed(i.values)):
            result = result * size + value
        return result

    def unindex(self, i: int) -> Vector:
        components = []
        for size in self._values:
            components.append(i % size)
            i //= size
        return Vector(*components)

    def is_in_bounds(self, i: Vector) -> bool:
        return len(i) == len(self) and all(
            0 <= a < b for a, b in zip(i.values, self._values)
        )

    def cardinality(self) -> int:
        return math.prod(self._values)


Vector.ZERO = Vector(0, 0)
Vector.ONE = Vector(1, 1)
Vector.X = Vector(1, 0)
Vector.Y = Vector(0, 1)
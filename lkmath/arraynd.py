"""Dense n-dimensional arrays indexed by vectors, and character grids."""

from __future__ import annotations

import itertools
import math
import operator
from typing import Any, Callable, Iterable, Iterator, Sequence

from .line import Line
from .line_iterator import LineIterator
from .linear_index import LinearIndex
from .vector import Vector


class CharArrayParseError(ValueError):
    """Raised when the lines of a character grid differ in width."""

    def __init__(self, first_line: int, first_width: int, line: int, width: int) -> None:
        self.first_line = first_line
        self.first_width = first_width
        self.line = line
        self.width = width
        super().__init__(
            f"Inconsistent line width. On line {first_line} the width is {first_width}, "
            f"while on line {line} the width is {width}."
        )


def _strides(dims: Sequence[int]) -> tuple[int, ...]:
    strides = []
    current = 1
    for d in dims:
        strides.append(current)
        current *= d
    return tuple(strides)


def _checked_dims(dims: Iterable[Any]) -> tuple[int, ...]:
    result = tuple(operator.index(d) for d in dims)
    for d in result:
        if d <= 0:
            raise ValueError(f"array dimensions must be positive, got {result}")
    return result


def _is_linear(i: Any) -> bool:
    return isinstance(i, int) and not isinstance(i, bool)


class ArrayNd(LinearIndex):
    """A dense array with ``len(dims)`` axes; the first axis varies fastest.

    Positions are either flat integer indices or ``Vector`` coordinates.
    """

    def __init__(self, dims: Iterable[Any], default: Any) -> None:
        self.dims = _checked_dims(dims)
        self.dim_strides = _strides(self.dims)
        self.data: list[Any] = [default] * math.prod(self.dims)

    @classmethod
    def _from_parts(cls, data: list[Any], dims: tuple[int, ...]) -> ArrayNd:
        array = cls.__new__(cls)
        array.data = data
        array.dims = dims
        array.dim_strides = _strides(dims)
        return array

    @classmethod
    def from_slice(cls, dims: Iterable[Any], data: Iterable[Any]) -> ArrayNd:
        """An array of the given dimensions holding a copy of ``data``."""
        return cls._from_parts(list(data), _checked_dims(dims))

    @classmethod
    def with_dimensions(cls, *args: int, default: Any) -> ArrayNd:
        """An array of the given sizes, e.g. ``with_dimensions(w, h, default=0)``."""
        dims = tuple(operator.index(d) for d in args)
        if any(d < 0 for d in dims):
            raise ValueError(f"array dimensions must not be negative, got {dims}")
        return cls._from_parts([default] * math.prod(dims), dims)

    @property
    def width(self) -> int:
        return self.dims[0]

    @property
    def height(self) -> int:
        if len(self.dims) < 2:
            raise ValueError("array has no height axis")
        return self.dims[1]

    @property
    def depth(self) -> int:
        if len(self.dims) < 3:
            raise ValueError("array has no depth axis")
        return self.dims[2]

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayNd):
            return NotImplemented
        return (self.dims, self.dim_strides, self.data) == (
            other.dims,
            other.dim_strides,
            other.data,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArrayNd(dims={self.dims!r}, data={self.data!r})"

    def _position(self, key: Any) -> Any:
        return Vector(*key) if isinstance(key, tuple) else key

    def __getitem__(self, key: Any) -> Any:
        key = self._position(key)
        if _is_linear(key):
            return self.get_linear(key)
        index = self.index(key)
        if index is None:
            raise IndexError(f"position {key} is out of bounds")
        return self.data[index]

    def __setitem__(self, key: Any, value: Any) -> None:
        key = self._position(key)
        if _is_linear(key):
            self.set_linear(key, value)
            return
        index = self.index(key)
        if index is None:
            raise IndexError(f"position {key} is out of bounds")
        self.data[index] = value

    def resized(self, new_dims: Iterable[Any], default: Any, offset: Vector) -> ArrayNd:
        """A new array of ``new_dims`` where ``new[p] = self[p - offset]`` where defined."""
        result = ArrayNd(new_dims, default)
        shape = Vector(*result.dims)
        for linear, _ in enumerate(result.data):
            source = self.index(shape.unindex(linear) - offset)
            if source is not None:
                result.data[linear] = self.data[source]
        return result

    def padded(self, padding: int, default: Any) -> ArrayNd:
        """A copy with ``padding`` cells of ``default`` added on every side."""
        new_dims = [d + 2 * padding for d in self.dims]
        return self.resized(new_dims, default, Vector.all(padding, len(self.dims)))

    def index_unchecked(self, i: Any) -> int | None:
        if _is_linear(i):
            return i if 0 <= i < len(self.data) else None
        if isinstance(i, Vector):
            return Vector(*self.dims).index_unchecked(i)
        raise TypeError(f"cannot index an array with {type(i).__name__}")

    def unindex(self, i: int) -> Vector | None:
        """The vector position of flat index ``i``, or None when out of range."""
        if not 0 <= i < len(self.data):
            return None
        return Vector(*self.dims).unindex(i)

    def is_in_bounds(self, i: Any) -> bool:
        if _is_linear(i):
            return 0 <= i < len(self.data)
        if isinstance(i, Vector):
            return Vector(*self.dims).is_in_bounds(i)
        return False

    def cardinality(self) -> int:
        return math.prod(self.dims)

    def replace_all(self, old: Any, new: Any) -> None:
        """Replace every element equal to ``old`` with ``new``."""
        self.data = [new if x == old else x for x in self.data]

    def get_linear(self, index: int) -> Any:
        if not 0 <= index < len(self.data):
            raise IndexError(f"flat index {index} is out of bounds")
        return self.data[index]

    def set_linear(self, index: int, value: Any) -> None:
        if not 0 <= index < len(self.data):
            raise IndexError(f"flat index {index} is out of bounds")
        self.data[index] = value

    def get(self, p: Any) -> Any:
        """The element at ``p``, or None when ``p`` is out of bounds."""
        index = self.index(p)
        return None if index is None else self.data[index]

    def set(self, p: Any, value: Any) -> bool:
        """Store ``value`` at ``p``; return False when ``p`` is out of bounds."""
        index = self.index(p)
        if index is None:
            return False
        self.data[index] = value
        return True

    def find_item(self, item: Any) -> Vector | None:
        """The position of the first element equal to ``item``, or None."""
        index = next((i for i, x in enumerate(self.data) if x == item), None)
        return None if index is None else self.unindex(index)

    def find_last_item(self, item: Any) -> Vector | None:
        """The position of the last element equal to ``item``, or None."""
        index = next(
            (i for i in range(len(self.data) - 1, -1, -1) if self.data[i] == item),
            None,
        )
        return None if index is None else self.unindex(index)

    def find_all(self, predicate: Callable[[Any], bool]) -> list[Vector]:
        """Positions of all elements for which ``predicate`` holds, in storage order."""
        return [self.unindex(i) for i, x in enumerate(self.data) if predicate(x)]

    def find_all_items(self, item: Any) -> list[Vector]:
        return self.find_all(lambda x: x == item)

    def map(self, f: Callable[[Any], Any]) -> ArrayNd:
        """A new array of the same shape with ``f`` applied to every element."""
        return ArrayNd._from_parts([f(x) for x in self.data], self.dims)

    def line_iter(self, p0: Vector, p1: Vector, inclusive: bool = True) -> LineIterator:
        return LineIterator(p0, p1, inclusive)

    def iter_values_in_line(
        self, p0: Vector, p1: Vector, inclusive: bool = True
    ) -> Iterator[Any]:
        """The elements along a line; raises IndexError on leaving the array."""
        for p in self.line_iter(p0, p1, inclusive):
            index = self.index(p)
            if index is None:
                raise IndexError(f"position {p} is out of bounds")
            yield self.data[index]

    def draw_line(self, line: Line, value: Any, inclusive: bool = True) -> None:
        """Set every in-bounds cell along ``line`` to ``value``."""
        for p in self.line_iter(line.start, line.end, inclusive):
            self.set(p, value)

    def draw_block(self, matching: Sequence[int | None], value: Any) -> None:
        """Paint cells whose coordinate equals ``matching[axis]`` on every axis.

        An entry of None matches every coordinate on that axis, so
        ``[None, 3, None]`` paints the plane ``y = 3`` of a 3D array.
        """
        if len(matching) != len(self.dims):
            raise ValueError(
                f"expected {len(self.dims)} entries in matching, got {len(matching)}"
            )
        choices = [
            range(size) if m is None else (m,) for m, size in zip(matching, self.dims)
        ]
        for coordinates in itertools.product(*choices):
            index = sum(c * s for c, s in zip(coordinates, self.dim_strides))
            self.set_linear(index, value)

    def shift_n_rows_down(self, n: int, default: Any) -> None:
        """Drop the first ``n`` rows and append ``n`` rows of ``default``."""
        count = self.width * n
        if count > len(self.data) or n < 0:
            raise ValueError(f"cannot shift {n} rows in an array of {len(self.data)} cells")
        self.data = self.data[count:] + [default] * count

    def __str__(self) -> str:
        parts: list[str] = []
        if len(self.dims) > 1:
            index = 0
            row_block = self.dims[0] * self.dims[1]
            while index < len(self.data) and row_block > 0:
                if len(self.dims) > 2:
                    parts.append(f"Slice = {self.unindex(index)}\n")
                for _ in range(self.dims[1]):
                    for _ in range(self.dims[0]):
                        parts.append(str(self.get_linear(index)))
                        index += 1
                    parts.append("\n")
        else:
            parts.extend(str(x) for x in self.data)
        return "".join(parts)


def _strip_line_end(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def char_array_from_lines(lines: Iterable[str]) -> ArrayNd:
    """Build a 2D character grid from lines; empty lines are skipped.

    Raises CharArrayParseError when non-empty lines differ in width.
    """
    width = 0
    width_line = 0
    height = 0
    data: list[str] = []
    for line_number, raw in enumerate(lines):
        line = _strip_line_end(raw)
        line_width = len(line)
        if width == 0:
            width = line_width
            width_line = line_number
        elif width != line_width and line_width != 0:
            raise CharArrayParseError(width_line, width, line_number, line_width)
        if line_width > 0:
            height += 1
            data.extend(line)
    return ArrayNd._from_parts(data, (width, height))


def char_array_from_str(text: str) -> ArrayNd:
    """Build a 2D character grid from newline separated text."""
    return char_array_from_lines(text.split("\n"))
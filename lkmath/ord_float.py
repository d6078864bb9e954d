"""Floats with a total order based on their bit patterns."""

from __future__ import annotations

import math
import struct
from decimal import Decimal
from functools import total_ordering
from typing import Any, ClassVar


@total_ordering
class OrdFloat:
    """A float that is hashable and totally ordered.

    Equality and ordering compare the raw bit pattern read as a signed
    integer, so ``0.0`` and ``-0.0`` differ and NaN equals itself.
    """

    __slots__ = ("_value",)

    _FLOAT_FORMAT: ClassVar[str] = "<d"
    _BITS_FORMAT: ClassVar[str] = "<q"
    _DIGITS: ClassVar[int] = 17

    INFINITY: ClassVar[OrdFloat]
    NEG_INFINITY: ClassVar[OrdFloat]

    def __init__(self, value: Any = 0.0) -> None:
        if isinstance(value, OrdFloat):
            value = value._value
        self._value = self._round(float(value))

    @classmethod
    def _round(cls, value: float) -> float:
        try:
            packed = struct.pack(cls._FLOAT_FORMAT, value)
        except OverflowError:
            return math.copysign(math.inf, value)
        return struct.unpack(cls._FLOAT_FORMAT, packed)[0]

    @property
    def value(self) -> float:
        return self._value

    def _bits(self) -> int:
        return struct.unpack(self._BITS_FORMAT, struct.pack(self._FLOAT_FORMAT, self._value))[0]

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bits() == other._bits()

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bits() < other._bits()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._bits()))

    def _operand(self, other: object) -> float | None:
        if isinstance(other, OrdFloat):
            return other._value if type(other) is type(self) else None
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other)
        return None

    @staticmethod
    def _divide(a: float, b: float) -> float:
        if b != 0.0:
            return a / b
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)

    def __add__(self, other: object) -> Any:
        o = self._operand(other)
        return NotImplemented if o is None else type(self)(self._value + o)

    def __radd__(self, other: object) -> Any:
        o = self._operand(other)
        return NotImplemented if o is None else type(self)(o + self._value)

    def __sub__(self, other: object) -> Any:
        o = self._operand(other)
        return NotImplemented if o is None else type(self)(self._value - o)

    def __rsub__(self, other: object) -> Any:
        o = self._operand(other)
        return NotImplemented if o is None else type(self)(o - self._value)

    def __mul__(self, other: object) -> Any:
        o = self._operand(other)
        return NotImplemented if o is None else type(self)(self._value * o)

    def __rmul__(self, other: object) -> Any:
        o = self._operand(other)
        return NotImplemented if o is None else type(self)(o * self._value)

    def __truediv__(self, other: object) -> Any:
        o = self._operand(other)
        return NotImplemented if o is None else type(self)(self._divide(self._value, o))

    def __rtruediv__(self, other: object) -> Any:
        o = self._operand(other)
        return NotImplemented if o is None else type(self)(self._divide(o, self._value))

    def __neg__(self) -> OrdFloat:
        return type(self)(-self._value)

    def _shortest(self) -> str:
        for precision in range(1, self._DIGITS + 1):
            text = f"{self._value:.{precision}g}"
            if self._round(float(text)) == self._value:
                return text
        return repr(self._value)

    def __str__(self) -> str:
        v = self._value
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "inf" if v > 0 else "-inf"
        return format(Decimal(self._shortest()).normalize(), "f")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class OrdF64(OrdFloat):
    """A double-precision totally ordered float."""

    __slots__ = ()


class OrdF32(OrdFloat):
    """A single-precision totally ordered float; values are rounded to 32 bits."""

    __slots__ = ()

    _FLOAT_FORMAT = "<f"
    _BITS_FORMAT = "<i"
    _DIGITS = 9


for _cls in (OrdFloat, OrdF64, OrdF32):
    _cls.INFINITY = _cls(math.inf)
    _cls.NEG_INFINITY = _cls(-math.inf)
del _cls
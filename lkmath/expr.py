"""Small arithmetic expressions: parsing, evaluation and solving for unknowns."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Mapping


class EvalError(Exception):
    """Raised when an expression cannot be evaluated because it holds a free value."""

    def __init__(self) -> None:
        super().__init__("cannot evaluate a free expression")


def _div(a: Any, b: Any) -> Any:
    """Division that truncates toward zero for integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


Values = Mapping[str, "Expr"]


def _try_eval(expr: Expr, vals: Values) -> tuple[bool, Any]:
    try:
        return True, expr.eval(vals)
    except EvalError:
        return False, None


class Expr(ABC):
    """An expression tree node."""

    @abstractmethod
    def eval(self, vals: Values) -> Any:
        """Evaluate, looking identifiers up in ``vals``; raise EvalError on free values."""

    def solve(self, result: Any, vals: Values) -> dict[str, Any]:
        """Find the values the free identifiers must take for the expression to equal ``result``.

        Raises ValueError when the expression cannot be solved or is inconsistent.
        """
        forced: dict[str, Any] = {}
        self._solve(None, result, vals, forced)
        return forced

    @abstractmethod
    def _solve(
        self, my_ident: str | None, result: Any, vals: Values, forced: dict[str, Any]
    ) -> None:
        ...


@dataclass(frozen=True)
class _Binary(Expr):
    a: Expr
    b: Expr

    @staticmethod
    def _apply(a: Any, b: Any) -> Any:
        raise NotImplementedError

    @staticmethod
    def _right_from(result: Any, a: Any) -> Any:
        raise NotImplementedError

    @staticmethod
    def _left_from(result: Any, b: Any) -> Any:
        raise NotImplementedError

    def eval(self, vals: Values) -> Any:
        return self._apply(self.a.eval(vals), self.b.eval(vals))

    def _solve(
        self, my_ident: str | None, result: Any, vals: Values, forced: dict[str, Any]
    ) -> None:
        a_ok, a_val = _try_eval(self.a, vals)
        b_ok, b_val = _try_eval(self.b, vals)
        if a_ok and not b_ok:
            b_val = self._right_from(result, a_val)
            if self._apply(a_val, b_val) != result:
                raise ValueError(f"no exact solution for {self}")
            self.b._solve(None, b_val, vals, forced)
        elif b_ok and not a_ok:
            a_val = self._left_from(result, b_val)
            if self._apply(a_val, b_val) != result:
                raise ValueError(f"no exact solution for {self}")
            self.a._solve(None, a_val, vals, forced)
        else:
            raise ValueError(f"exactly one operand must be unknown in {self}")


@dataclass(frozen=True)
class Add(_Binary):
    @staticmethod
    def _apply(a: Any, b: Any) -> Any:
        return a + b

    @staticmethod
    def _right_from(result: Any, a: Any) -> Any:
        return result - a

    @staticmethod
    def _left_from(result: Any, b: Any) -> Any:
        return result - b


@dataclass(frozen=True)
class Sub(_Binary):
    @staticmethod
    def _apply(a: Any, b: Any) -> Any:
        return a - b

    @staticmethod
    def _right_from(result: Any, a: Any) -> Any:
        return a - result

    @staticmethod
    def _left_from(result: Any, b: Any) -> Any:
        return result + b


@dataclass(frozen=True)
class Mul(_Binary):
    @staticmethod
    def _apply(a: Any, b: Any) -> Any:
        return a * b

    @staticmethod
    def _right_from(result: Any, a: Any) -> Any:
        return _div(result, a)

    @staticmethod
    def _left_from(result: Any, b: Any) -> Any:
        return _div(result, b)


@dataclass(frozen=True)
class Div(_Binary):
    @staticmethod
    def _apply(a: Any, b: Any) -> Any:
        return _div(a, b)

    @staticmethod
    def _right_from(result: Any, a: Any) -> Any:
        return _div(a, result)

    @staticmethod
    def _left_from(result: Any, b: Any) -> Any:
        return result * b


@dataclass(frozen=True)
class Eq(Expr):
    """Equality; evaluates to the left operand's type built from the boolean result."""

    a: Expr
    b: Expr

    def eval(self, vals: Values) -> Any:
        a_val = self.a.eval(vals)
        b_val = self.b.eval(vals)
        return type(a_val)(a_val == b_val)

    def _solve(
        self, my_ident: str | None, result: Any, vals: Values, forced: dict[str, Any]
    ) -> None:
        if result != 1:
            raise ValueError("only enforcing equality is supported")
        a_ok, a_val = _try_eval(self.a, vals)
        b_ok, b_val = _try_eval(self.b, vals)
        if a_ok and not b_ok:
            self.b._solve(None, a_val, vals, forced)
        elif b_ok and not a_ok:
            self.a._solve(None, b_val, vals, forced)
        else:
            raise ValueError(f"exactly one side must be unknown in {self}")


@dataclass(frozen=True)
class Ident(Expr):
    """A named reference to an expression in the value table."""

    name: str

    def eval(self, vals: Values) -> Any:
        return vals[self.name].eval(vals)

    def _solve(
        self, my_ident: str | None, result: Any, vals: Values, forced: dict[str, Any]
    ) -> None:
        vals[self.name]._solve(self.name, result, vals, forced)


@dataclass(frozen=True)
class Const(Expr):
    """A constant value."""

    value: Any

    def eval(self, vals: Values) -> Any:
        return self.value

    def _solve(
        self, my_ident: str | None, result: Any, vals: Values, forced: dict[str, Any]
    ) -> None:
        if self.value != result:
            raise ValueError(f"constant {self.value!r} cannot equal {result!r}")


@dataclass(frozen=True)
class Free(Expr):
    """An unknown value, to be found by ``solve``."""

    def eval(self, vals: Values) -> Any:
        raise EvalError()

    def _solve(
        self, my_ident: str | None, result: Any, vals: Values, forced: dict[str, Any]
    ) -> None:
        if my_ident is None:
            raise ValueError("a free value must be reached through an identifier")
        if my_ident in forced:
            if forced[my_ident] != result:
                raise ValueError(
                    f"{my_ident} is forced to both {forced[my_ident]!r} and {result!r}"
                )
        else:
            forced[my_ident] = result


_OPERATORS: tuple[tuple[str, type[Expr]], ...] = (
    ("=", Eq),
    ("+", Add),
    ("-", Sub),
    ("*", Mul),
    ("/", Div),
)


def parse_expr(text: str, convert: Callable[[str], Any] = int) -> Expr:
    """Parse an expression; operators split at their first occurrence in the order ``= + - * /``.

    Leaves that ``convert`` accepts become constants, others identifiers.
    """
    s = text.strip()
    for symbol, node in _OPERATORS:
        i = s.find(symbol)
        if i >= 0:
            return node(parse_expr(s[:i], convert), parse_expr(s[i + 1 :], convert))
    try:
        return Const(convert(s))
    except ValueError:
        return Ident(s)
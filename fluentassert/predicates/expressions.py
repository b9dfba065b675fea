"""
Expression builder for describable predicates.

Lets predicates be written as ordinary Python expressions while keeping
their text:

    item = var("item")
    item > 3                      # Predicate 'item > 3'
    var("e").Length > 0           # Predicate 'e.Length > 0'
    var("x") == "xxx"             # Predicate 'x == "xxx"'
    item % 2 == 0                 # Predicate 'item % 2 == 0'
    length(var("s")) > 0          # Predicate 'len(s) > 0'

Comparisons produce Predicates; attribute access, indexing and arithmetic
produce further Expressions. Constants are rendered with the Formatter,
so strings appear double-quoted.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from ..formatting.formatter import Formatter
from .models import Predicate

_formatter = Formatter()


class Expression:
    """
    A value derived from the item under test, plus the text that names it.

    Any public attribute name resolves to a member access on the item, so
    the expression itself only carries underscore-prefixed state.
    """

    __slots__ = ("_text", "_resolve", "_compound")

    def __init__(self, text: str, resolve: Callable[[Any], Any], compound: bool = False):
        self._text = text
        self._resolve = resolve
        self._compound = compound

    def __repr__(self) -> str:
        return f"<Expression {self._text}>"

    # ─────────────────────────────────────────────────────────────────────
    # Member and item access
    # ─────────────────────────────────────────────────────────────────────

    def __getattr__(self, name: str) -> Expression:
        if name.startswith("_"):
            raise AttributeError(name)
        resolve = self._resolve
        return Expression(
            f"{_render(self, nested=True)}.{name}",
            lambda item: getattr(resolve(item), name),
        )

    def __getitem__(self, key: Any) -> Expression:
        resolve = self._resolve
        return Expression(
            f"{_render(self, nested=True)}[{_render(key)}]",
            lambda item: resolve(item)[_value(key, item)],
        )

    # ─────────────────────────────────────────────────────────────────────
    # Comparisons (produce predicates)
    # ─────────────────────────────────────────────────────────────────────

    def __eq__(self, other: Any) -> Predicate:  # type: ignore[override]
        return self._compare(operator.eq, "==", other)

    def __ne__(self, other: Any) -> Predicate:  # type: ignore[override]
        return self._compare(operator.ne, "!=", other)

    def __lt__(self, other: Any) -> Predicate:
        return self._compare(operator.lt, "<", other)

    def __le__(self, other: Any) -> Predicate:
        return self._compare(operator.le, "<=", other)

    def __gt__(self, other: Any) -> Predicate:
        return self._compare(operator.gt, ">", other)

    def __ge__(self, other: Any) -> Predicate:
        return self._compare(operator.ge, ">=", other)

    __hash__ = None  # type: ignore[assignment]

    def _compare(self, op: Callable[[Any, Any], Any], symbol: str, other: Any) -> Predicate:
        resolve = self._resolve
        return Predicate(
            func=lambda item: op(resolve(item), _value(other, item)),
            description=f"{_render(self)} {symbol} {_render(other)}",
        )

    # ─────────────────────────────────────────────────────────────────────
    # Arithmetic (produce expressions)
    # ─────────────────────────────────────────────────────────────────────

    def __add__(self, other: Any) -> Expression:
        return _binary(operator.add, "+", self, other)

    def __radd__(self, other: Any) -> Expression:
        return _binary(operator.add, "+", other, self)

    def __sub__(self, other: Any) -> Expression:
        return _binary(operator.sub, "-", self, other)

    def __rsub__(self, other: Any) -> Expression:
        return _binary(operator.sub, "-", other, self)

    def __mul__(self, other: Any) -> Expression:
        return _binary(operator.mul, "*", self, other)

    def __rmul__(self, other: Any) -> Expression:
        return _binary(operator.mul, "*", other, self)

    def __truediv__(self, other: Any) -> Expression:
        return _binary(operator.truediv, "/", self, other)

    def __rtruediv__(self, other: Any) -> Expression:
        return _binary(operator.truediv, "/", other, self)

    def __floordiv__(self, other: Any) -> Expression:
        return _binary(operator.floordiv, "//", self, other)

    def __rfloordiv__(self, other: Any) -> Expression:
        return _binary(operator.floordiv, "//", other, self)

    def __mod__(self, other: Any) -> Expression:
        return _binary(operator.mod, "%", self, other)

    def __rmod__(self, other: Any) -> Expression:
        return _binary(operator.mod, "%", other, self)


def var(name: str) -> Expression:
    """The item under test, shown in messages as `name`."""
    if not name.isidentifier():
        raise ValueError(f"Variable name must be an identifier, got {name!r}")
    return Expression(name, lambda item: item)


def length(expression: Expression) -> Expression:
    """len() of an expression, shown as len(<expression>)."""
    resolve = expression._resolve
    return Expression(f"len({_render(expression)})", lambda item: len(resolve(item)))


def _binary(op: Callable[[Any, Any], Any], symbol: str, left: Any, right: Any) -> Expression:
    return Expression(
        f"{_render(left, nested=True)} {symbol} {_render(right, nested=True)}",
        lambda item: op(_value(left, item), _value(right, item)),
        compound=True,
    )


def _value(operand: Any, item: Any) -> Any:
    if isinstance(operand, Expression):
        return operand._resolve(item)
    return operand


def _render(operand: Any, nested: bool = False) -> str:
    if isinstance(operand, Expression):
        if nested and operand._compound:
            return f"({operand._text})"
        return operand._text
    return _formatter.format(operand)

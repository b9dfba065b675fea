"""
Predicate model.

A Predicate pairs a test function with the text it was written as, so
that failure messages can show "(item > 3)" instead of a function repr.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class Predicate:
    """
    A test applied to each item of a collection.

    Attributes:
        func: Called with one item; its result is taken as a boolean
        description: Source-level text, e.g. 'item > 3'
        compound: "and" / "or" / "not" for combined predicates, used to
            parenthesize correctly when combining further

    Predicates combine with & (and), | (or) and ~ (not). Using one in a
    boolean context raises TypeError, which catches chained comparisons
    such as `1 < item < 3` that Python would otherwise silently split.

    Example:
        even = Predicate(lambda n: n % 2 == 0, "n % 2 == 0")
        small = Predicate(lambda n: n < 10, "n < 10")
        (even & small)(4)     # True
        (even & small).description   # 'n % 2 == 0 and n < 10'
    """
    func: Callable[[Any], Any]
    description: str
    compound: str | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise TypeError(f"Predicate function must be callable, got {type(self.func).__name__}")

    @classmethod
    def of(cls, func: Callable[[Any], Any], description: str) -> Predicate:
        """Pair a callable with the text to show for it."""
        return cls(func=func, description=description)

    def __call__(self, item: Any) -> bool:
        return bool(self.func(item))

    def __bool__(self) -> bool:
        raise TypeError(
            f"Predicate ({self.description}) has no truth value; "
            "combine predicates with &, | and ~ instead of and/or/not"
        )

    def __and__(self, other: Any) -> Predicate:
        if not isinstance(other, Predicate):
            return NotImplemented
        left, right = self, other
        return Predicate(
            func=lambda item: left(item) and right(item),
            description=f"{_operand(left, 'and')} and {_operand(right, 'and')}",
            compound="and",
        )

    def __or__(self, other: Any) -> Predicate:
        if not isinstance(other, Predicate):
            return NotImplemented
        left, right = self, other
        return Predicate(
            func=lambda item: left(item) or right(item),
            description=f"{_operand(left, 'or')} or {_operand(right, 'or')}",
            compound="or",
        )

    def __invert__(self) -> Predicate:
        inner = self
        return Predicate(
            func=lambda item: not inner(item),
            description=f"not ({inner.description})",
            compound="not",
        )


def _operand(predicate: Predicate, joined_by: str) -> str:
    """Description of one side of an and/or, parenthesized if needed."""
    if predicate.compound in (None, "not", joined_by):
        return predicate.description
    return f"({predicate.description})"

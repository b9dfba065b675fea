"""
Fluent assertions for collections.

CollectionAssertions binds a subject to the CollectionAssertionEngine
and exposes the verbs; AndConstraint is what a passing verb returns so
that further verbs can be chained.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Callable

from ..predicates.models import Predicate
from ..settings.loader import default_settings
from ..settings.models import Settings
from .engine import CollectionAssertionEngine
from .messages import build_message
from .models import AssertionFailure, AssertionResult

logger = logging.getLogger(__name__)

# Containers that `contain()` treats as "all of these items"
SUBSET_TYPES = (list, tuple, set, frozenset)


class AndConstraint:
    """Returned by a passing verb; `.and_` continues the chain."""

    def __init__(self, assertions: CollectionAssertions):
        self.and_ = assertions

    def __repr__(self) -> str:
        return f"AndConstraint({self.and_!r})"


class CollectionAssertions:
    """
    Assertions on a collection subject.

    The subject is read into a list once, when the assertions object is
    created. Mutating a shared collection from another thread while
    asserting on it is the caller's responsibility.

    Every verb accepts an optional reason: a format string and its
    positional arguments, e.g.
        .contain(item > 3, "at least {0} item should be larger than 3", 1)

    Example:
        should([1, 2, 3]).contain(2).and_.not_contain(var("n") > 5)
    """

    def __init__(
        self,
        subject: Iterable[Any] | None,
        settings: Settings | None = None,
        engine: CollectionAssertionEngine | None = None,
    ):
        self.subject = None if subject is None else list(subject)
        self.settings = settings or default_settings()
        self.engine = engine or CollectionAssertionEngine()

    def __repr__(self) -> str:
        return f"CollectionAssertions({self.subject!r})"

    # ─────────────────────────────────────────────────────────────────────
    # Contain
    # ─────────────────────────────────────────────────────────────────────

    def contain(self, expected: Any, because: str = "", *because_args: Any) -> AndConstraint:
        """
        Assert that the collection contains `expected`.

        - a Predicate or callable: at least one item must match it
        - a list, tuple, set or frozenset: every one of its items must be present
        - anything else: an equal item must be present

        Use contain_item() to look for a callable or a list as a single item.
        """
        if isinstance(expected, Predicate) or callable(expected):
            return self.contain_match(expected, because, *because_args)
        if isinstance(expected, SUBSET_TYPES):
            return self.contain_all(expected, because=because, because_args=because_args)
        return self.contain_item(expected, because, *because_args)

    def contain_item(self, item: Any, because: str = "", *because_args: Any) -> AndConstraint:
        """Assert that an item equal to `item` is present."""
        result = self.engine.contain(self.subject, item)
        return self._conclude(result, because, because_args)

    def contain_match(
        self, predicate: Callable[[Any], Any], because: str = "", *because_args: Any
    ) -> AndConstraint:
        """Assert that at least one item satisfies `predicate`."""
        result = self.engine.contain_match(self.subject, predicate)
        return self._conclude(result, because, because_args)

    def contain_all(
        self,
        expected: Iterable[Any],
        *additional: Any,
        because: str = "",
        because_args: tuple[Any, ...] = (),
    ) -> AndConstraint:
        """
        Assert that every item of `expected`, and every extra positional
        item, is present.

        Extra positional arguments are items, not a reason, so the reason
        is keyword-only here:
            .contain_all(strings, "string3", because="{0} is required", because_args=(3,))
        """
        result = self.engine.contain_all(self.subject, [*expected, *additional])
        return self._conclude(result, because, because_args)

    # ─────────────────────────────────────────────────────────────────────
    # Not contain
    # ─────────────────────────────────────────────────────────────────────

    def not_contain(self, unexpected: Any, because: str = "", *because_args: Any) -> AndConstraint:
        """
        Assert that the collection does not contain `unexpected`.

        A Predicate or callable means no item may match it; anything else
        means no item may equal it.
        """
        if isinstance(unexpected, Predicate) or callable(unexpected):
            return self.not_contain_match(unexpected, because, *because_args)
        return self.not_contain_item(unexpected, because, *because_args)

    def not_contain_item(self, item: Any, because: str = "", *because_args: Any) -> AndConstraint:
        """Assert that no item equals `item`."""
        result = self.engine.not_contain(self.subject, item)
        return self._conclude(result, because, because_args)

    def not_contain_match(
        self, predicate: Callable[[Any], Any], because: str = "", *because_args: Any
    ) -> AndConstraint:
        """Assert that no item satisfies `predicate`."""
        result = self.engine.not_contain_match(self.subject, predicate)
        return self._conclude(result, because, because_args)

    # ─────────────────────────────────────────────────────────────────────
    # Only contain
    # ─────────────────────────────────────────────────────────────────────

    def only_contain(
        self, predicate: Callable[[Any], Any], because: str = "", *because_args: Any
    ) -> AndConstraint:
        """Assert that the collection is not empty and every item satisfies `predicate`."""
        result = self.engine.only_contain(self.subject, predicate)
        return self._conclude(result, because, because_args)

    def _conclude(
        self, result: AssertionResult, because: str, because_args: tuple[Any, ...]
    ) -> AndConstraint:
        if result.passed:
            return AndConstraint(self)

        message = build_message(result, because, because_args, self.settings)
        logger.debug(f"Assertion failed: {message}")
        raise AssertionFailure(message)

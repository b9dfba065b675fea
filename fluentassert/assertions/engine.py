"""
Assertion engine for evaluating checks on collections.

This module provides the core containment and predicate logic. Each
check returns an AssertionResult describing what was found; turning a
failed result into a message and raising is left to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Callable

from .models import AssertionResult, CheckKind

logger = logging.getLogger(__name__)


class CollectionAssertionEngine:
    """
    Engine for running containment checks on collections.

    Supported checks:
    - contain: an item equal to the expected one is present
    - contain_match: at least one item satisfies a predicate
    - contain_all: every expected item is present
    - not_contain: no item equals the unexpected one
    - not_contain_match: no item satisfies a predicate
    - only_contain: the collection is non-empty and every item matches

    A None subject fails every check before any item or predicate is
    evaluated. Subjects are read once into a list and never modified.

    Example:
        engine = CollectionAssertionEngine()
        result = engine.contain([1, 2, 3], 2)
        result = engine.only_contain([2, 12, 3], lambda i: i <= 10)
        result.details["non_matching"]   # [12]
    """

    def contain(self, subject: Iterable[Any] | None, item: Any) -> AssertionResult:
        """
        Assert that the subject contains an item equal to `item`.

        Args:
            subject: The collection to search, or None
            item: The item to look for

        Returns:
            AssertionResult indicating pass/fail
        """
        actual = _materialize(subject)
        if actual is None:
            return self._null_subject(CheckKind.CONTAIN, item)

        if item in actual:
            return self._passed(CheckKind.CONTAIN, item, actual)
        return self._failed(CheckKind.CONTAIN, item, actual)

    def contain_match(
        self, subject: Iterable[Any] | None, predicate: Callable[[Any], Any]
    ) -> AssertionResult:
        """
        Assert that at least one item of the subject satisfies `predicate`.

        Args:
            subject: The collection to search, or None
            predicate: A Predicate or one-argument callable

        Returns:
            AssertionResult indicating pass/fail
        """
        _require_callable(predicate)
        actual = _materialize(subject)
        if actual is None:
            return self._null_subject(CheckKind.CONTAIN_MATCH, predicate)

        if any(predicate(item) for item in actual):
            return self._passed(CheckKind.CONTAIN_MATCH, predicate, actual)
        return self._failed(CheckKind.CONTAIN_MATCH, predicate, actual)

    def contain_all(
        self, subject: Iterable[Any] | None, expected: Iterable[Any]
    ) -> AssertionResult:
        """
        Assert that every item of `expected` is present in the subject.

        Items missing from the subject are reported once each, in the
        order they first appear in `expected`.

        Args:
            subject: The collection to search, or None
            expected: Items that must all be present

        Returns:
            AssertionResult indicating pass/fail
        """
        expected = list(expected)
        actual = _materialize(subject)
        if actual is None:
            return self._null_subject(CheckKind.CONTAIN_ALL, expected)

        missing: list[Any] = []
        for item in expected:
            if item not in actual and item not in missing:
                missing.append(item)

        if not missing:
            return self._passed(CheckKind.CONTAIN_ALL, expected, actual)
        return self._failed(
            CheckKind.CONTAIN_ALL, expected, actual, {"missing": missing}
        )

    def not_contain(self, subject: Iterable[Any] | None, item: Any) -> AssertionResult:
        """
        Assert that no item of the subject equals `item`.

        Args:
            subject: The collection to search, or None
            item: The item that must be absent

        Returns:
            AssertionResult indicating pass/fail
        """
        actual = _materialize(subject)
        if actual is None:
            return self._null_subject(CheckKind.NOT_CONTAIN, item)

        if item not in actual:
            return self._passed(CheckKind.NOT_CONTAIN, item, actual)
        return self._failed(CheckKind.NOT_CONTAIN, item, actual)

    def not_contain_match(
        self, subject: Iterable[Any] | None, predicate: Callable[[Any], Any]
    ) -> AssertionResult:
        """
        Assert that no item of the subject satisfies `predicate`.

        Args:
            subject: The collection to search, or None
            predicate: A Predicate or one-argument callable

        Returns:
            AssertionResult indicating pass/fail; a failure lists the
            matching items in their original order
        """
        _require_callable(predicate)
        actual = _materialize(subject)
        if actual is None:
            return self._null_subject(CheckKind.NOT_CONTAIN_MATCH, predicate)

        matching = [item for item in actual if predicate(item)]
        if not matching:
            return self._passed(CheckKind.NOT_CONTAIN_MATCH, predicate, actual)
        return self._failed(
            CheckKind.NOT_CONTAIN_MATCH, predicate, actual, {"matching": matching}
        )

    def only_contain(
        self, subject: Iterable[Any] | None, predicate: Callable[[Any], Any]
    ) -> AssertionResult:
        """
        Assert that the subject has items and all of them satisfy `predicate`.

        Args:
            subject: The collection to check, or None
            predicate: A Predicate or one-argument callable

        Returns:
            AssertionResult indicating pass/fail; a failure either flags
            the subject as empty or lists the non-matching items in their
            original order, duplicates included
        """
        _require_callable(predicate)
        actual = _materialize(subject)
        if actual is None:
            return self._null_subject(CheckKind.ONLY_CONTAIN, predicate)

        if not actual:
            return self._failed(
                CheckKind.ONLY_CONTAIN, predicate, actual, {"empty": True}
            )

        non_matching = [item for item in actual if not predicate(item)]
        if not non_matching:
            return self._passed(CheckKind.ONLY_CONTAIN, predicate, actual)
        return self._failed(
            CheckKind.ONLY_CONTAIN, predicate, actual, {"non_matching": non_matching}
        )

    def _passed(self, check: CheckKind, expected: Any, actual: list[Any]) -> AssertionResult:
        logger.debug(f"{check.value} passed on {len(actual)} item(s)")
        return AssertionResult.passed_result(check, expected=expected, actual=actual)

    def _failed(
        self,
        check: CheckKind,
        expected: Any,
        actual: list[Any],
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        logger.debug(f"{check.value} failed on {len(actual)} item(s)")
        return AssertionResult.failed_result(
            check, expected=expected, actual=actual, details=details
        )

    def _null_subject(self, check: CheckKind, expected: Any) -> AssertionResult:
        logger.debug(f"{check.value} failed: subject is None")
        return AssertionResult.failed_result(check, expected=expected, actual=None)


def _materialize(subject: Iterable[Any] | None) -> list[Any] | None:
    """Read the subject once so checks and messages see the same items."""
    if subject is None:
        return None
    return list(subject)


def _require_callable(predicate: Any) -> None:
    if not callable(predicate):
        raise TypeError(
            f"Predicate must be callable, got {type(predicate).__name__}"
        )

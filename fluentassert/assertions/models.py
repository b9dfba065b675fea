"""
Assertion result models.

This module defines the outcome of a single collection check, the
kinds of check the engine performs, and the failure raised to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"


class CheckKind(str, Enum):
    """Collection checks performed by the engine."""
    CONTAIN = "contain"
    CONTAIN_MATCH = "contain_match"
    CONTAIN_ALL = "contain_all"
    NOT_CONTAIN = "not_contain"
    NOT_CONTAIN_MATCH = "not_contain_match"
    ONLY_CONTAIN = "only_contain"


class AssertionFailure(AssertionError):
    """
    Raised when an assertion does not hold.

    Carries the composed failure message and nothing else, so any host
    test runner can report it as an ordinary failed assertion.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass
class AssertionResult:
    """
    Result of a single collection check.

    Attributes:
        status: Whether the check passed or failed
        check: Which check produced this result
        expected: The item, subset or predicate the check was given
        actual: The subject as a list, or None for a null subject
        details: Data needed to explain a failure:
            - missing: expected items not found (contain_all)
            - matching: items that matched (not_contain_match)
            - non_matching: items that did not match (only_contain)
            - empty: True when the subject had no items (only_contain)
    """
    status: AssertionStatus
    check: CheckKind
    expected: Any = None
    actual: list[Any] | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == AssertionStatus.FAILED

    @property
    def subject_is_null(self) -> bool:
        return self.actual is None

    def __str__(self) -> str:
        """Format as a short human-readable line."""
        if self.passed:
            return f"✅ PASS: {self.check.value}"
        if self.subject_is_null:
            reason = "subject is null"
        else:
            reason = ", ".join(
                f"{key}={value!r}" for key, value in self.details.items()
            ) or "condition not met"
        return f"❌ FAIL: {self.check.value} ({reason})"

    @classmethod
    def passed_result(
        cls,
        check: CheckKind,
        expected: Any = None,
        actual: list[Any] | None = None,
    ) -> AssertionResult:
        """Create a passing result."""
        return cls(
            status=AssertionStatus.PASSED,
            check=check,
            expected=expected,
            actual=actual,
        )

    @classmethod
    def failed_result(
        cls,
        check: CheckKind,
        expected: Any = None,
        actual: list[Any] | None = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create a failing result."""
        return cls(
            status=AssertionStatus.FAILED,
            check=check,
            expected=expected,
            actual=actual,
            details=details or {},
        )

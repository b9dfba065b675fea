"""
Assertion Engine for collection subjects

This package provides the containment and predicate checks, the
messages built from their results, and the fluent wrapper around them.

Supported checks:
    - contain: an equal item is present
    - contain_match: some item satisfies a predicate
    - contain_all: every expected item is present
    - not_contain / not_contain_match: the item or a match is absent
    - only_contain: non-empty, and every item satisfies a predicate

Usage:
    from fluentassert.assertions import CollectionAssertionEngine, build_message

    engine = CollectionAssertionEngine()
    result = engine.contain_all(["a", "b"], ["a", "c"])
    if result.failed:
        print(build_message(result))
"""

# Models
from .models import AssertionFailure, AssertionResult, AssertionStatus, CheckKind

# Engine
from .engine import CollectionAssertionEngine

# Messages
from .messages import build_message

# Fluent wrapper
from .collection import AndConstraint, CollectionAssertions

__all__ = [
    # Models
    "AssertionFailure",
    "AssertionResult",
    "AssertionStatus",
    "CheckKind",
    # Engine
    "CollectionAssertionEngine",
    # Messages
    "build_message",
    # Fluent wrapper
    "AndConstraint",
    "CollectionAssertions",
]

"""
fluentassert - Fluent, readable assertions for collections

This package wraps a subject in chainable assertions that raise an
AssertionFailure with a descriptive message when they do not hold.

Subpackages:
    - assertions: Collection checks, failure messages, fluent wrapper
    - predicates: Describable predicates and the expression builder
    - formatting: Value formatter and "because" reason composer
    - settings: Load and validate rendering settings

Usage:
    from fluentassert import length, should, var

    item = var("item")
    should([1, 2, 3]).contain(item > 3, "at least {0} item should be larger than 3", 1)
    # AssertionFailure: Collection {1, 2, 3} should have an item matching
    # (item > 3) because at least 1 item should be larger than 3.

    should(["a", "b"]).contain("a").and_.only_contain(length(var("s")) == 1)
"""

__version__ = "0.1.0"

# Entry point
from .api import should

# Re-export assertions for convenience
from .assertions import (
    # Models
    AssertionFailure,
    AssertionResult,
    AssertionStatus,
    CheckKind,
    # Engine
    CollectionAssertionEngine,
    build_message,
    # Fluent wrapper
    AndConstraint,
    CollectionAssertions,
)

# Re-export predicates for convenience
from .predicates import Expression, Predicate, describe, length, var

# Re-export formatting for convenience
from .formatting import Formatter, compose_reason, format_scalar

# Re-export settings for convenience
from .settings import (
    FormattingOptions,
    InvalidSettingsError,
    PredicateOptions,
    Settings,
    default_settings,
    load_settings,
    validate_settings_yaml,
)

__all__ = [
    # Package info
    "__version__",
    # Entry point
    "should",
    # Assertions - Models
    "AssertionFailure",
    "AssertionResult",
    "AssertionStatus",
    "CheckKind",
    # Assertions - Engine
    "CollectionAssertionEngine",
    "build_message",
    # Assertions - Fluent wrapper
    "AndConstraint",
    "CollectionAssertions",
    # Predicates
    "Predicate",
    "Expression",
    "var",
    "length",
    "describe",
    # Formatting
    "Formatter",
    "format_scalar",
    "compose_reason",
    # Settings
    "Settings",
    "FormattingOptions",
    "PredicateOptions",
    "InvalidSettingsError",
    "default_settings",
    "load_settings",
    "validate_settings_yaml",
]

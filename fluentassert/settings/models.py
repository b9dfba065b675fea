"""
Typed data structures for fluentassert settings.

This module contains the dataclasses that represent the parsed
contents of a settings file.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ─────────────────────────────────────────────────────────────────────────────
# Sections
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FormattingOptions:
    """
    Limits applied when rendering values into failure messages.

    - max_items: items shown per collection before the rest collapse to "..."
    - max_depth: nesting shown before deeper collections collapse to "{...}"
    - max_string_length: characters shown per string (0 means unlimited)
    """
    max_items: int = 32
    max_depth: int = 5
    max_string_length: int = 0


@dataclass(frozen=True)
class PredicateOptions:
    """How predicates without a captured description are rendered."""
    describe_lambdas: bool = True  # Recover lambda bodies from source


# ─────────────────────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    """Fully parsed and validated settings."""
    version: int = 1
    formatting: FormattingOptions = field(default_factory=FormattingOptions)
    predicates: PredicateOptions = field(default_factory=PredicateOptions)

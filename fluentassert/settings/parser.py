"""
Settings parser for fluentassert.

This module converts validated YAML data into typed Settings structures.
"""

from __future__ import annotations

from typing import Any

from .models import FormattingOptions, PredicateOptions, Settings


class SettingsParser:
    """Parses and converts validated YAML to typed Settings structure."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> Settings:
        """Convert validated data to typed Settings."""
        return Settings(
            version=self.data["version"],
            formatting=self._parse_formatting(),
            predicates=self._parse_predicates(),
        )

    def _parse_formatting(self) -> FormattingOptions:
        formatting = self.data.get("formatting") or {}
        defaults = FormattingOptions()
        return FormattingOptions(
            max_items=formatting.get("max_items", defaults.max_items),
            max_depth=formatting.get("max_depth", defaults.max_depth),
            max_string_length=formatting.get(
                "max_string_length", defaults.max_string_length
            ),
        )

    def _parse_predicates(self) -> PredicateOptions:
        predicates = self.data.get("predicates") or {}
        return PredicateOptions(
            describe_lambdas=predicates.get("describe_lambdas", True),
        )

"""
Value formatter for failure messages.

Renders subjects and expectations into the canonical text used in
messages: <null>, "quoted strings", {1, 2, 3} for collections and
{key: value} for mappings.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence, Set
from functools import singledispatch
from itertools import islice
from typing import Any

from ..settings.models import FormattingOptions

logger = logging.getLogger(__name__)

NULL_TOKEN = "<null>"
ELLIPSIS = "..."
COLLAPSED = "{...}"


@singledispatch
def format_scalar(value: Any) -> str:
    """
    Render a value that is not a string, mapping or collection.

    Register renderers for your own types:

        @format_scalar.register
        def _(value: Money) -> str:
            return f"{value.amount} {value.currency}"

    A renderer registered for a collection type takes precedence over
    the built-in collection rendering.
    """
    return str(value)


class Formatter:
    """
    Formats values for failure messages.

    Order is always preserved: collections render in iteration order and
    are never sorted. Formatting never raises; a value whose own string
    conversion fails renders as <TypeName>.

    Example:
        formatter = Formatter()
        formatter.format([1, 2, 3])     # '{1, 2, 3}'
        formatter.format(["a", "b"])    # '{"a", "b"}'
        formatter.format(None)          # '<null>'
    """

    def __init__(self, options: FormattingOptions | None = None):
        self.options = options or FormattingOptions()

    def format(self, value: Any) -> str:
        """Render a value into its canonical text."""
        return self._format(value, depth=0, seen=frozenset())

    def _format(self, value: Any, depth: int, seen: frozenset[int]) -> str:
        if value is None:
            return NULL_TOKEN

        if _has_custom_renderer(value):
            return self._format_scalar(value)

        if isinstance(value, str):
            return self._format_string(value)

        if _is_collection(value):
            if id(value) in seen or depth >= self.options.max_depth:
                return COLLAPSED
            return self._format_collection(value, depth, seen | {id(value)})

        return self._format_scalar(value)

    def _format_string(self, value: str) -> str:
        limit = self.options.max_string_length
        if limit and len(value) > limit:
            value = value[:limit] + ELLIPSIS
        return f'"{value}"'

    def _format_collection(self, value: Any, depth: int, seen: frozenset[int]) -> str:
        limit = self.options.max_items

        if isinstance(value, Mapping):
            parts = [
                f"{self._format(k, depth + 1, seen)}: {self._format(v, depth + 1, seen)}"
                for k, v in islice(value.items(), limit)
            ]
        else:
            parts = [self._format(item, depth + 1, seen) for item in islice(value, limit)]

        if len(value) > limit:
            parts.append(ELLIPSIS)

        return "{" + ", ".join(parts) + "}"

    def _format_scalar(self, value: Any) -> str:
        try:
            return format_scalar(value)
        except Exception as e:
            logger.debug(f"Could not format {type(value).__name__}: {e}")
            return f"<{type(value).__name__}>"


def _is_collection(value: Any) -> bool:
    """Sized containers that render as {...}; bytes stay scalar."""
    if isinstance(value, (bytes, bytearray)):
        return False
    return isinstance(value, (Mapping, Sequence, Set))


def _has_custom_renderer(value: Any) -> bool:
    return format_scalar.dispatch(type(value)) is not format_scalar.dispatch(object)

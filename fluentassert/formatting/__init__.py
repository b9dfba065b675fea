"""
Message formatting for fluentassert

Renders values and "because" reasons into the text of failure messages.

Usage:
    from fluentassert.formatting import Formatter, compose_reason

    Formatter().format(["a", "b"])          # '{"a", "b"}'
    compose_reason("{0} is required", 4)    # ' because 4 is required'
"""

from .formatter import COLLAPSED, ELLIPSIS, NULL_TOKEN, Formatter, format_scalar
from .reason import compose_reason

__all__ = [
    "Formatter",
    "format_scalar",
    "compose_reason",
    "NULL_TOKEN",
    "ELLIPSIS",
    "COLLAPSED",
]

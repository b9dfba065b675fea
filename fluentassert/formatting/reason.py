"""Composition of the optional "because" clause of failure messages."""

from __future__ import annotations

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_STARTS_WITH_BECAUSE = re.compile(r"^because\b", re.IGNORECASE)


def compose_reason(because: str = "", *because_args: Any) -> str:
    """
    Build the reason clause appended to a failure message.

    Placeholders such as {0} are filled with the plain str() of each
    argument. The text is prefixed with "because" unless it already
    starts with that word, and the clause carries its own leading space
    so it can be dropped straight into a template.

    Returns:
        "" when no reason is given, otherwise " because <text>"

    Example:
        compose_reason("{0} is the maximum", 10)   # ' because 10 is the maximum'
        compose_reason("because it is required")   # ' because it is required'
        compose_reason()                           # ''
    """
    if not because or not str(because).strip():
        return ""

    text = str(because)
    if because_args:
        try:
            text = text.format(*because_args)
        except Exception as e:
            logger.debug(f"Reason {text!r} could not be formatted with its arguments: {e}")

    text = text.strip()
    if not _STARTS_WITH_BECAUSE.match(text):
        text = f"because {text}"

    return f" {text}"

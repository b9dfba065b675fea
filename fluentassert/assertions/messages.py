"""
Failure message templates.

Turns a failed AssertionResult into the sentence carried by
AssertionFailure. Each check has a template for a null subject and one
(or, for only_contain, two) for a subject that was present.
"""

from __future__ import annotations

import logging
from typing import Any

from ..formatting.formatter import Formatter
from ..formatting.reason import compose_reason
from ..predicates.describer import describe
from ..settings.models import Settings
from .models import AssertionResult, CheckKind

logger = logging.getLogger(__name__)

# {expected} is the formatted item/subset or the described predicate,
# which already carries its parentheses. {reason} is "" or " because ...".
NULL_TEMPLATES: dict[CheckKind, str] = {
    CheckKind.CONTAIN: "Expected collection to contain {expected}{reason}, but found <null>.",
    CheckKind.CONTAIN_MATCH: "Expected collection to contain {expected}{reason}, but found <null>.",
    CheckKind.CONTAIN_ALL: "Expected collection to contain {expected}{reason}, but found <null>.",
    CheckKind.NOT_CONTAIN: "Expected collection not to contain {expected}{reason}, but found <null>.",
    CheckKind.NOT_CONTAIN_MATCH: "Expected collection not to contain {expected}{reason}, but found <null>.",
    CheckKind.ONLY_CONTAIN: (
        "Expected collection to contain only items matching {expected}{reason}, but found <null>."
    ),
}

TEMPLATES: dict[CheckKind, str] = {
    CheckKind.CONTAIN: "Expected collection {subject} to contain {expected}{reason}.",
    CheckKind.CONTAIN_MATCH: "Collection {subject} should have an item matching {expected}{reason}.",
    CheckKind.CONTAIN_ALL: (
        "Expected collection {subject} to contain {expected}{reason}, but could not find {missing}."
    ),
    CheckKind.NOT_CONTAIN: "Expected collection {subject} not to contain {expected}{reason}.",
    CheckKind.NOT_CONTAIN_MATCH: (
        "Collection {subject} should not have any items matching {expected}{reason}, "
        "but found {matching}."
    ),
    CheckKind.ONLY_CONTAIN: (
        "Expected collection to contain only items matching {expected}{reason}, "
        "but {non_matching} do(es) not match."
    ),
}

EMPTY_ONLY_CONTAIN_TEMPLATE = (
    "Expected collection to contain only items matching {expected}{reason}, "
    "but the collection is empty."
)

PREDICATE_CHECKS = frozenset({
    CheckKind.CONTAIN_MATCH,
    CheckKind.NOT_CONTAIN_MATCH,
    CheckKind.ONLY_CONTAIN,
})


def build_message(
    result: AssertionResult,
    because: str = "",
    because_args: tuple[Any, ...] = (),
    settings: Settings | None = None,
) -> str:
    """
    Compose the failure message for a failed result.

    Never raises: if a template cannot be filled, a shorter message
    naming the check is returned instead.

    Args:
        result: A failed AssertionResult
        because: Optional reason, may contain {0}-style placeholders
        because_args: Values for the reason's placeholders
        settings: Rendering options; defaults are used when omitted

    Returns:
        The complete message, always ending with a period
    """
    settings = settings or Settings()
    formatter = Formatter(settings.formatting)
    reason = ""

    try:
        reason = compose_reason(because, *because_args)
        if result.check in PREDICATE_CHECKS:
            expected = describe(result.expected, settings.predicates.describe_lambdas)
        else:
            expected = formatter.format(result.expected)

        if result.subject_is_null:
            return NULL_TEMPLATES[result.check].format(expected=expected, reason=reason)

        if result.check == CheckKind.ONLY_CONTAIN and result.details.get("empty"):
            return EMPTY_ONLY_CONTAIN_TEMPLATE.format(expected=expected, reason=reason)

        details = {
            key: formatter.format(value)
            for key, value in result.details.items()
            if key != "empty"
        }
        return TEMPLATES[result.check].format(
            subject=formatter.format(result.actual),
            expected=expected,
            reason=reason,
            **details,
        )
    except Exception as e:
        logger.debug(f"Could not build message for {result.check.value}: {e}")
        return f"Expected collection to satisfy {result.check.value}{reason}."

"""
The `should` entry point.

`should(subject)` picks the assertions class for the subject's category.
Collections (and None) get CollectionAssertions; other categories can be
added with `should.register`.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import singledispatch
from typing import Any

from .assertions.collection import CollectionAssertions
from .settings.models import Settings


@singledispatch
def should(subject: Any, settings: Settings | None = None) -> Any:
    """
    Start a fluent assertion on `subject`.

    Args:
        subject: The value under test
        settings: Rendering options for failure messages; defaults to
            default_settings()

    Returns:
        An assertions object for the subject's category

    Raises:
        TypeError: If no assertions are registered for the subject's type

    Example:
        item = var("item")
        should([1, 2, 3]).contain(item > 2)
        should(["a", "b"]).contain(["a", "b"]).and_.not_contain("c")
    """
    raise TypeError(f"No assertions available for subject of type {type(subject).__name__}")


@should.register(type(None))
@should.register(Iterable)
def _(subject: Iterable[Any] | None, settings: Settings | None = None) -> CollectionAssertions:
    return CollectionAssertions(subject, settings=settings)


@should.register(str)
@should.register(bytes)
@should.register(bytearray)
def _(subject: Any, settings: Settings | None = None) -> Any:
    raise TypeError(
        f"No assertions available for subject of type {type(subject).__name__}; "
        "wrap it in a list to assert on it as a collection item"
    )

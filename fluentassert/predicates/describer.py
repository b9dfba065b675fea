"""
Predicate describer.

Produces the parenthesized text shown for a predicate in failure
messages. Predicate objects carry their own description; for bare
lambdas the body is recovered from source when possible.
"""

from __future__ import annotations

import ast
import inspect
import logging
import tokenize
from dataclasses import dataclass
from typing import Any, Callable

from .models import Predicate

logger = logging.getLogger(__name__)

# Longest source fragment searched for a lambda
_MAX_SOURCE_LENGTH = 2000


def describe(predicate: Predicate | Callable[[Any], Any], describe_lambdas: bool = True) -> str:
    """
    Describe a predicate for a failure message.

    Args:
        predicate: A Predicate or any one-argument callable
        describe_lambdas: Recover the body of bare lambdas from source

    Returns:
        The description wrapped in parentheses, e.g. "(item > 3)"
    """
    return f"({description_of(predicate, describe_lambdas)})"


def description_of(predicate: Predicate | Callable[[Any], Any], describe_lambdas: bool = True) -> str:
    """The unparenthesized description of a predicate."""
    if isinstance(predicate, Predicate):
        return predicate.description

    if describe_lambdas:
        source = lambda_source(predicate)
        if source:
            return source

    return getattr(predicate, "__name__", None) or type(predicate).__name__


def lambda_source(func: Any) -> str | None:
    """
    Recover the body of a lambda as written, e.g. 'item > 3'.

    The lambda is located by the source positions recorded in its code
    object, so several lambdas on one line are told apart. Returns None
    for anything that is not a lambda, when its source is unavailable
    (interactive sessions, compiled code), or when it cannot be isolated
    unambiguously.
    """
    code = getattr(func, "__code__", None)
    if code is None or getattr(func, "__name__", None) != "<lambda>":
        return None

    try:
        lines, first_line = inspect.getsourcelines(func)
    except (OSError, TypeError, IndexError, SyntaxError, tokenize.TokenError) as e:
        logger.debug(f"Source unavailable for lambda: {e}")
        return None

    arg_names = list(code.co_varnames[: code.co_argcount])
    positions = [p for p in code.co_positions() if None not in p]

    for fragment in _fragments(lines, first_line):
        tree = _parse_prefix(fragment.text)
        if tree is None:
            continue
        candidates = [
            node for node in ast.walk(tree)
            if isinstance(node, ast.Lambda) and [a.arg for a in node.args.args] == arg_names
        ]
        node = _pick(candidates, positions, fragment)
        if node is None:
            continue
        segment = ast.get_source_segment(fragment.text, node.body)
        if segment and "\n" in segment:
            segment = " ".join(segment.split())
        return segment

    logger.debug(f"Could not isolate lambda in source: {''.join(lines)!r}")
    return None


@dataclass(frozen=True)
class _Fragment:
    """Parseable snippet of source and how it maps back to the file."""
    text: str
    first_line: int  # file line of the snippet's line 1
    first_shift: int  # bytes removed before the snippet's line 1
    shift: int  # bytes removed before each later line

    def file_position(self, lineno: int, col_offset: int) -> tuple[int, int]:
        shift = self.first_shift if lineno == 1 else self.shift
        return self.first_line + lineno - 1, col_offset + shift


def _fragments(lines: list[str], first_line: int) -> list[_Fragment]:
    """Candidate snippets of source that may parse on their own."""
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    margin = min(indents, default=0)
    text = "".join(line[margin:] if line.strip() else "\n" for line in lines)
    text = text.rstrip()[:_MAX_SOURCE_LENGTH]

    fragments = [_Fragment(text, first_line, margin, margin)]
    head = text.split("\n", 1)[0]
    start = head.find("lambda")
    if start > 0:
        shift = margin + len(head[:start].encode())
        fragments.append(_Fragment(text[start:], first_line, shift, margin))
    return fragments


def _pick(
    candidates: list[ast.Lambda],
    positions: list[tuple[int, int, int, int]],
    fragment: _Fragment,
) -> ast.Lambda | None:
    """
    The candidate whose span holds the most of the code's positions.

    Ties go to the smaller span (an inner lambda inside an outer one);
    a tie on both counts as ambiguous.
    """
    if not positions:
        return candidates[0] if len(candidates) == 1 else None

    best: ast.Lambda | None = None
    best_key: tuple[int, tuple[int, int]] | None = None
    ambiguous = False

    for node in candidates:
        start = fragment.file_position(node.lineno, node.col_offset)
        end = fragment.file_position(node.end_lineno, node.end_col_offset)
        hits = sum(
            1 for line, end_line, col, end_col in positions
            if start <= (line, col) and (end_line, end_col) <= end
        )
        if not hits:
            continue
        key = (-hits, (end[0] - start[0], end[1] - start[1]))
        if best_key is None or key < best_key:
            best, best_key, ambiguous = node, key, False
        elif key == best_key:
            ambiguous = True

    return None if ambiguous else best


def _parse_prefix(text: str) -> ast.AST | None:
    """Parse the longest prefix of text that is valid Python."""
    while text:
        try:
            return ast.parse(text)
        except SyntaxError:
            text = text[:-1].rstrip()
    return None

"""Tests for the collection assertion engine and message building."""

import logging

import pytest

from fluentassert.assertions import (
    AssertionResult,
    AssertionStatus,
    CheckKind,
    CollectionAssertionEngine,
    build_message,
)
from fluentassert.predicates import Predicate, var
from fluentassert.settings import FormattingOptions, PredicateOptions, Settings


@pytest.fixture
def engine():
    return CollectionAssertionEngine()


# --- contain ---


def test_contain_pass(engine):
    result = engine.contain([1, 2, 3], 2)
    assert isinstance(result, AssertionResult)
    assert result.passed is True
    assert result.check == CheckKind.CONTAIN


def test_contain_fail(engine):
    result = engine.contain([1, 2, 3], 4)
    assert result.failed is True
    assert result.actual == [1, 2, 3]
    assert result.expected == 4


def test_contain_uses_equality(engine):
    assert engine.contain([1.0, 2.0], 1).passed is True


# --- contain_match ---


def test_contain_match_pass_and_fail(engine):
    n = var("n")
    assert engine.contain_match([1, 2, 3], n == 2).passed is True
    assert engine.contain_match([1, 2, 3], n > 3).failed is True


def test_contain_match_accepts_plain_callable(engine):
    assert engine.contain_match(["a", ""], lambda s: not s).passed is True


# --- contain_all ---


def test_contain_all_reports_missing_once_in_order(engine):
    result = engine.contain_all(["a", "b"], ["c", "a", "d", "c"])
    assert result.failed is True
    assert result.details == {"missing": ["c", "d"]}


def test_contain_all_handles_unhashable_items(engine):
    result = engine.contain_all([[1], [2]], [[2], [3], [3]])
    assert result.details["missing"] == [[3]]


def test_contain_all_pass(engine):
    assert engine.contain_all([1, 2, 3], [3, 1, 1]).passed is True


# --- not_contain / not_contain_match ---


def test_not_contain(engine):
    assert engine.not_contain([1, 2], 3).passed is True
    assert engine.not_contain([1, 2], 2).failed is True


def test_not_contain_match_lists_matching_items(engine):
    n = var("n")
    result = engine.not_contain_match([1, 6, 2, 8], n > 5)
    assert result.failed is True
    assert result.details == {"matching": [6, 8]}


def test_contain_match_and_not_contain_match_are_exclusive(engine):
    n = var("n")
    for subject in ([1, 2], [5, 6], [1, 9]):
        predicate = n > 4
        contains = engine.contain_match(subject, predicate).passed
        lacks = engine.not_contain_match(subject, predicate).passed
        assert contains != lacks


# --- only_contain ---


def test_only_contain_empty(engine):
    result = engine.only_contain([], var("e").Length > 0)
    assert result.failed is True
    assert result.details == {"empty": True}


def test_only_contain_non_matching_keeps_order_and_duplicates(engine):
    i = var("i")
    result = engine.only_contain([2, 12, 3, 11, 2, 12], i <= 10)
    assert result.details == {"non_matching": [12, 11, 12]}


def test_only_contain_pass(engine):
    assert engine.only_contain([2, 9, 3], var("i") <= 10).passed is True


# --- null subject ---


@pytest.mark.parametrize(
    "check, argument",
    [
        ("contain", "x"),
        ("contain_all", ["x"]),
        ("not_contain", "x"),
        ("contain_match", Predicate(bool, "x")),
        ("not_contain_match", Predicate(bool, "x")),
        ("only_contain", Predicate(bool, "x")),
    ],
)
def test_null_subject_fails_every_check(engine, check, argument):
    result = getattr(engine, check)(None, argument)
    assert result.status == AssertionStatus.FAILED
    assert result.subject_is_null is True
    assert result.details == {}


def test_null_subject_does_not_evaluate_predicate(engine):
    def explode(item):
        raise AssertionError("predicate should not run")

    assert engine.only_contain(None, explode).subject_is_null is True


def test_predicate_errors_propagate(engine):
    with pytest.raises(ZeroDivisionError):
        engine.contain_match([0], lambda n: 1 / n)


def test_engine_logs_outcome(engine, caplog):
    with caplog.at_level(logging.DEBUG, logger="fluentassert.assertions.engine"):
        engine.contain([1], 2)
    assert "contain failed" in caplog.text


# --- AssertionResult ---


def test_result_str():
    passed = AssertionResult.passed_result(CheckKind.CONTAIN, expected=1, actual=[1])
    failed = AssertionResult.failed_result(CheckKind.CONTAIN_ALL, expected=[2], actual=[1], details={"missing": [2]})
    null = AssertionResult.failed_result(CheckKind.CONTAIN, expected=1)

    assert str(passed) == "✅ PASS: contain"
    assert str(failed) == "❌ FAIL: contain_all (missing=[2])"
    assert str(null) == "❌ FAIL: contain (subject is null)"


# --- build_message ---


def test_build_message_uses_settings():
    engine = CollectionAssertionEngine()
    result = engine.contain(["abcdef"], "xyz")
    settings = Settings(formatting=FormattingOptions(max_string_length=3))

    assert build_message(result, settings=settings) == 'Expected collection {"abc..."} to contain "xyz".'


def test_build_message_without_lambda_descriptions():
    engine = CollectionAssertionEngine()
    result = engine.contain_match([1], lambda item: item > 3)
    settings = Settings(predicates=PredicateOptions(describe_lambdas=False))

    assert build_message(result, settings=settings) == "Collection {1} should have an item matching (<lambda>)."


def test_build_message_with_reason_arguments():
    engine = CollectionAssertionEngine()
    result = engine.only_contain([2, 12], var("i") <= 10)

    message = build_message(result, "{0} is the maximum", (10,))

    assert message == (
        "Expected collection to contain only items matching (i <= 10) because 10 is the maximum, "
        "but {12} do(es) not match."
    )


def test_build_message_with_unresolvable_reason_placeholder():
    engine = CollectionAssertionEngine()
    result = engine.contain([1], 2)

    message = build_message(result, "{0.missing} is required", (1,))

    assert message == "Expected collection {1} to contain 2 because {0.missing} is required."

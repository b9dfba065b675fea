"""End-to-end tests for should(...) on collections."""

import pytest

from fluentassert import (
    AndConstraint,
    AssertionFailure,
    CollectionAssertions,
    FormattingOptions,
    Predicate,
    Settings,
    should,
    var,
)


def failure_message(act) -> str:
    with pytest.raises(AssertionFailure) as excinfo:
        act()
    return excinfo.value.message


# --- contain(predicate) ---


def test_contain_predicate_without_match_fails():
    item = var("item")
    collection = [1, 2, 3]

    message = failure_message(
        lambda: should(collection).contain(item > 3, "at least {0} item should be larger than 3", 1)
    )

    assert message == (
        "Collection {1, 2, 3} should have an item matching (item > 3) "
        "because at least 1 item should be larger than 3."
    )


def test_contain_predicate_with_match_passes():
    item = var("item")
    should([1, 2, 3]).contain(item == 2)


def test_contain_bare_lambda_is_described_from_source():
    message = failure_message(lambda: should([1, 2, 3]).contain(lambda item: item > 3))

    assert message == "Collection {1, 2, 3} should have an item matching (item > 3)."


def test_contain_predicate_on_null_subject_fails():
    x = var("x")

    message = failure_message(
        lambda: should(None).contain(x == "xxx", "because we're checking how it reacts to a null subject")
    )

    assert message == (
        'Expected collection to contain (x == "xxx") because we\'re checking '
        "how it reacts to a null subject, but found <null>."
    )


# --- contain(item) ---


def test_contain_string_passes():
    should(["string1", "string2", "string3"]).contain("string2")


def test_contain_missing_string_fails():
    strings = ["string1", "string2", "string3"]

    message = failure_message(lambda: should(strings).contain("string4", "because {0} is required", "4"))

    assert message == (
        'Expected collection {"string1", "string2", "string3"} to contain "string4" '
        "because 4 is required."
    )


def test_contain_item_on_null_subject_fails():
    message = failure_message(
        lambda: should(None).contain("string4", "because we're checking how it reacts to a null subject")
    )

    assert message == (
        'Expected collection to contain "string4" because we\'re checking how it '
        "reacts to a null subject, but found <null>."
    )


def test_contain_item_looks_for_list_as_single_item():
    should([[1, 2], [3]]).contain_item([1, 2])


def test_message_without_reason_has_no_because_clause():
    message = failure_message(lambda: should([1]).contain(2))

    assert message == "Expected collection {1} to contain 2."
    assert " because " not in message


# --- contain(subset) ---


def test_contain_subset_with_missing_item_fails():
    strings = ["string1", "string2"]

    message = failure_message(lambda: should(strings).contain(strings + ["string3"]))

    assert message == (
        'Expected collection {"string1", "string2"} to contain '
        '{"string1", "string2", "string3"}, but could not find {"string3"}.'
    )


def test_contain_subset_reports_missing_items_once_in_order():
    message = failure_message(lambda: should([1, 2]).contain([4, 1, 3, 4, 3]))

    assert message == (
        "Expected collection {1, 2} to contain {4, 1, 3, 4, 3}, but could not find {4, 3}."
    )


def test_contain_subset_passes_when_all_present():
    should(["a", "b", "c"]).contain(("c", "a"))


def test_contain_all_with_additional_items_fails():
    strings = ["string1", "string2"]

    message = failure_message(lambda: should(strings).contain_all(strings, "string3"))

    assert message == (
        'Expected collection {"string1", "string2"} to contain '
        '{"string1", "string2", "string3"}, but could not find {"string3"}.'
    )


def test_contain_all_with_additional_items_passes():
    should(["a", "b", "c"]).contain_all(["a"], "b", "c")


def test_contain_all_takes_reason_by_keyword():
    message = failure_message(
        lambda: should([1, 2]).contain_all([1], 3, because="{0} is required", because_args=(3,))
    )

    assert message == (
        "Expected collection {1, 2} to contain {1, 3} because 3 is required, but could not find {3}."
    )


def test_contain_subset_on_null_subject_fails():
    message = failure_message(lambda: should(None).contain(["a"]))

    assert message == 'Expected collection to contain {"a"}, but found <null>.'


# --- not_contain ---


def test_not_contain_predicate_on_null_subject_fails():
    x = var("x")

    message = failure_message(
        lambda: should(None).not_contain(x == "xxx", "because we're checking how it reacts to a null subject")
    )

    assert message == (
        'Expected collection not to contain (x == "xxx") because we\'re checking '
        "how it reacts to a null subject, but found <null>."
    )


def test_not_contain_predicate_with_match_fails():
    n = var("n")

    message = failure_message(lambda: should([1, 5, 2, 7]).not_contain(n > 4, "{0} is the limit", 4))

    assert message == (
        "Collection {1, 5, 2, 7} should not have any items matching (n > 4) "
        "because 4 is the limit, but found {5, 7}."
    )


def test_not_contain_predicate_without_match_passes():
    should([1, 2, 3]).not_contain(var("n") > 3)


def test_not_contain_item_present_fails():
    message = failure_message(lambda: should(["a", "b"]).not_contain("b"))

    assert message == 'Expected collection {"a", "b"} not to contain "b".'


def test_not_contain_item_on_null_subject_fails():
    message = failure_message(lambda: should(None).not_contain("b"))

    assert message == 'Expected collection not to contain "b", but found <null>.'


# --- only_contain ---


def test_only_contain_with_non_matching_items_fails():
    i = var("i")
    collection = [2, 12, 3, 11, 2]

    message = failure_message(lambda: should(collection).only_contain(i <= 10, "10 is the maximum"))

    assert message == (
        "Expected collection to contain only items matching (i <= 10) because 10 is the maximum, "
        "but {12, 11} do(es) not match."
    )


def test_only_contain_keeps_duplicate_non_matching_items():
    i = var("i")

    message = failure_message(lambda: should([12, 1, 12]).only_contain(i <= 10))

    assert message.endswith("but {12, 12} do(es) not match.")


def test_only_contain_on_empty_collection_fails():
    e = var("e")

    message = failure_message(lambda: should([]).only_contain(e.Length > 0))

    assert message == (
        "Expected collection to contain only items matching (e.Length > 0), "
        "but the collection is empty."
    )


def test_only_contain_with_all_matching_items_passes():
    i = var("i")
    should([2, 9, 3, 8, 2]).only_contain(i <= 10)


def test_only_contain_on_null_subject_fails():
    message = failure_message(lambda: should(None).only_contain(Predicate(bool, "x")))

    assert message == "Expected collection to contain only items matching (x), but found <null>."


# --- chaining ---


def test_passing_verb_returns_chainable_constraint():
    n = var("n")

    constraint = should([1, 2, 3]).contain(1).and_.not_contain(n > 3).and_.only_contain(n > 0)

    assert isinstance(constraint, AndConstraint)
    assert isinstance(constraint.and_, CollectionAssertions)


def test_chain_stops_at_first_failure():
    message = failure_message(lambda: should([1, 2]).contain(1).and_.contain(5).and_.contain(2))

    assert message == "Expected collection {1, 2} to contain 5."


# --- subjects ---


def test_generator_subject_is_read_once():
    subject = (n for n in [1, 2, 3])

    message = failure_message(lambda: should(subject).contain(4))

    assert message == "Expected collection {1, 2, 3} to contain 4."


def test_string_subject_is_rejected():
    with pytest.raises(TypeError, match="str"):
        should("abc")


def test_non_iterable_subject_is_rejected():
    with pytest.raises(TypeError, match="int"):
        should(42)


def test_non_callable_predicate_is_rejected():
    with pytest.raises(TypeError, match="callable"):
        should([1]).only_contain(3)


def test_explicit_settings_shape_the_message():
    settings = Settings(formatting=FormattingOptions(max_items=2))

    message = failure_message(lambda: should([1, 2, 3], settings=settings).contain(9))

    assert message == "Expected collection {1, 2, ...} to contain 9."


def test_failure_is_an_assertion_error():
    with pytest.raises(AssertionError, match=r"to contain 2\.$"):
        should([1]).contain(2)


def test_reason_placeholder_error_still_raises_assertion_failure():
    message = failure_message(lambda: should([1]).contain(2, "{0[1]} is required", 5))

    assert message == "Expected collection {1} to contain 2 because {0[1]} is required."


def test_chained_lambdas_on_one_line_describe_the_failing_one():
    message = failure_message(lambda: should([1, 2]).contain(lambda i: i > 3).and_.only_contain(lambda i: i < 4))

    assert message == "Collection {1, 2} should have an item matching (i > 3)."

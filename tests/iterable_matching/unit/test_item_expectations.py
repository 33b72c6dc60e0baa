"""Item expectation variant tests."""

from __future__ import annotations

import pytest
from hamcrest import equal_to, starts_with
from hamcrest.core.string_description import StringDescription
from fluent_matchers import an_iterable_of
from fluent_matchers.iterable_matching.item_expectations import (
    MatcherExpectation,
    PredicateExpectation,
    ScorableExpectation,
    ValueExpectation,
    expectation_for_matcher,
    expectation_for_value,
)


def _describe(expectation) -> str:
    description = StringDescription()
    expectation.describe_to(description)
    return str(description)


def test_values_become_equality_expectations() -> None:
    expectation = expectation_for_value("a")

    assert isinstance(expectation, ValueExpectation)
    assert expectation.test("a")
    assert not expectation.test("b")
    assert expectation.partial_score("b") == 0.0
    assert _describe(expectation) == "'a'"


def test_hamcrest_matchers_are_wrapped() -> None:
    expectation = expectation_for_matcher(starts_with("ab"))

    assert isinstance(expectation, MatcherExpectation)
    assert expectation.test("abc")
    assert not expectation.test("xbc")
    assert _describe(expectation) == "a string starting with 'ab'"


def test_callables_become_predicate_expectations() -> None:
    def is_even(value: int) -> bool:
        return value % 2 == 0

    expectation = expectation_for_matcher(is_even)

    assert isinstance(expectation, PredicateExpectation)
    assert expectation.test(4)
    assert not expectation.test(3)
    assert _describe(expectation) == "an item satisfying is_even"


def test_fluent_matchers_are_scorable() -> None:
    nested = an_iterable_of(str).with_items("a", "b")

    expectation = expectation_for_matcher(nested)

    assert isinstance(expectation, ScorableExpectation)
    assert not expectation.test(["a", "x"])
    assert expectation.partial_score(["a", "x"]) == pytest.approx(0.5)
    assert expectation.test(["b", "a"])


def test_plain_matchers_are_not_scorable() -> None:
    assert not isinstance(expectation_for_matcher(equal_to(1)), ScorableExpectation)


def test_unsupported_expectations_are_rejected() -> None:
    with pytest.raises(TypeError, match="Unsupported item expectation"):
        expectation_for_matcher(42)  # type: ignore[arg-type]


def test_scorable_partial_score_evaluates_items_not_yet_tested() -> None:
    expectation = expectation_for_matcher(an_iterable_of(str).with_items("a", "b"))
    tested = ["a"]

    assert expectation.partial_score(["x"]) == pytest.approx(0.25)
    assert not expectation.test(tested)
    assert expectation.partial_score(tested) == pytest.approx(0.5)

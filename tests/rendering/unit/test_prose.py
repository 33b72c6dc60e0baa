"""Prose rendering tests."""

from __future__ import annotations

from hamcrest import starts_with
from fluent_matchers.customization.symbols import ascii_symbols, default_symbols
from fluent_matchers.iterable_matching.expectation_settings import IterableExpectations
from fluent_matchers.iterable_matching.item_expectations import (
    MatcherExpectation,
    PredicateExpectation,
    ValueExpectation,
)
from fluent_matchers.iterable_matching.item_results import CandidateExpectation, ItemResult
from fluent_matchers.rendering.prose import (
    describe_expectations,
    render_item_line,
    render_item_lines,
)


def test_describes_bare_expectation_set() -> None:
    assert describe_expectations(IterableExpectations(item_type=int)) == "an iterable of int"


def test_describes_custom_sort_order_and_item_matchers() -> None:
    settings = IterableExpectations(
        item_type=str,
        expectations=(MatcherExpectation(starts_with("a")), ValueExpectation("b")),
        sorted=True,
        comparator=lambda left, right: 0,
    )

    assert describe_expectations(settings) == (
        "an iterable of str with sorted by custom order; "
        "items [a string starting with 'a', 'b']"
    )


def test_renders_matched_item_with_flags() -> None:
    result = ItemResult(
        value="a",
        index=3,
        matched=True,
        breaking_sort_order=True,
        duplicate=True,
    )

    assert render_item_line(result, ascii_symbols()) == "OK [3] 'a' ^v 2+"


def test_renders_unmatched_item_with_closest_value_expectation() -> None:
    result = ItemResult(
        value="b",
        index=0,
        matched=False,
        candidates=(CandidateExpectation(0, ValueExpectation("a"), 0.0),),
        unwanted=True,
    )

    assert render_item_line(result, ascii_symbols()) == "FAIL [0] 'b' -- != 'a'"


def test_renders_partial_score_of_nested_candidates() -> None:
    def is_short(value: str) -> bool:
        return len(value) < 3

    result = ItemResult(
        value="long",
        index=0,
        matched=False,
        candidates=(CandidateExpectation(0, PredicateExpectation(is_short), 0.25),),
    )

    assert render_item_line(result, default_symbols()) == (
        "💔 ⦗0⦘ 'long' ⩳ an item satisfying is_short ▶ score 0.25"
    )


def test_aligns_index_and_value_columns() -> None:
    results = [
        ItemResult(value=value, index=index, matched=True)
        for index, value in enumerate("abcdefghijk")
    ]
    results[0] = ItemResult(value="long", index=0, matched=False)

    lines = render_item_lines(results, ascii_symbols())

    assert lines[0] == "FAIL [ 0] 'long'"
    assert lines[10] == "OK [10] 'k'"
    assert render_item_lines([], ascii_symbols()) == []

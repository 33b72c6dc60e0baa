"""Human-readable rendering of expectations and per-item diagnostics."""

from __future__ import annotations

from collections.abc import Sequence

from hamcrest.core.string_description import StringDescription

from fluent_matchers.customization.symbols import Symbols
from fluent_matchers.iterable_matching.assessment import Finding
from fluent_matchers.iterable_matching.expectation_settings import IterableExpectations
from fluent_matchers.iterable_matching.item_expectations import ItemExpectation
from fluent_matchers.iterable_matching.item_results import CandidateExpectation, ItemResult


def describe_expectations(settings: IterableExpectations) -> str:
    """Summarize an expectation set in one sentence."""
    parts: list[str] = []
    if settings.expected_size is not None:
        parts.append(f"size {settings.expected_size}")
    if settings.exhaustive:
        parts.append("no unexpected items")
    if settings.ordered:
        parts.append("items in declared order")
    if settings.sorted:
        parts.append("sorted" if settings.comparator is None else "sorted by custom order")
    if settings.unique:
        parts.append("unique items")
    if settings.expectations:
        rendered = ", ".join(describe_expectation(item) for item in settings.expectations)
        parts.append(f"items [{rendered}]")

    text = f"an iterable of {settings.item_type.__name__}"
    if parts:
        text += " with " + "; ".join(parts)
    return text


def describe_expectation(expectation: ItemExpectation) -> str:
    description = StringDescription()
    expectation.describe_to(description)
    return str(description)


def describe_findings(findings: Sequence[Finding]) -> list[str]:
    return [finding.description for finding in findings]


def render_item_lines(results: Sequence[ItemResult], symbols: Symbols) -> list[str]:
    """Render one aligned line per item diagnostic."""
    if not results:
        return []
    index_width = len(str(len(results) - 1))
    value_width = max(len(repr(result.value)) for result in results)
    return [
        render_item_line(result, symbols, index_width=index_width, value_width=value_width)
        for result in results
    ]


def render_item_line(
    result: ItemResult,
    symbols: Symbols,
    *,
    index_width: int = 1,
    value_width: int = 1,
) -> str:
    status = (
        symbols.iterable_item_matches_symbol
        if result.matched
        else symbols.iterable_item_not_matches_symbol
    )
    position = f"{symbols.left_bracket}{result.index:>{index_width}}{symbols.right_bracket}"
    line = f"{status} {position} {repr(result.value):<{value_width}}"

    flags = _render_flags(result, symbols)
    if flags:
        line += f" {flags}"
    if not result.matched and result.candidates:
        line += _render_candidate(result.candidates[0], symbols)
    return line.rstrip()


def _render_flags(result: ItemResult, symbols: Symbols) -> str:
    flags = (
        (result.breaking_item_order, symbols.iterable_item_bad_item_order_symbol),
        (result.breaking_sort_order, symbols.iterable_item_bad_sort_order_symbol),
        (result.duplicate, symbols.iterable_item_duplicate_symbol),
        (result.unwanted, symbols.iterable_item_unwanted_symbol),
    )
    return " ".join(symbol for active, symbol in flags if active)


def _render_candidate(candidate: CandidateExpectation, symbols: Symbols) -> str:
    relation = (
        symbols.actual_not_equals if candidate.expectation.is_value else symbols.expected_matches
    )
    text = f"{relation}{describe_expectation(candidate.expectation)}"
    if 0.0 < candidate.score < 1.0:
        text += f"{symbols.pointing_nested}score {candidate.score:.2f}"
    return text

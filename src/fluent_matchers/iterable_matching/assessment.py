"""Assessment of an observed sequence against an expectation set."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .expectation_settings import IterableExpectations, validate_expectations
from .match_matrix import (
    EXACT_MATCH,
    MatchAggregate,
    MatchMatrix,
    aggregate_matches,
    build_match_matrix,
)


class FindingKind(str, Enum):
    """Categories of violated expectations."""

    NULL_ACTUAL = "null_actual"
    NOT_ITERABLE = "not_iterable"
    SIZE_MISMATCH = "size_mismatch"
    UNFULFILLED_EXPECTATIONS = "unfulfilled_expectations"
    UNEXPECTED_ITEMS = "unexpected_items"
    UNMATCHABLE_EXPECTATIONS = "unmatchable_expectations"
    ITEM_ORDER = "item_order"
    SORT_ORDER = "sort_order"
    DUPLICATES = "duplicates"


@dataclass(frozen=True)
class Finding:
    """One violated expectation category."""

    kind: FindingKind
    description: str


NULL_ACTUAL_FINDING = Finding(FindingKind.NULL_ACTUAL, "Actual collection was null.")
NOT_ITERABLE_FINDING = Finding(FindingKind.NOT_ITERABLE, "Actual value is not iterable.")


@dataclass(frozen=True)
class IterableAssessment:  # pylint: disable=too-many-instance-attributes
    """Outcome of evaluating one candidate against an expectation set."""

    settings: IterableExpectations
    candidate: Any
    actual: tuple[Any, ...] | None
    matrix: MatchMatrix = ()
    aggregate: MatchAggregate = field(
        default_factory=lambda: MatchAggregate(frozenset(), frozenset())
    )
    out_of_order: frozenset[int] = frozenset()
    unsorted: frozenset[int] = frozenset()
    duplicates: frozenset[int] = frozenset()
    findings: tuple[Finding, ...] = ()

    @property
    def passed(self) -> bool:
        """Return True when no expectation was violated."""
        return not self.findings

    @property
    def actual_items(self) -> tuple[Any, ...]:
        return self.actual if self.actual is not None else ()

    def has_finding(self, kind: FindingKind) -> bool:
        return any(finding.kind == kind for finding in self.findings)


class _Findings:
    """Insertion-ordered collector that collapses repeated findings."""

    def __init__(self) -> None:
        self._items: dict[Finding, None] = {}

    def add(self, finding: Finding) -> None:
        self._items.setdefault(finding, None)

    def freeze(self) -> tuple[Finding, ...]:
        return tuple(self._items)


def assess_iterable(
    settings: IterableExpectations,
    candidate: Iterable[Any] | None,
) -> IterableAssessment:
    """Validate the setup, then match, aggregate and assess one candidate."""
    validate_expectations(settings)
    if candidate is None:
        return IterableAssessment(
            settings=settings,
            candidate=None,
            actual=None,
            findings=(NULL_ACTUAL_FINDING,),
        )
    if not isinstance(candidate, Iterable):
        return IterableAssessment(
            settings=settings,
            candidate=candidate,
            actual=None,
            findings=(NOT_ITERABLE_FINDING,),
        )

    actual = tuple(candidate)
    matrix = build_match_matrix(settings.expectations, actual)
    aggregate = aggregate_matches(matrix)

    findings = _Findings()
    _check_size(settings, actual, findings)
    _check_completeness(settings, aggregate, findings)
    _check_exhaustiveness(settings, actual, findings)
    _check_matchability(aggregate, findings)
    out_of_order = _check_item_order(settings, actual, matrix, findings)
    unsorted = _check_sort_order(settings, actual, findings)
    duplicates = _check_uniqueness(settings, actual, findings)

    return IterableAssessment(
        settings=settings,
        candidate=candidate,
        actual=actual,
        matrix=matrix,
        aggregate=aggregate,
        out_of_order=frozenset(out_of_order),
        unsorted=frozenset(unsorted),
        duplicates=frozenset(duplicates),
        findings=findings.freeze(),
    )


def _check_size(
    settings: IterableExpectations, actual: Sequence[Any], findings: _Findings
) -> None:
    if settings.expected_size is not None and settings.expected_size != len(actual):
        findings.add(
            Finding(
                FindingKind.SIZE_MISMATCH,
                f"Size mismatch. Expected: {settings.expected_size}. Actual was: {len(actual)}.",
            )
        )


def _check_completeness(
    settings: IterableExpectations, aggregate: MatchAggregate, findings: _Findings
) -> None:
    if len(aggregate.matched_expectations) < len(settings.expectations):
        findings.add(
            Finding(FindingKind.UNFULFILLED_EXPECTATIONS, "Not all expectations were fulfilled.")
        )


def _check_exhaustiveness(
    settings: IterableExpectations, actual: Sequence[Any], findings: _Findings
) -> None:
    if settings.exhaustive and len(actual) > len(settings.expectations):
        findings.add(Finding(FindingKind.UNEXPECTED_ITEMS, "Unexpected actual items."))


def _check_matchability(aggregate: MatchAggregate, findings: _Findings) -> None:
    # Unreachable while aggregation records both sides of every exact pair.
    if len(aggregate.matched_expectations) > len(aggregate.matched_items):
        findings.add(
            Finding(
                FindingKind.UNMATCHABLE_EXPECTATIONS,
                "Could not find matches for all expectations.",
            )
        )


def _check_item_order(
    settings: IterableExpectations,
    actual: Sequence[Any],
    matrix: MatchMatrix,
    findings: _Findings,
) -> set[int]:
    out_of_order: set[int] = set()
    if not settings.ordered:
        return out_of_order

    expectation_count = len(settings.expectations)
    matched_in_order = 0
    expectation_index = 0
    for item_index in range(len(actual)):
        if expectation_index >= expectation_count:
            break
        if matrix[expectation_index][item_index] == EXACT_MATCH:
            matched_in_order += 1
            expectation_index += 1
            continue
        out_of_order.add(item_index)
        if settings.exhaustive:
            expectation_index += 1
        # Otherwise the same expectation is retried against the next item.

    if matched_in_order < expectation_count:
        findings.add(
            Finding(FindingKind.ITEM_ORDER, "Items did not appear in the expected order.")
        )
    return out_of_order


def _check_sort_order(
    settings: IterableExpectations, actual: Sequence[Any], findings: _Findings
) -> set[int]:
    unsorted: set[int] = set()
    if not settings.sorted or len(actual) < 2:
        return unsorted

    for index in range(1, len(actual)):
        if _is_descending(settings, actual[index - 1], actual[index]):
            unsorted.add(index)
            findings.add(Finding(FindingKind.SORT_ORDER, "Collection is not sorted."))
    return unsorted


def _is_descending(settings: IterableExpectations, previous: Any, current: Any) -> bool:
    if settings.comparator is not None:
        return settings.comparator(previous, current) > 0
    return bool(current < previous)


def _check_uniqueness(
    settings: IterableExpectations, actual: Sequence[Any], findings: _Findings
) -> set[int]:
    duplicates: set[int] = set()
    if not settings.unique or len(actual) < 2:
        return duplicates

    for left in range(len(actual)):
        for right in range(left + 1, len(actual)):
            if settings.equator(actual[left], actual[right]):
                duplicates.update((left, right))
    if duplicates:
        findings.add(Finding(FindingKind.DUPLICATES, "Detected duplicates."))
    return duplicates

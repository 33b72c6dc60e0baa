"""Match matrix construction and exact-match aggregation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .item_expectations import ItemExpectation

EXACT_MATCH = 1.0
NO_MATCH = 0.0

MatchMatrix = tuple[tuple[float, ...], ...]


@dataclass(frozen=True)
class MatchAggregate:
    """Expectations and items taking part in at least one exact match."""

    matched_expectations: frozenset[int]
    matched_items: frozenset[int]


def build_match_matrix(
    expectations: Sequence[ItemExpectation],
    actual: Sequence[Any],
) -> MatchMatrix:
    """Score every expectation (rows) against every observed item (columns)."""
    return tuple(
        tuple(_score(expectation, item) for item in actual) for expectation in expectations
    )


def aggregate_matches(matrix: MatchMatrix) -> MatchAggregate:
    """Project exact matches onto expectation and item indices."""
    matched_expectations: set[int] = set()
    matched_items: set[int] = set()
    for expectation_index, row in enumerate(matrix):
        for item_index, score in enumerate(row):
            if score == EXACT_MATCH:
                matched_expectations.add(expectation_index)
                matched_items.add(item_index)
    return MatchAggregate(
        matched_expectations=frozenset(matched_expectations),
        matched_items=frozenset(matched_items),
    )


def _score(expectation: ItemExpectation, item: Any) -> float:
    if expectation.test(item):
        return EXACT_MATCH
    return float(expectation.partial_score(item))

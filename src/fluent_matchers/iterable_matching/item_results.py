"""Per-item diagnostic records derived from an assessment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .assessment import IterableAssessment
from .item_expectations import ItemExpectation
from .match_matrix import EXACT_MATCH


@dataclass(frozen=True)
class CandidateExpectation:
    """Expectation an unmatched item came closest to satisfying."""

    expectation_index: int
    expectation: ItemExpectation
    score: float


@dataclass(frozen=True)
class ItemResult:  # pylint: disable=too-many-instance-attributes
    """Diagnostic record for one observed item."""

    value: Any
    index: int
    matched: bool
    candidates: tuple[CandidateExpectation, ...] = ()
    breaking_item_order: bool = False
    breaking_sort_order: bool = False
    duplicate: bool = False
    unwanted: bool = False

    @property
    def is_ok(self) -> bool:
        """Return True when the item matched and breaks no sequence-level expectation."""
        return (
            self.matched
            and not self.breaking_item_order
            and not self.breaking_sort_order
            and not self.duplicate
            and not self.unwanted
        )


def project_item_results(assessment: IterableAssessment) -> tuple[ItemResult, ...]:
    """Build one diagnostic record per observed item, in observation order."""
    settings = assessment.settings
    results: list[ItemResult] = []
    for index, value in enumerate(assessment.actual_items):
        if index in assessment.aggregate.matched_items:
            results.append(
                ItemResult(
                    value=value,
                    index=index,
                    matched=True,
                    breaking_item_order=index in assessment.out_of_order,
                    breaking_sort_order=index in assessment.unsorted,
                    duplicate=index in assessment.duplicates,
                )
            )
        elif settings.exhaustive and settings.ordered:
            results.append(
                ItemResult(
                    value=value,
                    index=index,
                    matched=False,
                    candidates=_positional_candidate(assessment, index),
                    breaking_item_order=True,
                    breaking_sort_order=index in assessment.unsorted,
                    duplicate=index in assessment.duplicates,
                    unwanted=True,
                )
            )
        else:
            results.append(
                ItemResult(
                    value=value,
                    index=index,
                    matched=False,
                    candidates=_ranked_candidates(assessment, index),
                    breaking_item_order=index in assessment.out_of_order,
                    breaking_sort_order=index in assessment.unsorted,
                    duplicate=index in assessment.duplicates,
                    unwanted=settings.exhaustive,
                )
            )
    return tuple(results)


def _positional_candidate(
    assessment: IterableAssessment, item_index: int
) -> tuple[CandidateExpectation, ...]:
    expectations = assessment.settings.expectations
    if item_index >= len(expectations):
        return ()
    return (
        CandidateExpectation(
            expectation_index=item_index,
            expectation=expectations[item_index],
            score=assessment.matrix[item_index][item_index],
        ),
    )


def _ranked_candidates(
    assessment: IterableAssessment, item_index: int
) -> tuple[CandidateExpectation, ...]:
    expectations = assessment.settings.expectations
    scored = [
        (assessment.matrix[expectation_index][item_index], expectation_index)
        for expectation_index in range(len(expectations))
        if assessment.matrix[expectation_index][item_index] != EXACT_MATCH
    ]
    scored.sort(
        key=lambda entry: (-entry[0], abs(item_index - entry[1]), entry[1], item_index)
    )
    return tuple(
        CandidateExpectation(
            expectation_index=expectation_index,
            expectation=expectations[expectation_index],
            score=score,
        )
        for score, expectation_index in scored
    )

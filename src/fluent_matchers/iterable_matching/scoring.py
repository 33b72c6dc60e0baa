"""Fractional satisfaction score of an assessment."""

from __future__ import annotations

from .assessment import IterableAssessment


class ScoreInvariantError(RuntimeError):
    """Raised when assessment state contradicts itself while scoring."""


def calculate_score(assessment: IterableAssessment | None) -> float:
    """Return the share of satisfied expectations, between 0.0 and 1.0.

    An unevaluated matcher (`assessment is None`) scores like an empty finding set.
    """
    if assessment is None or assessment.passed:
        return 1.0
    if assessment.actual is None:
        return 0.0

    settings = assessment.settings
    active_general_expectations = (
        settings.expected_size is not None,
        settings.exhaustive,
        settings.ordered,
        settings.sorted,
        settings.unique,
        settings.has_item_expectations,
    )
    # One more for "actual is not null".
    general_expectations = sum(1 for active in active_general_expectations if active) + 1
    all_expectations = general_expectations + len(settings.expectations)

    general_matched = general_expectations - len(assessment.findings)
    if general_matched < 0:
        raise ScoreInvariantError(
            "There should be at least as many expectations as findings."
        )
    all_matched = general_matched + len(assessment.aggregate.matched_expectations)
    if all_matched > all_expectations:
        raise ScoreInvariantError(
            "There should not be more matched expectations than expectations."
        )
    return all_matched / all_expectations

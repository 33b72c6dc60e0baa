"""Iterable matching domain exports."""

from .assessment import (
    NOT_ITERABLE_FINDING,
    NULL_ACTUAL_FINDING,
    Finding,
    FindingKind,
    IterableAssessment,
    assess_iterable,
)
from .expectation_settings import (
    IterableExpectations,
    MatcherConfigurationError,
    validate_expectations,
)
from .item_expectations import (
    ItemExpectation,
    MatcherExpectation,
    PredicateExpectation,
    ScorableExpectation,
    ScorableMatcher,
    ValueExpectation,
)
from .item_results import CandidateExpectation, ItemResult, project_item_results
from .match_matrix import MatchAggregate, aggregate_matches, build_match_matrix
from .scoring import ScoreInvariantError, calculate_score

__all__ = [
    "IterableExpectations",
    "MatcherConfigurationError",
    "validate_expectations",
    "ItemExpectation",
    "ValueExpectation",
    "MatcherExpectation",
    "PredicateExpectation",
    "ScorableExpectation",
    "ScorableMatcher",
    "MatchAggregate",
    "build_match_matrix",
    "aggregate_matches",
    "Finding",
    "FindingKind",
    "NULL_ACTUAL_FINDING",
    "NOT_ITERABLE_FINDING",
    "IterableAssessment",
    "assess_iterable",
    "CandidateExpectation",
    "ItemResult",
    "project_item_results",
    "ScoreInvariantError",
    "calculate_score",
]

"""Fluent PyHamcrest matcher for iterables."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher

from fluent_matchers.customization.symbols import Symbols, default_symbols
from fluent_matchers.iterable_matching import (
    Finding,
    IterableAssessment,
    IterableExpectations,
    ItemResult,
    MatcherConfigurationError,
    assess_iterable,
    calculate_score,
    project_item_results,
)
from fluent_matchers.iterable_matching.expectation_settings import (
    comparator_from_key,
    is_naturally_ordered,
)
from fluent_matchers.iterable_matching.item_expectations import (
    expectation_for_matcher,
    expectation_for_value,
)
from fluent_matchers.rendering.prose import (
    describe_expectations,
    describe_findings,
    render_item_lines,
)

_LOGGER = logging.getLogger(__name__)


class FluentIterableMatcher(BaseMatcher[Iterable[Any]]):
    """Checks several characteristics of an actual iterable at once.

    Expectations are declared through chained calls::

        assert_that(
            ["news", "impeachment"],
            an_iterable_of(str).exactly().ordered().with_items("news", "impeachment"),
        )

    Every configuration call replaces an immutable `IterableExpectations` snapshot and
    returns the matcher itself. The outcome of the most recent evaluation is kept on the
    instance for `describe_mismatch`, `get_score` and `get_item_results`; evaluating the
    same instance from several threads at once is not supported, use one matcher per
    thread instead.
    """

    def __init__(self, item_type: type, symbols: Symbols | None = None) -> None:
        if item_type is None:
            raise MatcherConfigurationError("Argument 'item_type' must not be None.")
        if not isinstance(item_type, type):
            raise MatcherConfigurationError("Argument 'item_type' must be a type.")
        self._settings = IterableExpectations(item_type=item_type)
        self._symbols = symbols or default_symbols()
        self._assessment: IterableAssessment | None = None

    @property
    def settings(self) -> IterableExpectations:
        return self._settings

    @property
    def symbols(self) -> Symbols:
        return self._symbols

    @property
    def last_assessment(self) -> IterableAssessment | None:
        """Outcome of the most recent evaluation, if any."""
        return self._assessment

    def of_size(self, expected_size: int) -> FluentIterableMatcher:
        """Expect the actual iterable to hold exactly `expected_size` items.

        Combined with `exactly()`, the size must equal the number of item expectations.
        """
        if isinstance(expected_size, bool) or not isinstance(expected_size, int):
            raise MatcherConfigurationError("Size must be an integer.")
        if expected_size < 0:
            raise MatcherConfigurationError("Size must not be negative.")
        self._settings = replace(self._settings, expected_size=expected_size)
        return self

    def sorted(
        self,
        comparator: Callable[[Any, Any], int] | None = None,
        *,
        key: Callable[[Any], Any] | None = None,
    ) -> FluentIterableMatcher:
        """Expect items to be sorted ascending.

        Without `comparator` or `key`, the natural order of the item type is used, which
        requires the item type to support `<`. A comparator returns a positive number when
        its first argument belongs after its second. Calling `sorted()` without arguments
        keeps a comparator set by an earlier call.
        """
        if comparator is not None and key is not None:
            raise MatcherConfigurationError("Pass either a comparator or a key, not both.")
        if key is not None:
            comparator = comparator_from_key(key)
        if comparator is None:
            comparator = self._settings.comparator
        if comparator is None and not is_naturally_ordered(self._settings.item_type):
            raise MatcherConfigurationError(
                f"Type {self._settings.item_type.__name__} does not define a natural order. "
                "Either implement __lt__ or use sorted(comparator) or sorted(key=...)."
            )
        self._settings = replace(self._settings, sorted=True, comparator=comparator)
        return self

    def ordered(self) -> FluentIterableMatcher:
        """Expect items in the order in which their expectations were added."""
        self._settings = replace(self._settings, ordered=True)
        return self

    def with_items_matching(
        self, *matchers: Matcher | Callable[[Any], bool]
    ) -> FluentIterableMatcher:
        """Add item expectations given as PyHamcrest matchers or predicates.

        Each expectation must be met by at least one item. Nested matchers exposing
        `get_score()` contribute partial scores to mismatch diagnostics.
        """
        if any(matcher is None for matcher in matchers):
            raise MatcherConfigurationError("Item expectations must not be None.")
        try:
            added = tuple(expectation_for_matcher(matcher) for matcher in matchers)
        except TypeError as exc:
            raise MatcherConfigurationError(str(exc)) from exc
        self._settings = replace(
            self._settings, expectations=self._settings.expectations + added
        )
        return self

    def with_items(self, *expected_items: Any) -> FluentIterableMatcher:
        """Add expected item values, each to be met by at least one equal item."""
        added = tuple(expectation_for_value(value) for value in expected_items)
        self._settings = replace(
            self._settings, expectations=self._settings.expectations + added
        )
        return self

    def exactly(self) -> FluentIterableMatcher:
        """Expect no items beyond those declared via `with_items`/`with_items_matching`."""
        self._settings = replace(self._settings, exhaustive=True)
        return self

    def unique(self, equator: Callable[[Any, Any], bool] | None = None) -> FluentIterableMatcher:
        """Expect items to be pairwise distinct, by `==` or by a custom `equator`."""
        if equator is None:
            self._settings = replace(self._settings, unique=True)
        else:
            self._settings = replace(self._settings, unique=True, equator=equator)
        return self

    def _matches(self, item: Iterable[Any]) -> bool:
        return self._evaluate(item).passed

    def describe_to(self, description: Description) -> None:
        description.append_text(describe_expectations(self._settings))

    def describe_mismatch(self, item: Iterable[Any], mismatch_description: Description) -> None:
        assessment = self._assessment_for(item)
        findings = "\n".join(f'"{text}"' for text in describe_findings(assessment.findings))
        mismatch_description.append_text(f"Findings:\n{findings}\n")
        lines = render_item_lines(project_item_results(assessment), self._symbols)
        if lines:
            mismatch_description.append_text("\n" + "\n".join(lines) + "\n")
        mismatch_description.append_text("was ").append_description_of(item)

    def get_score(self) -> float:
        """Share of expectations met by the last evaluated candidate, between 0 and 1."""
        return calculate_score(self._assessment)

    def get_findings(self) -> tuple[Finding, ...]:
        if self._assessment is None:
            return ()
        return self._assessment.findings

    def get_item_results(self) -> tuple[ItemResult, ...]:
        """Per-item diagnostics for the last evaluated candidate."""
        if self._assessment is None:
            return ()
        return project_item_results(self._assessment)

    def _evaluate(self, item: Iterable[Any] | None) -> IterableAssessment:
        self._assessment = None
        assessment = assess_iterable(self._settings, item)
        self._assessment = assessment
        _LOGGER.debug(
            "Evaluated %s: passed=%s findings=%d",
            self._settings.item_type.__name__,
            assessment.passed,
            len(assessment.findings),
        )
        return assessment

    def _assessment_for(self, item: Iterable[Any] | None) -> IterableAssessment:
        if self._assessment is not None and self._assessment.candidate is item:
            return self._assessment
        return self._evaluate(item)

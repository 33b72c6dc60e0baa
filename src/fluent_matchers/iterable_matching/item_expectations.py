"""Item expectation variants evaluated against each observed item."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher


@runtime_checkable
class ScorableMatcher(Protocol):
    """Matcher that reports how far its last evaluated item met its expectations."""

    def matches(self, item: Any, mismatch_description: Description | None = None) -> bool: ...

    def get_score(self) -> float: ...


class ItemExpectation(ABC):
    """One declared expectation for an item of the observed sequence."""

    @abstractmethod
    def test(self, item: Any) -> bool:
        """Return True when the item fully satisfies this expectation."""

    def partial_score(self, item: Any) -> float:  # pylint: disable=unused-argument
        """Return the partial satisfaction score for an item that failed `test`."""
        return 0.0

    @property
    def is_value(self) -> bool:
        return False

    @abstractmethod
    def describe_to(self, description: Description) -> None:
        """Append a human-readable rendering of this expectation."""


class ValueExpectation(ItemExpectation):
    """Expects an item equal to a given value."""

    def __init__(self, expected: Any) -> None:
        self.expected = expected

    def test(self, item: Any) -> bool:
        return bool(item == self.expected)

    @property
    def is_value(self) -> bool:
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text(repr(self.expected))

    def __repr__(self) -> str:
        return f"ValueExpectation({self.expected!r})"


class MatcherExpectation(ItemExpectation):
    """Expects an item accepted by a PyHamcrest matcher."""

    def __init__(self, matcher: Matcher) -> None:
        self.matcher = matcher

    def test(self, item: Any) -> bool:
        return bool(self.matcher.matches(item))

    def describe_to(self, description: Description) -> None:
        description.append_description_of(self.matcher)

    def __repr__(self) -> str:
        return f"MatcherExpectation({self.matcher!r})"


class PredicateExpectation(ItemExpectation):
    """Expects an item accepted by a plain callable."""

    def __init__(self, predicate: Callable[[Any], bool]) -> None:
        self.predicate = predicate

    def test(self, item: Any) -> bool:
        return bool(self.predicate(item))

    def describe_to(self, description: Description) -> None:
        name = getattr(self.predicate, "__name__", None) or repr(self.predicate)
        description.append_text(f"an item satisfying {name}")

    def __repr__(self) -> str:
        return f"PredicateExpectation({self.predicate!r})"


class ScorableExpectation(MatcherExpectation):
    """Expects an item accepted by a nested matcher that also reports a partial score.

    The nested matcher keeps the state of its last evaluation, so the score read after
    `test` belongs to that item. `partial_score` re-evaluates when asked about any
    other item.
    """

    matcher: ScorableMatcher

    def __init__(self, matcher: ScorableMatcher) -> None:
        super().__init__(matcher)  # type: ignore[arg-type]
        self._last_item: Any = None
        self._last_score: float | None = None

    def test(self, item: Any) -> bool:
        matched, _ = self._evaluate(item)
        return matched

    def partial_score(self, item: Any) -> float:
        if self._last_score is not None and self._last_item is item:
            return self._last_score
        _, score = self._evaluate(item)
        return score

    def _evaluate(self, item: Any) -> tuple[bool, float]:
        matched = bool(self.matcher.matches(item))
        score = float(self.matcher.get_score())
        self._last_item = item
        self._last_score = score
        return matched, score

    def __repr__(self) -> str:
        return f"ScorableExpectation({self.matcher!r})"


def expectation_for_value(value: Any) -> ItemExpectation:
    """Wrap an expected value into an equality expectation."""
    return ValueExpectation(value)


def expectation_for_matcher(matcher: Matcher | Callable[[Any], bool]) -> ItemExpectation:
    """Choose the expectation variant for a matcher or predicate."""
    if isinstance(matcher, ItemExpectation):
        return matcher
    if isinstance(matcher, ScorableMatcher):
        return ScorableExpectation(matcher)
    if isinstance(matcher, Matcher):
        return MatcherExpectation(matcher)
    if callable(matcher):
        return PredicateExpectation(matcher)
    raise TypeError(f"Unsupported item expectation: {matcher!r}")

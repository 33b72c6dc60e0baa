"""Expectation set entities and setup validation."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .item_expectations import ItemExpectation


class MatcherConfigurationError(ValueError):
    """Raised when a matcher is configured inconsistently."""


@dataclass(frozen=True)
class IterableExpectations:  # pylint: disable=too-many-instance-attributes
    """Immutable snapshot of everything expected from an observed sequence."""

    item_type: type
    expectations: tuple[ItemExpectation, ...] = ()
    expected_size: int | None = None
    exhaustive: bool = False
    ordered: bool = False
    sorted: bool = False
    unique: bool = False
    comparator: Callable[[Any, Any], int] | None = None
    equator: Callable[[Any, Any], bool] = field(default=operator.eq)

    @property
    def has_item_expectations(self) -> bool:
        return bool(self.expectations)


def is_naturally_ordered(item_type: type) -> bool:
    """Return True when instances of `item_type` support `<` comparison."""
    return getattr(item_type, "__lt__", object.__lt__) is not object.__lt__


def comparator_from_key(key: Callable[[Any], Any]) -> Callable[[Any, Any], int]:
    """Build a three-way comparator from a sort key function."""

    def compare(left: Any, right: Any) -> int:
        left_key = key(left)
        right_key = key(right)
        if right_key < left_key:
            return 1
        if left_key < right_key:
            return -1
        return 0

    return compare


def validate_expectations(settings: IterableExpectations) -> None:
    """Reject setups whose size constraint contradicts the declared item expectations."""
    expectation_count = len(settings.expectations)
    if settings.expected_size is not None and settings.expected_size < expectation_count:
        raise MatcherConfigurationError(
            "Invalid setup. Argument passed to of_size() is less than expected items specified."
        )
    if (
        settings.exhaustive
        and settings.expected_size is not None
        and settings.expected_size != expectation_count
    ):
        raise MatcherConfigurationError(
            "Invalid setup. Argument passed to of_size() must match number of expected items "
            "when exactly() is set."
        )

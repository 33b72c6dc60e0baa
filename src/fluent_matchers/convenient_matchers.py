"""Factory functions for fluent matchers."""

from __future__ import annotations

from fluent_matchers.customization.symbols import Symbols
from fluent_matchers.fluent_iterable_matcher import FluentIterableMatcher
from fluent_matchers.iterable_matching import MatcherConfigurationError


def an_iterable_of(item_type: type, symbols: Symbols | None = None) -> FluentIterableMatcher:
    """Create a `FluentIterableMatcher` with no expectations for items of `item_type`.

    Args:
      item_type: Expected type of the iterable's items.
      symbols: Symbol set for mismatch output; the Unicode set when omitted.

    Raises:
      MatcherConfigurationError: If `item_type` is missing.
    """
    if item_type is None:
        raise MatcherConfigurationError("Type argument must not be None.")
    return FluentIterableMatcher(item_type, symbols=symbols)

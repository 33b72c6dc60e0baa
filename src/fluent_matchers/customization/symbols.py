"""Display symbol sets used when rendering mismatches."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum


class SymbolsPreset(str, Enum):
    """Built-in symbol sets."""

    DEFAULT = "default"
    ASCII = "ascii"


@dataclass(frozen=True)
class Symbols:  # pylint: disable=too-many-instance-attributes
    """Symbols decorating expectation and per-item mismatch output."""

    expected_equals: str
    actual_not_equals: str
    expected_matches: str
    pointing_nested: str
    iterable_item_matches_symbol: str
    iterable_item_not_matches_symbol: str
    iterable_item_bad_item_order_symbol: str
    iterable_item_bad_sort_order_symbol: str
    iterable_item_duplicate_symbol: str
    iterable_item_unwanted_symbol: str
    left_bracket: str
    right_bracket: str


_DEFAULT_SYMBOLS = Symbols(
    expected_equals=" = ",
    actual_not_equals=" ≠ ",
    expected_matches=" ⩳ ",
    pointing_nested=" ▶ ",
    iterable_item_matches_symbol="💕",
    iterable_item_not_matches_symbol="💔",
    iterable_item_bad_item_order_symbol="↔",
    iterable_item_bad_sort_order_symbol="↕",
    iterable_item_duplicate_symbol="👯",
    iterable_item_unwanted_symbol="🚯",
    left_bracket="⦗",
    right_bracket="⦘",
)

_ASCII_SYMBOLS = Symbols(
    expected_equals=" = ",
    actual_not_equals=" != ",
    expected_matches=" =~ ",
    pointing_nested=" >> ",
    iterable_item_matches_symbol="OK",
    iterable_item_not_matches_symbol="FAIL",
    iterable_item_bad_item_order_symbol="<>",
    iterable_item_bad_sort_order_symbol="^v",
    iterable_item_duplicate_symbol="2+",
    iterable_item_unwanted_symbol="--",
    left_bracket="[",
    right_bracket="]",
)

SYMBOL_NAMES: tuple[str, ...] = tuple(entry.name for entry in fields(Symbols))


def default_symbols() -> Symbols:
    """Return the Unicode-decorated symbol set."""
    return _DEFAULT_SYMBOLS


def ascii_symbols() -> Symbols:
    """Return the plain-ASCII symbol set."""
    return _ASCII_SYMBOLS


def preset_symbols(preset: SymbolsPreset) -> Symbols:
    if preset == SymbolsPreset.ASCII:
        return ascii_symbols()
    return default_symbols()


def with_overrides(base: Symbols, overrides: Mapping[str, str]) -> Symbols:
    """Return `base` with selected symbols replaced.

    Raises:
      KeyError: If an override names an unknown symbol.
    """
    unknown = sorted(set(overrides) - set(SYMBOL_NAMES))
    if unknown:
        raise KeyError(f"Unknown symbol name(s): {', '.join(unknown)}")
    return replace(base, **dict(overrides))

"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fluent_matchers.customization.symbols import SymbolsPreset

ITEM_TYPES: Mapping[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "any": object,
}


@dataclass(frozen=True)
class SymbolsSettings:
    """Symbol set selection for rendered mismatch output."""

    preset: SymbolsPreset = SymbolsPreset.DEFAULT
    overrides: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ExpectationSettings:  # pylint: disable=too-many-instance-attributes
    """Expectations declared in a check document."""

    item_type: type
    items: tuple[Any, ...]
    size: int | None
    exactly: bool
    ordered: bool
    sorted: bool
    unique: bool


@dataclass(frozen=True)
class CheckDocument:
    """Expectations plus, optionally, the observed items they are checked against."""

    path: Path
    expectations: ExpectationSettings
    actual: tuple[Any, ...] | None
    symbols: SymbolsSettings

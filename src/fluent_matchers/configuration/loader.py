"""Check document and symbols configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from fluent_matchers.customization.symbols import SYMBOL_NAMES, SymbolsPreset

from .runtime_settings import ITEM_TYPES, CheckDocument, ExpectationSettings, SymbolsSettings

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a check document or symbols configuration is invalid."""


def load_check_document(document_path: Path | str) -> CheckDocument:
    """Load and validate a YAML/JSON check document."""
    path = Path(document_path)
    parsed = _read_mapping(path, "Check document")

    expectations = _parse_expectations_section(parsed.get("expectations"))
    actual_value = parsed.get("actual")
    actual = None
    if actual_value is not None:
        actual = _parse_item_list(actual_value, "actual")
        check_item_types(actual, expectations.item_type, "actual")
    symbols = _parse_symbols_section(parsed.get("symbols"))
    _LOGGER.debug(
        "Loaded check document %s with %d item expectation(s)", path, len(expectations.items)
    )
    return CheckDocument(path=path, expectations=expectations, actual=actual, symbols=symbols)


def load_actual_items(actual_path: Path | str) -> tuple[Any, ...]:
    """Load observed items from a YAML/JSON list, or a mapping with an `actual` list."""
    path = Path(actual_path)
    parsed = _read_document(path, "Actual items file")
    if isinstance(parsed, Mapping):
        parsed = parsed.get("actual")
    if parsed is None:
        raise ConfigurationError("actual must be provided as a list.")
    return _parse_item_list(parsed, "actual")


def check_item_types(items: Sequence[Any], item_type: type, field_name: str) -> None:
    """Reject entries that are not instances of the declared item type.

    `object` accepts anything. Booleans are not accepted as numbers, and integers are
    accepted where floats are declared.
    """
    if item_type is object:
        return
    for index, item in enumerate(items):
        if not _is_instance_of(item, item_type):
            raise ConfigurationError(
                f"{field_name}[{index}] {item!r} is not of item_type '{item_type.__name__}'."
            )


def _is_instance_of(item: Any, item_type: type) -> bool:
    if isinstance(item, bool) and item_type is not bool:
        return False
    if item_type is float:
        return isinstance(item, int | float)
    return isinstance(item, item_type)


def load_symbols_settings(config_path: Path | str) -> SymbolsSettings:
    """Load the symbol set selection from a YAML/JSON configuration file."""
    path = Path(config_path)
    parsed = _read_mapping(path, "Symbols configuration")
    return _parse_symbols_section(parsed.get("symbols"))


def _read_document(path: Path, label: str) -> Any:
    if not path.exists():
        raise ConfigurationError(f"{label} not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"{label} is not valid UTF-8: {path}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {label.lower()}: {exc}") from exc


def _read_mapping(path: Path, label: str) -> Mapping[str, Any]:
    parsed = _read_document(path, label)
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError(f"{label} root must be a mapping.")
    return parsed


def _parse_expectations_section(value: Any) -> ExpectationSettings:
    section = _require_mapping(value, "expectations")
    item_type_name = _require_non_empty_string(
        section.get("item_type", "any"), "expectations.item_type"
    ).lower()
    if item_type_name not in ITEM_TYPES:
        supported = ", ".join(sorted(ITEM_TYPES))
        raise ConfigurationError(
            f"expectations.item_type '{item_type_name}' is not supported ({supported})."
        )
    items = section.get("items") or []
    if not isinstance(items, Sequence) or isinstance(items, str | bytes):
        raise ConfigurationError("expectations.items must be a list.")
    item_type = ITEM_TYPES[item_type_name]
    check_item_types(items, item_type, "expectations.items")
    size = section.get("size")
    if size is not None:
        size = _require_non_negative_int(size, "expectations.size")
    return ExpectationSettings(
        item_type=item_type,
        items=tuple(items),
        size=size,
        exactly=_optional_bool(section.get("exactly"), "expectations.exactly"),
        ordered=_optional_bool(section.get("ordered"), "expectations.ordered"),
        sorted=_optional_bool(section.get("sorted"), "expectations.sorted"),
        unique=_optional_bool(section.get("unique"), "expectations.unique"),
    )


def _parse_item_list(value: Any, field_name: str) -> tuple[Any, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str | bytes):
        raise ConfigurationError(f"{field_name} must be a list.")
    return tuple(value)


def _parse_symbols_section(value: Any) -> SymbolsSettings:
    if value is None:
        return SymbolsSettings()
    section = _require_mapping(value, "symbols")
    preset_name = _require_non_empty_string(
        section.get("preset", SymbolsPreset.DEFAULT.value), "symbols.preset"
    ).lower()
    try:
        preset = SymbolsPreset(preset_name)
    except ValueError as exc:
        raise ConfigurationError(
            f"symbols.preset must be one of: {', '.join(p.value for p in SymbolsPreset)}."
        ) from exc

    overrides = section.get("overrides") or {}
    if not isinstance(overrides, Mapping):
        raise ConfigurationError("symbols.overrides must be a mapping.")
    normalized: dict[str, str] = {}
    for name, symbol in overrides.items():
        if name not in SYMBOL_NAMES:
            raise ConfigurationError(f"symbols.overrides '{name}' is not a known symbol.")
        if not isinstance(symbol, str):
            raise ConfigurationError(f"symbols.overrides.{name} must be a string.")
        normalized[name] = symbol
    return SymbolsSettings(preset=preset, overrides=normalized)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value

"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fluent_matchers.configuration.loader import (
    ConfigurationError,
    load_actual_items,
    load_check_document,
    load_symbols_settings,
)
from fluent_matchers.customization.symbols import SymbolsPreset


def _write_file(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_loads_check_document_with_defaults(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "check.yaml",
        """
expectations:
  items: [a, b]
""",
    )

    document = load_check_document(document_path)

    assert document.path == document_path
    assert document.expectations.item_type is object
    assert document.expectations.items == ("a", "b")
    assert document.expectations.size is None
    assert document.expectations.exactly is False
    assert document.expectations.ordered is False
    assert document.expectations.sorted is False
    assert document.expectations.unique is False
    assert document.actual is None
    assert document.symbols.preset is SymbolsPreset.DEFAULT
    assert dict(document.symbols.overrides) == {}


def test_loads_fully_specified_json_check_document(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "check.json",
        json.dumps(
            {
                "expectations": {
                    "item_type": "INT",
                    "items": [1, 2],
                    "size": 3,
                    "exactly": False,
                    "ordered": True,
                    "sorted": True,
                    "unique": True,
                },
                "actual": [1, 2, 3],
                "symbols": {"preset": "ascii", "overrides": {"left_bracket": "("}},
            }
        ),
    )

    document = load_check_document(document_path)

    assert document.expectations.item_type is int
    assert document.expectations.size == 3
    assert document.expectations.ordered is True
    assert document.expectations.sorted is True
    assert document.expectations.unique is True
    assert document.actual == (1, 2, 3)
    assert document.symbols.preset is SymbolsPreset.ASCII
    assert dict(document.symbols.overrides) == {"left_bracket": "("}


def test_errors_when_check_document_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Check document not found"):
        load_check_document(tmp_path / "missing.yaml")


def test_errors_when_expectations_section_missing(tmp_path: Path) -> None:
    document_path = _write_file(tmp_path / "check.yaml", "actual: [a]\n")

    with pytest.raises(ConfigurationError, match="'expectations' is required"):
        load_check_document(document_path)


@pytest.mark.parametrize(
    ("expectations", "message"),
    [
        ({"item_type": "decimal"}, "expectations.item_type 'decimal' is not supported"),
        ({"items": "abc"}, "expectations.items must be a list"),
        ({"size": -1}, "expectations.size must not be negative"),
        ({"size": True}, "expectations.size must be an integer"),
        ({"size": "3"}, "expectations.size must be an integer"),
        ({"ordered": "yes"}, "expectations.ordered must be true or false"),
    ],
)
def test_errors_when_expectations_invalid(
    tmp_path: Path, expectations: dict, message: str
) -> None:
    document_path = _write_file(
        tmp_path / "check.json", json.dumps({"expectations": expectations})
    )

    with pytest.raises(ConfigurationError, match=message):
        load_check_document(document_path)


def test_errors_when_actual_is_not_a_list(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "check.json",
        json.dumps({"expectations": {}, "actual": "a,b"}),
    )

    with pytest.raises(ConfigurationError, match="actual must be a list"):
        load_check_document(document_path)


def test_loads_actual_items_from_plain_list(tmp_path: Path) -> None:
    actual_path = _write_file(tmp_path / "actual.json", json.dumps(["x", 1, None]))

    assert load_actual_items(actual_path) == ("x", 1, None)


def test_loads_actual_items_from_mapping(tmp_path: Path) -> None:
    actual_path = _write_file(tmp_path / "actual.yaml", "actual:\n  - x\n  - y\n")

    assert load_actual_items(actual_path) == ("x", "y")


def test_errors_when_actual_items_file_has_no_list(tmp_path: Path) -> None:
    actual_path = _write_file(tmp_path / "actual.yaml", "observed: [x]\n")

    with pytest.raises(ConfigurationError, match="actual must be provided as a list"):
        load_actual_items(actual_path)


def test_loads_symbols_settings(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "symbols.yaml",
        """
symbols:
  preset: ASCII
  overrides:
    iterable_item_matches_symbol: "+"
""",
    )

    settings = load_symbols_settings(config_path)

    assert settings.preset is SymbolsPreset.ASCII
    assert dict(settings.overrides) == {"iterable_item_matches_symbol": "+"}


def test_symbols_settings_default_when_section_absent(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "symbols.yaml", "")

    settings = load_symbols_settings(config_path)

    assert settings.preset is SymbolsPreset.DEFAULT
    assert dict(settings.overrides) == {}


@pytest.mark.parametrize(
    ("symbols", "message"),
    [
        ({"preset": "fancy"}, "symbols.preset must be one of: default, ascii."),
        ({"overrides": {"bogus": "?"}}, "symbols.overrides 'bogus' is not a known symbol."),
        ({"overrides": {"left_bracket": 1}}, "symbols.overrides.left_bracket must be a string."),
        ({"overrides": ["left_bracket"]}, "symbols.overrides must be a mapping."),
    ],
)
def test_errors_when_symbols_invalid(tmp_path: Path, symbols: dict, message: str) -> None:
    config_path = _write_file(tmp_path / "symbols.json", json.dumps({"symbols": symbols}))

    with pytest.raises(ConfigurationError) as exc_info:
        load_symbols_settings(config_path)

    assert str(exc_info.value) == message


def test_errors_when_document_root_is_not_a_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "symbols.yaml", "- default\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_symbols_settings(config_path)


@pytest.mark.parametrize(
    ("document", "message"),
    [
        (
            {"expectations": {"item_type": "int", "items": [1, "2"]}},
            "expectations.items[1] '2' is not of item_type 'int'.",
        ),
        (
            {"expectations": {"item_type": "int"}, "actual": [True]},
            "actual[0] True is not of item_type 'int'.",
        ),
        (
            {"expectations": {"item_type": "str"}, "actual": ["a", None]},
            "actual[1] None is not of item_type 'str'.",
        ),
    ],
)
def test_errors_when_items_do_not_match_item_type(
    tmp_path: Path, document: dict, message: str
) -> None:
    document_path = _write_file(tmp_path / "check.json", json.dumps(document))

    with pytest.raises(ConfigurationError) as exc_info:
        load_check_document(document_path)

    assert str(exc_info.value) == message


def test_float_item_type_accepts_integers_and_any_accepts_everything(tmp_path: Path) -> None:
    float_path = _write_file(
        tmp_path / "float.json",
        json.dumps({"expectations": {"item_type": "float", "items": [1, 2.5]}}),
    )
    any_path = _write_file(
        tmp_path / "any.json",
        json.dumps({"expectations": {"item_type": "any"}, "actual": [1, "a", None]}),
    )

    assert load_check_document(float_path).expectations.items == (1, 2.5)
    assert load_check_document(any_path).actual == (1, "a", None)


def test_errors_when_document_is_not_utf8(tmp_path: Path) -> None:
    document_path = tmp_path / "check.yaml"
    document_path.write_bytes(b"expectations:\n  items: [\xff\xfe]\n")

    with pytest.raises(ConfigurationError, match="Check document is not valid UTF-8"):
        load_check_document(document_path)


def test_errors_when_document_is_not_parseable(tmp_path: Path) -> None:
    document_path = _write_file(tmp_path / "check.yaml", "expectations: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse check document"):
        load_check_document(document_path)

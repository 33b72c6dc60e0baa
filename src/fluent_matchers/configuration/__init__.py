"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CHECK_FILENAME,
    build_placeholder_check_document,
    write_placeholder_check_document,
)
from .loader import (
    ConfigurationError,
    check_item_types,
    load_actual_items,
    load_check_document,
    load_symbols_settings,
)
from .runtime_settings import ITEM_TYPES, CheckDocument, ExpectationSettings, SymbolsSettings

__all__ = [
    "CheckDocument",
    "ExpectationSettings",
    "SymbolsSettings",
    "ITEM_TYPES",
    "ConfigurationError",
    "check_item_types",
    "load_check_document",
    "load_actual_items",
    "load_symbols_settings",
    "DEFAULT_CHECK_FILENAME",
    "build_placeholder_check_document",
    "write_placeholder_check_document",
]

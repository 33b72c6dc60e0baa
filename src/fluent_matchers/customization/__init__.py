"""Display customization exports."""

from .symbols import (
    SYMBOL_NAMES,
    Symbols,
    SymbolsPreset,
    ascii_symbols,
    default_symbols,
    preset_symbols,
    with_overrides,
)

__all__ = [
    "Symbols",
    "SymbolsPreset",
    "SYMBOL_NAMES",
    "default_symbols",
    "ascii_symbols",
    "preset_symbols",
    "with_overrides",
]

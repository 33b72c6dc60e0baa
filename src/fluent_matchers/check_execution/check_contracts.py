"""Check execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fluent_matchers.iterable_matching import Finding


@dataclass(frozen=True)
class CheckRequest:
    """Input contract for evaluating one check document."""

    expectations_path: str
    actual_path: str | None = None
    report_path: str | None = None
    symbols_config_path: str | None = None
    ascii_symbols: bool = False


@dataclass(frozen=True)
class CheckOutcome:
    """Output contract for one evaluated check document."""

    passed: bool
    score: float
    findings: tuple[Finding, ...]
    rendered: str
    report_path: Path | None

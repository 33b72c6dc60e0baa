"""Check execution use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from hamcrest.core.string_description import StringDescription

from fluent_matchers.configuration import (
    CheckDocument,
    ConfigurationError,
    ExpectationSettings,
    SymbolsSettings,
    check_item_types,
    load_actual_items,
    load_check_document,
    load_symbols_settings,
)
from fluent_matchers.convenient_matchers import an_iterable_of
from fluent_matchers.customization.symbols import (
    Symbols,
    SymbolsPreset,
    preset_symbols,
    with_overrides,
)
from fluent_matchers.fluent_iterable_matcher import FluentIterableMatcher
from fluent_matchers.iterable_matching import MatcherConfigurationError
from fluent_matchers.results_writing import RunMetadata, write_assessment_workbook

from .check_contracts import CheckOutcome, CheckRequest

_LOGGER = logging.getLogger(__name__)


class CheckExecutionError(Exception):
    """Raised when a check cannot be evaluated."""


def execute_check(request: CheckRequest) -> CheckOutcome:
    """Evaluate one check document and optionally write a diagnostics workbook."""
    run_start = datetime.now(UTC)
    document = _load_document(request.expectations_path)
    actual = _resolve_actual_items(document, request.actual_path)
    symbols = _resolve_symbols(document, request)

    try:
        matcher = build_matcher(document.expectations, symbols)
        passed = matcher.matches(actual)
    except MatcherConfigurationError as exc:
        raise CheckExecutionError(str(exc)) from exc
    except TypeError as exc:
        raise CheckExecutionError(f"Actual items cannot be compared: {exc}") from exc

    rendered = _render_outcome(matcher, actual, passed)
    assessment = matcher.last_assessment
    if assessment is None:
        raise RuntimeError("Matcher assessment is not available after evaluation.")

    report_path: Path | None = None
    if request.report_path:
        expectation_text = StringDescription()
        matcher.describe_to(expectation_text)
        try:
            report_path = write_assessment_workbook(
                request.report_path,
                assessment,
                RunMetadata(
                    run_start=run_start,
                    expectations_path=document.path.resolve(),
                    output_path=Path(request.report_path).resolve(),
                    description=str(expectation_text),
                ),
            )
        except OSError as exc:
            raise CheckExecutionError(str(exc)) from exc
        _LOGGER.info("Wrote diagnostics workbook %s", report_path)

    return CheckOutcome(
        passed=passed,
        score=matcher.get_score(),
        findings=matcher.get_findings(),
        rendered=rendered,
        report_path=report_path,
    )


def build_matcher(expectations: ExpectationSettings, symbols: Symbols) -> FluentIterableMatcher:
    """Translate declared check document expectations into a fluent matcher."""
    matcher = an_iterable_of(expectations.item_type, symbols=symbols)
    if expectations.size is not None:
        matcher.of_size(expectations.size)
    if expectations.exactly:
        matcher.exactly()
    if expectations.ordered:
        matcher.ordered()
    if expectations.sorted:
        matcher.sorted()
    if expectations.unique:
        matcher.unique()
    return matcher.with_items(*expectations.items)


def _load_document(expectations_path: str) -> CheckDocument:
    try:
        return load_check_document(expectations_path)
    except (ConfigurationError, OSError) as exc:
        raise CheckExecutionError(str(exc)) from exc


def _resolve_actual_items(document: CheckDocument, actual_path: str | None) -> tuple[Any, ...]:
    if actual_path:
        try:
            actual = load_actual_items(actual_path)
            check_item_types(actual, document.expectations.item_type, "actual")
        except (ConfigurationError, OSError) as exc:
            raise CheckExecutionError(str(exc)) from exc
        return actual
    if document.actual is None:
        raise CheckExecutionError(
            "No actual items: add an 'actual' list to the check document or pass --actual."
        )
    return document.actual


def _resolve_symbols(document: CheckDocument, request: CheckRequest) -> Symbols:
    settings = document.symbols
    if request.symbols_config_path:
        try:
            settings = load_symbols_settings(request.symbols_config_path)
        except (ConfigurationError, OSError) as exc:
            raise CheckExecutionError(str(exc)) from exc
    if request.ascii_symbols:
        settings = SymbolsSettings(preset=SymbolsPreset.ASCII, overrides=settings.overrides)
    return with_overrides(preset_symbols(settings.preset), settings.overrides)


def _render_outcome(matcher: FluentIterableMatcher, actual: tuple[Any, ...], passed: bool) -> str:
    description = StringDescription()
    description.append_text("Expected: ")
    matcher.describe_to(description)
    description.append_text("\n")
    if passed:
        description.append_text(f"PASS (score {matcher.get_score():.2f})\n")
        return str(description)
    description.append_text(f"FAIL (score {matcher.get_score():.2f})\n")
    matcher.describe_mismatch(actual, description)
    return str(description)

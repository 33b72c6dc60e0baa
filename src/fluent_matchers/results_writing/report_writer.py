"""Diagnostics workbook writer service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from fluent_matchers.iterable_matching import (
    IterableAssessment,
    ItemResult,
    calculate_score,
    project_item_results,
)
from fluent_matchers.rendering.prose import describe_expectation

from .report_models import (
    FINDINGS_SHEET_NAME,
    ITEM_COLUMNS,
    ITEMS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    ItemStatus,
    RunMetadata,
)


def write_assessment_workbook(
    output_path: Path | str,
    assessment: IterableAssessment,
    run_metadata: RunMetadata,
) -> Path:
    """Write Findings, Items and RunInfo sheets for one assessment."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = ITEMS_SHEET_NAME

    item_results = project_item_results(assessment)
    _write_items_sheet(sheet, item_results)
    _write_findings_sheet(workbook, assessment)
    _write_run_info_sheet(workbook, assessment, item_results, run_metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_items_sheet(sheet: Worksheet, item_results: Sequence[ItemResult]) -> None:
    for column_index, name in enumerate(ITEM_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name)
        sheet.cell(row=1, column=column_index).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )

    for row, result in enumerate(item_results, start=2):
        closest = result.candidates[0] if result.candidates else None
        values = (
            result.index,
            _normalize_output_value(result.value),
            _resolve_item_status(result).value,
            result.breaking_item_order,
            result.breaking_sort_order,
            result.duplicate,
            result.unwanted,
            describe_expectation(closest.expectation) if closest else None,
            closest.score if closest else None,
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row, column=column_index, value=value)


def _write_findings_sheet(workbook: Workbook, assessment: IterableAssessment) -> None:
    sheet = workbook.create_sheet(FINDINGS_SHEET_NAME)
    sheet.cell(row=1, column=1, value="Kind")
    sheet.cell(row=1, column=2, value="Description")
    sheet.column_dimensions["B"].width = 60
    for row, finding in enumerate(assessment.findings, start=2):
        sheet.cell(row=row, column=1, value=finding.kind.value)
        sheet.cell(row=row, column=2, value=finding.description)


def _write_run_info_sheet(
    workbook: Workbook,
    assessment: IterableAssessment,
    item_results: Sequence[ItemResult],
    run_metadata: RunMetadata,
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("expectations_path", str(run_metadata.expectations_path)),
        ("output_path", str(run_metadata.output_path)),
        ("expectations", run_metadata.description),
        ("verdict", "PASS" if assessment.passed else "FAIL"),
        ("score", calculate_score(assessment)),
        ("total", len(item_results)),
        ("matched", sum(1 for result in item_results if result.matched)),
        ("findings", len(assessment.findings)),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _resolve_item_status(result: ItemResult) -> ItemStatus:
    if result.is_ok:
        return ItemStatus.OK
    if result.matched:
        return ItemStatus.MATCHED_WITH_ISSUES
    return ItemStatus.NOT_MATCHED


def _normalize_output_value(value: Any) -> Any:
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    if isinstance(value, Sequence) and not isinstance(value, bytes):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return repr(value)

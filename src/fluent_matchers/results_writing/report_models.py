"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

FINDINGS_SHEET_NAME = "Findings"
ITEMS_SHEET_NAME = "Items"
RUN_INFO_SHEET_NAME = "RunInfo"

ITEM_COLUMNS: tuple[str, ...] = (
    "Index",
    "Value",
    "Status",
    "Out of order",
    "Unsorted",
    "Duplicate",
    "Unwanted",
    "Closest expectation",
    "Score",
)


class ItemStatus(str, Enum):
    """Rendered status in the Items sheet status column."""

    OK = "OK"
    MATCHED_WITH_ISSUES = "MATCHED_WITH_ISSUES"
    NOT_MATCHED = "NOT_MATCHED"


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    expectations_path: Path
    output_path: Path
    description: str

"""Results writing domain exports."""

from .report_models import ItemStatus, RunMetadata
from .report_writer import write_assessment_workbook

__all__ = [
    "ItemStatus",
    "RunMetadata",
    "write_assessment_workbook",
]

"""Check execution domain exports."""

from .check_contracts import CheckOutcome, CheckRequest
from .check_use_case import CheckExecutionError, build_matcher, execute_check

__all__ = [
    "CheckRequest",
    "CheckOutcome",
    "CheckExecutionError",
    "build_matcher",
    "execute_check",
]

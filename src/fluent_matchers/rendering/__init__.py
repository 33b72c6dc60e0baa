"""Rendering exports."""

from .prose import (
    describe_expectation,
    describe_expectations,
    describe_findings,
    render_item_line,
    render_item_lines,
)

__all__ = [
    "describe_expectation",
    "describe_expectations",
    "describe_findings",
    "render_item_line",
    "render_item_lines",
]

"""Fluent PyHamcrest matchers with per-item mismatch diagnostics."""

import logging

from .convenient_matchers import an_iterable_of
from .fluent_iterable_matcher import FluentIterableMatcher

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FluentIterableMatcher",
    "an_iterable_of",
]

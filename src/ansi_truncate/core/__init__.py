"""Truncation engine for ansi-truncate."""

from ansi_truncate.core.slicer import SliceResult, SliceState, TextSlicer, slice_text
from ansi_truncate.core.strategies import (
    truncate_ends,
    truncate_from,
    truncate_middle,
    truncate_start,
)
from ansi_truncate.core.truncator import STRATEGIES, Truncator, boundary_predicate, truncate

__all__ = [
    # Slicing
    "SliceResult",
    "SliceState",
    "TextSlicer",
    "slice_text",
    # Strategies
    "truncate_start",
    "truncate_from",
    "truncate_middle",
    "truncate_ends",
    "STRATEGIES",
    # Dispatch
    "Truncator",
    "boundary_predicate",
    "truncate",
]

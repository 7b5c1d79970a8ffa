# Dayline - timeline layout engine
"""
Exports for renderers and other consumers.
"""

from .contracts import EntryRecord, enforce_invariants, parse_entries
from .timeline import (
    BlockLayout,
    BlockProgress,
    BlockTable,
    Entry,
    LayoutBox,
    TimeBlock,
    classify,
    classify_instant,
    layout_block,
    layout_day,
    load_block_table,
)

__all__ = [
    "Entry",
    "TimeBlock",
    "BlockTable",
    "load_block_table",
    "LayoutBox",
    "BlockLayout",
    "BlockProgress",
    "layout_block",
    "layout_day",
    "classify",
    "classify_instant",
    "EntryRecord",
    "parse_entries",
    "enforce_invariants",
]

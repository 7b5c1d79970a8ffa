"""
Timeline Module

Lays out a block's activity entries on a time axis and tracks the current
position within the day.

Objects:
- Entry (label, block, optional start time and duration)
- BlockTable (the three daily blocks; evening wraps past midnight)
- BlockLayout (positioned LayoutBoxes + unscheduled entry ids)
- BlockProgress (active block + percent elapsed)

Invariants:
- Every entry of a block is either scheduled or unscheduled, never both
- Entries sharing a lane never overlap in time
- A cluster uses exactly as many lanes as its peak concurrency
"""

from .blocks import BlockSpec, BlockTable, load_block_table
from .clock import classify, classify_instant, minute_of_day
from .clusterer import cluster, cluster_ids, touches
from .concurrency import max_concurrency
from .errors import BlockTableError, ConsistencyWarning, LayoutWarning, MalformedTimeError, WarningKind
from .geometry import to_box
from .lanes import assign_lanes
from .layout import layout_block, layout_day
from .models import BlockLayout, BlockProgress, Entry, Interval, LayoutBox, TimeBlock
from .normalizer import derive_end_time, effective_duration, format_hhmm, parse_hhmm, to_absolute_minutes, to_interval

__all__ = [
    # Model
    "TimeBlock",
    "Entry",
    "Interval",
    "LayoutBox",
    "BlockLayout",
    "BlockProgress",
    "BlockSpec",
    "BlockTable",
    "load_block_table",
    # Errors
    "MalformedTimeError",
    "ConsistencyWarning",
    "BlockTableError",
    "LayoutWarning",
    "WarningKind",
    # Pipeline stages
    "parse_hhmm",
    "format_hhmm",
    "to_absolute_minutes",
    "effective_duration",
    "derive_end_time",
    "to_interval",
    "touches",
    "cluster",
    "cluster_ids",
    "max_concurrency",
    "assign_lanes",
    "to_box",
    "layout_block",
    "layout_day",
    # Clock
    "classify",
    "classify_instant",
    "minute_of_day",
]

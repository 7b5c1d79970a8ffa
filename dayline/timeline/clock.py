"""
Block Clock - which block is active now, and how far through it.

Derived purely from the instant passed in, so callers can poll on any
cadence (the dashboard re-evaluates every 30 seconds) without drift. The
engine never reads the system clock itself.
"""

from datetime import datetime, time

from dayline.timeline.blocks import BlockTable
from dayline.timeline.models import BlockProgress
from dayline.timeline.normalizer import MINUTES_PER_DAY


def minute_of_day(instant: datetime | time) -> int:
    """Wall-clock minutes since midnight (seconds are dropped)."""
    return instant.hour * 60 + instant.minute


def classify(now_minute: int, table: BlockTable | None = None) -> BlockProgress:
    """
    Active block and progress for a wall-clock minute.

    Minutes into a block are measured with day rollover, so 02:00 is 540
    minutes into the evening block (17:00-05:00), not a negative offset.
    Without ``table`` the built-in BlockTable.default() is used, not the
    YAML table from load_block_table().
    """
    table = table or BlockTable.default()
    now_minute %= MINUTES_PER_DAY

    spec = table.block_for_minute(now_minute)
    elapsed = spec.minutes_into(now_minute)
    progress = elapsed / spec.duration_minutes * 100

    return BlockProgress(
        active_block=spec.block,
        progress_percent=min(max(progress, 0.0), 100.0),
    )


def classify_instant(instant: datetime | time, table: BlockTable | None = None) -> BlockProgress:
    return classify(minute_of_day(instant), table)

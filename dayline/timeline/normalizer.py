"""
Time Normalizer - "HH:MM" strings to block-relative absolute minutes.

A block that starts in the afternoon or later reads early clock times as
belonging to the next calendar day, so the evening block (17:00-05:00)
places 02:00 after 17:00 instead of before it.
"""

import re

from dayline import config
from dayline.timeline.errors import MalformedTimeError
from dayline.timeline.models import Entry, Interval

MINUTES_PER_DAY = 1440

# Wraparound defaults for the fixed block table; BlockTable carries the live values.
WRAP_APPLIES_FROM_MINUTE = 720  # 12:00
WRAP_BEFORE_MINUTE = 600  # 10:00

_HHMM = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_hhmm(time_str: str) -> int:
    """
    Parse a 24-hour "HH:MM" string into minutes since midnight.

    Raises:
        MalformedTimeError: If the value is not a string, does not match the
            pattern, or hours/minutes are out of range.
    """
    if not isinstance(time_str, str):
        raise MalformedTimeError(time_str, "not a string")

    match = _HHMM.fullmatch(time_str)
    if not match:
        raise MalformedTimeError(time_str)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if not 0 <= hours <= 23:
        raise MalformedTimeError(time_str, f"hour {hours} not in 0-23")
    if not 0 <= minutes <= 59:
        raise MalformedTimeError(time_str, f"minute {minutes} not in 0-59")

    return hours * 60 + minutes


def format_hhmm(minutes: int) -> str:
    """Format a minute count as "HH:MM", modulo one day."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def to_absolute_minutes(
    time_str: str,
    block_start_minute: int,
    *,
    wrap_applies_from: int = WRAP_APPLIES_FROM_MINUTE,
    wrap_before: int = WRAP_BEFORE_MINUTE,
) -> int:
    """
    Minutes since the reference midnight of the block's day.

    Values can exceed 1440 when the block starts at or after
    ``wrap_applies_from`` and the time reads earlier than ``wrap_before``.
    """
    minute = parse_hhmm(time_str)
    if block_start_minute >= wrap_applies_from and minute < wrap_before:
        minute += MINUTES_PER_DAY
    return minute


def effective_duration(duration_minutes: int | None) -> int:
    """Duration to lay out; missing or non-positive values become the default."""
    if duration_minutes is None or duration_minutes <= 0:
        return config.DEFAULT_DURATION_MIN
    return int(duration_minutes)


def derive_end_time(start_time: str | None, duration_minutes: int | None = None) -> str | None:
    """End time as "HH:MM" (may cross midnight). None for untimed entries."""
    if start_time is None:
        return None
    return format_hhmm(parse_hhmm(start_time) + effective_duration(duration_minutes))


def to_interval(
    entry: Entry,
    block_start_minute: int,
    *,
    wrap_applies_from: int = WRAP_APPLIES_FROM_MINUTE,
    wrap_before: int = WRAP_BEFORE_MINUTE,
) -> Interval:
    """Build the layout interval for a timed entry."""
    if entry.start_time is None:
        raise MalformedTimeError(None, "entry has no start time")

    start = to_absolute_minutes(
        entry.start_time,
        block_start_minute,
        wrap_applies_from=wrap_applies_from,
        wrap_before=wrap_before,
    )
    return Interval(start=start, end=start + effective_duration(entry.duration_minutes), entry_id=entry.id)

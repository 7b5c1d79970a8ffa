"""
Timeline data model.

Entries come from an external store and are never mutated here. Everything
else (intervals, boxes, layouts, progress) is derived per call and discarded.
"""

from dataclasses import dataclass
from enum import StrEnum

from dayline.timeline.errors import LayoutWarning


class TimeBlock(StrEnum):
    """The three fixed daily blocks an entry can belong to."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"

    @classmethod
    def parse(cls, value: "TimeBlock | str") -> "TimeBlock":
        """Accept a member or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown time block: {value!r}")


@dataclass(frozen=True)
class Entry:
    id: str
    label: str
    time_block: TimeBlock
    start_time: str | None = None
    duration_minutes: int | None = None
    order: int = 0

    @property
    def is_timed(self) -> bool:
        return self.start_time is not None


@dataclass(frozen=True, order=True)
class Interval:
    """Half-open [start, end) in block-relative absolute minutes."""

    start: int
    end: int
    entry_id: str

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class LayoutBox:
    entry_id: str
    top_percent: float
    height_percent: float
    left_percent: float
    width_percent: float
    lane_index: int
    lane_count: int
    start_minute: int
    end_minute: int

    def to_dict(self) -> dict:
        return {
            "entryId": self.entry_id,
            "topPercent": self.top_percent,
            "heightPercent": self.height_percent,
            "leftPercent": self.left_percent,
            "widthPercent": self.width_percent,
            "laneIndex": self.lane_index,
            "laneCount": self.lane_count,
            "startMinute": self.start_minute,
            "endMinute": self.end_minute,
        }


@dataclass(frozen=True)
class BlockLayout:
    """Layout of one block: positioned boxes plus the unscheduled side list."""

    block: TimeBlock
    scheduled: tuple[LayoutBox, ...] = ()
    unscheduled: tuple[str, ...] = ()
    warnings: tuple[LayoutWarning, ...] = ()

    def box_for(self, entry_id: str) -> LayoutBox | None:
        for box in self.scheduled:
            if box.entry_id == entry_id:
                return box
        return None

    def to_dict(self) -> dict:
        return {
            "block": self.block.value,
            "scheduled": [b.to_dict() for b in self.scheduled],
            "unscheduled": list(self.unscheduled),
            "warnings": [w.to_dict() for w in self.warnings],
        }


@dataclass(frozen=True)
class BlockProgress:
    active_block: TimeBlock
    progress_percent: float

    def to_dict(self) -> dict:
        return {"activeBlock": self.active_block.value, "progressPercent": self.progress_percent}

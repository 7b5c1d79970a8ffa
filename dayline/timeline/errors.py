"""
Error and warning taxonomy for the timeline engine.

Nothing here is fatal to the host process:
- MalformedTimeError is raised by the normalizer and caught per entry by the
  layout pipeline, which routes the entry to the unscheduled list.
- ConsistencyWarning marks a lane assignment that fell back to lane 0.
- BlockTableError rejects a block table that does not tile the day.
"""

from dataclasses import dataclass
from enum import StrEnum


class MalformedTimeError(ValueError):
    """A start time that is not a valid 24-hour "HH:MM" string."""

    def __init__(self, value: object, reason: str = "expected HH:MM"):
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed time {value!r}: {reason}")


class BlockTableError(ValueError):
    """Raised when a block table does not cover the day exactly once."""

    pass


class ConsistencyWarning(UserWarning):
    """Lane assignment found no free lane within the computed concurrency."""

    pass


class WarningKind(StrEnum):
    MALFORMED_TIME = "malformed_time"
    LANE_CONSISTENCY = "lane_consistency"


@dataclass(frozen=True)
class LayoutWarning:
    """A non-fatal problem surfaced to the caller alongside a layout."""

    kind: WarningKind
    entry_id: str
    message: str

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "entryId": self.entry_id, "message": self.message}

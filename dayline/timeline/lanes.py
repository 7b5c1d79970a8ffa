"""
Lane Assigner - greedy interval colouring within one cluster.

Enforces: no two intervals that share a lane overlap in time.
"""

import logging
import warnings
from collections.abc import Iterable

from dayline.timeline.errors import ConsistencyWarning, LayoutWarning, WarningKind
from dayline.timeline.models import Interval

logger = logging.getLogger(__name__)


def assign_lanes(
    group: Iterable[Interval],
    lane_count: int,
    issues: list[LayoutWarning] | None = None,
) -> dict[str, int]:
    """
    Map each entry id in the group to a lane index in [0, lane_count).

    Intervals are taken in (start, entry_id) order and each goes to the
    lowest lane that is free by its start. With lane_count taken from
    max_concurrency() a free lane always exists; if none does, the interval
    falls back to lane 0 and a ConsistencyWarning is reported, appended to
    ``issues`` when given, otherwise emitted via the warnings module.

    Args:
        group: Intervals of one overlap cluster
        lane_count: Number of lanes available (>= 1)
        issues: Optional collector for non-fatal warnings

    Returns:
        Dict of entry_id -> lane index
    """
    lane_count = max(int(lane_count), 1)
    occupied_until: list[int | None] = [None] * lane_count
    lanes: dict[str, int] = {}

    for interval in sorted(group, key=lambda iv: (iv.start, iv.entry_id)):
        lane = _first_free_lane(occupied_until, interval.start)

        if lane is None:
            message = (
                f"No free lane for {interval.entry_id} at minute {interval.start} "
                f"with {lane_count} lane(s); falling back to lane 0"
            )
            logger.warning(message)
            if issues is not None:
                issues.append(LayoutWarning(WarningKind.LANE_CONSISTENCY, interval.entry_id, message))
            else:
                warnings.warn(message, ConsistencyWarning, stacklevel=2)
            lane = 0
            occupied_until[0] = max(occupied_until[0], interval.end)
        else:
            occupied_until[lane] = interval.end

        lanes[interval.entry_id] = lane

    return lanes


def _first_free_lane(occupied_until: list[int | None], start: int) -> int | None:
    for index, until in enumerate(occupied_until):
        if until is None or until <= start:
            return index
    return None

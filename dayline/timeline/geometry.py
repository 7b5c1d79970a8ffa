"""
Geometry Mapper - interval + lane to percentage box coordinates.

Top and height are percentages of the block span; left and width are
percentages of the block's width. Values outside [0, 100] are passed
through for the renderer to clip or scroll.
"""

from dayline import config
from dayline.timeline.models import Interval, LayoutBox


def to_box(
    interval: Interval,
    lane_index: int,
    lane_count: int,
    block_start: int,
    block_duration: int,
) -> LayoutBox:
    """Pure mapping from one placed interval to its LayoutBox."""
    lane_count = max(lane_count, 1)
    slot = 100.0 / lane_count

    top = (interval.start - block_start) / block_duration * 100
    height = max(interval.duration / block_duration * 100, config.MIN_HEIGHT_PCT)
    # Gutter never eats more than half a lane.
    width = max(slot - config.LANE_GUTTER_PCT, slot / 2)

    return LayoutBox(
        entry_id=interval.entry_id,
        top_percent=top,
        height_percent=height,
        left_percent=lane_index * slot,
        width_percent=width,
        lane_index=lane_index,
        lane_count=lane_count,
        start_minute=interval.start,
        end_minute=interval.end,
    )

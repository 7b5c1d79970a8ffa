"""
Layout - the full pipeline for one block or a whole day.

entries -> normalize -> {timed, untimed} -> cluster -> sweep -> lanes -> boxes

Partial-failure isolation: an entry whose start time does not parse is
moved to the unscheduled list with a warning; the rest of the block is laid
out as usual.
"""

import logging
from collections.abc import Iterable

from dayline.timeline.blocks import BlockTable
from dayline.timeline.clusterer import cluster
from dayline.timeline.concurrency import max_concurrency
from dayline.timeline.errors import LayoutWarning, MalformedTimeError, WarningKind
from dayline.timeline.geometry import to_box
from dayline.timeline.lanes import assign_lanes
from dayline.timeline.models import BlockLayout, Entry, Interval, LayoutBox, TimeBlock
from dayline.timeline.normalizer import to_interval

logger = logging.getLogger(__name__)


def layout_block(
    entries: Iterable[Entry],
    block: TimeBlock | str,
    table: BlockTable | None = None,
) -> BlockLayout:
    """
    Lay out the entries that belong to ``block``.

    Entries of other blocks are ignored. Scheduled boxes are ordered by
    (start, lane, entry id); unscheduled ids by (order, entry id).

    Without ``table`` the built-in BlockTable.default() is used; pass
    load_block_table() to honour config/time_blocks.yaml.

    Returns:
        BlockLayout with scheduled boxes, unscheduled ids and warnings
    """
    table = table or BlockTable.default()
    spec = table.spec(block)

    issues: list[LayoutWarning] = []
    intervals: list[Interval] = []
    unscheduled: list[Entry] = []

    for entry in entries:
        if entry.time_block != spec.block:
            continue
        if not entry.is_timed:
            unscheduled.append(entry)
            continue
        try:
            intervals.append(
                to_interval(
                    entry,
                    spec.start_minute,
                    wrap_applies_from=table.wrap_applies_from,
                    wrap_before=table.wrap_before,
                )
            )
        except MalformedTimeError as exc:
            logger.warning("Entry %s moved to unscheduled: %s", entry.id, exc)
            issues.append(LayoutWarning(WarningKind.MALFORMED_TIME, entry.id, str(exc)))
            unscheduled.append(entry)

    boxes: list[LayoutBox] = []
    groups = cluster(intervals)
    for group in groups:
        lane_count = max_concurrency(group)
        lanes = assign_lanes(group, lane_count, issues)
        for interval in group:
            boxes.append(
                to_box(
                    interval,
                    lanes[interval.entry_id],
                    lane_count,
                    spec.start_minute,
                    spec.duration_minutes,
                )
            )

    boxes.sort(key=lambda b: (b.start_minute, b.lane_index, b.entry_id))
    unscheduled.sort(key=lambda e: (e.order, e.id))

    logger.debug(
        "Laid out %s: %d scheduled in %d cluster(s), %d unscheduled, %d warning(s)",
        spec.block.value,
        len(boxes),
        len(groups),
        len(unscheduled),
        len(issues),
    )

    return BlockLayout(
        block=spec.block,
        scheduled=tuple(boxes),
        unscheduled=tuple(e.id for e in unscheduled),
        warnings=tuple(issues),
    )


def layout_day(entries: Iterable[Entry], table: BlockTable | None = None) -> dict[TimeBlock, BlockLayout]:
    """Lay out every block. Each block is computed independently."""
    table = table or BlockTable.default()
    entries = list(entries)
    return {spec.block: layout_block(entries, spec.block, table) for spec in table.specs}

"""
Invariants Module - Semantic Correctness Checks for block layouts.

Shape is checked by schema.py; these verify MEANING:
- totality: every entry of the block is scheduled or unscheduled, not both
- lane exclusivity: boxes sharing a lane never overlap in time
- lane count: each overlap cluster uses exactly as many lanes as its peak
  concurrency
- geometry: boxes stay inside the horizontal span

They are cheap enough to run on every layout, not just in tests.
"""

from collections.abc import Iterable

from dayline.timeline.clusterer import cluster
from dayline.timeline.concurrency import max_concurrency
from dayline.timeline.models import BlockLayout, Entry, Interval, LayoutBox


class InvariantViolation(Exception):
    """Raised when a layout invariant is violated."""

    pass


def _interval(box: LayoutBox) -> Interval:
    return Interval(start=box.start_minute, end=box.end_minute, entry_id=box.entry_id)


# =============================================================================
# INVARIANT FUNCTIONS
# =============================================================================


def check_totality(layout: BlockLayout, entries: list[Entry]) -> None:
    """
    INVARIANT: each entry of the block appears exactly once across
    scheduled and unscheduled, and nothing else appears.

    Raises:
        InvariantViolation: On a missing, duplicated or foreign entry id
    """
    expected = sorted(e.id for e in entries if e.time_block == layout.block)
    placed = sorted([b.entry_id for b in layout.scheduled] + list(layout.unscheduled))

    if placed != expected:
        missing = sorted(set(expected) - set(placed))
        extra = sorted(set(placed) - set(expected))
        duplicated = sorted({i for i in placed if placed.count(i) > 1})
        raise InvariantViolation(
            f"Totality broken for {layout.block.value}: missing={missing}, "
            f"unexpected={extra}, duplicated={duplicated}"
        )


def check_lane_exclusivity(layout: BlockLayout, entries: list[Entry]) -> None:
    """
    INVARIANT: no two boxes in the same lane overlap in time.

    Raises:
        InvariantViolation: Listing the first overlapping pair found
    """
    boxes = list(layout.scheduled)
    for i, a in enumerate(boxes):
        for b in boxes[i + 1 :]:
            if a.lane_index != b.lane_index:
                continue
            if max(a.start_minute, b.start_minute) < min(a.end_minute, b.end_minute):
                raise InvariantViolation(
                    f"{a.entry_id} and {b.entry_id} overlap in lane {a.lane_index} "
                    f"of {layout.block.value}"
                )


def check_lane_count_matches_usage(layout: BlockLayout, entries: list[Entry]) -> None:
    """
    INVARIANT: per overlap cluster, distinct lanes used == peak concurrency
    == lane_count on every box.

    Raises:
        InvariantViolation: If a cluster over- or under-allocates lanes
    """
    by_id = {b.entry_id: b for b in layout.scheduled}
    for group in cluster(_interval(b) for b in layout.scheduled):
        peak = max_concurrency(group)
        used = {by_id[iv.entry_id].lane_index for iv in group}
        counts = {by_id[iv.entry_id].lane_count for iv in group}
        if len(used) != peak or counts != {peak}:
            ids = [iv.entry_id for iv in group]
            raise InvariantViolation(
                f"Cluster {ids}: peak concurrency {peak}, lanes used {sorted(used)}, "
                f"lane_count {sorted(counts)}"
            )


def check_box_geometry(layout: BlockLayout, entries: list[Entry]) -> None:
    """
    INVARIANT: every box sits inside the horizontal span with positive size.

    Raises:
        InvariantViolation: On a box that spills past 100% or has no area
    """
    tolerance = 1e-9
    for box in layout.scheduled:
        if box.height_percent <= 0 or box.width_percent <= 0:
            raise InvariantViolation(f"{box.entry_id} has empty geometry")
        if box.left_percent < -tolerance or box.left_percent + box.width_percent > 100 + tolerance:
            raise InvariantViolation(
                f"{box.entry_id} spans {box.left_percent:.2f}%..{box.left_percent + box.width_percent:.2f}%"
            )


ALL_INVARIANTS = [
    check_totality,
    check_lane_exclusivity,
    check_lane_count_matches_usage,
    check_box_geometry,
]


# =============================================================================
# ENFORCEMENT
# =============================================================================


def enforce_invariants(layout: BlockLayout, entries: Iterable[Entry]) -> list[str]:
    """
    Run all invariants. Returns list of violations.

    Args:
        layout: The layout to validate
        entries: The entries it was computed from (all blocks allowed)

    Returns:
        List of violation messages. Empty = pass.
    """
    entries = list(entries)
    violations = []

    for invariant in ALL_INVARIANTS:
        try:
            invariant(layout, entries)
        except InvariantViolation as e:
            violations.append(f"INVARIANT_VIOLATION: {str(e)}")

    return violations


def enforce_invariants_strict(layout: BlockLayout, entries: Iterable[Entry]) -> None:
    """
    Strict enforcement - raises on first violation.

    Raises:
        InvariantViolation: If any invariant fails
    """
    entries = list(entries)
    for invariant in ALL_INVARIANTS:
        invariant(layout, entries)

"""
Overlap Clusterer - connected components of overlapping intervals.

Touching is not transitive (A-B and B-C can overlap while A-C do not), yet
all three must share one lane allocation or their boxes collide. Groups are
therefore grown until a full pass over the remaining intervals adds nothing.

The expansion is O(n^2) per pass and O(n) passes in the worst case, which is
fine for a single day's activities.
"""

from collections.abc import Iterable

from dayline.timeline.models import Interval


def touches(a: Interval, b: Interval) -> bool:
    """Strict overlap: intervals that only abut (a.end == b.start) do not touch."""
    return max(a.start, b.start) < min(a.end, b.end)


def cluster(intervals: Iterable[Interval]) -> list[list[Interval]]:
    """
    Partition intervals into overlap clusters.

    Intervals are seeded in (start, end, entry_id) order; groups come back
    in seed order with members sorted the same way. Every interval lands in
    exactly one group, singletons included.
    """
    remaining = sorted(intervals)
    groups: list[list[Interval]] = []

    while remaining:
        group = [remaining.pop(0)]

        grew = True
        while grew:
            grew = False
            still_outside = []
            for candidate in remaining:
                if any(touches(candidate, member) for member in group):
                    group.append(candidate)
                    grew = True
                else:
                    still_outside.append(candidate)
            remaining = still_outside

        groups.append(sorted(group))

    return groups


def cluster_ids(intervals: Iterable[Interval]) -> list[list[str]]:
    """Same as cluster(), reduced to entry ids."""
    return [[iv.entry_id for iv in group] for group in cluster(intervals)]

"""
Concurrency Sweep - peak number of simultaneously active intervals.

The peak becomes the number of equal-width lanes for a cluster.
"""

from collections.abc import Iterable

from dayline.timeline.models import Interval


def max_concurrency(group: Iterable[Interval]) -> int:
    """
    Sweep start (+1) and end (-1) events in time order and return the
    largest running total, never less than 1.

    At the same instant ends are applied before starts, so an interval that
    begins exactly when another finishes is not counted alongside it. This
    matches the strict overlap rule in clusterer.touches().
    """
    events: list[tuple[int, int]] = []
    for interval in group:
        events.append((interval.start, +1))
        events.append((interval.end, -1))

    # (time, delta) sorts -1 before +1 at equal times.
    events.sort()

    active = 0
    peak = 0
    for _, delta in events:
        active += delta
        peak = max(peak, active)

    return max(peak, 1)

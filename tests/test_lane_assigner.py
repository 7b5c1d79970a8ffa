"""
Tests for the Lane Assigner - greedy lowest-free-lane placement.
"""

import warnings

import pytest

from dayline.timeline import ConsistencyWarning, Interval, WarningKind, assign_lanes, max_concurrency


def iv(entry_id, start, end):
    return Interval(start=start, end=end, entry_id=entry_id)


class TestAssignLanes:
    def test_single_interval_lane_zero(self):
        assert assign_lanes([iv("a", 0, 30)], 1) == {"a": 0}

    def test_overlap_gets_two_lanes(self):
        lanes = assign_lanes([iv("a", 480, 540), iv("b", 510, 540)], 2)
        assert lanes == {"a": 0, "b": 1}

    def test_lane_reused_after_end(self):
        group = [iv("a", 0, 30), iv("b", 30, 60), iv("c", 0, 60)]
        lanes = assign_lanes(group, max_concurrency(group))
        assert lanes == {"a": 0, "c": 1, "b": 0}

    def test_lowest_free_lane_preferred(self):
        group = [iv("a", 0, 100), iv("b", 10, 40), iv("c", 20, 200), iv("d", 50, 80)]
        lanes = assign_lanes(group, max_concurrency(group))
        # b frees lane 1 at 40, so d takes lane 1 rather than a new lane
        assert lanes == {"a": 0, "b": 1, "c": 2, "d": 1}

    def test_ties_broken_by_id(self):
        lanes = assign_lanes([iv("b", 0, 30), iv("a", 0, 30)], 2)
        assert lanes == {"a": 0, "b": 1}

    def test_same_lane_never_overlaps(self):
        group = [iv(str(i), (i * 17) % 90, (i * 17) % 90 + 40) for i in range(12)]
        lanes = assign_lanes(group, max_concurrency(group))
        for a in group:
            for b in group:
                if a.entry_id < b.entry_id and lanes[a.entry_id] == lanes[b.entry_id]:
                    assert max(a.start, b.start) >= min(a.end, b.end)

    def test_lane_count_fully_used(self):
        group = [iv("a", 0, 60), iv("b", 10, 70), iv("c", 20, 80)]
        lanes = assign_lanes(group, max_concurrency(group))
        assert sorted(set(lanes.values())) == [0, 1, 2]


class TestFallback:
    """Too few lanes: degrade to lane 0, never raise."""

    def test_collects_warning(self):
        issues = []
        lanes = assign_lanes([iv("a", 0, 60), iv("b", 10, 40)], 1, issues)
        assert lanes == {"a": 0, "b": 0}
        assert len(issues) == 1
        assert issues[0].kind == WarningKind.LANE_CONSISTENCY
        assert issues[0].entry_id == "b"

    def test_emits_python_warning_without_collector(self):
        with pytest.warns(ConsistencyWarning):
            lanes = assign_lanes([iv("a", 0, 60), iv("b", 10, 40)], 1)
        assert lanes["b"] == 0

    def test_no_warning_when_consistent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assign_lanes([iv("a", 0, 60), iv("b", 10, 40)], 2)

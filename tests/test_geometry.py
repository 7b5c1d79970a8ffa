"""
Tests for the Geometry Mapper.
"""

import pytest

from dayline import config
from dayline.timeline import Interval, to_box


def iv(entry_id, start, end):
    return Interval(start=start, end=end, entry_id=entry_id)


class TestVertical:
    def test_top_percent(self):
        box = to_box(iv("a", 480, 540), 0, 1, 300, 420)
        assert box.top_percent == pytest.approx(42.857, abs=1e-3)

    def test_height_percent(self):
        box = to_box(iv("a", 480, 540), 0, 1, 300, 420)
        assert box.height_percent == pytest.approx(60 / 420 * 100)

    def test_height_floor(self):
        box = to_box(iv("a", 480, 490), 0, 1, 300, 420)
        assert box.height_percent == 5.0

    def test_top_outside_block_passed_through(self):
        box = to_box(iv("a", 240, 270), 0, 1, 300, 420)
        assert box.top_percent < 0

    def test_evening_after_midnight_near_end(self):
        box = to_box(iv("late", 1560, 1620), 0, 1, 1020, 720)
        assert box.top_percent == pytest.approx(75.0)


class TestHorizontal:
    def test_single_lane_full_width_minus_gutter(self):
        box = to_box(iv("a", 0, 30), 0, 1, 0, 300)
        assert box.left_percent == 0.0
        assert box.width_percent == 100.0 - config.LANE_GUTTER_PCT

    def test_second_of_two_lanes(self):
        box = to_box(iv("a", 0, 30), 1, 2, 0, 300)
        assert box.left_percent == 50.0
        assert box.width_percent == 50.0 - config.LANE_GUTTER_PCT

    def test_gutter_capped_at_half_lane(self):
        box = to_box(iv("a", 0, 30), 0, 200, 0, 300)
        assert box.width_percent == pytest.approx(0.25)

    def test_carries_lane_and_minutes(self):
        box = to_box(iv("a", 100, 130), 2, 3, 0, 300)
        assert (box.lane_index, box.lane_count, box.start_minute, box.end_minute) == (2, 3, 100, 130)

    def test_pure(self):
        args = (iv("a", 480, 540), 1, 3, 300, 420)
        assert to_box(*args) == to_box(*args)

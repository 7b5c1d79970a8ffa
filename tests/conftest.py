"""
Test configuration - ensures repo root is in sys.path + shared entry fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import dayline.*
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dayline.timeline import BlockTable, Entry, TimeBlock  # noqa: E402


@pytest.fixture
def table():
    """The built-in morning/afternoon/evening table."""
    return BlockTable.default()


@pytest.fixture
def make_entry():
    """Factory: make_entry("A", "08:00", 60) -> morning Entry with id A."""

    def _make(entry_id, start_time=None, duration=None, block=TimeBlock.MORNING, order=0, label=None):
        return Entry(
            id=entry_id,
            label=label or f"Activity {entry_id}",
            time_block=block,
            start_time=start_time,
            duration_minutes=duration,
            order=order,
        )

    return _make

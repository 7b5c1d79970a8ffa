"""
Centralized configuration for Dayline.

Layout tunables that a deployment may want to adjust belong here.
Override via environment variables where marked.
"""

import os

# ============================================================
# Entries
# ============================================================

DEFAULT_DURATION_MIN: int = int(os.environ.get("DAYLINE_DEFAULT_DURATION_MIN", "30"))
"""Duration used when an entry has a start time but no (or a non-positive) duration."""

# ============================================================
# Geometry
# ============================================================

MIN_HEIGHT_PCT: float = float(os.environ.get("DAYLINE_MIN_HEIGHT_PCT", "5.0"))
"""Smallest box height, as a percent of the block span, so short entries stay tappable."""

LANE_GUTTER_PCT: float = float(os.environ.get("DAYLINE_LANE_GUTTER_PCT", "1.0"))
"""Horizontal gap taken off each lane's width, in percentage points."""

# ============================================================
# Block table / logging
# ============================================================

BLOCKS_CONFIG: str | None = os.environ.get("DAYLINE_BLOCKS_CONFIG")
"""Path to a YAML block table. Unset means config/time_blocks.yaml under the project root."""

LOG_LEVEL: str = os.environ.get("DAYLINE_LOG_LEVEL", "INFO")
"""Default level for configure_logging()."""

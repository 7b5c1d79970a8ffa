"""
Block Table - the three fixed daily time windows.

Invariant: morning, afternoon and evening, laid end to end with wraparound
at midnight, cover the whole day exactly once. Evening runs 17:00-05:00 and
is the only block that crosses midnight in the default table.

Loads overrides from config/time_blocks.yaml. Falls back to the built-in
table if the config file is missing or invalid.

The layout pipeline and the block clock default to BlockTable.default(); a
host that wants the YAML table (or DAYLINE_BLOCKS_CONFIG) calls
load_block_table() once and passes the result in.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from dayline import paths
from dayline.timeline.errors import BlockTableError, MalformedTimeError
from dayline.timeline.models import TimeBlock
from dayline.timeline.normalizer import (
    MINUTES_PER_DAY,
    WRAP_APPLIES_FROM_MINUTE,
    WRAP_BEFORE_MINUTE,
    parse_hhmm,
)

logger = logging.getLogger(__name__)


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True)
class BlockSpec:
    block: TimeBlock
    start_minute: int
    duration_minutes: int
    label: str = ""

    @property
    def end_minute(self) -> int:
        """Wall-clock end, modulo one day."""
        return (self.start_minute + self.duration_minutes) % MINUTES_PER_DAY

    @property
    def crosses_midnight(self) -> bool:
        return self.start_minute + self.duration_minutes > MINUTES_PER_DAY

    @property
    def time_range(self) -> str:
        """Human range, e.g. "5:00 PM - 5:00 AM"."""
        return f"{_format_12h(self.start_minute)} - {_format_12h(self.end_minute)}"

    def minutes_into(self, minute: int) -> int | None:
        """Minutes elapsed since block start, or None when outside the block."""
        offset = (minute - self.start_minute) % MINUTES_PER_DAY
        if offset < self.duration_minutes:
            return offset
        return None


@dataclass(frozen=True)
class BlockTable:
    """
    The daily block layout plus the wraparound parameters used to place
    early clock times inside blocks that start late in the day.
    """

    specs: tuple[BlockSpec, ...]
    wrap_applies_from: int = WRAP_APPLIES_FROM_MINUTE
    wrap_before: int = WRAP_BEFORE_MINUTE

    def __post_init__(self):
        _validate_coverage(self.specs)
        for name, value in (("wrap_applies_from", self.wrap_applies_from), ("wrap_before", self.wrap_before)):
            if not 0 <= value < MINUTES_PER_DAY:
                raise BlockTableError(f"{name}={value} outside 0-{MINUTES_PER_DAY - 1}")

    @classmethod
    def default(cls) -> "BlockTable":
        return cls(specs=DEFAULT_SPECS)

    def spec(self, block: TimeBlock | str) -> BlockSpec:
        block = TimeBlock.parse(block)
        for spec in self.specs:
            if spec.block == block:
                return spec
        raise BlockTableError(f"Block {block.value} missing from table")

    def block_for_minute(self, minute: int) -> BlockSpec:
        """The block whose range contains the wall-clock minute."""
        for spec in self.specs:
            if spec.minutes_into(minute) is not None:
                return spec
        # Unreachable for a validated table.
        raise BlockTableError(f"No block covers minute {minute}")


DEFAULT_SPECS: tuple[BlockSpec, ...] = (
    BlockSpec(TimeBlock.MORNING, start_minute=300, duration_minutes=420, label="Morning"),
    BlockSpec(TimeBlock.AFTERNOON, start_minute=720, duration_minutes=300, label="Afternoon"),
    BlockSpec(TimeBlock.EVENING, start_minute=1020, duration_minutes=720, label="Evening"),
)


# =============================================================================
# VALIDATION
# =============================================================================


def _validate_coverage(specs: tuple[BlockSpec, ...]) -> None:
    """
    Raise BlockTableError unless every TimeBlock appears once and the ranges
    tile the day with no gaps and no overlaps.
    """
    blocks = [s.block for s in specs]
    if sorted(blocks) != sorted(TimeBlock):
        raise BlockTableError(f"Expected exactly one spec per block, got {[b.value for b in blocks]}")

    for spec in specs:
        if not 0 <= spec.start_minute < MINUTES_PER_DAY:
            raise BlockTableError(f"{spec.block.value}: start {spec.start_minute} outside 0-1439")
        if spec.duration_minutes <= 0:
            raise BlockTableError(f"{spec.block.value}: duration must be positive")

    total = sum(s.duration_minutes for s in specs)
    if total != MINUTES_PER_DAY:
        raise BlockTableError(f"Blocks cover {total} minutes, expected {MINUTES_PER_DAY}")

    ordered = sorted(specs, key=lambda s: s.start_minute)
    for current, following in zip(ordered, ordered[1:] + ordered[:1]):
        if current.end_minute != following.start_minute:
            raise BlockTableError(
                f"{current.block.value} ends at {current.end_minute} "
                f"but {following.block.value} starts at {following.start_minute}"
            )


def _format_12h(minute: int) -> str:
    hours, minutes = divmod(minute % MINUTES_PER_DAY, 60)
    suffix = "AM" if hours < 12 else "PM"
    return f"{hours % 12 or 12}:{minutes:02d} {suffix}"


# =============================================================================
# LOADING
# =============================================================================


def _minute_value(value) -> int:
    """YAML times may be quoted "HH:MM" strings or plain minute counts."""
    if isinstance(value, bool):
        raise BlockTableError(f"Invalid time value {value!r}")
    if isinstance(value, int):
        return value
    try:
        return parse_hhmm(value)
    except MalformedTimeError as exc:
        raise BlockTableError(str(exc)) from exc


def block_table_from_dict(data: dict) -> BlockTable:
    """Build a BlockTable from the parsed YAML document."""
    raw_blocks = data.get("blocks")
    if not isinstance(raw_blocks, dict):
        raise BlockTableError("'blocks' section missing")

    specs = []
    for name, raw in raw_blocks.items():
        try:
            block = TimeBlock.parse(name)
        except ValueError as exc:
            raise BlockTableError(str(exc)) from exc
        if not isinstance(raw, dict) or "start" not in raw or "duration_minutes" not in raw:
            raise BlockTableError(f"{name}: 'start' and 'duration_minutes' are required")
        specs.append(
            BlockSpec(
                block=block,
                start_minute=_minute_value(raw["start"]),
                duration_minutes=int(raw["duration_minutes"]),
                label=str(raw.get("label", block.value.title())),
            )
        )

    wrap = data.get("wraparound") or {}
    if not isinstance(wrap, dict):
        raise BlockTableError("'wraparound' must be a mapping")
    return BlockTable(
        specs=tuple(sorted(specs, key=lambda s: list(TimeBlock).index(s.block))),
        wrap_applies_from=_minute_value(wrap.get("applies_from", WRAP_APPLIES_FROM_MINUTE)),
        wrap_before=_minute_value(wrap.get("before", WRAP_BEFORE_MINUTE)),
    )


def load_block_table(config_path: Path | None = None) -> BlockTable:
    """
    Load the block table from YAML.

    Never raises: a missing file logs a warning, an unreadable or invalid
    one logs an error, and both return BlockTable.default().
    """
    if config_path is None:
        config_path = paths.blocks_config_path()

    if not config_path.exists():
        logger.warning("Block table config not found at %s, using defaults", config_path)
        return BlockTable.default()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise BlockTableError("top level must be a mapping")
        table = block_table_from_dict(data)
    except (yaml.YAMLError, OSError, ValueError, TypeError) as exc:
        logger.error("Failed to load block table from %s: %s", config_path, exc)
        return BlockTable.default()

    logger.debug("Loaded block table from %s", config_path)
    return table

"""
Schema Module - Pydantic models for entry input and layout output.

EntryRecord is the boundary with the external store: documents arrive with
camelCase keys (`_id`, `timeBlock`, `startTime`, `durationMinutes`) and are
turned into immutable Entry objects. Start times are deliberately NOT
pattern-checked here; a malformed time must still reach the layout pipeline
so that only that entry is moved to the unscheduled list.

BlockLayoutContract is the shape handed to the renderer (BlockLayout.to_dict()).
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from dayline.timeline.models import Entry, TimeBlock

# =============================================================================
# INPUT
# =============================================================================


class EntryRecord(BaseModel):
    """One activity document from the store."""

    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True, frozen=True, extra="ignore")

    id: str = Field(alias="_id")
    label: str
    time_block: TimeBlock
    start_time: str | None = None
    duration_minutes: int | None = None
    order: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        if v is None:
            raise ValueError("id is required")
        return str(v)

    @field_validator("label")
    @classmethod
    def label_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("label must not be blank")
        return v

    @field_validator("time_block", mode="before")
    @classmethod
    def parse_block(cls, v):
        return TimeBlock.parse(v)

    @field_validator("start_time", mode="before")
    @classmethod
    def blank_start_is_unscheduled(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        if v is not None and not isinstance(v, str):
            # Left for the normalizer to reject as malformed.
            return str(v)
        return v

    def to_entry(self) -> Entry:
        return Entry(
            id=self.id,
            label=self.label,
            time_block=self.time_block,
            start_time=self.start_time,
            duration_minutes=self.duration_minutes,
            order=self.order,
        )


def parse_entries(records: Iterable[dict]) -> list[Entry]:
    """
    Validate raw store documents and convert them to Entry objects.

    Raises:
        pydantic.ValidationError: On a record with no id, a blank label or an
            unknown time block
    """
    return [EntryRecord.model_validate(r).to_entry() for r in records]


# =============================================================================
# OUTPUT
# =============================================================================


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)


class LayoutBoxContract(_CamelModel):
    entry_id: str
    top_percent: float
    height_percent: float = Field(gt=0.0)
    left_percent: float = Field(ge=0.0, lt=100.0)
    width_percent: float = Field(gt=0.0, le=100.0)
    lane_index: int = Field(ge=0)
    lane_count: int = Field(ge=1)
    start_minute: int
    end_minute: int

    @model_validator(mode="after")
    def lane_within_count(self):
        if self.lane_index >= self.lane_count:
            raise ValueError(f"lane_index {self.lane_index} >= lane_count {self.lane_count}")
        if self.end_minute <= self.start_minute:
            raise ValueError("end_minute must be after start_minute")
        return self


class LayoutWarningContract(_CamelModel):
    kind: str
    entry_id: str
    message: str


class BlockLayoutContract(_CamelModel):
    """Renderer payload for one block."""

    block: TimeBlock
    scheduled: list[LayoutBoxContract] = Field(default_factory=list)
    unscheduled: list[str] = Field(default_factory=list)
    warnings: list[LayoutWarningContract] = Field(default_factory=list)


class BlockProgressContract(_CamelModel):
    active_block: TimeBlock
    progress_percent: float = Field(ge=0.0, le=100.0)

"""
Result types returned by the query engine.

Multi-value results are NamedTuples so callers can unpack them or compare
them against plain tuples. Every field uses -1 for "no data".
"""

from typing import NamedTuple, Optional

from pydantic import BaseModel, Field

NO_DATA = -1


class Segment(NamedTuple):
    """One record together with the time its value stays in force."""

    time: int
    value: int
    end: int
    is_last: bool

    @property
    def duration(self) -> int:
        return self.end - self.time

    @property
    def is_unavailable(self) -> bool:
        return self.value == NO_DATA


class ExtremePoints(NamedTuple):
    """Lowest and highest effective value in a window, with their times."""

    min_time: int = NO_DATA
    min_value: int = NO_DATA
    max_time: int = NO_DATA
    max_value: int = NO_DATA

    @property
    def found(self) -> bool:
        return self.min_value != NO_DATA


class PriceAndAuxCost(NamedTuple):
    """Raw (value, aux_cost) pair of a record on a 3-wide channel."""

    price: int = NO_DATA
    aux_cost: int = NO_DATA


class SeriesSummary(BaseModel):
    """
    Snapshot of the commonly requested figures of one history.

    All integer fields follow the query convention of -1 for "no data".
    """

    channel: str = Field(description="Channel name")
    record_count: int = Field(ge=0, description="Complete records in the sequence")
    last_time: int = Field(description="Time of the last change event")
    last_value: int = Field(description="Effective value of the last record")
    last_delta: int = Field(description="Change between the last two effective values")
    lowest: int = Field(description="Lowest effective value over the whole history")
    highest: int = Field(description="Highest effective value over the whole history")
    weighted_mean: int = Field(description="Duration-weighted mean over the trailing window")
    window_days: float = Field(ge=0, description="Requested trailing window in days")
    unavailable_percentage: Optional[int] = Field(
        default=None,
        description="Percentage of the trailing window spent unavailable (price channels only)",
    )

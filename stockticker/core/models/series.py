"""Daily time-series models."""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

# Loosely typed value found under a field label of a provider day entry.
RawValue = str | int | float | None

# Provider per-date mapping, e.g. {"4. close": "235.60", ...}.
RawDayEntry = Mapping[str, RawValue]

# Date string -> RawDayEntry, in provider document order.
RawSeries = Mapping[str, RawDayEntry]

OPEN_FIELD = "1. open"
HIGH_FIELD = "2. high"
LOW_FIELD = "3. low"
CLOSE_FIELD = "4. close"
VOLUME_FIELD = "5. volume"


class DailyRecord(BaseModel):
    """One normalized trading day."""

    model_config = ConfigDict(frozen=True)

    date: str
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float
    volume: int = 0


class SeriesSummary(BaseModel):
    """Response payload: the requested window and its average close."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Ticker symbol")
    days: int = Field(..., description="Requested day count")
    average_close: float = Field(..., description="Mean close of the returned records")
    data: tuple[DailyRecord, ...] = Field(default_factory=tuple, description="Returned records")

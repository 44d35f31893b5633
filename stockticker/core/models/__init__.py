"""Core data models."""

from stockticker.core.models.series import (
    CLOSE_FIELD,
    HIGH_FIELD,
    LOW_FIELD,
    OPEN_FIELD,
    VOLUME_FIELD,
    DailyRecord,
    RawDayEntry,
    RawSeries,
    RawValue,
    SeriesSummary,
)

__all__ = [
    "DailyRecord",
    "SeriesSummary",
    "RawValue",
    "RawDayEntry",
    "RawSeries",
    "OPEN_FIELD",
    "HIGH_FIELD",
    "LOW_FIELD",
    "CLOSE_FIELD",
    "VOLUME_FIELD",
]

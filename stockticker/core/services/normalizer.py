"""Reduction of a raw provider series to the requested window.

The provider ships its series as a mapping of date strings to per-field string
values. ``normalize`` walks that mapping in its own iteration order (no
chronological sort), visits at most ``requested_days`` dates, and keeps only
the dates whose closing price parses. The other price fields and the volume
are best-effort and fall back to zero.
"""

from __future__ import annotations

import math

from stockticker.core.exceptions import FieldParseError
from stockticker.core.logging import get_logger
from stockticker.core.models import (
    CLOSE_FIELD,
    HIGH_FIELD,
    LOW_FIELD,
    OPEN_FIELD,
    VOLUME_FIELD,
    DailyRecord,
    RawDayEntry,
    RawSeries,
    RawValue,
)
from stockticker.core.parsing import parse_int64

logger = get_logger(__name__)


def _require_text(value: RawValue, field: str) -> str:
    if not isinstance(value, str):
        raise FieldParseError(f"{field} is not a string", field=field, value=value)
    if not value or value != value.strip() or "_" in value:
        raise FieldParseError(f"{field} is not a number: {value!r}", field=field, value=value)
    return value


def parse_price(value: RawValue, field: str = CLOSE_FIELD) -> float:
    """Coerce a string-encoded price to ``float``.

    Raises:
        FieldParseError: value is absent, not a string, not a float literal,
            or not finite (NaN, infinities and overflow such as ``"1e400"``)
    """
    text = _require_text(value, field)
    try:
        price = float(text)
    except ValueError as e:
        raise FieldParseError(f"{field} is not a number: {value!r}", field=field, value=value) from e
    if not math.isfinite(price):
        raise FieldParseError(f"{field} is not a finite number: {value!r}", field=field, value=value)
    return price


def parse_volume(value: RawValue, field: str = VOLUME_FIELD) -> int:
    """Coerce a string-encoded base-10 integer to ``int``.

    Raises:
        FieldParseError: value is absent, not a string, not an integer literal,
            or outside the signed 64-bit range
    """
    volume = parse_int64(_require_text(value, field))
    if volume is None:
        raise FieldParseError(f"{field} is not a 64-bit integer: {value!r}", field=field, value=value)
    return volume


def _price_or_zero(entry: RawDayEntry, field: str, date: str) -> float:
    try:
        return parse_price(entry.get(field), field)
    except FieldParseError as e:
        logger.debug("Defaulting unparsable field to zero", date=date, field=field, reason=e.message)
        return 0.0


def _volume_or_zero(entry: RawDayEntry, date: str) -> int:
    try:
        return parse_volume(entry.get(VOLUME_FIELD))
    except FieldParseError as e:
        logger.debug("Defaulting unparsable field to zero", date=date, field=VOLUME_FIELD, reason=e.message)
        return 0


def normalize_entry(date: str, entry: RawDayEntry) -> DailyRecord:
    """Build a ``DailyRecord`` from one raw entry.

    Raises:
        FieldParseError: the closing price is missing or unparsable
    """
    close = parse_price(entry.get(CLOSE_FIELD), CLOSE_FIELD)
    return DailyRecord(
        date=date,
        open=_price_or_zero(entry, OPEN_FIELD, date),
        high=_price_or_zero(entry, HIGH_FIELD, date),
        low=_price_or_zero(entry, LOW_FIELD, date),
        close=close,
        volume=_volume_or_zero(entry, date),
    )


def average_close(records: tuple[DailyRecord, ...]) -> float:
    """Arithmetic mean of ``close`` over ``records``; 0.0 when empty."""
    if not records:
        return 0.0
    return sum(record.close for record in records) / len(records)


def normalize(raw_series: RawSeries, requested_days: int) -> tuple[tuple[DailyRecord, ...], float]:
    """Select up to ``requested_days`` dates and compute their average close.

    A date whose close cannot be parsed still uses up its slot in the window;
    it is dropped from the result and the average, not replaced.
    """
    limit = max(0, min(requested_days, len(raw_series)))

    records: list[DailyRecord] = []
    for position, date in enumerate(raw_series):
        if position >= limit:
            break
        try:
            records.append(normalize_entry(date, raw_series[date]))
        except FieldParseError as e:
            logger.debug("Skipping record with unparsable close", date=date, reason=e.message)

    result = tuple(records)
    return result, average_close(result)

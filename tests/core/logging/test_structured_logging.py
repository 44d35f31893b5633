"""Tests for structured logging with trace propagation."""

from __future__ import annotations

import io
import json
from datetime import datetime

from stockticker.core.logging import LogConfig, configure_logging, get_logger, log_context, logger
from stockticker.core.logging.logger import _format_payload


def _read_records(stream: io.StringIO) -> list[dict[str, object]]:
    stream.seek(0)
    lines = [line for line in stream.getvalue().splitlines() if line.strip()]
    return [json.loads(line) for line in lines]


def test_structured_log_contains_trace_and_context() -> None:
    buffer = io.StringIO()
    configure_logging(console_stream=buffer)

    with log_context(trace_id="trace-123", provider="alpha_vantage", error_code="DATA_NOT_FOUND", request_id="req-42"):
        logger.info("series fetched", symbol="AAPL")

    records = _read_records(buffer)
    assert len(records) == 1
    record = records[0]
    assert record["trace_id"] == "trace-123"
    assert record["provider"] == "alpha_vantage"
    assert record["error_code"] == "DATA_NOT_FOUND"
    assert record["context"]["request_id"] == "req-42"
    assert record["context"]["symbol"] == "AAPL"


def test_trace_id_propagates_within_context() -> None:
    buffer = io.StringIO()
    configure_logging(console_stream=buffer)

    with log_context() as trace_id:
        logger.info("first event")
        logger.info("second event")

    logger.info("outside context")

    records = _read_records(buffer)
    assert len(records) == 3
    assert records[0]["trace_id"] == records[1]["trace_id"] == trace_id
    assert records[2]["trace_id"] != trace_id


def test_level_filters_records() -> None:
    buffer = io.StringIO()
    configure_logging(level="WARNING", console_stream=buffer)

    logger.info("dropped")
    logger.warning("kept")

    records = _read_records(buffer)
    assert [r["message"] for r in records] == ["kept"]
    assert records[0]["level"] == "WARNING"


def test_console_output_disabled_writes_nothing() -> None:
    buffer = io.StringIO()
    configure_logging(console_output=False, console_stream=buffer)

    logger.warning("silenced")

    assert buffer.getvalue() == ""


def test_get_logger_binds_name() -> None:
    buffer = io.StringIO()
    configure_logging(console_stream=buffer)

    get_logger("stockticker.test").info("named")

    records = _read_records(buffer)
    assert records[0]["context"]["logger_name"] == "stockticker.test"


def test_timestamps_are_timezone_aware() -> None:
    buffer = io.StringIO()
    configure_logging(console_stream=buffer)

    logger.info("stamped")

    emitted = datetime.fromisoformat(_read_records(buffer)[0]["timestamp"])
    assert emitted.tzinfo is not None

    fallback = datetime.fromisoformat(_format_payload({"message": "no time"})["timestamp"])
    assert fallback.tzinfo is not None


def test_log_config_defaults() -> None:
    config = LogConfig()

    assert config.level == "INFO"
    assert config.console_output is True
    assert config.console_stream is None

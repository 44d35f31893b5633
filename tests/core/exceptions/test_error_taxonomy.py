"""Tests for the stockticker error hierarchy."""

from __future__ import annotations

import pytest

from stockticker.core.exceptions import (
    ConfigurationError,
    DecodeError,
    ErrorCode,
    FieldParseError,
    NoDataError,
    ProviderError,
    StockTickerError,
    TransportError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (TransportError("boom", "alpha_vantage"), ErrorCode.NETWORK_ERROR),
        (DecodeError("bad json", "alpha_vantage"), ErrorCode.DATA_FORMAT_ERROR),
        (NoDataError("alpha_vantage"), ErrorCode.DATA_NOT_FOUND),
    ],
)
def test_provider_errors(error: ProviderError, code: ErrorCode) -> None:
    assert isinstance(error, ProviderError)
    assert isinstance(error, StockTickerError)
    assert error.error_code is code
    assert error.provider_name == "alpha_vantage"


def test_no_data_default_message() -> None:
    error = NoDataError("alpha_vantage")

    assert error.message == "no time series data returned"
    assert error.details == {}


def test_field_parse_error_is_not_a_provider_error() -> None:
    error = FieldParseError("4. close is not a number", field="4. close", value="x")

    assert not isinstance(error, ProviderError)
    assert error.details == {"field": "4. close", "value": "x"}


def test_configuration_error_details() -> None:
    error = ConfigurationError("SYMBOL environment variable is required", variable="SYMBOL")

    assert error.error_code is ErrorCode.CONFIGURATION_ERROR
    assert error.details["variable"] == "SYMBOL"


def test_base_error_defaults() -> None:
    error = StockTickerError("plain")

    assert str(error) == "plain"
    assert error.error_code is ErrorCode.GENERAL_ERROR
    assert error.details == {}

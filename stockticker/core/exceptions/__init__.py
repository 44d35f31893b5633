"""Exception handling module."""

from stockticker.core.exceptions.base import (
    ConfigurationError,
    DecodeError,
    FieldParseError,
    NoDataError,
    ProviderError,
    StockTickerError,
    TransportError,
)
from stockticker.core.exceptions.codes import ErrorCode

__all__ = [
    "StockTickerError",
    "ConfigurationError",
    "ProviderError",
    "TransportError",
    "DecodeError",
    "NoDataError",
    "FieldParseError",
    "ErrorCode",
]

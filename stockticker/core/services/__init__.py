"""Core services."""

from stockticker.core.services.normalizer import (
    average_close,
    normalize,
    normalize_entry,
    parse_price,
    parse_volume,
)
from stockticker.core.services.stock_service import StockService

__all__ = [
    "StockService",
    "normalize",
    "normalize_entry",
    "average_close",
    "parse_price",
    "parse_volume",
]

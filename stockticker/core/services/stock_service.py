"""Stock summary service: provider fetch plus normalization."""

from __future__ import annotations

from stockticker.core.config import ServiceConfig
from stockticker.core.logging import get_logger
from stockticker.core.models import SeriesSummary
from stockticker.core.providers import PROVIDER_NAME, AlphaVantageClient
from stockticker.core.services.normalizer import normalize

logger = get_logger(__name__)


class StockService:
    """Builds the ``SeriesSummary`` for the configured symbol and window."""

    def __init__(self, config: ServiceConfig, client: AlphaVantageClient) -> None:
        self.config = config
        self.client = client

    def get_summary(self, symbol: str | None = None, days: int | None = None) -> SeriesSummary:
        """Fetch and reduce the series; ``symbol``/``days`` override the configured values."""
        symbol = symbol or self.config.symbol
        days = self.config.ndays if days is None else days

        raw_series = self.client.fetch(symbol, self.config.api_key)
        records, avg_close = normalize(raw_series, days)

        logger.info(
            "Built series summary",
            provider=PROVIDER_NAME,
            symbol=symbol,
            requested_days=days,
            available_days=len(raw_series),
            returned_days=len(records),
            average_close=avg_close,
        )
        return SeriesSummary(symbol=symbol, days=days, average_close=avg_close, data=records)

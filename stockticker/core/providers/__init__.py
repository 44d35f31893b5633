"""Data provider clients."""

from stockticker.core.providers.alpha_vantage import PROVIDER_NAME, TIME_SERIES_KEY, AlphaVantageClient

__all__ = ["AlphaVantageClient", "PROVIDER_NAME", "TIME_SERIES_KEY"]

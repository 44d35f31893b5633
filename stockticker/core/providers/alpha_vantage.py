"""Alpha Vantage daily time-series client."""

from __future__ import annotations

from typing import Any

import httpx

from stockticker.core.config import ALPHA_VANTAGE_URL
from stockticker.core.exceptions import DecodeError, NoDataError, TransportError
from stockticker.core.logging import get_logger
from stockticker.core.models import RawSeries

logger = get_logger(__name__)

PROVIDER_NAME = "alpha_vantage"
TIME_SERIES_KEY = "Time Series (Daily)"

# Fields Alpha Vantage uses to explain an empty answer (bad symbol, throttling, premium endpoint).
_PROVIDER_MESSAGE_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageClient:
    """Fetches the raw ``TIME_SERIES_DAILY`` mapping for one symbol.

    One call is one outbound GET; there is no retry and no cache. When no
    ``http_client`` is injected a short-lived ``httpx.Client`` is opened per
    call, so concurrent fetches share nothing.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_url: str = ALPHA_VANTAGE_URL,
        timeout: float | None = 30.0,
    ) -> None:
        self.http_client = http_client
        self.base_url = base_url
        self.timeout = timeout

    def build_url(self, symbol: str, api_key: str) -> str:
        """Return the outbound URL; parameter names and order are fixed."""
        return f"{self.base_url}?apikey={api_key}&function=TIME_SERIES_DAILY&symbol={symbol}"

    def fetch(self, symbol: str, api_key: str) -> RawSeries:
        """Fetch and decode the daily series for ``symbol``.

        Raises:
            TransportError: the request could not be completed
            DecodeError: the body is not a JSON object of the expected shape
            NoDataError: the time series is absent or null
        """
        url = self.build_url(symbol, api_key)
        logger.debug("Requesting daily series", provider=PROVIDER_NAME, symbol=symbol)

        response = self._get(url)
        if not response.is_success:
            logger.warning(
                "Provider answered with non-success status",
                provider=PROVIDER_NAME,
                symbol=symbol,
                status_code=response.status_code,
            )

        return self._parse_response(response, symbol)

    def _get(self, url: str) -> httpx.Response:
        try:
            if self.http_client is not None:
                return self.http_client.get(url)
            with httpx.Client(timeout=self.timeout) as client:
                return client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(
                f"request to provider failed: {e}",
                PROVIDER_NAME,
                details={"error_type": type(e).__name__},
            ) from e

    def _parse_response(self, response: httpx.Response, symbol: str) -> RawSeries:
        try:
            document: Any = response.json()
        except ValueError as e:
            raise DecodeError(f"error decoding response: {e}", PROVIDER_NAME) from e

        if not isinstance(document, dict):
            raise DecodeError(
                f"error decoding response: expected a JSON object, got {type(document).__name__}",
                PROVIDER_NAME,
            )

        series = document.get(TIME_SERIES_KEY)
        if series is None:
            provider_message = next(
                (str(document[key]) for key in _PROVIDER_MESSAGE_KEYS if document.get(key)),
                None,
            )
            logger.warning(
                "Provider returned no time series",
                provider=PROVIDER_NAME,
                error_code="DATA_NOT_FOUND",
                symbol=symbol,
                provider_message=provider_message,
            )
            raise NoDataError(PROVIDER_NAME, provider_message=provider_message)

        if not isinstance(series, dict):
            raise DecodeError(
                f"error decoding response: {TIME_SERIES_KEY!r} is not an object",
                PROVIDER_NAME,
            )
        # A null entry carries no fields, so its close is missing and the date is skipped.
        entries: dict[str, dict[str, Any]] = {}
        for date, entry in series.items():
            if entry is None:
                entry = {}
            elif not isinstance(entry, dict):
                raise DecodeError(
                    f"error decoding response: entry for {date} is not an object",
                    PROVIDER_NAME,
                )
            entries[date] = entry

        return entries

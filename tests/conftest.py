"""Pytest configuration for the stockticker test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from stockticker.core.config import ServiceConfig
from stockticker.core.providers import AlphaVantageClient


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--stockticker-run-integration",
        action="store_true",
        default=False,
        help="Run stockticker integration tests that require the live provider.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker."""

    config.addinivalue_line(
        "markers",
        "integration: marks tests requiring network access to the live provider",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--stockticker-run-integration"):
        return

    skip_integration = pytest.mark.skip(
        reason="integration tests require --stockticker-run-integration",
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


DAY_2025_01_15 = {
    "1. open": "234.50",
    "2. high": "236.80",
    "3. low": "233.20",
    "4. close": "235.60",
    "5. volume": "45000000",
}

DAY_2025_01_14 = {
    "1. open": "232.50",
    "2. high": "234.80",
    "3. low": "231.20",
    "4. close": "233.60",
    "5. volume": "43000000",
}


def provider_document(series: dict[str, Any] | None) -> dict[str, Any]:
    """Wrap ``series`` the way Alpha Vantage does."""

    document: dict[str, Any] = {"Meta Data": {"2. Symbol": "AAPL"}}
    if series is not None:
        document["Time Series (Daily)"] = series
    return document


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(symbol="AAPL", ndays=1, api_key="test-api-key")


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(recorded_requests: list[httpx.Request]) -> Callable[..., AlphaVantageClient]:
    """Build an ``AlphaVantageClient`` answering every request with ``body``."""

    def factory(body: Any, status_code: int = 200, raw: bool = False) -> AlphaVantageClient:
        content = body if raw else json.dumps(body)

        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, content=content)

        return AlphaVantageClient(http_client=httpx.Client(transport=httpx.MockTransport(handler)))

    return factory


@pytest.fixture
def latest_day() -> dict[str, str]:
    return dict(DAY_2025_01_15)


@pytest.fixture
def previous_day() -> dict[str, str]:
    return dict(DAY_2025_01_14)


@pytest.fixture
def wrap_series() -> Callable[[dict[str, Any] | None], dict[str, Any]]:
    return provider_document

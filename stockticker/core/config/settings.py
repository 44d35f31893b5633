"""Configuration management - loads service settings from the environment."""

import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from stockticker.core.exceptions import ConfigurationError
from stockticker.core.parsing import parse_int64

ALPHA_VANTAGE_URL = "https://www.alphavantage.co/query"


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server settings."""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass(frozen=True)
class ProviderConfig:
    """Outbound provider settings."""

    base_url: str = ALPHA_VANTAGE_URL
    timeout: float | None = 30.0


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"


@dataclass(frozen=True)
class ServiceConfig:
    """stockticker main configuration."""

    symbol: str
    ndays: int
    api_key: str
    server: ServerConfig = field(default_factory=ServerConfig)
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary with the API key masked."""
        data = asdict(self)
        data["api_key"] = "***"
        return data


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "")
    if not value:
        raise ConfigurationError(f"{name} environment variable is required", variable=name)
    return value


def _parse_int(name: str, value: str) -> int:
    parsed = parse_int64(value)
    if parsed is None:
        raise ConfigurationError(f"Invalid {name} value: {value!r}", variable=name)
    return parsed


def _parse_timeout(value: str) -> float | None:
    if value.strip().lower() in ("0", "none", ""):
        return None
    try:
        timeout = float(value)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid STOCKTICKER_PROVIDER_TIMEOUT value: {value!r}",
            variable="STOCKTICKER_PROVIDER_TIMEOUT",
        ) from e
    if timeout < 0:
        raise ConfigurationError(
            "STOCKTICKER_PROVIDER_TIMEOUT must be non-negative",
            variable="STOCKTICKER_PROVIDER_TIMEOUT",
        )
    return timeout


def load_config_from_env(environ: Mapping[str, str] | None = None) -> ServiceConfig:
    """Load configuration from environment variables.

    ``SYMBOL``, ``NDAYS`` and ``APIKEY`` are required; everything under the
    ``STOCKTICKER_`` prefix is optional.

    Raises:
        ConfigurationError: a required variable is missing or a value is malformed
    """
    env = os.environ if environ is None else environ

    symbol = _require(env, "SYMBOL")
    ndays = _parse_int("NDAYS", _require(env, "NDAYS"))
    api_key = _require(env, "APIKEY")

    # Server
    server_kwargs: dict[str, Any] = {}
    if env.get("STOCKTICKER_HOST"):
        server_kwargs["host"] = env["STOCKTICKER_HOST"]
    if env.get("STOCKTICKER_PORT"):
        port = _parse_int("STOCKTICKER_PORT", env["STOCKTICKER_PORT"])
        if not 0 < port < 65536:
            raise ConfigurationError(f"Invalid STOCKTICKER_PORT value: {port}", variable="STOCKTICKER_PORT")
        server_kwargs["port"] = port

    # Provider
    provider_kwargs: dict[str, Any] = {}
    if env.get("STOCKTICKER_PROVIDER_URL"):
        provider_kwargs["base_url"] = env["STOCKTICKER_PROVIDER_URL"]
    if "STOCKTICKER_PROVIDER_TIMEOUT" in env:
        provider_kwargs["timeout"] = _parse_timeout(env["STOCKTICKER_PROVIDER_TIMEOUT"])

    # Logging
    logging_kwargs: dict[str, Any] = {}
    if env.get("STOCKTICKER_LOG_LEVEL"):
        logging_kwargs["level"] = env["STOCKTICKER_LOG_LEVEL"].upper()

    return ServiceConfig(
        symbol=symbol,
        ndays=ndays,
        api_key=api_key,
        server=ServerConfig(**server_kwargs),
        provider=ProviderConfig(**provider_kwargs),
        logging=LoggingConfig(**logging_kwargs),
    )

"""Configuration management module."""

from stockticker.core.config.settings import (
    ALPHA_VANTAGE_URL,
    LoggingConfig,
    ProviderConfig,
    ServerConfig,
    ServiceConfig,
    load_config_from_env,
)

__all__ = [
    "ALPHA_VANTAGE_URL",
    "ServiceConfig",
    "ServerConfig",
    "ProviderConfig",
    "LoggingConfig",
    "load_config_from_env",
]

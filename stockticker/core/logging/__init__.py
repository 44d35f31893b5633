"""Logging utilities for monitoring and debugging."""

from stockticker.core.logging.config import LogConfig
from stockticker.core.logging.logger import (
    configure_logging,
    get_logger,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "get_logger",
    "configure_logging",
    "log_context",
    "logger",
]

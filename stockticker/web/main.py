"""
Web service entry point
"""

import uvicorn

from stockticker.core.config import ServiceConfig
from stockticker.core.logging import configure_logging, get_logger
from stockticker.web.app import create_app

logger = get_logger(__name__)


def run(config: ServiceConfig) -> None:
    """Serve the app for ``config`` until interrupted."""
    configure_logging(level=config.logging.level)
    app = create_app(config)

    logger.info(
        "Starting server",
        host=config.server.host,
        port=config.server.port,
        symbol=config.symbol,
        ndays=config.ndays,
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level=config.logging.level.lower())


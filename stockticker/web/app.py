"""
FastAPI application factory
"""

import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stockticker import __version__
from stockticker.core.config import ServiceConfig
from stockticker.core.logging import get_logger, log_context
from stockticker.core.providers import AlphaVantageClient
from stockticker.core.services import StockService
from stockticker.web.routes import stock_router
from stockticker.web.utils import REQUEST_ID_HEADER, get_request_id

logger = get_logger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed"


def create_app(config: ServiceConfig, client: AlphaVantageClient | None = None) -> FastAPI:
    """Create the FastAPI application.

    Configuration and the provider client are injected; nothing is read from
    module globals or the environment here.
    """
    app = FastAPI(
        title="stockticker",
        description="Average daily close for a configured stock symbol",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    if client is None:
        client = AlphaVantageClient(base_url=config.provider.base_url, timeout=config.provider.timeout)

    app.state.config = config
    app.state.stock_service = StockService(config, client)

    _setup_middleware(app)
    _setup_routes(app)
    _setup_exception_handlers(app)

    return app


def _setup_middleware(app: FastAPI) -> None:
    """Per-request trace id and access log."""

    @app.middleware("http")
    async def trace_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request_id = get_request_id(request)
        with log_context(trace_id=request_id, method=request.method, path=request.url.path) as trace_id:
            started = time.perf_counter()
            response = await call_next(request)
            logger.info(
                "Request handled",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            response.headers[REQUEST_ID_HEADER] = trace_id
            return response


def _setup_routes(app: FastAPI) -> None:
    app.include_router(stock_router)


def _setup_exception_handlers(app: FastAPI) -> None:
    """Plain-text 405 for every method other than GET; 500 for anything unexpected."""

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 405:
            return PlainTextResponse(METHOD_NOT_ALLOWED, status_code=405, headers=exc.headers)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> Response:
        logger.opt(exception=exc).error("Unhandled error while serving request")
        return PlainTextResponse(f"Error fetching stock data: {exc}", status_code=500)

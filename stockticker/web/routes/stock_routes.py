"""
Stock summary route
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from stockticker.core.exceptions import StockTickerError
from stockticker.core.logging import get_logger
from stockticker.core.services import StockService

logger = get_logger(__name__)

router = APIRouter()


# Matches the root and every path below it.
@router.get("/{path:path}", response_class=JSONResponse, response_model=None)
def get_stock_summary(request: Request) -> JSONResponse | PlainTextResponse:
    """
    Return the configured symbol's last N daily records and their average close.

    Runs in the worker thread pool; the provider call is blocking.
    """
    service: StockService = request.app.state.stock_service

    try:
        summary = service.get_summary()
    except StockTickerError as e:
        logger.error(
            "Failed to fetch stock data",
            error_code=e.error_code.value,
            provider=getattr(e, "provider_name", None),
            details=e.details,
        )
        return PlainTextResponse(f"Error fetching stock data: {e.message}", status_code=500)

    return JSONResponse(content=summary.model_dump(mode="json"))

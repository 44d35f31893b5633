"""
Web API module - FastAPI service
"""

from stockticker.web.app import create_app
from stockticker.web.routes import stock_router

__all__ = ["create_app", "stock_router"]

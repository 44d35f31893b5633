"""
Web API routes
"""

from stockticker.web.routes.stock_routes import router as stock_router

__all__ = ["stock_router"]

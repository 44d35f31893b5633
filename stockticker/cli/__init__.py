"""Command line interface."""

from stockticker.cli.main import app, create_app

__all__ = ["app", "create_app"]

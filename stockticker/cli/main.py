"""Main entry point for the stockticker command line interface."""

from __future__ import annotations

import json
from dataclasses import replace

import typer

from stockticker.core.config import ServiceConfig, ServerConfig, load_config_from_env
from stockticker.core.exceptions import ConfigurationError, StockTickerError
from stockticker.core.logging import configure_logging
from stockticker.core.providers import AlphaVantageClient
from stockticker.core.services import StockService

PROVIDER_EXIT_CODE = 1
CONFIG_EXIT_CODE = 2


def get_stock_service(config: ServiceConfig) -> StockService:
    """Factory hook for obtaining a :class:`StockService` instance."""

    client = AlphaVantageClient(base_url=config.provider.base_url, timeout=config.provider.timeout)
    return StockService(config, client)


def _load_config() -> ServiceConfig:
    try:
        return load_config_from_env()
    except ConfigurationError as exc:
        typer.echo(f"Configuration error: {exc.message}", err=True)
        raise typer.Exit(code=CONFIG_EXIT_CODE) from exc


def create_app() -> typer.Typer:
    """Create a Typer application instance for stockticker."""

    app = typer.Typer(add_completion=False, help="stockticker command line interface")

    @app.command("serve")
    def serve_command(
        host: str | None = typer.Option(None, "--host", help="Bind address (default: STOCKTICKER_HOST or 0.0.0.0)."),
        port: int | None = typer.Option(None, "--port", help="Bind port (default: STOCKTICKER_PORT or 8080)."),
    ) -> None:
        """Run the HTTP service."""

        from stockticker.web.main import run

        config = _load_config()
        if host is not None or port is not None:
            config = replace(
                config,
                server=ServerConfig(
                    host=host if host is not None else config.server.host,
                    port=port if port is not None else config.server.port,
                ),
            )
        run(config)

    @app.command("fetch")
    def fetch_command(
        symbol: str | None = typer.Option(None, "--symbol", help="Override SYMBOL."),
        days: int | None = typer.Option(None, "--days", help="Override NDAYS."),
    ) -> None:
        """Fetch once and print the summary as JSON."""

        config = _load_config()
        configure_logging(level=config.logging.level, console_output=False)
        service = get_stock_service(config)
        try:
            summary = service.get_summary(symbol=symbol, days=days)
        except StockTickerError as exc:
            typer.echo(f"Error fetching stock data: {exc.message}", err=True)
            raise typer.Exit(code=PROVIDER_EXIT_CODE) from exc

        typer.echo(json.dumps(summary.model_dump(mode="json"), indent=2))

    return app


app = create_app()

"""Allow ``python -m stockticker``."""

from stockticker.cli.main import app

if __name__ == "__main__":
    app()

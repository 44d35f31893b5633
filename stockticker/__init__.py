"""
stockticker - daily stock series summary service

Fetches a symbol's daily time series from Alpha Vantage and serves the
average close over a configured window.
"""

__version__ = "0.1.0"

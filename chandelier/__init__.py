"""Chandelier - scan USDT pairs for a base-and-hold candlestick pattern."""

__version__ = "0.1.0"

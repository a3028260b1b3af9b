"""Exchange clients for Chandelier."""

from chandelier.exchange.base import BaseExchange, ExchangeError
from chandelier.exchange.binance import (
    BINANCE_BASE_URL,
    DEFAULT_INTERVAL,
    VALID_INTERVALS,
    BinanceExchange,
    normalize_interval,
)

__all__ = [
    "BINANCE_BASE_URL",
    "DEFAULT_INTERVAL",
    "VALID_INTERVALS",
    "BaseExchange",
    "BinanceExchange",
    "ExchangeError",
    "normalize_interval",
]

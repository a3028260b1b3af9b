"""Binance public market data client using httpx."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from chandelier.exchange.base import BaseExchange, ExchangeError
from chandelier.models import Candle, TickerPrice

logger = logging.getLogger(__name__)

BINANCE_BASE_URL = "https://api.binance.com"

# Intervals the scanner accepts; anything else falls back to the default.
VALID_INTERVALS = ("1h", "6h", "12h", "1d", "1w", "1M")
DEFAULT_INTERVAL = "1d"

PRICE_PATH = "/api/v3/ticker/price"
KLINES_PATH = "/api/v3/klines"


def normalize_interval(interval: Optional[str]) -> str:
    """Return the interval if supported, the default interval otherwise."""
    if interval in VALID_INTERVALS:
        return interval
    logger.warning("Unsupported interval %r, using %s", interval, DEFAULT_INTERVAL)
    return DEFAULT_INTERVAL


class BinanceExchange(BaseExchange):
    """Reads ticker prices and klines from the Binance REST API.

    Requests are made one at a time with a blocking httpx client. No retry
    is attempted: any failed request raises ExchangeError.
    """

    def __init__(
        self,
        base_url: str = BINANCE_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the Binance client.

        Args:
            base_url: API root URL.
            timeout: Request timeout in seconds.
            client: Pre-configured httpx client (used in tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _get(self, path: str, params: Optional[dict[str, str]] = None, what: str = "data") -> Any:
        """Issue a GET request and decode the JSON body."""
        logger.debug("GET %s %s", path, params or {})
        try:
            response = self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise ExchangeError(f"Failed to fetch {what}: {e}") from e

        if not response.is_success:
            raise ExchangeError(
                f"Failed to fetch {what}: HTTP {response.status_code} {response.text[:200]}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise ExchangeError(f"Failed to fetch {what}: response is not JSON") from e

    def get_all_prices(self) -> list[TickerPrice]:
        data = self._get(PRICE_PATH, what="pairs")
        if not isinstance(data, list):
            raise ExchangeError("Failed to fetch pairs: expected a list of tickers")

        try:
            return [TickerPrice.model_validate(item) for item in data]
        except ValidationError as e:
            raise ExchangeError(f"Failed to fetch pairs: malformed ticker ({e})") from e

    def get_candles(self, symbol: str, interval: str) -> list[Candle]:
        params = {"symbol": symbol, "interval": normalize_interval(interval)}
        data = self._get(KLINES_PATH, params=params, what=f"candles for {symbol}")
        if not isinstance(data, list):
            raise ExchangeError(f"Failed to fetch candles for {symbol}: expected a list of klines")

        return [Candle.from_kline(row) for row in data]

    def get_price(self, symbol: str) -> float:
        data = self._get(PRICE_PATH, params={"symbol": symbol}, what=f"price for {symbol}")
        if not isinstance(data, dict) or "price" not in data:
            raise ExchangeError(f"Failed to fetch price for {symbol}: no price in response")

        try:
            return float(data["price"])
        except (TypeError, ValueError) as e:
            raise ExchangeError(
                f"Failed to fetch price for {symbol}: malformed price {data['price']!r}"
            ) from e

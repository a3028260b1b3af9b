"""Base exchange interface for Chandelier."""

from abc import ABC, abstractmethod

from chandelier.models import Candle, TickerPrice


class ExchangeError(RuntimeError):
    """Raised when the exchange cannot be reached or answers with an error."""


class BaseExchange(ABC):
    """Abstract base class for market data sources.

    The scanner only reads public market data, so implementations need no
    authentication.
    """

    @abstractmethod
    def get_all_prices(self) -> list[TickerPrice]:
        """Get the latest price of every listed pair.

        Returns:
            One TickerPrice per pair, in exchange order.

        Raises:
            ExchangeError: If the request fails.
        """
        pass

    @abstractmethod
    def get_candles(self, symbol: str, interval: str) -> list[Candle]:
        """Get recent candles for a pair.

        Args:
            symbol: Trading pair.
            interval: Candle interval (1h, 6h, 12h, 1d, 1w, 1M).

        Returns:
            Candles ordered oldest first.

        Raises:
            ExchangeError: If the request fails.
            MalformedCandleError: If a candle row cannot be parsed.
        """
        pass

    @abstractmethod
    def get_price(self, symbol: str) -> float:
        """Get the current price of a pair.

        Args:
            symbol: Trading pair.

        Returns:
            Last traded price.

        Raises:
            ExchangeError: If the request fails.
        """
        pass

    def close(self) -> None:
        """Release any resources held by the client."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

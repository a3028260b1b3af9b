"""Shared fixtures for Chandelier tests."""

from typing import Optional

import pytest

from chandelier.exchange import BaseExchange, ExchangeError
from chandelier.models import Candle, TickerPrice


def make_candle(open_: float, close: float, time: int = 0) -> Candle:
    """Create a candle whose wicks sit just outside its body."""
    return Candle(
        time=time,
        open=open_,
        high=max(open_, close) + 1.0,
        low=max(min(open_, close) - 1.0, 0.0),
        close=close,
    )


def make_series(bodies: list[tuple[float, float]]) -> list[Candle]:
    """Create a series from (open, close) pairs, one minute apart."""
    return [
        make_candle(open_, close, time=1_700_000_000_000 + i * 60_000)
        for i, (open_, close) in enumerate(bodies)
    ]


def holding_series() -> list[Candle]:
    """A series with the pattern: flat base, strong green candle, tight hold."""
    return make_series(
        [(10.0, 10.0)] * 8
        + [(100.0, 120.0)]
        + [(115.0, 118.0), (117.0, 116.0), (116.0, 119.0)]
    )


def broken_series() -> list[Candle]:
    """Same shape as holding_series, but the last candle closes below the midpoint."""
    return make_series(
        [(10.0, 10.0)] * 8
        + [(100.0, 120.0)]
        + [(115.0, 118.0), (117.0, 116.0), (116.0, 105.0)]
    )


def flat_series() -> list[Candle]:
    """A series without any green candle."""
    return make_series([(10.0, 10.0)] * 12)


class FakeExchange(BaseExchange):
    """In-memory exchange that records every call."""

    def __init__(
        self,
        prices: dict[str, float],
        candles: dict[str, list[Candle]],
        fail_on: Optional[set[str]] = None,
        fail_listing: bool = False,
    ):
        self.prices = prices
        self.candles = candles
        self.fail_on = fail_on or set()
        self.fail_listing = fail_listing
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    def get_all_prices(self) -> list[TickerPrice]:
        self.calls.append(("prices", ""))
        if self.fail_listing:
            raise ExchangeError("Failed to fetch pairs: HTTP 503")
        return [TickerPrice(symbol=s, price=p) for s, p in self.prices.items()]

    def get_candles(self, symbol: str, interval: str) -> list[Candle]:
        self.calls.append(("candles", symbol))
        if symbol in self.fail_on:
            raise ExchangeError(f"Failed to fetch candles for {symbol}: HTTP 500")
        return self.candles.get(symbol, [])

    def get_price(self, symbol: str) -> float:
        self.calls.append(("price", symbol))
        return self.prices[symbol]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def market() -> FakeExchange:
    """Exchange with two matching pairs, one broken pair, one flat pair and BTC."""
    return FakeExchange(
        prices={
            "BTCUSDT": 65000.0,
            "SOLUSDT": 118.0,
            "ADAUSDT": 119.5,
            "XRPUSDT": 0.5,
            "DOGEUSDT": 0.1,
        },
        candles={
            "BTCUSDT": holding_series(),
            "SOLUSDT": holding_series(),
            "ADAUSDT": broken_series(),
            "XRPUSDT": flat_series(),
            "DOGEUSDT": holding_series(),
        },
    )

"""Candidate pair filtering.

Narrows the exchange's full symbol list down to the pairs worth scanning.
"""

from typing import Iterable

from chandelier.models import TickerPrice

DEFAULT_QUOTE_ASSET = "USDT"

# Majors quoted against USDT are left out of the scan.
DEFAULT_EXCLUDED_BASES = ("BTC", "ETH", "BNB")


def filter_candidates(
    tickers: Iterable[TickerPrice],
    quote_asset: str = DEFAULT_QUOTE_ASSET,
    excluded_bases: Iterable[str] = DEFAULT_EXCLUDED_BASES,
) -> list[TickerPrice]:
    """Keep the tickers that are eligible for a pattern scan.

    A ticker is kept when its symbol ends with the quote asset, does not
    start with one of the excluded base assets, and its price is strictly
    positive.

    Args:
        tickers: Prices for every pair listed by the exchange.
        quote_asset: Required symbol suffix.
        excluded_bases: Symbol prefixes to drop.

    Returns:
        The kept tickers, in input order.
    """
    prefixes = tuple(excluded_bases)
    return [
        ticker
        for ticker in tickers
        if ticker.symbol.endswith(quote_asset)
        and not (prefixes and ticker.symbol.startswith(prefixes))
        and ticker.price > 0
    ]

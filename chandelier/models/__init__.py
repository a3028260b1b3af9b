"""Data models for Chandelier."""

from chandelier.models.candle import Candle, MalformedCandleError
from chandelier.models.reference import ReferenceCandle
from chandelier.models.result import HIGHLIGHT_RATIO, ScanResult, ScanState
from chandelier.models.ticker import TickerPrice

__all__ = [
    "Candle",
    "HIGHLIGHT_RATIO",
    "MalformedCandleError",
    "ReferenceCandle",
    "ScanResult",
    "ScanState",
    "TickerPrice",
]

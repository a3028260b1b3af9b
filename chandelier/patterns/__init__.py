"""Pattern detection module."""

from chandelier.patterns.candidates import (
    DEFAULT_EXCLUDED_BASES,
    DEFAULT_QUOTE_ASSET,
    filter_candidates,
)
from chandelier.patterns.base_hold import (
    CLOSE_FLOOR_RATIO,
    REFERENCE_WINDOW,
    TRAILING_EXCLUSION,
    find_reference_candle,
    validate_following_candles,
)

__all__ = [
    "CLOSE_FLOOR_RATIO",
    "DEFAULT_EXCLUDED_BASES",
    "DEFAULT_QUOTE_ASSET",
    "REFERENCE_WINDOW",
    "TRAILING_EXCLUSION",
    "filter_candidates",
    "find_reference_candle",
    "validate_following_candles",
]

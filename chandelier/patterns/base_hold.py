"""Base-and-hold pattern detection.

The pattern is a strong bullish candle (the reference) among the most
recent candles, followed by a consolidation that stays in the upper half
of the reference body without closing above it.
"""

from typing import Optional, Sequence

from chandelier.models import Candle, ReferenceCandle

# Number of most recent candles searched for the reference.
REFERENCE_WINDOW = 10

# The reference must have at least this many candles after it.
TRAILING_EXCLUSION = 3

# Follow-on closes must stay at or above this fraction of the reference close.
CLOSE_FLOOR_RATIO = 0.8


def find_reference_candle(
    candles: Sequence[Candle],
    window: int = REFERENCE_WINDOW,
    trailing: int = TRAILING_EXCLUSION,
) -> Optional[ReferenceCandle]:
    """Pick the largest bullish candle among the most recent ones.

    Only the last ``window`` candles are searched (all of them when the
    series is shorter). Ties go to the earliest candle. A candle with
    close <= open is never picked.

    Args:
        candles: Candle series, oldest first.
        window: Number of trailing candles to search.
        trailing: Minimum number of candles required after the reference.

    Returns:
        The reference candle, or None if no bullish candle was found or
        the best one is among the last ``trailing`` candles.
    """
    start = max(len(candles) - window, 0)

    best_index = -1
    best_body = 0.0
    for index in range(start, len(candles)):
        body = candles[index].body
        if body > best_body:
            best_body = body
            best_index = index

    if best_index == -1 or best_index >= len(candles) - trailing:
        return None

    candle = candles[best_index]
    return ReferenceCandle(
        index=best_index,
        open=candle.open,
        high=candle.high,
        low=candle.low,
        close=candle.close,
    )


def validate_following_candles(
    candles: Sequence[Candle],
    reference: ReferenceCandle,
    close_floor: float = CLOSE_FLOOR_RATIO,
) -> bool:
    """Check that every candle after the reference holds the pattern band.

    Each following candle must open and close between the reference
    midpoint and the reference close, and close at or above
    ``close_floor`` times the reference close.

    Args:
        candles: The series the reference was taken from.
        reference: Reference candle returned by find_reference_candle.
        close_floor: Minimum close as a fraction of the reference close.

    Returns:
        True if all following candles hold (vacuously true when the
        reference is the last candle), False at the first one that breaks.

    Raises:
        ValueError: If the reference index is outside the series.
    """
    if reference.index >= len(candles):
        raise ValueError(
            f"Reference index {reference.index} is outside a series of {len(candles)} candles"
        )

    mid = reference.midpoint
    top = reference.close
    floor = close_floor * top

    for candle in candles[reference.index + 1:]:
        if not (mid <= candle.open <= top):
            return False
        if not (mid <= candle.close <= top):
            return False
        if candle.close < floor:
            return False

    return True

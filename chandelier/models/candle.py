"""Candle (OHLC) data model."""

import math
from typing import Any, Sequence

from pydantic import BaseModel, Field, ValidationError


class MalformedCandleError(ValueError):
    """Raised when a raw kline row cannot be projected into a Candle."""


# Positions of the fields we read from an exchange kline row.
KLINE_TIME = 0
KLINE_OPEN = 1
KLINE_HIGH = 2
KLINE_LOW = 3
KLINE_CLOSE = 4


def _to_number(row: Sequence[Any], position: int) -> float:
    value = row[position]
    if isinstance(value, bool):
        raise MalformedCandleError(f"Field {position} is not numeric: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise MalformedCandleError(f"Field {position} is not numeric: {value!r}") from None
    if not math.isfinite(number):
        raise MalformedCandleError(f"Field {position} is not finite: {value!r}")
    return number


class Candle(BaseModel):
    """Represents a single OHLC candle."""

    time: int = Field(..., description="Candle open time (ms epoch)")
    open: float = Field(..., ge=0, description="Opening price")
    high: float = Field(..., ge=0, description="High price")
    low: float = Field(..., ge=0, description="Low price")
    close: float = Field(..., ge=0, description="Closing price")

    model_config = {"frozen": True}

    @property
    def body(self) -> float:
        """Signed candle body (close - open)."""
        return self.close - self.open

    @property
    def is_bullish(self) -> bool:
        """True for a green candle (close strictly above open)."""
        return self.close > self.open

    @classmethod
    def from_kline(cls, row: Sequence[Any]) -> "Candle":
        """Build a candle from a raw kline row.

        Rows look like ``[openTime, open, high, low, close, volume, ...]``
        with prices usually sent as strings. Anything after the close is
        ignored.

        Args:
            row: Raw kline array.

        Returns:
            The parsed Candle.

        Raises:
            MalformedCandleError: If the row is too short or a field is
                not a finite number.
        """
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise MalformedCandleError(f"Kline row must be an array, got {type(row).__name__}")
        if len(row) <= KLINE_CLOSE:
            raise MalformedCandleError(
                f"Kline row has {len(row)} fields, expected at least {KLINE_CLOSE + 1}"
            )

        time = _to_number(row, KLINE_TIME)
        try:
            return cls(
                time=int(time),
                open=_to_number(row, KLINE_OPEN),
                high=_to_number(row, KLINE_HIGH),
                low=_to_number(row, KLINE_LOW),
                close=_to_number(row, KLINE_CLOSE),
            )
        except ValidationError as e:
            raise MalformedCandleError(f"Invalid kline row {list(row)!r}: {e}") from e

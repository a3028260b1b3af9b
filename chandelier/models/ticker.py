"""Ticker price data model."""

from pydantic import BaseModel, Field


class TickerPrice(BaseModel):
    """Latest price of one trading pair."""

    symbol: str = Field(..., min_length=1, description="Trading pair, e.g. ADAUSDT")
    price: float = Field(..., description="Last price in the quote currency")

    model_config = {"frozen": True}

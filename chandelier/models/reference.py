"""Reference candle data model."""

from pydantic import BaseModel, Field


class ReferenceCandle(BaseModel):
    """The anchor candle of the pattern, with its position in the series."""

    index: int = Field(..., ge=0, description="Absolute index in the candle series")
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    close: float = Field(..., description="Closing price")

    model_config = {"frozen": True}

    @property
    def midpoint(self) -> float:
        """Middle of the candle body."""
        return (self.open + self.close) / 2

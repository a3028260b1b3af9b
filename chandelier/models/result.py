"""Scan result and scan state models."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from chandelier.models.candle import Candle
from chandelier.models.reference import ReferenceCandle

# Current price within this fraction of the reference close gets highlighted.
HIGHLIGHT_RATIO = 0.95


class ScanResult(BaseModel):
    """A pair whose candles matched the pattern."""

    symbol: str = Field(..., min_length=1, description="Trading pair")
    reference: ReferenceCandle = Field(..., description="Pattern anchor candle")
    current_price: float = Field(..., description="Spot price fetched after validation")
    candles: list[Candle] = Field(
        default_factory=list, description="Series the pattern was found in"
    )

    model_config = {"frozen": True}

    @property
    def is_near_reference_close(self) -> bool:
        """True when the price sits just below the reference close."""
        close = self.reference.close
        return HIGHLIGHT_RATIO * close <= self.current_price < close


class ScanState(BaseModel):
    """Snapshot of a scanner's progress.

    A new snapshot is produced on every transition; subscribers never see
    a snapshot change under them.
    """

    phase: Literal["IDLE", "SCANNING"] = Field(default="IDLE", description="Scanner phase")
    interval: str = Field(default="1d", description="Candle interval being scanned")
    results: list[ScanResult] = Field(
        default_factory=list, description="Matches in scan completion order"
    )
    total: int = Field(default=0, ge=0, description="Number of candidate pairs")
    scanned: int = Field(default=0, ge=0, description="Candidates processed so far")
    current_symbol: Optional[str] = Field(default=None, description="Pair being processed")
    error: Optional[str] = Field(default=None, description="Why the last scan stopped early")

    model_config = {"frozen": True}

    @property
    def is_scanning(self) -> bool:
        return self.phase == "SCANNING"

"""Scan orchestration.

Drives a full scan: list pairs, filter candidates, then for each candidate
fetch candles, look for the pattern and, on a match, fetch the current
price. Candidates are processed strictly one after another; the first
failed request ends the scan and keeps whatever was found until then.
"""

import logging
from typing import Callable, Optional

from chandelier.exchange import DEFAULT_INTERVAL, BaseExchange, ExchangeError, normalize_interval
from chandelier.models import MalformedCandleError, ScanResult, ScanState
from chandelier.patterns import (
    filter_candidates,
    find_reference_candle,
    validate_following_candles,
)

logger = logging.getLogger(__name__)

StateCallback = Callable[[ScanState], None]


class PatternScanner:
    """Runs pattern scans against an exchange and publishes its state.

    The scanner owns a single ScanState. Every transition replaces it with
    a new snapshot and hands that snapshot to each subscriber, so a display
    can render matches as they are found.
    """

    def __init__(self, exchange: BaseExchange, interval: str = DEFAULT_INTERVAL):
        """Initialize the scanner.

        Args:
            exchange: Market data source.
            interval: Candle interval to scan.
        """
        self.exchange = exchange
        self.interval = normalize_interval(interval)
        self._state = ScanState(interval=self.interval)
        self._subscribers: list[StateCallback] = []

    @property
    def state(self) -> ScanState:
        """Latest state snapshot."""
        return self._state

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Register a callback for state snapshots.

        Args:
            callback: Called with each new ScanState.

        Returns:
            A function that removes the callback.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _update(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        for callback in list(self._subscribers):
            callback(self._state)

    def scan_symbol(self, symbol: str) -> Optional[ScanResult]:
        """Check one pair for the pattern.

        Args:
            symbol: Trading pair.

        Returns:
            ScanResult if the pair matches, None otherwise.

        Raises:
            ExchangeError: If a request fails.
            MalformedCandleError: If the candles cannot be parsed.
        """
        candles = self.exchange.get_candles(symbol, self.interval)

        reference = find_reference_candle(candles)
        if reference is None:
            return None
        if not validate_following_candles(candles, reference):
            return None

        current_price = self.exchange.get_price(symbol)
        return ScanResult(
            symbol=symbol,
            reference=reference,
            current_price=current_price,
            candles=candles,
        )

    def start(self) -> ScanState:
        """Run a full scan.

        Prior results are cleared when the scan starts. Calling this while
        a scan is already running does nothing.

        Returns:
            The final state; ``error`` is set if the scan stopped early.
        """
        if self._state.is_scanning:
            logger.debug("Scan already running, ignoring start request")
            return self._state

        self._update(
            phase="SCANNING",
            interval=self.interval,
            results=[],
            total=0,
            scanned=0,
            current_symbol=None,
            error=None,
        )
        logger.info("Scan started (interval %s)", self.interval)

        try:
            candidates = filter_candidates(self.exchange.get_all_prices())
            self._update(total=len(candidates))
            logger.info("Scanning %d candidate pairs", len(candidates))

            for position, ticker in enumerate(candidates, 1):
                self._update(current_symbol=ticker.symbol)
                logger.debug("Scanning %s (%d/%d)", ticker.symbol, position, len(candidates))

                result = self.scan_symbol(ticker.symbol)
                if result is not None:
                    logger.info("Pattern found on %s", ticker.symbol)
                    self._update(results=[*self._state.results, result], scanned=position)
                else:
                    self._update(scanned=position)
        except (ExchangeError, MalformedCandleError) as e:
            logger.exception("Scan aborted")
            self._update(phase="IDLE", current_symbol=None, error=str(e))
            return self._state
        except Exception:
            self._update(phase="IDLE", current_symbol=None)
            raise

        self._update(phase="IDLE", current_symbol=None)
        logger.info(
            "Scan finished: %d of %d pairs matched",
            len(self._state.results),
            self._state.total,
        )
        return self._state

"""
Canonical data models for the input price series.

Bars are produced by the host (or the synthetic generator) and are
read-only to the indicator.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Bar:
    """Single OHLCV sample."""
    timestamp: int     # Epoch milliseconds, strictly increasing across a series
    open: float        # Opening price
    high: float        # High price
    low: float         # Low price
    close: float       # Closing price, NaN when the source value was unusable
    volume: float      # Base volume

    def to_record(self) -> dict[str, float]:
        """Host record shape."""
        return {
            "timestamp": self.timestamp,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }

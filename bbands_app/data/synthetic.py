"""Synthetic random-walk OHLC series for demos and tests"""

import random
import time
from typing import Optional

from .models import Bar

DAY_MS = 24 * 60 * 60 * 1000


def generate_ohlc(
    bars: int = 300,
    start_price: float = 100.0,
    start_timestamp: Optional[int] = None,
    interval_ms: int = DAY_MS,
    seed: Optional[int] = None,
) -> list[Bar]:
    """
    Generate a random-walk daily OHLC series.

    Each bar opens at the previous close, drifts by up to +/-2, and keeps
    the close at or above 1. Wicks extend up to 1.5 beyond the body and
    the low never drops below zero.
    Prices are rounded to cents.

    Args:
        bars: Number of bars
        start_price: First open
        start_timestamp: First timestamp in ms, defaults to `bars` intervals before now
        interval_ms: Spacing between bars
        seed: Seed for a reproducible series

    Returns:
        List of bars with strictly increasing timestamps
    """
    rng = random.Random(seed)
    if start_timestamp is None:
        start_timestamp = int(time.time() * 1000) - bars * interval_ms

    out = []
    timestamp = start_timestamp
    price = start_price
    for _ in range(bars):
        drift = (rng.random() - 0.5) * 2
        open_ = price
        close = max(1.0, open_ + drift * (1 + rng.random()))
        high = max(open_, close) + rng.random() * 1.5
        low = max(0.0, min(open_, close) - rng.random() * 1.5)
        out.append(Bar(
            timestamp=timestamp,
            open=round(open_, 2),
            high=round(high, 2),
            low=round(low, 2),
            close=round(close, 2),
            volume=float(int(1000 + rng.random() * 5000)),
        ))
        price = close
        timestamp += interval_ms
    return out

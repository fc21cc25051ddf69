"""Rolling mean / population standard deviation and the band calculation"""

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from ..data.models import Bar
from ..logging import get_logger
from ..models.indicator import EMPTY_ROW, ComputedRow, IndicatorParams

logger = get_logger(__name__)


def rolling_mean_stdev(closes: Iterable[float], length: int) -> Iterator[Optional[tuple[float, float]]]:
    """
    Stream (mean, stdev) over a trailing window of closes.

    Keeps a running sum and sum of squares so each step is O(1). The
    variance is clamped at zero: cancellation in sumsq/n - mean^2 can leave
    a tiny negative value whose square root would be NaN.

    Non-finite closes are kept out of the sums and counted instead, so only
    windows that actually contain one yield None. Closes large enough to
    overflow the sum of squares yield None while they are in the window, and
    the sums are rebuilt from the window once they leave.

    Args:
        closes: Close prices in chronological order
        length: Window size (>= 1, validated by the caller)

    Yields:
        (mean, stdev) per input value, or None while the window is short
        or contains a non-finite close
    """
    window: deque[float] = deque()
    total = 0.0
    total_sq = 0.0
    bad_count = 0

    for i, close in enumerate(closes):
        window.append(close)
        if math.isfinite(close):
            total += close
            total_sq += close * close
        else:
            bad_count += 1

        if len(window) > length:
            out = window.popleft()
            if math.isfinite(out):
                total -= out
                total_sq -= out * out
            else:
                bad_count -= 1

        if i < length - 1 or bad_count:
            yield None
            continue

        mean = total / length
        variance = total_sq / length - mean * mean  # population variance
        if not (math.isfinite(mean) and math.isfinite(variance)):
            # overflowed sums never recover by subtraction; rebuild from the window
            total = sum(window)
            total_sq = sum(v * v for v in window)
            mean = total / length
            variance = total_sq / length - mean * mean
            if not (math.isfinite(mean) and math.isfinite(variance)):
                yield None
                continue
        yield mean, math.sqrt(max(0.0, variance))


def calculate_bands(bars: Sequence[Bar], length: int = 20, std_multiplier: float = 2.0) -> list[ComputedRow]:
    """
    Calculate unshifted Bollinger rows, one per bar.

    Basis = SMA(close, length)
    Upper = Basis + std_multiplier * StdDev
    Lower = Basis - std_multiplier * StdDev

    Args:
        bars: Bars in chronological order
        length: Window size
        std_multiplier: Band half-width in standard deviations

    Returns:
        Rows index-aligned with bars; EMPTY_ROW where no statistic exists
    """
    rows = []
    for stats in rolling_mean_stdev((bar.close for bar in bars), length):
        if stats is None:
            rows.append(EMPTY_ROW)
            continue
        mean, stdev = stats
        band = std_multiplier * stdev
        rows.append(ComputedRow(basis=mean, upper=mean + band, lower=mean - band))
    return rows


class RollingStatisticsEngine:
    """Stateless band calculator over a full bar series"""

    def compute(self, bars: Sequence[Bar], params: IndicatorParams) -> list[ComputedRow]:
        """
        Compute rows for every bar. Params are assumed already accepted.

        Args:
            bars: Full series currently supplied by the host
            params: Accepted parameter snapshot (offset is not applied here)

        Returns:
            List with len(bars) rows
        """
        rows = calculate_bands(bars, params.length, params.std_multiplier)
        logger.debug(
            "Rolling statistics computed",
            bars=len(bars),
            length=params.length,
            populated=sum(1 for row in rows if row.is_populated),
        )
        return rows

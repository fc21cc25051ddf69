"""
Bar series validation.

Opt-in checks for hosts or tools that want to confirm a series is well
formed before charting it. The calculation itself never calls these.
"""

import math
from collections.abc import Sequence

from ..errors import TemporalDataError
from .models import Bar


class BarSeriesValidator:
    """Checks ordering and OHLC consistency of a bar series."""

    def validate_ordering(self, bars: Sequence[Bar]) -> None:
        """
        Ensure timestamps are strictly increasing.

        Raises:
            TemporalDataError: On the first non-increasing timestamp
        """
        for index in range(1, len(bars)):
            previous, current = bars[index - 1].timestamp, bars[index].timestamp
            if current <= previous:
                raise TemporalDataError(
                    f"Timestamp {current} at index {index} does not follow {previous}",
                    timestamp=current,
                    previous_timestamp=previous,
                    index=index,
                )

    def inconsistent_indices(self, bars: Sequence[Bar]) -> list[int]:
        """
        Indices of bars violating high >= max(open, close) >= min(open, close) >= low
        or carrying negative / non-finite values.
        """
        bad = []
        for index, bar in enumerate(bars):
            values = (bar.open, bar.high, bar.low, bar.close, bar.volume)
            if not all(math.isfinite(v) and v >= 0 for v in values):
                bad.append(index)
                continue
            if not (bar.high >= max(bar.open, bar.close) and min(bar.open, bar.close) >= bar.low):
                bad.append(index)
        return bad


def validate_bar_series(bars: Sequence[Bar]) -> list[int]:
    """
    Validate ordering (raising) and return indices of inconsistent bars.

    Raises:
        TemporalDataError: If timestamps are not strictly increasing
    """
    validator = BarSeriesValidator()
    validator.validate_ordering(bars)
    return validator.inconsistent_indices(bars)

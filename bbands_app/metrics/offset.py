"""Offset shifting of computed rows"""

from collections.abc import Sequence

from ..models.indicator import EMPTY_ROW, ComputedRow


def shift_rows(rows: Sequence[ComputedRow], offset: int) -> list[ComputedRow]:
    """
    Shift rows along the bar index, preserving length.

    A positive offset pushes the series later in time: offset empty rows
    are prepended and the tail is dropped. A negative offset drops the first
    |offset| rows and pads the end. Statistics are moved, never recomputed.

    Args:
        rows: Computed rows aligned with the bar series
        offset: Bars to shift, any sign

    Returns:
        New list with len(rows) entries
    """
    n = len(rows)
    if offset == 0:
        return list(rows)

    pad_len = min(abs(offset), n)
    padding = [EMPTY_ROW] * pad_len
    if offset > 0:
        return padding + list(rows[:n - pad_len])
    return list(rows[pad_len:]) + padding

"""
Parsers turning host bar records into canonical Bar objects.

Hosts hand over plain mappings (timestamp/open/high/low/close/volume). The
close drives every calculation, so an unusable close is not an error here:
it becomes NaN and the windows that contain it produce empty rows.
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import MalformedDataError
from .models import Bar

BAR_FIELDS = ("timestamp", "open", "high", "low", "close", "volume")


def safe_float(value: Any, default: float = math.nan) -> float:
    """
    Convert a raw value to float.

    Args:
        value: Number, numeric string, or anything else
        default: Returned when conversion fails

    Returns:
        float value or default
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def parse_bar(record: Any) -> Bar:
    """
    Parse a single host record.

    Args:
        record: Bar instance or mapping with the BAR_FIELDS keys

    Returns:
        Bar with NaN for any missing or non-numeric price/volume field

    Raises:
        MalformedDataError: If record is not a mapping or has no usable timestamp
    """
    if isinstance(record, Bar):
        return record

    if not isinstance(record, Mapping):
        raise MalformedDataError(
            f"Bar record must be a mapping, got {type(record).__name__}",
            raw_data=repr(record)[:200],
            expected_format="mapping with " + ", ".join(BAR_FIELDS),
        )

    timestamp = safe_float(record.get("timestamp"))
    if not math.isfinite(timestamp):
        raise MalformedDataError(
            "Bar record has no usable timestamp",
            raw_data=repr(record)[:200],
            expected_format="epoch milliseconds",
        )

    return Bar(
        timestamp=int(timestamp),
        open=safe_float(record.get("open")),
        high=safe_float(record.get("high")),
        low=safe_float(record.get("low")),
        close=safe_float(record.get("close")),
        volume=safe_float(record.get("volume"), default=0.0),
    )


def parse_bars(records: Iterable[Any]) -> list[Bar]:
    """Parse a full host series, preserving order."""
    return [parse_bar(record) for record in records]

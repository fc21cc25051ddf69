"""
Data quality error classifications for bar series input.

These exceptions describe records that cannot be turned into a usable Bar.
A missing close is not one of them: it becomes NaN and yields empty rows.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Timestamp ordering issues in a bar series."""

    def __init__(self, message: str, timestamp: Optional[int] = None,
                 previous_timestamp: Optional[int] = None, index: Optional[int] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.timestamp = timestamp
        self.previous_timestamp = previous_timestamp
        self.index = index


class MalformedDataError(DataQualityError):
    """Record exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format

"""
Error classification for the band overlay.

Data quality errors describe bad input records and are recoverable by
skipping or substituting the value. Indicator errors are caller contract
violations or host integration failures.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    TemporalDataError,
)
from .indicator_failures import (
    IndicatorError,
    InvalidParameterError,
    RegistrationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    "TemporalDataError",
    # Indicator Failures
    "IndicatorError",
    "InvalidParameterError",
    "RegistrationError",
]

"""
Test error classification and propagation.

Checks that each error carries its context and recoverability flag, and
that the public entry points raise the right class for each failure.
"""

import pytest

from bbands_app.data.parsers import parse_bar
from bbands_app.engine import BandsIndicator
from bbands_app.errors import (
    DataQualityError,
    IndicatorError,
    InvalidParameterError,
    MalformedDataError,
    RegistrationError,
    TemporalDataError,
)
from bbands_app.models.indicator import IndicatorParams


class TestErrorClassification:
    """Test error hierarchy and attributes."""

    def test_data_quality_errors_are_recoverable(self):
        """Data quality errors can be skipped by the caller."""
        error = TemporalDataError(
            "Timestamp not increasing",
            timestamp=1000,
            previous_timestamp=2000,
            index=5,
            context={"source": "feed"},
        )
        assert isinstance(error, DataQualityError)
        assert error.recoverable is True
        assert error.context == {"source": "feed"}
        assert (error.timestamp, error.previous_timestamp, error.index) == (1000, 2000, 5)

        malformed = MalformedDataError("Bad record", raw_data="42", expected_format="mapping")
        assert isinstance(malformed, DataQualityError)
        assert malformed.recoverable is True
        assert malformed.context == {}

    def test_indicator_errors_are_not_recoverable(self):
        """Indicator failures are caller contract or host integration problems."""
        invalid = InvalidParameterError("Bad length", field="length", value=0)
        registration = RegistrationError("No API", indicator_name="BBANDS_V0", operation="register")

        for error in (invalid, registration):
            assert isinstance(error, IndicatorError)
            assert error.recoverable is False

        assert str(invalid) == "Bad length"
        assert registration.operation == "register"

    def test_hierarchies_are_separate(self):
        """Data quality and indicator errors do not share a base below Exception."""
        assert not issubclass(InvalidParameterError, DataQualityError)
        assert not issubclass(MalformedDataError, IndicatorError)


class TestErrorPropagation:
    """Test errors raised through the public API."""

    def test_malformed_record_propagates_from_compute(self):
        """A non-mapping record in the series is raised, not skipped."""
        with pytest.raises(MalformedDataError):
            BandsIndicator().compute([{"timestamp": 1, "close": 1.0}, "garbage"], IndicatorParams(length=1))

    def test_missing_close_is_not_an_error(self, sample_bar_record):
        """A missing close flows through as an empty row."""
        del sample_bar_record["close"]
        rows = BandsIndicator().compute([sample_bar_record], IndicatorParams(length=1))
        assert rows[0].to_record() == {}

    def test_malformed_error_keeps_raw_data(self):
        """The offending record is attached for diagnostics."""
        with pytest.raises(MalformedDataError) as exc_info:
            parse_bar(12345)
        assert "12345" in exc_info.value.raw_data

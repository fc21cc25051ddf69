"""
Indicator failure classifications.

These represent caller contract violations and host integration problems.
They are never raised from inside compute or render.
"""

from typing import Any, Optional


class IndicatorError(Exception):
    """Base class for unrecoverable indicator failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidParameterError(IndicatorError):
    """Parameters rejected by the acceptance predicate."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class RegistrationError(IndicatorError):
    """Host rejected or mishandled a registration or lifecycle call."""

    def __init__(self, message: str, indicator_name: Optional[str] = None,
                 operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator_name = indicator_name
        self.operation = operation

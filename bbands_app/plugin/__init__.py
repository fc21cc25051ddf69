"""
Charting host integration.

Registration of the indicator definition and instance lifecycle helpers.
"""

from .lifecycle import IndicatorHandle, create_instance, remove_instance, update_instance
from .registration import ChartHost, Figure, IndicatorDefinition, build_definition, register_bbands

__all__ = [
    "ChartHost",
    "Figure",
    "IndicatorDefinition",
    "IndicatorHandle",
    "build_definition",
    "create_instance",
    "register_bbands",
    "remove_instance",
    "update_instance",
]

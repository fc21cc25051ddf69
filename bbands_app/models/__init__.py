"""
Data models module.

Immutable parameter, result, style and geometry structures shared by the
calculation and rendering pipeline.
"""

from .geometry import BandPaths, DrawablePath, Point
from .indicator import EMPTY_ROW, ComputedRow, IndicatorParams
from .style import (
    TRANSPARENT,
    BandFillStyle,
    DashStyle,
    GapPolicy,
    LineStyle,
    StyleConfig,
)

__all__ = [
    "EMPTY_ROW",
    "ComputedRow",
    "IndicatorParams",
    "BandPaths",
    "DrawablePath",
    "Point",
    "TRANSPARENT",
    "BandFillStyle",
    "DashStyle",
    "GapPolicy",
    "LineStyle",
    "StyleConfig",
]

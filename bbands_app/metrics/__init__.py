"""Band statistics: rolling window calculation and offset shifting"""

from .offset import shift_rows
from .rolling import RollingStatisticsEngine, calculate_bands, rolling_mean_stdev

__all__ = [
    "RollingStatisticsEngine",
    "calculate_bands",
    "rolling_mean_stdev",
    "shift_rows",
]

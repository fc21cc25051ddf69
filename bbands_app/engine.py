"""
Bollinger Bands overlay engine.

Composes the rolling statistics calculation and offset shift into a single
compute step, and exposes the render step. Both are re-invoked by the host
on every data, parameter, style or viewport change; nothing is cached
between calls.
"""

import math
import numbers
from collections.abc import Sequence
from typing import Any, Optional

from .config.defaults import DefaultConfig, get_default_config
from .data.models import Bar
from .data.parsers import parse_bars
from .errors import InvalidParameterError
from .logging import get_logger
from .logging.config import log_param_rejection
from .metrics.offset import shift_rows
from .metrics.rolling import RollingStatisticsEngine
from .models.geometry import BandPaths
from .models.indicator import ComputedRow, IndicatorParams
from .models.style import GapPolicy, StyleConfig
from .render.context import DrawingContext2D
from .render.paths import IndexToPixel, RenderPathBuilder, ValueToPixel

logger = get_logger(__name__)


def param_problem(params: Any) -> Optional[tuple[str, Any, str]]:
    """
    Find the first reason params would be rejected.

    Accepts an IndicatorParams or the host's positional array.

    Returns:
        (field, value, reason) or None when acceptable
    """
    if isinstance(params, IndicatorParams):
        length, mult = params.length, params.std_multiplier
    else:
        values = list(params or [])
        if len(values) < 2:
            return "params", params, "expected [length, std_multiplier, offset]"
        length, mult = values[0], values[1]

    if not isinstance(length, numbers.Real) or isinstance(length, bool):
        return "length", length, "must be a number"
    if not math.isfinite(length) or length != int(length) or length < 1:
        return "length", length, "must be an integer >= 1"
    if not isinstance(mult, numbers.Real) or isinstance(mult, bool):
        return "std_multiplier", mult, "must be a number"
    if not math.isfinite(mult) or mult < 0:
        return "std_multiplier", mult, "must be >= 0"
    return None


def accept_params(params: Any) -> bool:
    """Acceptance predicate: reject length < 1 or std_multiplier < 0."""
    return param_problem(params) is None


def check_params(params: Any, indicator_name: str = "BBANDS_V0") -> None:
    """
    Raise if params would be rejected by the acceptance predicate.

    Raises:
        InvalidParameterError: With the offending field and value
    """
    problem = param_problem(params)
    if problem is None:
        return
    field, value, reason = problem
    log_param_rejection(logger, indicator_name, field, value, reason)
    raise InvalidParameterError(
        f"Invalid {field}: {value!r} {reason}",
        field=field,
        value=value,
        context={"indicator": indicator_name},
    )


class BandsIndicator:
    """
    Stateless compute/render pair for the band overlay.

    Only configuration is held; bars, params and style arrive with each call.
    """

    def __init__(self, config: Optional[DefaultConfig] = None, gap_policy: Optional[GapPolicy] = None):
        self.config = config or get_default_config()
        self.statistics = RollingStatisticsEngine()
        self.path_builder = RenderPathBuilder(
            gap_policy=gap_policy or GapPolicy(self.config.render.gap_policy),
            dash_pattern=self.config.render.dash_pattern,
        )

    def compute(self, bars: Sequence[Any], params: IndicatorParams) -> list[ComputedRow]:
        """
        Rolling statistics followed by the offset shift.

        Args:
            bars: Bar objects or host bar records
            params: Accepted parameter snapshot

        Returns:
            Rows index-aligned with bars
        """
        series = bars if all(isinstance(b, Bar) for b in bars) else parse_bars(bars)
        rows = self.statistics.compute(series, params)
        return shift_rows(rows, params.offset)

    def compute_records(self, bars: Sequence[Any], params: IndicatorParams) -> list[dict[str, float]]:
        """compute() in the host's record shape: {} or basis/upper/lower per bar."""
        return [row.to_record() for row in self.compute(bars, params)]

    def render(
        self,
        rows: Sequence[Any],
        to_x: IndexToPixel,
        to_y: ValueToPixel,
        style: StyleConfig,
        ctx: DrawingContext2D,
    ) -> BandPaths:
        """
        Draw rows onto ctx. Rows may be ComputedRow objects or host records.

        Returns:
            The geometry that was drawn
        """
        computed = [ComputedRow.from_record(row) for row in rows]
        return self.path_builder.render(computed, to_x, to_y, style, ctx)

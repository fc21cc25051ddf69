"""Conversion of computed rows into screen-space paths and draw calls"""

import math
from collections.abc import Callable, Sequence
from typing import Optional

from ..config.defaults import RenderDefaults
from ..logging import get_render_logger
from ..models.geometry import BandPaths, DrawablePath, Point
from ..models.indicator import ComputedRow
from ..models.style import DashStyle, GapPolicy, LineStyle, StyleConfig
from .context import DrawingContext2D

logger = get_render_logger(__name__)

IndexToPixel = Callable[[int], float]
ValueToPixel = Callable[[float], float]

_RENDER_DEFAULTS = RenderDefaults()


class RenderPathBuilder:
    """
    Builds band geometry from rows and draws it onto a host context.

    Holds only the gap policy and dash pattern; every call is a pure
    function of its arguments apart from the draw calls on ctx.
    """

    def __init__(
        self,
        gap_policy: GapPolicy = GapPolicy(_RENDER_DEFAULTS.gap_policy),
        dash_pattern: Sequence[float] = _RENDER_DEFAULTS.dash_pattern,
    ):
        self.gap_policy = gap_policy
        self.dash_pattern = list(dash_pattern)

    def build_paths(
        self,
        rows: Sequence[ComputedRow],
        to_x: IndexToPixel,
        to_y: ValueToPixel,
        style: StyleConfig,
    ) -> BandPaths:
        """
        Walk rows once and build line and fill geometry.

        Empty rows, and rows whose pixel coordinates come out non-finite,
        contribute no points. Under BRIDGE the surrounding points are joined;
        under BREAK a new segment starts after each gap.

        Args:
            rows: Possibly shifted rows, index-aligned with bars
            to_x: Bar index to pixel x
            to_y: Value to pixel y
            style: Style configuration; only decides whether a fill is built

        Returns:
            BandPaths with one or more segments per line and matching fill polygons
        """
        segments: list[list[tuple[Point, Point, Point]]] = []
        current: Optional[list[tuple[Point, Point, Point]]] = None

        for i, row in enumerate(rows):
            points = self._row_points(i, row, to_x, to_y)
            if points is None:
                if self.gap_policy is GapPolicy.BREAK:
                    current = None
                continue
            if current is None:
                current = []
                segments.append(current)
            current.append(points)

        basis = [DrawablePath(tuple(p[0] for p in seg)) for seg in segments]
        upper = [DrawablePath(tuple(p[1] for p in seg)) for seg in segments]
        lower = [DrawablePath(tuple(p[2] for p in seg)) for seg in segments]

        fill = []
        if style.can_fill:
            for up, low in zip(upper, lower):
                fill.append(DrawablePath(up.points + tuple(reversed(low.points)), closed=True))

        return BandPaths(basis=basis, upper=upper, lower=lower, fill=fill)

    def render(
        self,
        rows: Sequence[ComputedRow],
        to_x: IndexToPixel,
        to_y: ValueToPixel,
        style: StyleConfig,
        ctx: DrawingContext2D,
    ) -> BandPaths:
        """
        Draw fill, upper, lower, then basis, so basis stays on top.

        The context is used only for the duration of the call.

        Returns:
            The geometry that was drawn
        """
        paths = self.build_paths(rows, to_x, to_y, style)

        if paths.fill_vertex_count:
            self._fill_band(ctx, paths.fill, style)

        self._stroke_line(ctx, paths.upper, style.upper)
        self._stroke_line(ctx, paths.lower, style.lower)
        self._stroke_line(ctx, paths.basis, style.basis)

        logger.debug(
            "Band overlay rendered",
            rows=len(rows),
            segments=len(paths.basis),
            fill_vertices=paths.fill_vertex_count,
        )
        return paths

    @staticmethod
    def _row_points(
        index: int, row: ComputedRow, to_x: IndexToPixel, to_y: ValueToPixel
    ) -> Optional[tuple[Point, Point, Point]]:
        if not row.is_populated:
            return None
        x = to_x(index)
        ys = (to_y(row.basis), to_y(row.upper), to_y(row.lower))
        if not (math.isfinite(x) and all(math.isfinite(y) for y in ys)):
            return None
        return (x, ys[0]), (x, ys[1]), (x, ys[2])

    @staticmethod
    def _trace(ctx: DrawingContext2D, paths: Sequence[DrawablePath]) -> None:
        ctx.begin_path()
        for path in paths:
            if path.is_empty:
                continue
            first, *rest = path.points
            ctx.move_to(*first)
            for point in rest:
                ctx.line_to(*point)
            if path.closed:
                ctx.close_path()

    def _fill_band(self, ctx: DrawingContext2D, polygons: Sequence[DrawablePath], style: StyleConfig) -> None:
        ctx.save()
        ctx.global_alpha = style.band_fill.opacity
        ctx.fill_style = style.upper.color
        self._trace(ctx, polygons)
        ctx.fill("nonzero")
        ctx.restore()

    def _stroke_line(self, ctx: DrawingContext2D, paths: Sequence[DrawablePath], line: LineStyle) -> None:
        if not line.is_drawn or not any(not p.is_empty for p in paths):
            return
        ctx.save()
        ctx.stroke_style = line.color
        ctx.line_width = line.width
        ctx.set_line_dash(list(self.dash_pattern) if line.dash is DashStyle.DASHED else [])
        self._trace(ctx, paths)
        ctx.stroke()
        ctx.restore()

#!/usr/bin/env python3
"""
Basic usage of the band overlay without a charting host.

Generates a synthetic series, computes the bands with a preset, and
renders them onto a RecordingContext using simple linear coordinate maps.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bbands_app.config.loader import ConfigLoader
from bbands_app.data.synthetic import generate_ohlc
from bbands_app.engine import BandsIndicator, check_params
from bbands_app.logging import configure_logging
from bbands_app.render.context import RecordingContext

WIDTH = 1200
HEIGHT = 600


def main() -> None:
    configure_logging(level="DEBUG", render_level="DEBUG")

    print("📈 BBands basic usage")
    print("=" * 60)

    bars = generate_ohlc(bars=300, start_price=200.0, seed=7)
    loader = ConfigLoader.create()
    config = loader.merge_config("classic")
    params = loader.build_params(config)
    style = loader.build_style(config)
    check_params(params)

    indicator = BandsIndicator(gap_policy=loader.build_gap_policy(config))
    rows = indicator.compute(bars, params)

    populated = [row for row in rows if row.is_populated]
    print(f"Bars: {len(bars)}  populated rows: {len(populated)}  params: {params.to_list()}")
    last = populated[-1]
    print(f"Last row -> basis={last.basis:.2f} upper={last.upper:.2f} lower={last.lower:.2f}")

    lows = [bar.low for bar in bars]
    highs = [bar.high for bar in bars]
    lo, hi = min(lows), max(highs)

    def to_x(index: int) -> float:
        return index * WIDTH / max(len(bars) - 1, 1)

    def to_y(value: float) -> float:
        return HEIGHT - (value - lo) * HEIGHT / (hi - lo)

    ctx = RecordingContext()
    paths = indicator.render(rows, to_x, to_y, style, ctx)

    print(f"Draw commands: {len(ctx.commands)}  strokes: {len(ctx.ops('stroke'))}  "
          f"fills: {len(ctx.ops('fill'))}  fill vertices: {paths.fill_vertex_count}")


if __name__ == "__main__":
    main()

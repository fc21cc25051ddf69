#!/usr/bin/env python3
"""Performance benchmark script for the BBands overlay."""

import time
import sys
from pathlib import Path
from typing import Dict

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bbands_app.data.synthetic import generate_ohlc
from bbands_app.engine import BandsIndicator
from bbands_app.models.indicator import IndicatorParams
from bbands_app.models.style import StyleConfig
from bbands_app.render.context import RecordingContext


def benchmark_pass(bar_count: int, length: int = 20, repeats: int = 5) -> Dict[str, float]:
    """Time compute and render over a synthetic series."""
    print(f"🏃 Benchmarking compute + render with {bar_count} bars (length={length})...")

    indicator = BandsIndicator()
    bars = generate_ohlc(bars=bar_count, seed=1)
    params = IndicatorParams(length=length, offset=3)
    style = StyleConfig()

    # Warm up
    indicator.compute(bars[:100], params)

    start_time = time.perf_counter()
    for _ in range(repeats):
        rows = indicator.compute(bars, params)
    compute_time = (time.perf_counter() - start_time) / repeats

    start_time = time.perf_counter()
    for _ in range(repeats):
        indicator.render(rows, lambda i: float(i), lambda v: 1000.0 - v, style, RecordingContext())
    render_time = (time.perf_counter() - start_time) / repeats

    return {
        "compute_time": compute_time,
        "render_time": render_time,
        "bars_per_second": bar_count / compute_time,
    }


def main():
    """Main benchmark function."""
    print("⚡ BBands Performance Benchmark")
    print("=" * 40)

    test_sizes = [1_000, 10_000, 100_000]

    for size in test_sizes:
        for length in (20, 200):
            results = benchmark_pass(size, length)

            print(f"\n📊 Results for {size} bars, length {length}:")
            print(f"   Compute: {results['compute_time']*1000:.2f}ms")
            print(f"   Render:  {results['render_time']*1000:.2f}ms")
            print(f"   Bars/second: {results['bars_per_second']:.0f}")

    print(f"\n🎯 Compute time should scale with bar count, not with length.")


if __name__ == "__main__":
    main()

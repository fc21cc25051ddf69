"""Tests for the rolling statistics calculation"""

import math
import random
import statistics

import pytest

from bbands_app.metrics.rolling import RollingStatisticsEngine, calculate_bands, rolling_mean_stdev
from bbands_app.models.indicator import EMPTY_ROW, IndicatorParams


class TestRollingMeanStdev:
    """Test the streaming (mean, stdev) generator"""

    def test_warmup_yields_none(self):
        """Test nothing is produced before the window fills"""
        results = list(rolling_mean_stdev([1.0, 2.0, 3.0, 4.0], length=3))
        assert results[0] is None
        assert results[1] is None
        assert results[2] is not None

    def test_population_variance(self):
        """Test variance divides by the window size, not size - 1"""
        mean, stdev = list(rolling_mean_stdev([10.0, 11.0, 12.0], length=3))[-1]
        assert mean == pytest.approx(11.0)
        assert stdev == pytest.approx(math.sqrt(2.0 / 3.0))

    def test_window_slides(self):
        """Test the oldest close leaves the window"""
        results = list(rolling_mean_stdev([1.0, 1.0, 1.0, 100.0, 100.0, 100.0], length=3))
        assert results[2] == (pytest.approx(1.0), pytest.approx(0.0))
        assert results[5] == (pytest.approx(100.0), pytest.approx(0.0))

    def test_length_one_has_zero_stdev(self):
        """Test a one-bar window never has spread"""
        results = list(rolling_mean_stdev([5.0, 7.0, 3.0], length=1))
        assert [r[0] for r in results] == [5.0, 7.0, 3.0]
        assert all(r[1] == 0.0 for r in results)

    def test_constant_large_values_never_nan(self):
        """Test cancellation in sumsq/n - mean^2 is clamped at zero"""
        closes = [1e9 + 0.1] * 50
        for result in rolling_mean_stdev(closes, length=20):
            if result is None:
                continue
            _, stdev = result
            assert math.isfinite(stdev)
            assert stdev >= 0.0

    def test_non_finite_only_blanks_overlapping_windows(self):
        """Test a NaN close blanks exactly the windows containing it"""
        closes = [1.0, 2.0, math.nan, 4.0, 5.0, 6.0, 7.0]
        results = list(rolling_mean_stdev(closes, length=3))

        assert results[:5] == [None] * 5
        assert results[5][0] == pytest.approx(5.0)
        assert results[6][0] == pytest.approx(6.0)

    def test_infinite_close_treated_like_nan(self):
        """Test an infinite close is kept out of the sums"""
        closes = [1.0, math.inf, 3.0, 4.0, 5.0]
        results = list(rolling_mean_stdev(closes, length=2))
        assert results[1] is None
        assert results[2] is None
        assert results[3][0] == pytest.approx(3.5)

    def test_overflowing_closes_blank_then_recover(self):
        """Test closes whose squares overflow never yield a collapsed band"""
        closes = [1e200, 1e200, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        results = list(rolling_mean_stdev(closes, length=2))

        assert results[:3] == [None] * 3
        assert results[3] == (pytest.approx(1.5), pytest.approx(0.5))
        assert results[7] == (pytest.approx(5.5), pytest.approx(0.5))

    def test_overflowing_mean_is_none(self):
        """Test a window whose sum overflows yields None"""
        results = list(rolling_mean_stdev([1.7e308, 1.7e308, 1.0], length=2))
        assert results[1] is None
        assert results[2] is None

    def test_empty_input(self):
        """Test no closes yields nothing"""
        assert list(rolling_mean_stdev([], length=5)) == []


class TestCalculateBands:
    """Test band rows built from bars"""

    def test_scenario_zero_multiplier(self, bar_factory, scenario_closes):
        """Test [10..14], length 3, multiplier 0 collapses the bands"""
        rows = calculate_bands(bar_factory(scenario_closes), length=3, std_multiplier=0.0)

        assert rows[0] is EMPTY_ROW
        assert rows[1] is EMPTY_ROW
        assert [row.basis for row in rows[2:]] == pytest.approx([11.0, 12.0, 13.0])
        for row in rows[2:]:
            assert row.upper == row.basis
            assert row.lower == row.basis

    def test_scenario_two_std(self, bar_factory, scenario_closes):
        """Test [10..14], length 3, multiplier 2 gives 11 +/- 2*0.8165"""
        rows = calculate_bands(bar_factory(scenario_closes), length=3, std_multiplier=2.0)

        row = rows[2]
        assert row.basis == pytest.approx(11.0)
        assert row.upper == pytest.approx(12.633, abs=1e-3)
        assert row.lower == pytest.approx(9.367, abs=1e-3)

    def test_overflowed_variance_is_not_zero_spread(self, bar_factory):
        """Test huge closes leave no populated row with collapsed bands"""
        closes = [1e200, 1e200, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        rows = calculate_bands(bar_factory(closes), length=2, std_multiplier=2.0)

        assert not any(row.is_populated for row in rows[:3])
        last = rows[-1]
        assert (last.basis, last.upper, last.lower) == (
            pytest.approx(5.5), pytest.approx(6.5), pytest.approx(4.5)
        )

    def test_result_aligned_with_bars(self, bar_factory):
        """Test one row per bar even when the window never fills"""
        bars = bar_factory([1.0, 2.0])
        rows = calculate_bands(bars, length=5)
        assert len(rows) == 2
        assert not any(row.is_populated for row in rows)

    def test_default_parameters(self, bar_factory):
        """Test defaults are length 20, multiplier 2"""
        bars = bar_factory([float(i) for i in range(25)])
        rows = calculate_bands(bars)
        assert not rows[18].is_populated
        assert rows[19].is_populated
        assert rows[19].basis == pytest.approx(9.5)


class TestBandProperties:
    """Property checks over random series"""

    @pytest.fixture
    def random_closes(self):
        rng = random.Random(42)
        price = 100.0
        closes = []
        for _ in range(250):
            price = max(1.0, price + rng.uniform(-2.0, 2.0))
            closes.append(round(price, 2))
        return closes

    @pytest.mark.parametrize("length", [1, 2, 5, 20, 60])
    def test_populated_rows_start_at_length_minus_one(self, bar_factory, random_closes, length):
        """Test the first populated row is exactly at length - 1"""
        rows = calculate_bands(bar_factory(random_closes), length=length)
        first = next(i for i, row in enumerate(rows) if row.is_populated)
        assert first == length - 1
        assert all(row.is_populated for row in rows[length - 1:])

    @pytest.mark.parametrize("mult", [0.0, 0.5, 2.0, 3.5])
    def test_band_ordering(self, bar_factory, random_closes, mult):
        """Test lower <= basis <= upper on every populated row"""
        rows = calculate_bands(bar_factory(random_closes), length=14, std_multiplier=mult)
        for row in rows:
            if row.is_populated:
                assert row.lower <= row.basis <= row.upper

    def test_mean_matches_direct_mean(self, bar_factory, random_closes):
        """Test rolling mean equals the arithmetic mean of each window"""
        length = 20
        rows = calculate_bands(bar_factory(random_closes), length=length)
        for i in range(length - 1, len(random_closes)):
            window = random_closes[i - length + 1:i + 1]
            assert rows[i].basis == pytest.approx(sum(window) / length, rel=1e-9)

    def test_stdev_matches_population_stdev(self, bar_factory, random_closes):
        """Test band half-width equals multiplier * pstdev of each window"""
        length = 10
        rows = calculate_bands(bar_factory(random_closes), length=length, std_multiplier=1.0)
        for i in range(length - 1, len(random_closes)):
            expected = statistics.pstdev(random_closes[i - length + 1:i + 1])
            assert rows[i].upper - rows[i].basis == pytest.approx(expected, abs=1e-5)


class TestRollingStatisticsEngine:
    """Test RollingStatisticsEngine class"""

    def test_compute_ignores_offset(self, bar_factory, scenario_closes):
        """Test offset is applied by the shifter, not the engine"""
        engine = RollingStatisticsEngine()
        rows = engine.compute(bar_factory(scenario_closes), IndicatorParams(length=3, offset=2))
        assert rows[2].basis == pytest.approx(11.0)

    def test_compute_is_repeatable(self, bar_factory, scenario_closes):
        """Test repeated calls give identical results"""
        engine = RollingStatisticsEngine()
        bars = bar_factory(scenario_closes)
        params = IndicatorParams(length=3)
        assert engine.compute(bars, params) == engine.compute(bars, params)

    def test_compute_over_appended_series(self, bar_factory, scenario_closes):
        """Test a grown series recomputes from scratch with the same prefix"""
        engine = RollingStatisticsEngine()
        params = IndicatorParams(length=3)
        short = engine.compute(bar_factory(scenario_closes), params)
        longer = engine.compute(bar_factory(scenario_closes + [15.0, 16.0]), params)
        assert longer[:len(short)] == short
        assert longer[-1].basis == pytest.approx(15.0)

"""
Tests for Sharpe / Sortino ratios, downside deviation and maximum drawdown.
"""

import math
import pytest

from quant_toolkit import PerformanceMetrics, DrawdownResult


class TestRatios:
    """Excess return per unit of risk."""

    def test_sharpe(self):
        assert PerformanceMetrics.sharpe_ratio(0.12, 0.2, 0.02) == pytest.approx(0.5)

    def test_sharpe_zero_risk(self):
        assert PerformanceMetrics.sharpe_ratio(0.05, 0.0, 0.03) == 0.0

    def test_sharpe_negative_excess(self):
        assert PerformanceMetrics.sharpe_ratio(0.01, 0.1, 0.03) == pytest.approx(-0.2)

    def test_sortino(self):
        assert PerformanceMetrics.sortino_ratio(0.1, 0.05, 0.02) == pytest.approx(1.6)

    def test_sortino_without_downside(self):
        assert PerformanceMetrics.sortino_ratio(0.1, 0.0, 0.02) == 0.0


class TestDownsideDeviation:
    """RMS shortfall over the below-target subset."""

    def test_shortfalls(self):
        deviation = PerformanceMetrics.downside_deviation([0.1, -0.1, -0.3, 0.05], 0.0)
        assert deviation == pytest.approx(math.sqrt((0.01 + 0.09) / 2))

    def test_nothing_below_target(self):
        assert PerformanceMetrics.downside_deviation([0.1, 0.2], 0.05) == 0.0

    def test_target_is_exclusive(self):
        """Returns equal to the target are not shortfalls."""
        assert PerformanceMetrics.downside_deviation([0.0, 0.0, -0.2], 0.0) == pytest.approx(0.2)


class TestMaxDrawdown:
    """Largest decline from a running peak."""

    def test_known_series(self):
        result = PerformanceMetrics.max_drawdown([100, 120, 90, 110, 60, 80])
        assert result == DrawdownResult(max_drawdown=0.5, peak_index=1, trough_index=4)

    def test_later_peak_with_smaller_drawdown(self):
        """A new peak after the worst decline does not move the reported peak."""
        result = PerformanceMetrics.max_drawdown([100, 50, 200, 180])
        assert result.max_drawdown == pytest.approx(0.5)
        assert result.peak_index == 0
        assert result.trough_index == 1

    def test_rising_series(self):
        result = PerformanceMetrics.max_drawdown([1, 2, 3, 4])
        assert result.max_drawdown == 0.0
        assert result.trough_index == 0

    def test_empty(self):
        with pytest.raises(ValueError):
            PerformanceMetrics.max_drawdown([])

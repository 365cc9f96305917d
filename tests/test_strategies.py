"""
Tests for preset option strategy payoff curves.
"""

import numpy as np
import pytest

from quant_toolkit import StrategyPayoffs, BlackScholesModel


SPOT = 100.0


def premium(strike, T, option_type):
    return BlackScholesModel.price_option(SPOT, strike, T, 0.2, 0.05, option_type).price


class TestPriceGrid:
    """0.5x to 2.48x spot in steps of spot / 50."""

    def test_default_grid(self):
        grid = StrategyPayoffs.price_grid(SPOT)
        assert len(grid) == 100
        assert grid[0] == pytest.approx(50.0)
        assert grid[1] == pytest.approx(52.0)
        assert grid[-1] == pytest.approx(248.0)

    def test_custom_points(self):
        assert len(StrategyPayoffs.price_grid(SPOT, points=10)) == 10


class TestPresets:
    """Preset lookup."""

    def test_all_strategies(self):
        assert StrategyPayoffs.get_all_strategies() == [
            "covered-call", "cash-secured-put", "long-leaps", "strangle"
        ]

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            StrategyPayoffs.get_strategy("iron-condor")
        with pytest.raises(ValueError):
            StrategyPayoffs.payoff_curve("iron-condor", SPOT)

    def test_get_strategy_returns_copy(self):
        preset = StrategyPayoffs.get_strategy("strangle")
        preset["legs"].clear()
        assert len(StrategyPayoffs.get_strategy("strangle")["legs"]) == 2

    def test_leaps_premium(self):
        premiums = StrategyPayoffs.leg_premiums("long-leaps", SPOT)
        assert premiums == [pytest.approx(premium(100.0, 2.0, "call"))]


class TestPayoffCurves:
    """Profit/loss at expiry."""

    def test_covered_call(self):
        call_premium = premium(110.0, 1 / 12, "call")
        curve = StrategyPayoffs.payoff_curve("covered-call", SPOT, prices=[80.0, 100.0, 200.0])

        assert curve[0] == pytest.approx(-20.0 + call_premium)
        assert curve[1] == pytest.approx(call_premium)
        assert curve[2] == pytest.approx(10.0 + call_premium)

    def test_cash_secured_put(self):
        put_premium = premium(90.0, 1 / 12, "put")
        curve = StrategyPayoffs.payoff_curve("cash-secured-put", SPOT, prices=[50.0, 120.0])

        assert curve[0] == pytest.approx(-40.0 + put_premium)
        assert curve[1] == pytest.approx(put_premium)

    def test_long_leaps(self):
        leaps_premium = premium(100.0, 2.0, "call")
        curve = StrategyPayoffs.payoff_curve("long-leaps", SPOT, prices=[80.0, 150.0])

        assert curve[0] == pytest.approx(-leaps_premium)
        assert curve[1] == pytest.approx(50.0 - leaps_premium)

    def test_strangle(self):
        total = premium(110.0, 1 / 12, "call") + premium(90.0, 1 / 12, "put")
        curve = StrategyPayoffs.payoff_curve("strangle", SPOT, prices=[70.0, 100.0, 130.0])

        np.testing.assert_allclose(curve, [20.0 - total, -total, 20.0 - total])

    def test_default_grid_length(self):
        curve = StrategyPayoffs.payoff_curve("strangle", SPOT)
        assert curve.shape == (100,)

    def test_custom_assumptions(self):
        low = StrategyPayoffs.payoff_curve("long-leaps", SPOT, prices=[SPOT], volatility=0.1)
        high = StrategyPayoffs.payoff_curve("long-leaps", SPOT, prices=[SPOT], volatility=0.4)
        assert high[0] < low[0]

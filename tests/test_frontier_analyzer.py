"""
Tests for the strategy-level frontier analysis facade.
"""

import numpy as np
import pytest
from pydantic import ValidationError

from quant_toolkit import FrontierAnalyzer, FrontierResults, StrategyInput, PortfolioOptimizer


STRATEGIES = [
    {"name": "covered-call", "expected_return": 0.08, "volatility": 0.12},
    {"name": "long-leaps", "expected_return": 0.18, "volatility": 0.35},
    {"name": "strangle", "expected_return": 0.05, "volatility": 0.25},
]


@pytest.fixture
def analyzer():
    return FrontierAnalyzer(STRATEGIES, points=6)


class TestFrontierAnalyzer:

    def test_requires_two_strategies(self):
        with pytest.raises(ValueError):
            FrontierAnalyzer(STRATEGIES[:1])

    def test_accepts_models_and_dicts(self):
        analyzer = FrontierAnalyzer([StrategyInput(**STRATEGIES[0]), STRATEGIES[1]])
        assert all(isinstance(s, StrategyInput) for s in analyzer.strategies)

    def test_negative_volatility_rejected(self):
        with pytest.raises(ValidationError):
            FrontierAnalyzer([{"name": "a", "expected_return": 0.1, "volatility": -0.1}, STRATEGIES[0]])

    def test_covariance_from_assumed_correlation(self, analyzer):
        covariance = analyzer.covariance

        np.testing.assert_allclose(np.diag(covariance), [0.12 ** 2, 0.35 ** 2, 0.25 ** 2])
        assert covariance[0][1] == pytest.approx(0.5 * 0.12 * 0.35)
        np.testing.assert_allclose(covariance, np.transpose(covariance))

    def test_custom_correlation(self):
        analyzer = FrontierAnalyzer(STRATEGIES, correlation=0.0)
        assert analyzer.covariance[0][2] == 0.0

    def test_analyze(self, analyzer):
        results = analyzer.analyze()

        assert isinstance(results, FrontierResults)
        assert len(results.frontier) == 6
        assert results.frontier[0].target_return == pytest.approx(0.05)
        assert results.frontier[-1].target_return == pytest.approx(0.18)

    def test_summary_points(self, analyzer):
        results = analyzer.analyze()

        assert results.strategy_points == [(0.12, 0.08), (0.35, 0.18), (0.25, 0.05)]
        assert results.max_sharpe_point.sharpe_ratio == max(p.sharpe_ratio for p in results.frontier)
        assert results.min_variance_point.risk == min(p.risk for p in results.frontier)

    def test_to_dataframe(self, analyzer):
        frame = analyzer.analyze().to_dataframe()

        assert len(frame) == 6
        assert list(frame.columns) == [
            "target_return", "expected_return", "risk", "sharpe_ratio",
            "weight_covered-call", "weight_long-leaps", "weight_strangle"
        ]
        weights = frame[[c for c in frame.columns if c.startswith("weight_")]]
        np.testing.assert_allclose(weights.sum(axis=1), 1.0, atol=1e-6)

    def test_custom_optimizer(self):
        analyzer = FrontierAnalyzer(STRATEGIES, points=4, optimizer=PortfolioOptimizer(method="slsqp"))
        results = analyzer.analyze()
        for point in results.frontier[1:-1]:
            assert point.target_gap < 1e-6

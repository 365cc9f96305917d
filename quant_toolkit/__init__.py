"""
Quantitative Finance Toolkit: option pricing, Monte Carlo simulation and
mean-variance portfolio optimization

This package implements three independent numerical engines:
- Black-Scholes-Merton closed-form prices and Greeks for European options
- Geometric Brownian motion path simulation, Monte Carlo option pricing
  and VaR / CVaR extraction from simulated returns
- Mean-variance portfolio optimization tracing an efficient frontier
  with Sharpe ratios

All engines are stateless: given inputs they return new values and keep
nothing between calls.
"""

import logging
import pandas as pd
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .pricing.black_scholes import BlackScholesModel
from .pricing.strategies import StrategyPayoffs
from .simulation.monte_carlo import MonteCarloEngine
from .portfolio_optimization.optimizer import PortfolioOptimizer
from .portfolio_optimization.performance import PerformanceMetrics
from .models.option import OptionType, OptionParameters, PricingResult
from .models.simulation import ConfidenceInterval, SimulationResult, RiskMetrics
from .models.portfolio import (
    OptimizationConstraints, PortfolioMetrics, FrontierPoint, StrategyInput, DrawdownResult
)
from .utils.math_utils import covariance_from_volatilities
from .utils.deadline import Deadline, DeadlineExceeded, OperationCancelled
from .config import FRONTIER_RISK_FREE_RATE, FRONTIER_POINTS, ASSUMED_CORRELATION, MIN_STRATEGIES

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

class FrontierAnalyzer:
    """
    Efficient frontier over a set of strategies described only by
    expected return and volatility

    Covariance is built from the volatilities with one assumed pairwise
    correlation (0.5 by default).
    """

    def __init__(self,
                 strategies: Sequence[Union[StrategyInput, Dict]],
                 risk_free_rate: float = FRONTIER_RISK_FREE_RATE,
                 points: int = FRONTIER_POINTS,
                 correlation: float = ASSUMED_CORRELATION,
                 optimizer: Optional[PortfolioOptimizer] = None):

        self.strategies = [s if isinstance(s, StrategyInput) else StrategyInput(**s) for s in strategies]
        if len(self.strategies) < MIN_STRATEGIES:
            raise ValueError(f"At least {MIN_STRATEGIES} strategies are needed to optimize, got {len(self.strategies)}")

        self.risk_free_rate = risk_free_rate
        self.points = points
        self.correlation = correlation
        self.optimizer = optimizer or PortfolioOptimizer()

    @property
    def returns(self) -> List[float]:
        return [s.expected_return for s in self.strategies]

    @property
    def covariance(self):
        return covariance_from_volatilities([s.volatility for s in self.strategies], self.correlation)

    def analyze(self, deadline: Optional[Deadline] = None) -> "FrontierResults":
        """Trace the frontier for the configured strategies"""
        frontier = self.optimizer.efficient_frontier(
            self.returns,
            self.covariance,
            risk_free_rate=self.risk_free_rate,
            points=self.points,
            deadline=deadline
        )
        return FrontierResults(frontier, self.strategies, self.risk_free_rate)

class FrontierResults:
    """Container for frontier analysis results"""

    def __init__(self, frontier: List[FrontierPoint], strategies: List[StrategyInput], risk_free_rate: float):
        self.frontier = frontier
        self.strategies = strategies
        self.risk_free_rate = risk_free_rate

    @property
    def strategy_points(self) -> List[Tuple[float, float]]:
        """(risk, return) of each individual strategy"""
        return [(s.volatility, s.expected_return) for s in self.strategies]

    @property
    def max_sharpe_point(self) -> FrontierPoint:
        return max(self.frontier, key=lambda p: p.sharpe_ratio)

    @property
    def min_variance_point(self) -> FrontierPoint:
        return min(self.frontier, key=lambda p: p.risk)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per frontier point, one weight column per strategy"""
        rows = []
        for point in self.frontier:
            row = {
                'target_return': point.target_return,
                'expected_return': point.expected_return,
                'risk': point.risk,
                'sharpe_ratio': point.sharpe_ratio
            }
            for strategy, weight in zip(self.strategies, point.weights):
                row[f'weight_{strategy.name}'] = weight
            rows.append(row)
        return pd.DataFrame(rows)

__all__ = [
    # Engines
    'BlackScholesModel',
    'StrategyPayoffs',
    'MonteCarloEngine',
    'PortfolioOptimizer',
    'PerformanceMetrics',
    'FrontierAnalyzer',
    'FrontierResults',
    # Models
    'OptionType',
    'OptionParameters',
    'PricingResult',
    'ConfidenceInterval',
    'SimulationResult',
    'RiskMetrics',
    'OptimizationConstraints',
    'PortfolioMetrics',
    'FrontierPoint',
    'StrategyInput',
    'DrawdownResult',
    # Helpers
    'covariance_from_volatilities',
    'Deadline',
    'DeadlineExceeded',
    'OperationCancelled'
]

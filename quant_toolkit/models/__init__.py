"""
Value models for pricing inputs, simulation outputs and portfolio results
"""

from .option import OptionType, OptionParameters, PricingResult
from .simulation import ConfidenceInterval, SimulationResult, RiskMetrics
from .portfolio import (
    OptimizationConstraints,
    PortfolioMetrics,
    FrontierPoint,
    StrategyInput,
    DrawdownResult
)

__all__ = [
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
    'DrawdownResult'
]

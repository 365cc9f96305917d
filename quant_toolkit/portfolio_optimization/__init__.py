"""
Mean-variance portfolio optimization and performance ratios
"""

from .optimizer import PortfolioOptimizer
from .performance import PerformanceMetrics

__all__ = ['PortfolioOptimizer', 'PerformanceMetrics']

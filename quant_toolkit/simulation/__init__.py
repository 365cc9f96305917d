"""
Geometric Brownian motion simulation, Monte Carlo pricing and tail risk
"""

from .monte_carlo import MonteCarloEngine

__all__ = ['MonteCarloEngine']

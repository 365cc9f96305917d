"""
Closed-form option pricing and option strategy payoffs
"""

from .black_scholes import BlackScholesModel
from .strategies import StrategyPayoffs

__all__ = ['BlackScholesModel', 'StrategyPayoffs']

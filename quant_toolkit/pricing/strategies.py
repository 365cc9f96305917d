import copy
import numpy as np
from typing import Dict, List, Optional, Sequence
from .black_scholes import BlackScholesModel
from ..models.option import OptionParameters
from ..config import (
    STRATEGY_PRESETS, STRATEGY_VOLATILITY, STRATEGY_RISK_FREE_RATE,
    PAYOFF_GRID_POINTS, PAYOFF_GRID_START, PAYOFF_GRID_STEP
)

class StrategyPayoffs:
    """
    Profit/loss at expiry of preset option strategies

    Each leg is priced today with Black-Scholes under the preset assumptions
    (20% volatility, 5% rate unless overridden) and the premium is netted
    against the leg's intrinsic value at each price on the grid.
    """

    @staticmethod
    def get_all_strategies() -> List[str]:
        return list(STRATEGY_PRESETS.keys())

    @staticmethod
    def get_strategy(name: str) -> Dict:
        """Preset definition by name (a copy, safe to modify)"""
        if name not in STRATEGY_PRESETS:
            raise ValueError(f"Strategy '{name}' not found. Use one of {list(STRATEGY_PRESETS)}")
        return copy.deepcopy(STRATEGY_PRESETS[name])

    @staticmethod
    def price_grid(spot: float, points: int = PAYOFF_GRID_POINTS) -> np.ndarray:
        """spot * (0.5 + i / 50) for i in range(points): 0.5x to 2.48x spot for 100 points"""
        return spot * (PAYOFF_GRID_START + np.arange(points) * PAYOFF_GRID_STEP)

    @staticmethod
    def leg_premiums(name: str, spot: float,
                     volatility: float = STRATEGY_VOLATILITY,
                     risk_free_rate: float = STRATEGY_RISK_FREE_RATE) -> List[float]:
        """Black-Scholes premium of each leg, in preset order"""
        strategy = StrategyPayoffs.get_strategy(name)
        premiums = []

        for leg in strategy["legs"]:
            params = OptionParameters(
                spot=spot,
                strike=spot * leg["strike_mult"],
                time_to_expiry=strategy["time_to_expiry"],
                volatility=volatility,
                risk_free_rate=risk_free_rate,
                option_type=leg["option_type"]
            )
            premiums.append(BlackScholesModel.price(params).price)

        return premiums

    @staticmethod
    def payoff_curve(name: str, spot: float,
                     prices: Optional[Sequence[float]] = None,
                     volatility: float = STRATEGY_VOLATILITY,
                     risk_free_rate: float = STRATEGY_RISK_FREE_RATE) -> np.ndarray:
        """
        Profit/loss of strategy name at each underlying price

        prices defaults to price_grid(spot). Long legs pay their premium and
        receive intrinsic value; short legs the reverse. Covered calls also
        carry the stock bought at spot.
        """
        strategy = StrategyPayoffs.get_strategy(name)
        premiums = StrategyPayoffs.leg_premiums(name, spot, volatility, risk_free_rate)

        if prices is None:
            prices = StrategyPayoffs.price_grid(spot)
        prices = np.asarray(prices, dtype=float)

        payoff = np.zeros(len(prices))

        if strategy["holds_underlying"]:
            payoff += prices - spot

        for leg, premium in zip(strategy["legs"], premiums):
            strike = spot * leg["strike_mult"]
            if leg["option_type"] == "call":
                intrinsic = np.maximum(0.0, prices - strike)
            else:
                intrinsic = np.maximum(0.0, strike - prices)

            if leg["position"] == "long":
                payoff += intrinsic - premium
            else:
                payoff += premium - intrinsic

        return payoff

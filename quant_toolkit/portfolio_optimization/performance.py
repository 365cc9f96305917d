import numpy as np
from typing import Sequence
from ..models.portfolio import DrawdownResult

class PerformanceMetrics:
    """Risk-adjusted return ratios and drawdown of a return or price series"""

    @staticmethod
    def sharpe_ratio(portfolio_return: float, portfolio_risk: float, risk_free_rate: float) -> float:
        """
        Excess return per unit of standard deviation

        Returns 0.0 for a riskless portfolio instead of dividing by zero.
        """
        if portfolio_risk == 0:
            return 0.0
        return (portfolio_return - risk_free_rate) / portfolio_risk

    @staticmethod
    def sortino_ratio(portfolio_return: float, downside_deviation: float, risk_free_rate: float) -> float:
        """Excess return per unit of downside deviation (0.0 without downside)"""
        if downside_deviation == 0:
            return 0.0
        return (portfolio_return - risk_free_rate) / downside_deviation

    @staticmethod
    def downside_deviation(returns: Sequence[float], target_return: float) -> float:
        """
        Root mean square shortfall below target_return

        Only the below-target observations enter the mean; 0.0 when there
        are none.
        """
        returns = np.asarray(returns, dtype=float)
        shortfalls = target_return - returns[returns < target_return]

        if len(shortfalls) == 0:
            return 0.0

        return float(np.sqrt(np.mean(shortfalls ** 2)))

    @staticmethod
    def max_drawdown(prices: Sequence[float]) -> DrawdownResult:
        """Largest fractional decline from a running peak, with its indices"""

        if len(prices) == 0:
            raise ValueError("Price series is empty")

        max_drawdown = 0.0
        peak = prices[0]
        peak_index = 0
        drawdown_peak_index = 0
        trough_index = 0

        for i in range(1, len(prices)):
            if prices[i] > peak:
                peak = prices[i]
                peak_index = i

            drawdown = (peak - prices[i]) / peak
            if drawdown > max_drawdown:
                max_drawdown = drawdown
                drawdown_peak_index = peak_index
                trough_index = i

        return DrawdownResult(
            max_drawdown=float(max_drawdown),
            peak_index=drawdown_peak_index,
            trough_index=trough_index
        )

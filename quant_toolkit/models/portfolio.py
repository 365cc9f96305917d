from pydantic import BaseModel, validator
from typing import List

class OptimizationConstraints(BaseModel):
    """Feasible-set projection applied after every optimizer step"""

    sum_to_one: bool = True
    non_negative: bool = True

    class Config:
        frozen = True

class PortfolioMetrics(BaseModel):
    """Expected return and risk of a weighted portfolio"""

    expected_return: float
    risk: float
    variance: float

    class Config:
        frozen = True

class FrontierPoint(BaseModel):
    """Minimum-variance portfolio found for one target return"""

    target_return: float
    weights: List[float]
    expected_return: float
    risk: float
    sharpe_ratio: float

    class Config:
        frozen = True

    @property
    def weights_sum(self) -> float:
        return sum(self.weights)

    @property
    def is_long_only(self) -> bool:
        """True when no weight is short (allows small numerical tolerance)"""
        return all(w >= -1e-12 for w in self.weights)

    @property
    def target_gap(self) -> float:
        """Distance between the realised and the requested return"""
        return abs(self.expected_return - self.target_return)

class StrategyInput(BaseModel):
    """Annualised expected return and volatility of one strategy, as decimals"""

    name: str
    expected_return: float
    volatility: float

    @validator('volatility')
    def validate_volatility(cls, v):
        if v < 0.0:
            raise ValueError("Volatility must be non-negative")
        return v

class DrawdownResult(BaseModel):
    """Largest peak-to-trough decline of a price series"""

    max_drawdown: float
    peak_index: int
    trough_index: int

    class Config:
        frozen = True

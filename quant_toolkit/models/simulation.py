from pydantic import BaseModel


class ConfidenceInterval(BaseModel):
    """Two-sided interval around a Monte Carlo estimate"""

    lower: float
    upper: float

    class Config:
        frozen = True

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    @property
    def width(self) -> float:
        return self.upper - self.lower


class SimulationResult(BaseModel):
    """Aggregate Monte Carlo option price over an ensemble of paths"""

    price: float
    confidence_interval: ConfidenceInterval
    standard_error: float
    paths: int
    steps: int

    class Config:
        frozen = True


class RiskMetrics(BaseModel):
    """
    Tail risk of simulated path returns

    value_at_risk and conditional_var are positive loss magnitudes in units of
    the initial value; worst_return and best_return are raw fractional returns.
    """

    value_at_risk: float
    conditional_var: float
    worst_return: float
    best_return: float
    confidence: float

    class Config:
        frozen = True

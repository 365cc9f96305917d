from enum import Enum
from pydantic import BaseModel, validator
from ..config import DISPLAY_DECIMALS


class OptionType(str, Enum):
    """European option kind"""

    CALL = "call"
    PUT = "put"


class OptionParameters(BaseModel):
    """
    Inputs to closed-form Black-Scholes pricing

    Spot and strike must be strictly positive. A non-positive time to expiry
    or volatility is accepted: those are degenerate but well-defined cases
    handled by the pricer (expired option / deterministic forward).
    """

    spot: float
    strike: float
    time_to_expiry: float
    volatility: float
    risk_free_rate: float
    option_type: OptionType = OptionType.CALL

    class Config:
        frozen = True

    @validator('spot', 'strike')
    def validate_positive_price(cls, v):
        if v <= 0:
            raise ValueError("Spot and strike prices must be positive")
        return v

    @validator('option_type', pre=True)
    def normalize_option_type(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def is_call(self) -> bool:
        return self.option_type == OptionType.CALL


class PricingResult(BaseModel):
    """Option price with Greeks (vega and rho per 1% move, theta per day)"""

    price: float
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float

    class Config:
        frozen = True

    def rounded(self, digits: int = DISPLAY_DECIMALS) -> "PricingResult":
        """Copy with every field rounded for display"""
        return PricingResult(
            price=round(self.price, digits),
            delta=round(self.delta, digits),
            gamma=round(self.gamma, digits),
            vega=round(self.vega, digits),
            theta=round(self.theta, digits),
            rho=round(self.rho, digits)
        )

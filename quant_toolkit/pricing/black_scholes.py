import math
import logging
from ..models.option import OptionParameters, OptionType, PricingResult
from ..utils.math_utils import normal_cdf, normal_pdf
from ..config import DAYS_PER_YEAR, GREEK_SCALE

logger = logging.getLogger(__name__)

class BlackScholesModel:
    """
    Closed-form Black-Scholes-Merton pricing of European options

    Produces the price and the Greeks in display units:
    - vega and rho per 1% move (divided by 100)
    - theta as daily decay (annual theta divided by 365)

    Two degenerate inputs never raise, they take their own closed form:
    - time_to_expiry <= 0: expired option, intrinsic value and binary delta
    - volatility <= 0: deterministic forward, discounted intrinsic value
    """

    @staticmethod
    def d1(S: float, K: float, r: float, v: float, T: float) -> float:
        return (math.log(S / K) + (r + 0.5 * v * v) * T) / (v * math.sqrt(T))

    @staticmethod
    def d2(d1: float, v: float, T: float) -> float:
        return d1 - v * math.sqrt(T)

    @staticmethod
    def price(params: OptionParameters) -> PricingResult:
        """Price and Greeks for one set of option parameters"""

        if params.time_to_expiry <= 0:
            return BlackScholesModel._expired(params)
        if params.volatility <= 0:
            return BlackScholesModel._zero_volatility(params)

        S = params.spot
        K = params.strike
        T = params.time_to_expiry
        v = params.volatility
        r = params.risk_free_rate

        d1 = BlackScholesModel.d1(S, K, r, v, T)
        d2 = BlackScholesModel.d2(d1, v, T)

        Nd1 = normal_cdf(d1)
        Nd2 = normal_cdf(d2)
        NNd1 = normal_cdf(-d1)
        NNd2 = normal_cdf(-d2)
        pdf_d1 = normal_pdf(d1)

        discount = math.exp(-r * T)
        sqrt_T = math.sqrt(T)

        if params.is_call:
            price = S * Nd1 - K * discount * Nd2
            delta = Nd1
            rho = K * T * discount * Nd2 / GREEK_SCALE
        else:
            price = K * discount * NNd2 - S * NNd1
            delta = -NNd1
            rho = -K * T * discount * NNd2 / GREEK_SCALE

        # Same for calls and puts
        gamma = pdf_d1 / (S * v * sqrt_T)
        vega = S * sqrt_T * pdf_d1 / GREEK_SCALE

        term1 = -(S * v * pdf_d1) / (2 * sqrt_T)
        term2 = r * K * discount
        if params.is_call:
            theta = (term1 - term2 * Nd2) / DAYS_PER_YEAR
        else:
            theta = (term1 + term2 * NNd2) / DAYS_PER_YEAR

        return PricingResult(
            price=max(0.0, price),
            delta=delta,
            gamma=gamma,
            vega=vega,
            theta=theta,
            rho=rho
        )

    @staticmethod
    def _expired(params: OptionParameters) -> PricingResult:
        """At or past expiry: intrinsic value, binary delta, no other sensitivity"""
        S, K = params.spot, params.strike

        if params.is_call:
            price = max(0.0, S - K)
            delta = 1.0 if S > K else 0.0
        else:
            price = max(0.0, K - S)
            delta = -1.0 if S < K else 0.0

        logger.debug(f"Expired {params.option_type.value} priced at intrinsic value {price}")

        return PricingResult(price=price, delta=delta, gamma=0.0, vega=0.0, theta=0.0, rho=0.0)

    @staticmethod
    def _zero_volatility(params: OptionParameters) -> PricingResult:
        """
        No volatility: the underlying grows at r, so the option is worth its
        discounted intrinsic value against the forward. Gamma and vega vanish;
        theta and rho come from the deterministic discount factor alone.
        """
        S = params.spot
        K = params.strike
        T = params.time_to_expiry
        r = params.risk_free_rate

        discounted_strike = K * math.exp(-r * T)

        if params.is_call:
            price = max(0.0, S - discounted_strike)
            delta = 1.0 if S > discounted_strike else 0.0
            rho = T * discounted_strike / GREEK_SCALE
        else:
            price = max(0.0, discounted_strike - S)
            delta = -1.0 if S < discounted_strike else 0.0
            rho = -T * discounted_strike / GREEK_SCALE

        return PricingResult(
            price=price,
            delta=delta,
            gamma=0.0,
            vega=0.0,
            theta=-r * discounted_strike / DAYS_PER_YEAR,
            rho=rho
        )

    @staticmethod
    def price_option(spot: float, strike: float, time_to_expiry: float, volatility: float,
                     risk_free_rate: float, option_type: str = "call") -> PricingResult:
        """Convenience wrapper building OptionParameters from plain numbers"""
        params = OptionParameters(
            spot=spot,
            strike=strike,
            time_to_expiry=time_to_expiry,
            volatility=volatility,
            risk_free_rate=risk_free_rate,
            option_type=option_type
        )
        return BlackScholesModel.price(params)

    @staticmethod
    def put_call_parity_gap(spot: float, strike: float, time_to_expiry: float,
                            volatility: float, risk_free_rate: float) -> float:
        """(C - P) - (S - K e^(-rT)); zero up to rounding for valid inputs"""
        call = BlackScholesModel.price_option(spot, strike, time_to_expiry, volatility,
                                              risk_free_rate, OptionType.CALL)
        put = BlackScholesModel.price_option(spot, strike, time_to_expiry, volatility,
                                             risk_free_rate, OptionType.PUT)
        forward_value = spot - strike * math.exp(-risk_free_rate * time_to_expiry)
        return (call.price - put.price) - forward_value

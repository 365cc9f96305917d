import math
import logging
import numpy as np
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, Tuple, Union
from ..models.option import OptionType
from ..models.simulation import ConfidenceInterval, SimulationResult, RiskMetrics
from ..utils.math_utils import box_muller, as_rng
from ..utils.deadline import Deadline, check_deadline
from ..config import (
    DEFAULT_STEPS, DEFAULT_PATHS, DEFAULT_BATCH_SIZE,
    CONFIDENCE_Z_SCORE, DEFAULT_RISK_CONFIDENCE
)

logger = logging.getLogger(__name__)

class MonteCarloEngine:
    """
    Geometric Brownian motion simulation and Monte Carlo option pricing

    Paths use the exact log-normal step
        S[i] = S[i-1] * exp((mu - sigma^2 / 2) * dt + sigma * sqrt(dt) * Z)
    so there is no discretisation bias whatever the number of steps.
    Z comes from the Box-Muller transform driven by a numpy Generator;
    pass rng or seed for reproducible runs.
    """

    @staticmethod
    def generate_path(S0: float, mu: float, sigma: float, T: float, steps: int,
                      rng: Optional[np.random.Generator] = None,
                      seed: Optional[int] = None) -> np.ndarray:
        """Single price path of length steps + 1 starting at S0"""
        return MonteCarloEngine.generate_paths(S0, mu, sigma, T, steps, 1, rng=rng, seed=seed)[0]

    @staticmethod
    def generate_paths(S0: float, mu: float, sigma: float, T: float, steps: int, paths: int,
                       rng: Optional[np.random.Generator] = None,
                       seed: Optional[int] = None,
                       deadline: Optional[Deadline] = None,
                       batch_size: int = DEFAULT_BATCH_SIZE) -> np.ndarray:
        """
        Independent price paths as an array of shape (paths, steps + 1)

        The deadline is checked before each batch of batch_size paths.
        """
        MonteCarloEngine._validate_grid(steps, paths, batch_size)
        rng = as_rng(rng, seed)

        dt = T / steps
        drift = (mu - 0.5 * sigma * sigma) * dt
        diffusion = sigma * math.sqrt(dt)

        result = np.empty((paths, steps + 1))
        result[:, 0] = S0

        for start in range(0, paths, batch_size):
            check_deadline(deadline)
            stop = min(start + batch_size, paths)

            z = box_muller(rng, (stop - start, steps))
            growth = np.exp(drift + diffusion * z)
            result[start:stop, 1:] = S0 * np.cumprod(growth, axis=1)

        return result

    @staticmethod
    def price_option(S0: float, K: float, r: float, sigma: float, T: float,
                     paths: int = DEFAULT_PATHS,
                     steps: int = DEFAULT_STEPS,
                     option_type: Union[str, OptionType] = OptionType.CALL,
                     rng: Optional[np.random.Generator] = None,
                     seed: Optional[int] = None,
                     batch_size: int = DEFAULT_BATCH_SIZE,
                     workers: int = 1,
                     deadline: Optional[Deadline] = None,
                     z_score: float = CONFIDENCE_Z_SCORE) -> SimulationResult:
        """
        Risk-neutral Monte Carlo price of a European option

        Paths drift at r. The estimate is the discounted mean terminal payoff;
        the interval is estimate +/- z_score * standard error using the normal
        approximation (no Student-t correction, intended for paths >> 30).
        The standard error is discounted as well, so everything is in price
        units.

        Paths are simulated in independent batches, each with its own child
        seed, and reduced through sum and sum of squares. workers > 1 runs the
        batches on a thread pool; the result does not depend on worker count.
        """
        MonteCarloEngine._validate_grid(steps, paths, batch_size)
        if paths < 2:
            raise ValueError(f"At least 2 paths are needed for a standard error, got {paths}")
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        option_type = MonteCarloEngine._parse_option_type(option_type)
        is_call = option_type == OptionType.CALL

        batch_sizes = [min(batch_size, paths - start) for start in range(0, paths, batch_size)]
        parent = as_rng(rng, seed)
        seed_seq = np.random.SeedSequence(int(parent.integers(0, 2**63 - 1)))
        batch_rngs = [np.random.default_rng(s) for s in seed_seq.spawn(len(batch_sizes))]

        logger.debug(
            f"Pricing {option_type.value} by Monte Carlo: {paths} paths x {steps} steps "
            f"in {len(batch_sizes)} batches on {workers} worker(s)"
        )

        def run_batch(args: Tuple[int, np.random.Generator]) -> Tuple[float, float]:
            n, batch_rng = args
            return MonteCarloEngine._payoff_moments(S0, K, r, sigma, T, steps, n, is_call,
                                                    batch_rng, deadline)

        jobs = list(zip(batch_sizes, batch_rngs))
        if workers == 1:
            moments = [run_batch(job) for job in jobs]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                moments = list(executor.map(run_batch, jobs))

        payoff_sum = sum(m[0] for m in moments)
        payoff_sq_sum = sum(m[1] for m in moments)

        mean_payoff = payoff_sum / paths
        variance = max(0.0, (payoff_sq_sum - paths * mean_payoff ** 2) / (paths - 1))
        standard_error = math.sqrt(variance / paths)

        discount = math.exp(-r * T)
        price = mean_payoff * discount
        half_width = z_score * standard_error * discount

        result = SimulationResult(
            price=price,
            confidence_interval=ConfidenceInterval(lower=price - half_width, upper=price + half_width),
            standard_error=standard_error * discount,
            paths=paths,
            steps=steps
        )
        logger.info(f"Monte Carlo {option_type.value} price {price:.4f} +/- {half_width:.4f}")
        return result

    @staticmethod
    def calculate_risk_metrics(paths: Union[np.ndarray, Sequence[Sequence[float]]],
                               confidence: float = DEFAULT_RISK_CONFIDENCE,
                               initial_value: float = 1.0) -> RiskMetrics:
        """
        Empirical VaR and CVaR from the total return of each path

        Returns are sorted ascending and the VaR index is
        floor(N * (1 - confidence)). VaR is the loss at that index and CVaR
        the mean loss of the returns strictly below it, both scaled by
        initial_value and reported as positive loss magnitudes.

        When the index is 0 no return lies below it and CVaR is reported as
        0.0 instead of dividing by zero.
        """
        if not 0 < confidence <= 1:
            raise ValueError(f"confidence must be in (0, 1], got {confidence}")

        returns = np.sort(MonteCarloEngine.path_returns(paths))
        if len(returns) == 0:
            raise ValueError("No paths supplied")

        # 1 - confidence rounds to 1.0 for confidence below machine epsilon
        var_index = min(int(math.floor(len(returns) * (1 - confidence))), len(returns) - 1)
        value_at_risk = -returns[var_index] * initial_value

        if var_index == 0:
            logger.warning(
                f"No returns beyond the {confidence:.2%} VaR threshold with {len(returns)} paths; "
                "conditional VaR reported as 0.0"
            )
            conditional_var = 0.0
        else:
            conditional_var = -float(np.mean(returns[:var_index])) * initial_value

        return RiskMetrics(
            value_at_risk=float(value_at_risk),
            conditional_var=conditional_var,
            worst_return=float(returns[0]),
            best_return=float(returns[-1]),
            confidence=confidence
        )

    @staticmethod
    def path_returns(paths: Union[np.ndarray, Sequence[Sequence[float]]]) -> np.ndarray:
        """Total return final / initial - 1 of every path"""
        if isinstance(paths, np.ndarray) and paths.ndim == 2:
            return paths[:, -1] / paths[:, 0] - 1.0
        return np.array([path[-1] / path[0] - 1.0 for path in paths], dtype=float)

    @staticmethod
    def _payoff_moments(S0: float, K: float, r: float, sigma: float, T: float, steps: int,
                        n: int, is_call: bool, rng: np.random.Generator,
                        deadline: Optional[Deadline]) -> Tuple[float, float]:
        """Sum and sum of squares of undiscounted payoffs over n fresh paths"""
        check_deadline(deadline)
        batch = MonteCarloEngine.generate_paths(S0, r, sigma, T, steps, n, rng=rng,
                                                deadline=deadline, batch_size=n)
        final_prices = batch[:, -1]

        if is_call:
            payoffs = np.maximum(0.0, final_prices - K)
        else:
            payoffs = np.maximum(0.0, K - final_prices)

        return float(np.sum(payoffs)), float(np.sum(payoffs ** 2))

    @staticmethod
    def _parse_option_type(option_type: Union[str, OptionType]) -> OptionType:
        if isinstance(option_type, OptionType):
            return option_type
        try:
            return OptionType(str(option_type).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown option type: {option_type}. Use 'call' or 'put'")

    @staticmethod
    def _validate_grid(steps: int, paths: int, batch_size: int = DEFAULT_BATCH_SIZE):
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        if paths < 1:
            raise ValueError(f"paths must be at least 1, got {paths}")
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")

import math
import logging
import numpy as np
from scipy.optimize import minimize
from typing import List, Optional, Sequence, Tuple
from ..models.portfolio import OptimizationConstraints, PortfolioMetrics, FrontierPoint
from ..utils.deadline import Deadline, check_deadline
from .performance import PerformanceMetrics
from ..config import (
    OPTIMIZER_LEARNING_RATE, OPTIMIZER_MAX_ITERATIONS, OPTIMIZER_RETURN_TOLERANCE,
    OPTIMIZER_METHODS, OPTIMIZER_MIN_WEIGHT_TOTAL, FRONTIER_RISK_FREE_RATE, FRONTIER_POINTS
)

logger = logging.getLogger(__name__)

class PortfolioOptimizer:
    """
    Mean-variance portfolio optimizer and efficient frontier

    Two methods share the same contract optimize(returns, covariance,
    target_return, constraints) -> weights:

    - "gradient": projected gradient descent on portfolio variance starting
      from equal weights. The target return is only a stopping condition
      (|return - target| < tolerance), not a constraint, so the result may
      miss the target when the iteration budget runs out. This is a
      heuristic baseline, not a certified solver.
    - "slsqp": scipy SLSQP with the target return and the constraints
      imposed exactly; falls back to "gradient" if SLSQP fails.

    Holds configuration only; every call works on fresh arrays and never
    modifies the caller's inputs.
    """

    def __init__(self,
                 learning_rate: float = OPTIMIZER_LEARNING_RATE,
                 max_iterations: int = OPTIMIZER_MAX_ITERATIONS,
                 tolerance: float = OPTIMIZER_RETURN_TOLERANCE,
                 method: str = "gradient"):

        if method not in OPTIMIZER_METHODS:
            raise ValueError(f"Unknown optimization method: {method}. Use one of {OPTIMIZER_METHODS}")
        if learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {learning_rate}")
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")

        self.learning_rate = learning_rate
        self.max_iterations = max_iterations
        self.tolerance = tolerance
        self.method = method

    @staticmethod
    def portfolio_metrics(weights: Sequence[float],
                          returns: Sequence[float],
                          covariance: Sequence[Sequence[float]]) -> PortfolioMetrics:
        """
        Expected return w.r and variance w'Σw (cross terms included)

        Inputs must have aligned lengths; this is not checked here.
        """
        w = np.asarray(weights, dtype=float)
        mu = np.asarray(returns, dtype=float)
        sigma = np.asarray(covariance, dtype=float)

        portfolio_return = float(w @ mu)
        variance = float(w @ sigma @ w)

        return PortfolioMetrics(
            expected_return=portfolio_return,
            risk=math.sqrt(max(variance, 0.0)),
            variance=variance
        )

    def optimize(self,
                 returns: Sequence[float],
                 covariance: Sequence[Sequence[float]],
                 target_return: float,
                 constraints: Optional[OptimizationConstraints] = None,
                 deadline: Optional[Deadline] = None) -> np.ndarray:
        """Minimum-variance weights for target_return under constraints"""

        mu, sigma = self._validate_inputs(returns, covariance)
        if constraints is None:
            constraints = OptimizationConstraints()

        if self.method == "slsqp":
            return self._optimize_slsqp(mu, sigma, target_return, constraints, deadline)
        return self._optimize_gradient(mu, sigma, target_return, constraints, deadline)

    def efficient_frontier(self,
                           returns: Sequence[float],
                           covariance: Sequence[Sequence[float]],
                           risk_free_rate: float = FRONTIER_RISK_FREE_RATE,
                           points: int = FRONTIER_POINTS,
                           constraints: Optional[OptimizationConstraints] = None,
                           deadline: Optional[Deadline] = None) -> List[FrontierPoint]:
        """
        Optimized portfolios for evenly spaced targets in [min(returns), max(returns)]

        Both ends are included. Points come back in ascending target order.
        """
        if points < 2:
            raise ValueError(f"Efficient frontier needs at least 2 points, got {points}")

        mu, sigma = self._validate_inputs(returns, covariance)
        min_return = float(np.min(mu))
        max_return = float(np.max(mu))
        return_step = (max_return - min_return) / (points - 1)

        frontier = []
        for i in range(points):
            target_return = min_return + i * return_step

            weights = self.optimize(mu, sigma, target_return, constraints, deadline)
            metrics = self.portfolio_metrics(weights, mu, sigma)

            frontier.append(FrontierPoint(
                target_return=target_return,
                weights=weights.tolist(),
                expected_return=metrics.expected_return,
                risk=metrics.risk,
                sharpe_ratio=PerformanceMetrics.sharpe_ratio(
                    metrics.expected_return, metrics.risk, risk_free_rate
                )
            ))

        logger.info(f"Efficient frontier traced: {points} points, {len(mu)} assets, method={self.method}")
        return frontier

    def _optimize_gradient(self, mu: np.ndarray, sigma: np.ndarray, target_return: float,
                           constraints: OptimizationConstraints,
                           deadline: Optional[Deadline]) -> np.ndarray:
        """Projected gradient descent; gradient of the variance taken as Σw"""

        n_assets = len(mu)
        weights = np.full(n_assets, 1.0 / n_assets)

        for iteration in range(self.max_iterations):
            check_deadline(deadline)

            gradient = sigma @ weights
            weights = self._project(weights - self.learning_rate * gradient, constraints)

            if abs(weights @ mu - target_return) < self.tolerance:
                logger.debug(f"Target return {target_return:.6f} reached after {iteration + 1} iterations")
                break
        else:
            logger.debug(
                f"Target return {target_return:.6f} not reached in {self.max_iterations} iterations "
                f"(realised {weights @ mu:.6f})"
            )

        return weights

    def _optimize_slsqp(self, mu: np.ndarray, sigma: np.ndarray, target_return: float,
                        constraints: OptimizationConstraints,
                        deadline: Optional[Deadline]) -> np.ndarray:
        """Exact quadratic program through scipy SLSQP"""

        check_deadline(deadline)
        n_assets = len(mu)
        initial_weights = np.ones(n_assets) / n_assets

        scipy_constraints = [{'type': 'eq', 'fun': lambda w: w @ mu - target_return}]
        if constraints.sum_to_one:
            scipy_constraints.append({'type': 'eq', 'fun': lambda w: np.sum(w) - 1.0})

        bounds = None
        if constraints.non_negative:
            upper = 1.0 if constraints.sum_to_one else None
            bounds = [(0.0, upper) for _ in range(n_assets)]

        result = minimize(
            lambda w: w @ sigma @ w, initial_weights,
            jac=lambda w: 2.0 * sigma @ w,
            method='SLSQP', bounds=bounds, constraints=scipy_constraints,
            callback=lambda w: check_deadline(deadline),
            options={'ftol': 1e-12, 'maxiter': self.max_iterations, 'disp': False}
        )

        residual = max(abs(c['fun'](result.x)) for c in scipy_constraints)
        feasible = residual < 1e-8 and (not constraints.non_negative or np.all(result.x >= -1e-10))

        if not result.success and feasible:
            logger.debug(f"SLSQP stopped early ({result.message}) at a feasible point; accepting it")
        elif not result.success:
            logger.warning(
                f"SLSQP failed for target return {target_return:.6f} ({result.message}); "
                "falling back to gradient descent"
            )
            return self._optimize_gradient(mu, sigma, target_return, constraints, deadline)

        # Clear solver round-off (e.g. -1e-17) without moving off the target
        return self._project(np.array(result.x, dtype=float), constraints)

    @staticmethod
    def _project(weights: np.ndarray, constraints: OptimizationConstraints) -> np.ndarray:
        """
        Clamp negatives, then renormalize to sum to one; returns a new array

        A total within OPTIMIZER_MIN_WEIGHT_TOTAL of zero (everything clamped
        away, or longs and shorts cancelling out) resets to equal weights.
        """

        if constraints.non_negative:
            weights = np.maximum(weights, 0.0)

        if constraints.sum_to_one:
            total = np.sum(weights)
            if abs(total) < OPTIMIZER_MIN_WEIGHT_TOTAL:
                logger.warning(f"Weights sum to {total:.3g} after projection; resetting to equal weights")
                return np.full(len(weights), 1.0 / len(weights))
            weights = weights / total

        return weights

    @staticmethod
    def _validate_inputs(returns: Sequence[float],
                         covariance: Sequence[Sequence[float]]) -> Tuple[np.ndarray, np.ndarray]:
        """Check alignment of returns and covariance"""

        mu = np.asarray(returns, dtype=float)
        sigma = np.asarray(covariance, dtype=float)

        if mu.ndim != 1 or len(mu) == 0:
            raise ValueError("Returns must be a non-empty one-dimensional sequence")
        if sigma.shape != (len(mu), len(mu)):
            raise ValueError(
                f"Covariance matrix shape {sigma.shape} doesn't match {len(mu)} assets"
            )

        return mu, sigma

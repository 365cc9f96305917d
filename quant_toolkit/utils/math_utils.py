import math
import numpy as np
from typing import Optional, Sequence, Tuple, Union
from ..config import ASSUMED_CORRELATION

# Abramowitz & Stegun 7.1.26 rational approximation of erf, |error| <= 1.5e-7
_AS_A1 = 0.254829592
_AS_A2 = -0.284496736
_AS_A3 = 1.421413741
_AS_A4 = -1.453152027
_AS_A5 = 1.061405429
_AS_P = 0.3275911

MACHINE_EPSILON = np.finfo(float).eps

def normal_cdf(x: float) -> float:
    """
    Standard normal cumulative distribution function

    Uses the Abramowitz-Stegun 7.1.26 approximation rather than an exact erf,
    so values agree with the exact CDF to about 1e-7 only. N(x) + N(-x) == 1
    holds exactly because the approximation is applied to |x| with the sign
    restored afterwards.
    """
    sign = -1.0 if x < 0 else 1.0
    z = abs(x) / math.sqrt(2.0)

    t = 1.0 / (1.0 + _AS_P * z)
    poly = ((((_AS_A5 * t + _AS_A4) * t + _AS_A3) * t + _AS_A2) * t + _AS_A1) * t
    erf = 1.0 - poly * math.exp(-z * z)

    return 0.5 * (1.0 + sign * erf)

def normal_pdf(x: float) -> float:
    """Standard normal probability density (exact Gaussian formula)"""
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)

def box_muller(rng: np.random.Generator,
               size: Optional[Union[int, Tuple[int, ...]]] = None) -> Union[float, np.ndarray]:
    """
    Standard normal variates via the Box-Muller transform

    Two independent uniform(0, 1) draws per variate. First draws at or below
    machine epsilon are redrawn so that log(u1) stays finite.
    """
    shape = 1 if size is None else size

    u1 = rng.random(shape)
    rejected = u1 <= MACHINE_EPSILON
    while np.any(rejected):
        u1[rejected] = rng.random(int(np.count_nonzero(rejected)))
        rejected = u1 <= MACHINE_EPSILON
    u2 = rng.random(shape)

    z = np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)

    if size is None:
        return float(z[0])
    return z

def covariance_from_volatilities(volatilities: Sequence[float],
                                 correlation: float = ASSUMED_CORRELATION) -> np.ndarray:
    """
    Covariance matrix from volatilities under a single assumed correlation

    Diagonal = sigma_i^2, off-diagonal = sigma_i * sigma_j * correlation
    """
    vols = np.asarray(volatilities, dtype=float)
    covariance = np.outer(vols, vols) * correlation
    np.fill_diagonal(covariance, vols ** 2)
    return covariance

def as_rng(rng: Optional[np.random.Generator] = None,
           seed: Optional[int] = None) -> np.random.Generator:
    """Use the given generator, or create one from seed (fresh entropy if None)"""
    if rng is not None:
        return rng
    return np.random.default_rng(seed)

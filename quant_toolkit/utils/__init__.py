
"""
Mathematical utilities and helper functions
"""

from .math_utils import (
    normal_cdf,
    normal_pdf,
    box_muller,
    covariance_from_volatilities,
    as_rng,
    MACHINE_EPSILON
)
from .deadline import Deadline, DeadlineExceeded, OperationCancelled, check_deadline

__all__ = [
    'normal_cdf',
    'normal_pdf',
    'box_muller',
    'covariance_from_volatilities',
    'as_rng',
    'MACHINE_EPSILON',
    'Deadline',
    'DeadlineExceeded',
    'OperationCancelled',
    'check_deadline'
]

"""
Sample quantile estimation.
"""

from .estimator import (
    EmptySampleError,
    quantile,
    quantiles
)

__all__ = [
    'EmptySampleError',
    'quantile',
    'quantiles'
]

"""
Sample quantiles using Definition 8 of Hyndman and Fan.

See "Sample Quantiles in Statistical Packages" (Hyndman & Fan, 1996) and the
R documentation for ``quantile(..., type = 8)``, which summarizes that paper.
"""

import math
import numpy as np
from typing import Iterable, List, Sequence


class EmptySampleError(ValueError):
    """Raised when a quantile is requested from an empty sample."""


def _as_sample(sorted_sample: Sequence[float]) -> np.ndarray:
    xs = np.asarray(sorted_sample, dtype=np.float64)
    if xs.ndim != 1:
        raise ValueError(f"Sample must be one-dimensional, got shape {xs.shape}")
    if xs.size == 0:
        raise EmptySampleError("quantile() sample may not be empty")
    return xs


def _quantile_sorted(p: float, xs: np.ndarray) -> float:
    n = xs.size
    if n == 1:
        return float(xs[0])

    # parameters for "Definition 8"
    m = (p + 1) / 3
    h = p * n + m
    if math.isnan(h):
        return float('nan')

    # h is a 1-based position; outside [1, n) it clamps to the ends like R does
    if h < 1:
        return float(xs[0])
    if h >= n:
        return float(xs[-1])

    j = int(math.floor(h))
    gamma = h - j

    lo = xs[j - 1]
    hi = xs[j]
    if lo == hi:
        return float(lo)
    return float((1 - gamma) * lo + gamma * hi)


def quantile(p: float, sorted_sample: Sequence[float]) -> float:
    """
    Quantile with probability p of an ascending, non-empty sample.

    The sample is not re-sorted. A single-element sample returns that
    element for any p.

    Args:
        p: Probability, normally in [0, 1]
        sorted_sample: Values sorted from smallest to largest

    Returns:
        Interpolated quantile value

    Raises:
        EmptySampleError: If the sample is empty
    """
    return _quantile_sorted(p, _as_sample(sorted_sample))


def quantiles(probabilities: Iterable[float],
              sorted_sample: Sequence[float]) -> List[float]:
    """
    Quantiles for several probabilities of the same sorted sample.
    
    Args:
        probabilities: Probabilities to evaluate
        sorted_sample: Values sorted from smallest to largest
    
    Returns:
        List of quantile values in the order of probabilities
    """
    xs = _as_sample(sorted_sample)
    return [_quantile_sorted(p, xs) for p in probabilities]

"""
Tukey fence outlier detection.
"""

import logging
import numpy as np
import pandas as pd
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from quantiles.estimator import quantile

logger = logging.getLogger(__name__)

# Traditional multipliers; neither has a statistical basis
DEFAULT_MULTIPLIER = 1.5
EXTREME_MULTIPLIER = 3.0


class Fences(NamedTuple):
    low: float
    high: float
    lower_quartile: float
    upper_quartile: float

    @property
    def iqr(self) -> float:
        return self.upper_quartile - self.lower_quartile

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


class OutlierResult(NamedTuple):
    outliers: List[float]
    low_fence: float
    high_fence: float


def tukey_fences(multiplier: float, sorted_sample: Sequence[float]) -> Fences:
    """
    Compute Tukey fences for a sorted sample.

    Args:
        multiplier: IQR multiplier (1.5 for outliers, 3.0 for extreme outliers)
        sorted_sample: Non-empty values sorted from smallest to largest

    Returns:
        Fences with the quartiles they were derived from
    """
    lower_quartile = quantile(0.25, sorted_sample)
    upper_quartile = quantile(0.75, sorted_sample)
    iqr = upper_quartile - lower_quartile

    return Fences(
        low=lower_quartile - multiplier * iqr,
        high=upper_quartile + multiplier * iqr,
        lower_quartile=lower_quartile,
        upper_quartile=upper_quartile
    )


def tukey_outliers(multiplier: float, sample: Sequence[float]) -> OutlierResult:
    """
    Locate outliers in a sample using Tukey fences.

    The sample is sorted into a private copy, so the caller's sequence keeps
    its order. Outliers are returned in ascending order together with the
    low and high fences used to find them, even when no outliers exist.

    Args:
        multiplier: IQR multiplier; any value is accepted
        sample: Non-empty sequence of values in any order

    Returns:
        OutlierResult of (outliers, low_fence, high_fence)

    Raises:
        EmptySampleError: If the sample is empty
    """
    xs = np.sort(np.asarray(sample, dtype=np.float64))
    fences = tukey_fences(multiplier, xs)

    outliers = [float(x) for x in xs if x < fences.low or x > fences.high]

    logger.debug(f"Fences [{fences.low:.4g}, {fences.high:.4g}] flagged "
                 f"{len(outliers)} of {xs.size} values")

    return OutlierResult(outliers, fences.low, fences.high)


def iqr_outlier_detection(data: np.ndarray,
                          iqr_multiplier: float = DEFAULT_MULTIPLIER) -> Tuple[np.ndarray, float, float]:
    """
    IQR-based outlier detection using Tukey's method.

    Args:
        data: Array of values
        iqr_multiplier: Multiplier for IQR to determine outlier bounds

    Returns:
        Tuple of (is_outlier boolean array in input order, lower_bound, upper_bound)
    """
    values = np.asarray(data, dtype=np.float64)
    fences = tukey_fences(iqr_multiplier, np.sort(values))

    is_outlier = (values < fences.low) | (values > fences.high)

    return is_outlier, fences.low, fences.high


def _stratum_key(stratum) -> str:
    return '_'.join(map(str, stratum)) if isinstance(stratum, tuple) else str(stratum)


def detect_outliers_iqr(df: pd.DataFrame,
                        metric_cols: List[str],
                        stratum_cols: Optional[List[str]] = None,
                        iqr_multiplier: float = DEFAULT_MULTIPLIER,
                        min_samples: int = 4) -> Tuple[pd.DataFrame, Dict]:
    """
    Detect outliers using Tukey fences per column, optionally per stratum.

    Args:
        df: DataFrame with samples
        metric_cols: List of metric columns to check
        stratum_cols: Columns to group by, or None to treat df as one group
        iqr_multiplier: IQR multiplier for bounds
        min_samples: Minimum non-null values needed to compute fences

    Returns:
        Tuple of (outlier flags DataFrame, bounds dictionary)
    """
    outlier_flags = pd.DataFrame(index=df.index)
    bounds = {}

    available_metrics = []
    for metric in metric_cols:
        if metric not in df.columns:
            logger.warning(f"Metric column '{metric}' not found, skipping")
            continue
        available_metrics.append(metric)
        # NaNs and undersized groups stay False
        outlier_flags[f'{metric}_iqr_outlier'] = False

    if stratum_cols:
        groups = df.groupby(stratum_cols)
    else:
        groups = [('all', df)]

    for stratum, group in groups:
        stratum_key = _stratum_key(stratum)
        bounds[stratum_key] = {}

        for metric in available_metrics:
            col_name = f'{metric}_iqr_outlier'

            valid_data = group[metric].dropna()
            if len(valid_data) < min_samples:
                logger.warning(f"Stratum {stratum_key}: only {len(valid_data)} values "
                               f"for {metric}, need {min_samples}")
                continue

            sorted_values = np.sort(valid_data.to_numpy(dtype=np.float64))
            fences = tukey_fences(iqr_multiplier, sorted_values)

            is_outlier = (valid_data < fences.low) | (valid_data > fences.high)
            outlier_flags.loc[valid_data.index, col_name] = is_outlier

            bounds[stratum_key][metric] = {
                'lower': float(fences.low),
                'upper': float(fences.high),
                'q1': float(fences.lower_quartile),
                'q3': float(fences.upper_quartile),
                'median': quantile(0.5, sorted_values)
            }

            logger.debug(f"Stratum {stratum_key}: {int(is_outlier.sum())} {metric} outliers")

    return outlier_flags, bounds


def detect_outliers_from_config(df: pd.DataFrame,
                                metric_cols: List[str],
                                config: Dict) -> Tuple[pd.DataFrame, Dict]:
    """Run detect_outliers_iqr with settings from a loaded configuration."""
    outlier_config = config.get('outliers', {})
    stratum_cols = config.get('stratification', {}).get('primary') or None

    return detect_outliers_iqr(
        df,
        metric_cols,
        stratum_cols=stratum_cols,
        iqr_multiplier=outlier_config.get('iqr_multiplier', DEFAULT_MULTIPLIER),
        min_samples=outlier_config.get('min_samples', 4)
    )

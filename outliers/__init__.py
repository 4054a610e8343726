"""
Outlier detection using Tukey fences.
"""

from .statistical import (
    DEFAULT_MULTIPLIER,
    EXTREME_MULTIPLIER,
    Fences,
    OutlierResult,
    tukey_fences,
    tukey_outliers,
    iqr_outlier_detection,
    detect_outliers_iqr,
    detect_outliers_from_config
)

__all__ = [
    'DEFAULT_MULTIPLIER',
    'EXTREME_MULTIPLIER',
    'Fences',
    'OutlierResult',
    'tukey_fences',
    'tukey_outliers',
    'iqr_outlier_detection',
    'detect_outliers_iqr',
    'detect_outliers_from_config'
]

"""
Configuration and logging utilities.
"""

from .config import (
    DEFAULT_CONFIG,
    load_config,
    setup_logging,
    setup_logging_from_config
)

__all__ = [
    'DEFAULT_CONFIG',
    'load_config',
    'setup_logging',
    'setup_logging_from_config'
]

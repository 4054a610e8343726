"""
Configuration loading and logging setup.
"""

import copy
import logging
import yaml
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict = {
    'outliers': {
        'iqr_multiplier': 1.5,
        'min_samples': 4
    },
    'stratification': {
        'primary': []
    },
    'logging': {
        'level': 'INFO',
        'file': None
    }
}


def _merge(base: Dict, override: Dict) -> Dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict:
    """
    Load configuration from YAML, merged over the built-in defaults.
    
    Args:
        config_path: Path to a YAML file, or None for defaults only
    
    Returns:
        Configuration dictionary
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid configuration in {config_path}: expected a mapping")

    logger.debug(f"Loaded configuration from {config_path}")
    return _merge(DEFAULT_CONFIG, raw)


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def setup_logging_from_config(config: Dict) -> None:
    """Configure logging from the 'logging' section of a loaded configuration."""
    log_config = config.get('logging', {})
    setup_logging(log_config.get('level', 'INFO'), log_config.get('file'))

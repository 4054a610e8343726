from __future__ import annotations

import logging
from pathlib import Path

import pytest

from utils.config import DEFAULT_CONFIG, load_config, setup_logging, setup_logging_from_config

REPO_CONFIG = Path(__file__).resolve().parent.parent / 'config.yaml'


def test_defaults_are_copied() -> None:
    config = load_config()
    assert config == DEFAULT_CONFIG
    config['outliers']['iqr_multiplier'] = 99.0
    assert DEFAULT_CONFIG['outliers']['iqr_multiplier'] == 1.5


def test_repository_config_matches_defaults() -> None:
    assert load_config(REPO_CONFIG) == DEFAULT_CONFIG


def test_partial_override_is_merged(tmp_path: Path) -> None:
    path = tmp_path / 'config.yaml'
    path.write_text("outliers:\n  iqr_multiplier: 3.0\nlogging:\n  level: DEBUG\n")

    config = load_config(path)
    assert config['outliers']['iqr_multiplier'] == 3.0
    assert config['outliers']['min_samples'] == 4
    assert config['logging'] == {'level': 'DEBUG', 'file': None}


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / 'empty.yaml'
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


def test_non_mapping_raises(tmp_path: Path) -> None:
    path = tmp_path / 'list.yaml'
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'nope.yaml')


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / 'tukey.log'
    setup_logging('debug', str(log_file))
    try:
        logging.getLogger('outliers.statistical').debug('fences computed')
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert 'fences computed' in log_file.read_text()
        assert logging.getLogger().level == logging.DEBUG
    finally:
        for handler in list(logging.getLogger().handlers):
            handler.close()
            logging.getLogger().removeHandler(handler)


def test_setup_logging_from_config() -> None:
    config = load_config()
    config['logging']['level'] = 'WARNING'
    setup_logging_from_config(config)
    try:
        assert logging.getLogger().level == logging.WARNING
    finally:
        for handler in list(logging.getLogger().handlers):
            handler.close()
            logging.getLogger().removeHandler(handler)

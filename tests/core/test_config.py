"""Unit tests for src/core/config.py"""

import logging
from unittest.mock import patch

from src.core import config


def test_defaults() -> None:
    assert config.DATABASE_URL.startswith("sqlite")
    assert config.LOG_LEVEL in logging.getLevelNamesMapping()


def test_configure_logging() -> None:
    with patch("src.core.config.logging.basicConfig") as basic_config:
        config.configure_logging("DEBUG")
    basic_config.assert_called_once_with(level="DEBUG", format=config.LOG_FORMAT)

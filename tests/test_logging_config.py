"""
test_logging_config.py
~~~~~~~~~~~~~~~~~~~~~~

Unit tests for environment-driven logging setup.
"""

import logging
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from feedforward.logging_config import PACKAGE_LOGGER, configure_logging
from feedforward.vector import Vector


@pytest.fixture
def package_logger():
    """Restore the package logger level after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    logger.setLevel(level)


@pytest.mark.unit
class TestConfigureLogging:

    def test_default_level_is_info(self, monkeypatch, package_logger):
        """Test that LOG_LEVEL defaults to INFO."""
        monkeypatch.delenv('LOG_LEVEL', raising=False)

        assert configure_logging() == logging.INFO
        assert package_logger.level == logging.INFO

    def test_level_from_environment(self, monkeypatch, package_logger):
        """Test that LOG_LEVEL is read case-insensitively."""
        monkeypatch.setenv('LOG_LEVEL', 'debug')

        assert configure_logging() == logging.DEBUG
        assert package_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch, package_logger):
        monkeypatch.setenv('LOG_LEVEL', 'VERBOSE')

        assert configure_logging() == logging.INFO

    def test_non_level_attribute_falls_back_to_info(self, monkeypatch, package_logger):
        monkeypatch.setenv('LOG_LEVEL', 'basic_format')

        assert configure_logging() == logging.INFO

    def test_diagnostics_reach_package_logger(
        self,
        monkeypatch,
        package_logger,
        caplog
    ):
        """Test that container diagnostics propagate through the package logger."""
        monkeypatch.setenv('LOG_LEVEL', 'ERROR')
        configure_logging()

        Vector(2).get(5)

        assert any(
            record.name == 'feedforward.vector'
            and record.levelno == logging.ERROR
            for record in caplog.records
        )

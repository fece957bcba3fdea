"""Shared pytest fixtures."""

import logging

import pytest

from calendar_duration.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_logging():
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger(LOGGER_NAME)
    package_level = package_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)

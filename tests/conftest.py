"""Shared test fixtures for straitjacket."""

import logging

import pytest

from straitjacket.core.config import Settings, configure, get_settings, reset_settings
from straitjacket.core.constants import LOGGER_NAME


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts from default settings and restores the previous ones."""
    previous = configure(Settings())
    yield get_settings()
    if previous is None:
        reset_settings()
    else:
        configure(previous)


@pytest.fixture
def restore_logger():
    """Undo setup_logging() side effects on the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class Counter:
    """External collaborator an action body mutates."""

    def __init__(self):
        self.value = 0

    def increment(self, by=1):
        self.value += by
        return self.value


@pytest.fixture
def counter():
    return Counter()

"""Unit test fixtures.

Provides:
- Settings cache isolation between tests
- Restoration of the library logger after logging tests
"""

import logging
from collections.abc import Iterator

import pytest

from fpkit.config import get_settings, get_settings_or_defaults
from fpkit.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings so environment changes take effect."""
    get_settings.cache_clear()
    get_settings_or_defaults.cache_clear()
    yield
    get_settings.cache_clear()
    get_settings_or_defaults.cache_clear()


@pytest.fixture
def library_logger() -> Iterator[logging.Logger]:
    """Library logger, restored to its original handlers and level afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)

"""Logging configuration.

The library logs under the ``fpkit`` logger and stays silent until the host
application configures logging, either on its own or through ``configure_logging``.

Usage:
    from fpkit.logging import configure_logging, get_logger

    configure_logging("DEBUG")
    logger = get_logger(__name__)
"""

import logging
import sys

from fpkit.config import get_settings

LOGGER_NAME = "fpkit"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

# Console handler installed by configure_logging, created on first use
_console_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the library logger.

    Args:
        level: Logging level name (defaults to ``Settings.log_level``)

    Returns:
        The configured ``fpkit`` logger
    """
    if level is None:
        level = get_settings().log_level

    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    global _console_handler
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    # Add our handler once; handlers attached by the host are left alone
    if _console_handler not in logger.handlers:
        logger.addHandler(_console_handler)
    _console_handler.setLevel(numeric_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)

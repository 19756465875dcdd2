"""Logging configuration and utilities."""

import sys
import logging
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import Config

LOGGER_NAME = 'safefunc'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(config: Optional['Config'] = None) -> logging.Logger:
    """Configure the safefunc logger.

    The library never calls this itself; applications opt in.

    Args:
        config: Configuration to use (read from the environment if omitted)

    Returns:
        Configured logger instance
    """
    if config is None:
        from ..config import Config
        config = Config.from_env()

    logger = logging.getLogger(LOGGER_NAME)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.setLevel(config.level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(config.level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setLevel(config.level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    logger.debug(f"Logging initialized at {config.log_level}")
    if config.log_file:
        logger.debug(f"Log file: {config.log_file}")

    return logger


def get_logger() -> logging.Logger:
    """Get the library logger.

    Returns:
        Logger instance
    """
    return logging.getLogger(LOGGER_NAME)

"""
Package-wide logger for ghcopier.
"""

import logging
import sys


LOGGER_NAME = "ghcopier"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str = LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """
    Create (or return) the package logger with a single stderr handler.

    Args:
        name: Logger name
        level: Initial logging level

    Returns:
        Configured logger instance
    """

    _logger = logging.getLogger(name)
    _logger.setLevel(level)

    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)

    return _logger


logger = setup_logger()


__all__ = ["logger", "setup_logger", "LOGGER_NAME"]

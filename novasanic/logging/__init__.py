"""
Logging Package
Structured logging with security features

Provides drop-in replacement for standard logging that uses
structured JSON logging with sensitive data filtering.
"""
from novasanic.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

# Logger names accepted without a dotted module path
ALLOWED_LOGGER_NAMES = ('application', 'routing', 'language')


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Uses structured logging automatically if the logger has been
    configured by LoggingServiceProvider. Falls back gracefully
    to standard logging if not yet initialized.

    Only allows logger names that are:
    - None (root logger)
    - One of ALLOWED_LOGGER_NAMES ('application', 'routing', 'language')
    - Module-based names (containing '.') like 'novasanic.routing.router'

    Example:
        from novasanic.logging import getLogger
        logger = getLogger(__name__)

        logger.info("Something happened")
        logger.warning("Warning message", extra={'uri': 'blog/show'})
    """
    # Allow Sanic's own loggers to bypass our restriction
    if name and name.startswith('sanic.'):
        return logging.getLogger(name)

    if name is not None and '.' not in name and name not in ALLOWED_LOGGER_NAMES:
        # Force arbitrary names to use root logger
        name = None

    return logging.getLogger(name)

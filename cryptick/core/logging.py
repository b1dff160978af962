"""
Unified Logging Configuration

All library modules log through the "cryptick" logger hierarchy instead of
using print() statements.

Usage:
    from cryptick.core.logging import logger, get_logger

    logger.info("General informational messages")
    log = get_logger(__name__)
    log.debug("Detailed debugging information")

Configuration:
    Log level is controlled by the LOG_LEVEL setting in .env file
    (defaults to INFO).
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "cryptick"


def setup_logging(
    log_level: str = "INFO",
    log_format: Optional[str] = None,
    include_timestamp: bool = True,
    include_module: bool = True
) -> logging.Logger:
    """
    Configure and return the library logger.

    Only the "cryptick" logger is touched; the root logger of the host
    application is left alone.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string (uses default if None)
        include_timestamp: Include timestamp in log messages
        include_module: Include module name in log messages

    Returns:
        logging.Logger: Configured logger instance

    Example:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.info("Fetching ticker")
        2024-01-01 12:00:00 [INFO] cryptick Fetching ticker
    """
    if log_format is None:
        format_parts = []

        if include_timestamp:
            format_parts.append("%(asctime)s")

        format_parts.append("[%(levelname)s]")

        if include_module:
            format_parts.append("%(name)s")

        format_parts.append("%(message)s")

        log_format = " ".join(format_parts)

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Replace our own handler on reconfiguration, keep any others
    for handler in list(logger.handlers):
        if getattr(handler, "_cryptick", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._cryptick = True
    logger.addHandler(handler)
    logger.propagate = False

    return logger


# ============================================
# Initialize Logger with Settings
# ============================================

try:
    from cryptick.core.config import settings
    log_level = settings.log_level
except ImportError:
    log_level = "INFO"

logger = setup_logging(log_level=log_level)


# ============================================
# Convenience Functions
# ============================================

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module or component.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        logging.Logger: Child of the "cryptick" logger

    Example:
        >>> get_logger("cryptick.core.ticker").name
        'cryptick.core.ticker'
        >>> get_logger("scratch").name
        'cryptick.scratch'
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def set_log_level(level: str) -> None:
    """
    Change the log level at runtime.

    Args:
        level: New log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


# ============================================
# Log Helper Functions
# ============================================

def log_api_request(exchange: str, method: str, url: str, pair: Optional[str] = None) -> None:
    """
    Log an API request with consistent formatting.

    Example:
        >>> log_api_request("btce", "GET", "https://btc-e.com/api/2/btc_usd/ticker", "btc_usd")
        [DEBUG] API Request: btce GET https://btc-e.com/api/2/btc_usd/ticker | Pair: btc_usd
    """
    if pair:
        logger.debug(f"API Request: {exchange} {method} {url} | Pair: {pair}")
    else:
        logger.debug(f"API Request: {exchange} {method} {url}")


def log_api_response(exchange: str, url: str, status: Optional[int], response_time: Optional[float] = None) -> None:
    """
    Log an API response with status and timing information.

    Example:
        >>> log_api_response("btce", "https://btc-e.com/api/2/btc_usd/ticker", 200, 0.342)
        [DEBUG] API Response: btce https://btc-e.com/api/2/btc_usd/ticker | Status: 200 | Time: 0.342s
    """
    time_str = f" | Time: {response_time:.3f}s" if response_time is not None else ""
    logger.debug(f"API Response: {exchange} {url} | Status: {status}{time_str}")

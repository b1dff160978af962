"""
Configuration Management Module

This module handles loading, validating, and providing access to the library
configuration from environment variables (.env file).

Uses Pydantic Settings for automatic validation and type conversion.

Key Features:
- Loads configuration from .env file
- Seeds the process-wide default request options (headers, TLS, keep-alive)
- Holds the live default options in a copy-on-write store

Usage:
    from cryptick.core.config import settings, default_options

    print(settings.user_agent)
    default_options.update(user_agent="my-bot 1.0")
"""

import threading
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cryptick.core.schemas import DefaultOptions


class Settings(BaseSettings):
    """
    Library Settings

    Values are automatically loaded from environment variables or .env file.

    Attributes:
        log_level: Logging level for the "cryptick" logger
        content_type: Default Content-Type request header
        user_agent: Default User-Agent request header
        tls_insecure: Skip TLS certificate verification
        keepalive_ms: Keep-alive hint for pooled connections (milliseconds)
    """

    # ============================================
    # Logging
    # ============================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # ============================================
    # Default Request Options
    # ============================================

    content_type: str = Field(
        default="application/json",
        description="Content-Type header sent with every request"
    )

    user_agent: str = Field(
        default="cryptick 0.1.3",
        description="User-Agent header sent with every request"
    )

    tls_insecure: bool = Field(
        default=False,
        description="Disable TLS certificate verification"
    )

    keepalive_ms: int = Field(
        default=1000,
        description="Keep-alive hint for idle pooled connections, in milliseconds"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

    def get_default_options(self) -> DefaultOptions:
        """
        Build the initial default request options from these settings.

        Returns:
            DefaultOptions seeded with header, TLS and keep-alive values
        """
        return DefaultOptions(
            content_type=self.content_type,
            user_agent=self.user_agent,
            insecure=self.tls_insecure,
            keepalive=self.keepalive_ms,
        )


# ============================================
# Global Settings Instance
# ============================================

settings = Settings()


# ============================================
# Default Options Store
# ============================================

class DefaultOptionsStore:
    """
    Read-mostly holder for the process-wide DefaultOptions.

    Readers get the current immutable snapshot without locking. Writers build
    a new snapshot under a lock and swap it in, so a request that already
    read the options never sees a partial update.

    Example:
        >>> store = DefaultOptionsStore()
        >>> store.update(user_agent="my-bot 1.0")
        >>> store.get().user_agent
        'my-bot 1.0'
    """

    def __init__(self, initial: Optional[DefaultOptions] = None):
        self._lock = threading.Lock()
        self._options = initial if initial is not None else settings.get_default_options()

    def get(self) -> DefaultOptions:
        """Return the current options snapshot."""
        return self._options

    def update(self, **changes: Any) -> DefaultOptions:
        """
        Replace some default options.

        Args:
            **changes: Option names and their new values

        Returns:
            The new options snapshot

        Raises:
            ValueError: If an option name is unknown
        """
        unknown = set(changes) - set(DefaultOptions.model_fields)
        if unknown:
            raise ValueError(
                f"Unknown default option(s): {', '.join(sorted(unknown))}. "
                f"Valid options: {', '.join(DefaultOptions.model_fields)}"
            )

        with self._lock:
            merged = self._options.model_dump()
            merged.update(changes)
            self._options = DefaultOptions(**merged)
            return self._options

    def reset(self) -> DefaultOptions:
        """Restore the options derived from settings."""
        with self._lock:
            self._options = settings.get_default_options()
            return self._options


default_options = DefaultOptionsStore()


# ============================================
# Configuration Validation
# ============================================

def validate_configuration() -> None:
    """
    Validate configuration settings.

    Raises:
        ValueError: If a setting is invalid
    """
    # Imported here: logging.py reads settings at import time
    from cryptick.core.logging import logger

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if settings.log_level.upper() not in valid_log_levels:
        raise ValueError(
            f"Invalid LOG_LEVEL: '{settings.log_level}'. "
            f"Must be one of: {', '.join(valid_log_levels)}"
        )

    if settings.keepalive_ms < 0:
        raise ValueError(f"Invalid KEEPALIVE_MS: {settings.keepalive_ms}. Must be >= 0")

    logger.info("Configuration validated successfully")
    logger.info(f"User-Agent: {settings.user_agent}")
    logger.info(f"TLS verification: {'disabled' if settings.tls_insecure else 'enabled'}")
    logger.info(f"Log level: {settings.log_level.upper()}")

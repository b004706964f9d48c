"""Cache configuration module."""

from .cache_config import DEFAULT_CHECK_PERIOD, CacheConfig
from .settings import CacheSettings
from .logging_config import (
    LogFormat,
    LogLevel,
    LoggingConfig,
    setup_logging,
)

__all__ = [
    "DEFAULT_CHECK_PERIOD",
    "CacheConfig",
    "CacheSettings",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "setup_logging",
]

"""Logging configuration for applications embedding ant-cache.

The library only creates module loggers; it never installs handlers on
import. Applications that want the cache's log output formatted
consistently call ``setup_logging()`` once at startup.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Logging configuration manager for the ``ant_cache`` logger tree."""

    LOGGER_NAME = "ant_cache"

    @classmethod
    def build(cls, level: Optional[str] = None, log_format: Optional[str] = None) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping.

        Args:
            level: Log level, defaults to ``LOG_LEVEL`` or INFO
            log_format: simple, detailed or json, defaults to ``LOG_FORMAT`` or simple
        """
        effective_level = LogLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper()).value
        effective_format = LogFormat((log_format or os.getenv("LOG_FORMAT", "simple")).lower())

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMAT_STRINGS[effective_format],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                cls.LOGGER_NAME: {
                    "level": effective_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    @classmethod
    def configure(cls, level: Optional[str] = None, log_format: Optional[str] = None) -> None:
        """Apply logging configuration for the ``ant_cache`` loggers."""
        config = cls.build(level=level, log_format=log_format)
        logging.config.dictConfig(config)

        logger = logging.getLogger(__name__)
        logger.debug(
            "Logging configured: level=%s, format=%s",
            config["loggers"][cls.LOGGER_NAME]["level"],
            config["formatters"]["default"]["format"],
        )

    @classmethod
    def set_level(cls, level: str) -> None:
        """Change the level of the ``ant_cache`` logger tree."""
        logging.getLogger(cls.LOGGER_NAME).setLevel(LogLevel(level.upper()).value)


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Setup logging configuration from arguments or environment variables.

    Call once at application startup.
    """
    LoggingConfig.configure(level=level, log_format=log_format)

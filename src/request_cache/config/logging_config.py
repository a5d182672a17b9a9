"""Logging configuration for request-cache.

Provides environment-driven logging setup for applications embedding the
request cache, with control over verbosity and output format.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


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


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level, WARNING for unknown modes."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Logging configuration manager."""

    PACKAGE_LOGGER = "request_cache"

    @classmethod
    def build(cls) -> Dict[str, Any]:
        """Build a dictConfig mapping from environment variables.

        ``LOG_LEVEL`` wins over ``LOG_VERBOSITY`` when both are set.
        """
        log_level = os.getenv("LOG_LEVEL")
        log_verbosity = os.getenv("LOG_VERBOSITY", LogVerbosity.NORMAL.value)
        log_format = os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value).lower()

        if log_level and log_level.upper() in LogLevel.__members__:
            effective_log_level = log_level.upper()
        else:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)

        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                cls.PACKAGE_LOGGER: {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        logging_config = cls.build()
        logging.config.dictConfig(logging_config)

        logger = logging.getLogger(__name__)
        level = logging_config["loggers"][cls.PACKAGE_LOGGER]["level"]
        logger.debug(f"Logging configured: level={level}")

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        return logging.getLogger(name)

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logger = logging.getLogger(module_name)
        logger.setLevel(getattr(logging, level.upper()))

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        cls.set_module_level(module_name, "CRITICAL")


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Call once at application startup.
    """
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    return LoggingConfig.get_logger(name)

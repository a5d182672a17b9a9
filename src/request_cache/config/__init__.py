"""Configuration module for request-cache."""

from .logging_config import (
    LogFormat,
    LogLevel,
    LoggingConfig,
    LogVerbosity,
    get_logger,
    setup_logging,
)

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "LogVerbosity",
    "get_logger",
    "setup_logging",
]

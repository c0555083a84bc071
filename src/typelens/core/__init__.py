"""Core module exports."""

from typelens.core.errors import ConfigError, ErrorCode, TypeLensError
from typelens.core.logging import PACKAGE_LOGGER, configure_logging, get_logger

__all__ = [
    # Errors
    "TypeLensError",
    "ConfigError",
    "ErrorCode",
    # Logging
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
]

"""Config module exports."""

from typelens.config.loader import TypeLensSettings, load_config
from typelens.config.models import (
    LoggingConfig,
    LogOutputConfig,
    ReflectionConfig,
    TypeLensConfig,
)

__all__ = [
    "load_config",
    "TypeLensConfig",
    "TypeLensSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "ReflectionConfig",
]

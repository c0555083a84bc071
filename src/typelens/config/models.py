"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TYPELENS__SECTION__KEY)
3. Explicit YAML file passed to load_config()
4. Global YAML (~/.config/typelens/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TYPELENS__<SECTION>__<KEY>=<VALUE>

Examples:
    TYPELENS__LOGGING__LEVEL=DEBUG
    TYPELENS__REFLECTION__ALLOW_PRIVATE_ACCESS=false
    TYPELENS__REFLECTION__CACHE_ENABLED=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from typelens.config.constants import (
    META_PROPERTY_NAME,
    RESERVED_PREFIXES,
    SERIAL_VERSION_NAME,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TYPELENS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every descriptor build.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ReflectionConfig(BaseModel):
    """Descriptor construction settings.

    Env vars:
        TYPELENS__REFLECTION__ALLOW_PRIVATE_ACCESS: Relax visibility of _private members
        TYPELENS__REFLECTION__CACHE_ENABLED: Memoize descriptors per type
    """

    allow_private_access: bool = Field(
        default=True,
        description="Allow underscore-prefixed members to be used as accessors. "
        "When false, private fields and constructors are skipped.",
    )
    cache_enabled: bool = Field(
        default=True,
        description="Cache one descriptor per type for the life of the factory.",
    )
    reserved_prefixes: list[str] = Field(
        default_factory=lambda: list(RESERVED_PREFIXES),
        description="Property names starting with any of these are never registered.",
    )
    excluded_names: list[str] = Field(
        default_factory=lambda: [SERIAL_VERSION_NAME, META_PROPERTY_NAME],
        description="Property names that are never registered.",
    )

    @field_validator("reserved_prefixes")
    @classmethod
    def validate_prefixes(cls, v: list[str]) -> list[str]:
        if any(not prefix for prefix in v):
            raise ValueError("Reserved prefixes must be non-empty strings")
        return v


class TypeLensConfig(BaseModel):
    """Root configuration for typelens.

    All settings can be configured via:
    1. Environment variables: TYPELENS__SECTION__KEY
    2. YAML config files (explicit or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    reflection: ReflectionConfig = Field(default_factory=ReflectionConfig)

"""Package logging.

Every typelens module logs through ``get_logger(__name__)``: a structlog
logger over a stdlib logger in the ``typelens`` namespace, filtered by the
stdlib level before any processor runs. The global structlog configuration
and the root logger are never touched, so importing typelens does not change
how the host application logs.

Until ``configure_logging`` runs, records propagate to the root logger and
the host's handlers decide what is shown. ``configure_logging`` installs
one handler per ``LoggingConfig`` output on the ``typelens`` logger and
stops propagation.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from typelens.config.models import LoggingConfig, LogOutputConfig

PACKAGE_LOGGER = "typelens"

# Also applied to plain stdlib records logged under the package namespace
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
]


def get_logger(name: str = PACKAGE_LOGGER) -> Any:
    """structlog logger bound to ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Route the package logger to the outputs in config.

    Handlers from an earlier call are closed and replaced.

    Returns:
        The configured ``typelens`` stdlib logger.
    """
    from typelens.config.models import LoggingConfig

    config = config or LoggingConfig()
    levels = logging.getLevelNamesMapping()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()
    package_logger.setLevel(levels[config.level])
    package_logger.propagate = False

    for output in config.outputs:
        handler = _create_handler(output.destination)
        handler.setLevel(levels[output.level or config.level])
        handler.setFormatter(_create_formatter(output))
        package_logger.addHandler(handler)
    return package_logger


def _create_handler(destination: str) -> logging.Handler:
    """Create handler for stderr, stdout, or file path."""
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def _create_formatter(output: LogOutputConfig) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = {"stderr": sys.stderr, "stdout": sys.stdout}.get(output.destination)
        renderer = structlog.dev.ConsoleRenderer(
            colors=stream is not None and stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_PRE_CHAIN)

"""Logging configuration.

Modules log through the standard library (``logging.getLogger(__name__)``);
this installs a structlog formatter on the root handler so records are
rendered as JSON lines or as console output depending on settings.
"""

import logging
import sys

import structlog

from src.config.settings import settings


def configure_logging(*, log_level: str | None = None, log_format: str | None = None) -> None:
    """Configure the root logger with a structlog renderer.

    Args:
        log_level: Level name, defaults to ``settings.log_level``
        log_format: ``"json"`` or ``"console"``, defaults to ``settings.log_format``

    """
    level = (log_level or settings.log_level).upper()
    fmt = (log_format or settings.log_format).lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if fmt == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

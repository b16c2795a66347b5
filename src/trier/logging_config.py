"""Structured logging configuration using structlog.

trier logs through ``structlog.get_logger``; applications that already
configure structlog need nothing from this module. Standalone users and
scripts can call :func:`configure_logging` to get JSON output in production
and pretty console output in development.
"""

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import EventDict, WrappedLogger

from trier.config import settings


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add library context to all log events."""
    event_dict["app"] = "trier"
    return event_dict


def configure_logging(
    log_level: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            defaults to settings.LOG_LEVEL
        environment: Environment name (development, production),
            defaults to settings.ENVIRONMENT
        stream: Output stream (defaults to stdout)

    In production mode:
        - JSON output for machine parsing
        - ISO timestamps
        - Exception info included

    In development mode:
        - Pretty console output
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    if environment is None:
        environment = settings.ENVIRONMENT

    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    is_production = environment.lower() == "production"

    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level_int)

    root_logger = logging.getLogger()
    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level_int)

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )

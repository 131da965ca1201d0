"""
Structured logging configuration using structlog.

Supports both development (colored console) and production (JSON) output.
When arguments are omitted, the output format and level come from settings
(JSON_LOGS / LOG_LEVEL).

Usage:
    from core.logging import configure_logging, get_logger

    # Configure once at startup
    configure_logging()                 # From settings
    configure_logging(json_logs=True)   # Force JSON

    logger = get_logger(__name__)
    logger.info("Catalog loaded", brands=12, templates=340)
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor

from config.settings import get_settings


def configure_logging(
    json_logs: Optional[bool] = None,
    log_level: Optional[str] = None,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        json_logs: If True, output JSON format. If False, colored console
                   format. None defers to settings.json_logs.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   None defers to settings.log_level.
        include_timestamp: Whether to include timestamp in logs
    """
    if json_logs is None or log_level is None:
        settings = get_settings()
        if json_logs is None:
            json_logs = settings.json_logs
        if log_level is None:
            log_level = settings.log_level

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ))

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True so a second call (e.g. from a script after tests) takes effect
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
        force=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__). If None, returns root logger.

    Returns:
        A structlog BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """
    Bind context variables to all subsequent logs in the current context.

    Usage:
        bind_context(gender="female", style="bitmoji")
        logger.info("Picking outfit")  # Will include gender and style
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """
    Unbind specific context variables.

    Args:
        *keys: Keys to unbind
    """
    structlog.contextvars.unbind_contextvars(*keys)


class LoggerMixin:
    """
    Mixin class that provides a logger property named after the class.

    Usage:
        class AvatarCatalog(LoggerMixin):
            def load(self):
                self.logger.info("Loading")
    """

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(self.__class__.__name__)

"""
oranpy Logging - structlog events routed through stdlib loggers.

Library modules log with ``get_logger(__name__)`` and never configure
anything themselves. Each logger wraps the stdlib ``logging.Logger`` of the
same name, so until an application calls ``configure_logging()`` the
executor's debug events fall under stdlib's WARNING default and nothing
reaches stdout or stderr.

``configure_logging()`` is for applications such as the ``oranpy`` CLI. It
picks the level and the renderer, and attaches one stderr handler to the
root logger so that stdout stays free for command output.

Architecture:
    ::

        get_logger("oranpy.core.tries")
            │  structlog.wrap_logger(logging.getLogger(name))
            ▼
        event dict ──> processors ──> rendered line
            │
            ▼
        logging.Logger ──> root StreamHandler(sys.stderr)

        JSON lines rename ``timestamp``/``level`` to ``@timestamp`` and
        ``log.level`` and carry ``service.name``.

Examples:
    >>> from oranpy.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("recovery_started", operation="load_config")

Guardrails:
    ❌ DON'T: Call configure_logging() from library code
    ✅ DO: Leave output decisions to the application entry point

Tags:
    logging, structlog, json-logging, oranpy

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


_SERVICE_NAME = "oranpy"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _ecs_field_names(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Rename timestamp and level to their ECS field names."""
    if "timestamp" in event_dict:
        event_dict["@timestamp"] = event_dict.pop("timestamp")
    if "level" in event_dict:
        event_dict["log.level"] = event_dict.pop("level")
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "oranpy",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for an application entry point.

    Replaces any handlers on the root logger with a single stderr handler,
    so calling it again switches level or format cleanly.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: True for JSON lines, False for console, None picks JSON
            when stderr is not a terminal
        service: Value of the ``service.name`` field
        add_timestamp: Include an ISO timestamp
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    numeric_level = getattr(logging, level.upper())

    if json_format is None:
        json_format = not sys.stderr.isatty()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]
    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors += [_ecs_field_names, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger backed by ``logging.getLogger(name)``.

    Args:
        name: Logger name (usually __name__); None for the root logger
    """
    return structlog.wrap_logger(logging.getLogger(name))


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs.

    Example:
        bind_context(command="demo.tries")
        logger.info("demo_started")  # Includes command
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(command="demo.containers"):
            logger.info("demo_started")
        # Context cleared here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> "LogContext":
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]

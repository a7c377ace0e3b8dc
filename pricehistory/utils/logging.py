"""
Structured logging configuration using structlog.

The query engine only emits debug events under the ``pricehistory`` logger
namespace. Nothing is rendered until the host application calls
configure_logging(), which attaches one handler to that namespace and leaves
the root logger alone.
"""

import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import EventDict, Processor

from pricehistory import __version__
from pricehistory.config import get_settings

LIBRARY_LOGGER = "pricehistory"


def add_severity(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add severity level for structured logging."""
    event_dict["severity"] = method_name.upper()
    return event_dict


def add_library_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag every event with the emitting library and its version."""
    event_dict.setdefault("library", LIBRARY_LOGGER)
    event_dict.setdefault("library_version", __version__)
    return event_dict


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Route pricehistory events through structlog.

    Uses JSON format in production, console format in development. Calling it
    again replaces the handler installed by the previous call.

    Args:
        level: Level name overriding PRICEHISTORY_LOG_LEVEL
        stream: Destination of rendered events, stderr by default
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(library_logger.handlers):
        if existing.get_name() == LIBRARY_LOGGER:
            library_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(LIBRARY_LOGGER)
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level_name, logging.INFO))
    library_logger.propagate = False

    if settings.log_format == "json" and not settings.dev_mode:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_severity,
            add_library_context,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LIBRARY_LOGGER) -> structlog.BoundLogger:
    """
    Get a structured logger inside the pricehistory namespace.

    Names outside the namespace are nested under it, so the handler installed
    by configure_logging() sees their events too.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    if name != LIBRARY_LOGGER and not name.startswith(LIBRARY_LOGGER + "."):
        name = f"{LIBRARY_LOGGER}.{name}"
    return structlog.get_logger(name)

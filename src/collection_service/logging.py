"""Structured logging setup (structlog)."""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger, Processor

from collection_service.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and stdlib logging.

    Console rendering in development (or when ``log_format`` is ``console``),
    JSON lines otherwise.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "console" and not settings.is_production:
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=settings.is_production,
    )

    # Third-party libraries (uvicorn, httpx) log through stdlib
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).setLevel(level)
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger."""
    return structlog.get_logger(name or "collection_service")

"""Structured logging configuration with structlog.

Production renders one JSON object per line; every other environment uses
the colored console renderer. Each entry carries timestamp, level, event
and, when a request is in flight, its correlation_id. Services add their
own context (service, component, operation, judge and assignment ids).

Example production entry:
    {
        "timestamp": "2026-01-05T14:03:11.120384Z",
        "level": "info",
        "event": "judge_moved",
        "service": "JudgeMoveService",
        "operation": "move",
        "kind": "swap",
        "correlation_id": "9a5c..."
    }
"""

import logging
from typing import cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.correlation import correlation_id_processor

DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level_name: str | None) -> int:
    """Translate a level name such as "debug" into a logging level.

    Unknown names fall back to INFO.
    """
    name = (level_name or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(
    environment: str = "production",
    log_level: str | None = None,
) -> None:
    """Configure structlog for the application.

    Should be called once at startup, before the first logger is used.

    Args:
        environment: 'production' for JSON output, anything else for console.
        log_level: Minimum level name; defaults to INFO.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

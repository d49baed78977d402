"""Correlation id management for request tracing.

The id lives in a ContextVar so it follows a request across awaits. The
HTTP middleware sets it from the X-Correlation-ID header (or generates
one), services bind it into their operation loggers, and the structlog
processor stamps it on every entry.
"""

from contextvars import ContextVar, Token
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation id (UUID4 string)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the current correlation id, or "" outside a request."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> Token[str]:
    """Set the correlation id for the current context.

    Returns:
        Token for reset_correlation_id().
    """
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    """Restore the correlation id that was current before set_correlation_id()."""
    _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id to every entry.

    An id bound explicitly by the caller takes precedence.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict

"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from src.config.personnel_config import PersonnelConfig
from src.infrastructure.observability import configure_structlog as _configure_structlog


def configure_logging(config: PersonnelConfig) -> None:
    """Configure structlog from the personnel configuration."""
    _configure_structlog(environment=config.environment, log_level=config.log_level)


__all__ = ["configure_logging"]

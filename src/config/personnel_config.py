"""Court personnel service configuration.

This module defines the runtime configuration for the personnel store and
logging, with environment variable overrides.

Environment Variables:
- PERSONNEL_STORE_BACKEND: "memory" or "postgres" (default: memory)
- APP_ENVIRONMENT: "production" selects JSON logs (default: development)
- DATABASE_URL: PostgreSQL connection string (required for postgres)
- SQLALCHEMY_ECHO: Echo SQL statements, "1"/"true"/"yes" (default: off)
- LOG_LEVEL: Minimum log level name (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

STORE_BACKENDS = ("memory", "postgres")


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set.

    Returns:
        True for "1", "true", "yes" (any case), False for other set values.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes")


def _get_str_env(key: str, default: str | None) -> str | None:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class PersonnelConfig:
    """Configuration for the personnel store and logging.

    Attributes:
        store_backend: "memory" for the in-process store, "postgres" for
            the SQLAlchemy adapter.
        environment: Deployment environment; "production" logs JSON.
        database_url: PostgreSQL connection string, required for postgres.
        sqlalchemy_echo: Whether SQLAlchemy logs every statement.
        log_level: Minimum log level name.
    """

    store_backend: str = "memory"
    environment: str = "development"
    database_url: str | None = None
    sqlalchemy_echo: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"store_backend must be one of {', '.join(STORE_BACKENDS)}, "
                f"got {self.store_backend!r}"
            )
        if self.store_backend == "postgres" and not self.database_url:
            raise ValueError("database_url is required when store_backend is 'postgres'")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> PersonnelConfig:
        """Create config from environment variables with defaults.

        Returns:
            PersonnelConfig with values from environment or defaults.

        Raises:
            ValueError: If the backend is unknown or postgres lacks DATABASE_URL.
        """
        return cls(
            store_backend=(_get_str_env("PERSONNEL_STORE_BACKEND", "memory") or "memory").lower(),
            environment=_get_str_env("APP_ENVIRONMENT", "development") or "development",
            database_url=_get_str_env("DATABASE_URL", None),
            sqlalchemy_echo=_get_bool_env("SQLALCHEMY_ECHO", False),
            log_level=(_get_str_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        )


# Testing config: in-memory store, console logs
TEST_PERSONNEL_CONFIG = PersonnelConfig(store_backend="memory", environment="test")

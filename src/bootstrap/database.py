"""Database session factory bootstrap (PostgreSQL via SQLAlchemy).

This module provides the async session factory used by the PostgreSQL
personnel store.

Usage:
    from src.bootstrap.database import get_session_factory

    session_factory = get_session_factory(config)
    async with session_factory() as session, session.begin():
        ...
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from structlog import get_logger

from src.config.personnel_config import PersonnelConfig

logger = get_logger()

_session_factory: async_sessionmaker[AsyncSession] | None = None
_engine: AsyncEngine | None = None


def to_async_database_url(url: str) -> str:
    """Convert a PostgreSQL URL to the asyncpg driver form.

    Returns:
        postgresql+asyncpg:// URL string.
    """
    if url.startswith("postgresql+asyncpg://"):
        return url
    if url.startswith("postgresql+"):
        return "postgresql+asyncpg://" + url.split("://", 1)[1]
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return f"postgresql+asyncpg://{url}"


def mask_database_url(url: str) -> str:
    """Hide the password of a connection URL for logging."""
    if "@" not in url:
        return url
    credentials, host = url.rsplit("@", 1)
    scheme, _, userinfo = credentials.rpartition("//")
    if ":" not in userinfo:
        return url
    user = userinfo.split(":", 1)[0]
    return f"{scheme}//{user}:***@{host}"


def get_session_factory(config: PersonnelConfig) -> async_sessionmaker[AsyncSession]:
    """Get the SQLAlchemy async session factory.

    Creates a singleton engine and session factory on first call.

    Args:
        config: Configuration carrying database_url and sqlalchemy_echo.

    Returns:
        async_sessionmaker producing AsyncSession instances.

    Raises:
        ValueError: If config has no database_url.
    """
    global _session_factory, _engine

    if _session_factory is None:
        if not config.database_url:
            raise ValueError(
                "DATABASE_URL environment variable not set. "
                "Required for the postgres personnel store."
            )
        log = logger.bind(component="database_bootstrap")
        url = to_async_database_url(config.database_url)
        log.info("creating_database_engine", url=mask_database_url(url))

        _engine = create_async_engine(
            url,
            echo=config.sqlalchemy_echo,
            pool_pre_ping=True,
        )
        _session_factory = async_sessionmaker(
            bind=_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        log.info("database_session_factory_created")

    return _session_factory


def reset_database_bootstrap() -> None:
    """Reset database singleton for testing."""
    global _session_factory, _engine
    _session_factory = None
    _engine = None


async def close_database_engine() -> None:
    """Close the database engine (for graceful shutdown)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None

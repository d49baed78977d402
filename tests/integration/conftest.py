"""
Integration test configuration with testcontainers.

This module provides a session-scoped PostgreSQL 16 container and
per-test fixtures for the PostgreSQL personnel store:
- The container is started once per test session (scope="session")
- Migrations are applied and both personnel tables truncated per test
- Containers are automatically cleaned up after all tests complete

Usage:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_example(postgres_store: PostgresPersonnelStore) -> None:
        ...

Note: Docker must be running for these fixtures to work.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from src.bootstrap.database import to_async_database_url
from src.infrastructure.adapters.persistence.postgres_personnel_store import (
    PostgresPersonnelStore,
)
from tests.integration.sql_helpers import apply_migrations


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """Session-scoped PostgreSQL 16 container.

    The container is started once and reused across all integration tests.
    """
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_async_url(postgres_container: PostgresContainer) -> str:
    """Get async-compatible PostgreSQL connection URL.

    testcontainers returns a psycopg2 URL by default, converted to asyncpg.

    Returns:
        postgresql+asyncpg:// URL string
    """
    return to_async_database_url(postgres_container.get_connection_url())


@pytest.fixture
async def session_factory(
    postgres_async_url: str,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Per-test session factory over a migrated, empty schema."""
    engine = create_async_engine(postgres_async_url, echo=False)
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session, session.begin():
        await apply_migrations(session)
        await session.execute(text("TRUNCATE court_assignments, personnel_profiles"))

    yield factory

    await engine.dispose()


@pytest.fixture
def postgres_store(
    session_factory: async_sessionmaker[AsyncSession],
) -> PostgresPersonnelStore:
    """PostgreSQL personnel store bound to the per-test schema."""
    return PostgresPersonnelStore(session_factory)

"""
Pytest configuration and shared fixtures for court personnel tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from src.infrastructure.stubs.personnel_store_stub import PersonnelStoreStub
from tests.helpers import Roster


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def store() -> PersonnelStoreStub:
    """Create an empty in-memory personnel store."""
    return PersonnelStoreStub()


@pytest.fixture
def roster(store: PersonnelStoreStub) -> Roster:
    """Seed the store with three judges and three courtroom slots."""
    return Roster.seed(store)

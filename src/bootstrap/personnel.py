"""Bootstrap wiring for the personnel store and engines.

Selects the store backend from PersonnelConfig and hands out singleton
services built on it. Tests replace the store with set_personnel_store()
and clear everything with reset_personnel_bootstrap().
"""

from __future__ import annotations

from dotenv import load_dotenv
from structlog import get_logger

from src.application.ports.personnel_store import PersonnelStoreProtocol
from src.application.services.chambers_swap_service import ChambersSwapService
from src.application.services.judge_departure_service import JudgeDepartureService
from src.application.services.judge_move_service import JudgeMoveService
from src.application.services.personnel_registry_service import PersonnelRegistryService
from src.application.services.slot_directory_service import SlotDirectoryService
from src.bootstrap.database import get_session_factory
from src.config.personnel_config import PersonnelConfig
from src.infrastructure.adapters.persistence.postgres_personnel_store import (
    PostgresPersonnelStore,
)
from src.infrastructure.stubs.personnel_store_stub import PersonnelStoreStub

logger = get_logger()

_config: PersonnelConfig | None = None
_store: PersonnelStoreProtocol | None = None


def get_personnel_config() -> PersonnelConfig:
    """Load configuration from the environment, reading .env first."""
    global _config
    if _config is None:
        load_dotenv()
        _config = PersonnelConfig.from_environment()
    return _config


def build_personnel_store(config: PersonnelConfig) -> PersonnelStoreProtocol:
    """Create the store for the configured backend."""
    logger.info("personnel_store_selected", backend=config.store_backend)
    if config.store_backend == "postgres":
        return PostgresPersonnelStore(get_session_factory(config))
    return PersonnelStoreStub()


def get_personnel_store() -> PersonnelStoreProtocol:
    """Get personnel store instance."""
    global _store
    if _store is None:
        _store = build_personnel_store(get_personnel_config())
    return _store


def set_personnel_store(store: PersonnelStoreProtocol) -> None:
    """Install a specific store (for tests)."""
    global _store
    _store = store


def get_slot_directory_service() -> SlotDirectoryService:
    return SlotDirectoryService(get_personnel_store())


def get_personnel_registry_service() -> PersonnelRegistryService:
    return PersonnelRegistryService(get_personnel_store())


def get_judge_move_service() -> JudgeMoveService:
    return JudgeMoveService(get_personnel_store())


def get_chambers_swap_service() -> ChambersSwapService:
    return ChambersSwapService(get_personnel_store())


def get_judge_departure_service() -> JudgeDepartureService:
    return JudgeDepartureService(get_personnel_store())


def reset_personnel_bootstrap() -> None:
    """Reset config and store singletons for testing."""
    global _config, _store
    _config = None
    _store = None

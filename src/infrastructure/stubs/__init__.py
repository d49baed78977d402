"""Infrastructure stubs for development and testing.

This module provides stub implementations of infrastructure ports
for use in development and testing environments.

Available stubs:
- PersonnelStoreStub: In-memory transactional slot and judge store with
  snapshot rollback, commit-time occupancy checks and failure injection

WARNING: These stubs are NOT for production use.
Production implementations are in src/infrastructure/adapters/.
"""

from src.infrastructure.stubs.personnel_store_stub import PersonnelStoreStub, StoreWrite

__all__: list[str] = ["PersonnelStoreStub", "StoreWrite"]

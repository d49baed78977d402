"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- PersonnelStoreProtocol: Transactional store for slots and judges
- PersonnelTransactionProtocol: Unit of work inside a store transaction
"""

from src.application.ports.personnel_store import (
    PersonnelStoreProtocol,
    PersonnelTransactionProtocol,
)

__all__: list[str] = ["PersonnelStoreProtocol", "PersonnelTransactionProtocol"]

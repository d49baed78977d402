"""
Application layer - Use cases and orchestration for court personnel.

This layer contains:
- Application services (slot directory, registry, move, chambers swap, departure)
- Port definitions (abstract interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api
"""

from src.application.ports import PersonnelStoreProtocol, PersonnelTransactionProtocol

__all__: list[str] = ["PersonnelStoreProtocol", "PersonnelTransactionProtocol"]

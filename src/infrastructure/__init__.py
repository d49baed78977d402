"""
Infrastructure layer - External adapters for court personnel.

This layer contains:
- PostgreSQL adapter (transactional slot and judge storage)
- In-memory stubs for development and testing
- Observability (structured logging, correlation ids)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

__all__: list[str] = []

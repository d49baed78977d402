"""
Domain layer - Pure business logic for court personnel management.

This layer contains:
- Domain models (Judge, AssignmentSlot, request/result value objects)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from src.domain.exceptions import CourtPersonnelError

__all__: list[str] = ["CourtPersonnelError"]

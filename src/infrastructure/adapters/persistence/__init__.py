"""Persistence adapters backed by PostgreSQL."""

from src.infrastructure.adapters.persistence.postgres_personnel_store import (
    PostgresPersonnelStore,
)

__all__: list[str] = ["PostgresPersonnelStore"]

"""Lookup helpers shared by the slot directory, registry and engines.

Each helper runs inside an open store transaction and converts missing or
ambiguous rows into domain errors, so callers can assume the result is the
single row they asked for.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from src.domain.errors.personnel import (
    AssignmentSlotNotFoundError,
    ConcurrentModificationError,
    DuplicateJudgeNameError,
    DuplicateSlotOccupancyError,
    JudgeNotFoundError,
)
from src.domain.models.assignment_slot import AssignmentSlot
from src.domain.models.judge import Judge

if TYPE_CHECKING:
    from src.application.ports.personnel_store import PersonnelTransactionProtocol


async def require_judge(tx: PersonnelTransactionProtocol, judge_id: UUID) -> Judge:
    """Read a judge or raise JudgeNotFoundError."""
    judge = await tx.read_judge(judge_id)
    if judge is None:
        raise JudgeNotFoundError(judge_id)
    return judge


async def require_slot(tx: PersonnelTransactionProtocol, assignment_id: UUID) -> AssignmentSlot:
    """Read an assignment slot or raise AssignmentSlotNotFoundError."""
    slot = await tx.read_slot(assignment_id)
    if slot is None:
        raise AssignmentSlotNotFoundError(assignment_id)
    return slot


async def find_judge_by_name(tx: PersonnelTransactionProtocol, name: str) -> Judge | None:
    """Resolve a display or full name to a single judge.

    Args:
        tx: Open store transaction.
        name: Display name ("A. SMITH") or full name ("Alice Smith").

    Returns:
        The judge, or None if nobody matches.

    Raises:
        DuplicateJudgeNameError: If the name matches more than one judge.
    """
    matches = await tx.find_judges_by_name(name)
    if len(matches) > 1:
        raise DuplicateJudgeNameError(name, tuple(j.id for j in matches))
    return matches[0] if matches else None


async def require_judge_by_name(tx: PersonnelTransactionProtocol, name: str) -> Judge:
    """Resolve a name to a single judge or raise JudgeNotFoundError."""
    judge = await find_judge_by_name(tx, name)
    if judge is None:
        raise JudgeNotFoundError(name)
    return judge


async def find_occupied_slot(
    tx: PersonnelTransactionProtocol, judge_id: UUID
) -> AssignmentSlot | None:
    """Resolve the slot a judge currently occupies.

    Args:
        tx: Open store transaction.
        judge_id: The occupying judge.

    Returns:
        The judge's slot, or None if the judge holds no assignment.

    Raises:
        DuplicateSlotOccupancyError: If several slots reference the judge.
    """
    slots = await tx.find_slots_by_occupant(judge_id)
    if len(slots) > 1:
        raise DuplicateSlotOccupancyError(judge_id, tuple(s.id for s in slots))
    return slots[0] if slots else None


def ensure_version(
    entity: str,
    entity_id: UUID,
    expected_version: int | None,
    actual_version: int,
) -> None:
    """Reject a stale caller view of a row.

    Args:
        entity: "judge" or "assignment_slot".
        entity_id: The row being checked.
        expected_version: Version the caller read earlier, or None to skip.
        actual_version: Version read inside the current transaction.

    Raises:
        ConcurrentModificationError: If the versions differ.
    """
    if expected_version is not None and expected_version != actual_version:
        raise ConcurrentModificationError(
            entity, entity_id, expected_version, actual_version
        )

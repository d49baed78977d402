"""Slot directory service.

Read-only view over the courtroom assignment slots: the full directory,
a judge's current slot, and the destinations a judge can be moved to.

Usage:
    from src.application.services.slot_directory_service import SlotDirectoryService

    directory = SlotDirectoryService(store)
    slots = await directory.list_slots()
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from src.application.services.base import LoggingMixin
from src.application.services.personnel_lookup import (
    find_occupied_slot,
    require_judge,
    require_slot,
)
from src.domain.models.assignment_slot import AssignmentSlot

if TYPE_CHECKING:
    from src.application.ports.personnel_store import PersonnelStoreProtocol


class SlotDirectoryService(LoggingMixin):
    """Read-only directory of courtroom assignment slots.

    Attributes:
        _store: Transactional personnel store.
    """

    def __init__(self, store: PersonnelStoreProtocol) -> None:
        """Initialize the slot directory.

        Args:
            store: Transactional personnel store.
        """
        self._store = store
        self._init_logger()

    async def list_slots(self) -> list[AssignmentSlot]:
        """List every assignment slot, ordered by part.

        Returns:
            Slots with assignment id, part, room number and occupant name.
        """
        log = self._log_operation("list_slots")
        async with self._store.transaction() as tx:
            slots = await tx.read_slots()
        log.debug("slots_listed", count=len(slots))
        return slots

    async def get_slot(self, assignment_id: UUID) -> AssignmentSlot:
        """Read one assignment slot.

        Raises:
            AssignmentSlotNotFoundError: If the slot does not exist.
        """
        async with self._store.transaction() as tx:
            return await require_slot(tx, assignment_id)

    async def get_slot_for_judge(self, judge_id: UUID) -> AssignmentSlot | None:
        """Resolve the slot a judge currently occupies.

        Args:
            judge_id: The judge to look up.

        Returns:
            The judge's slot, or None if the judge holds no assignment.

        Raises:
            JudgeNotFoundError: If the judge does not exist.
            DuplicateSlotOccupancyError: If several slots reference the judge.
        """
        log = self._log_operation("get_slot_for_judge", judge_id=str(judge_id))
        async with self._store.transaction() as tx:
            await require_judge(tx, judge_id)
            slot = await find_occupied_slot(tx, judge_id)
        log.debug("judge_slot_resolved", assignment_id=str(slot.id) if slot else None)
        return slot

    async def list_destinations(self, judge_id: UUID) -> list[AssignmentSlot]:
        """List the slots a judge could be moved into.

        Every slot except the one the judge already occupies. Occupied
        destinations imply a swap.

        Raises:
            JudgeNotFoundError: If the judge does not exist.
        """
        async with self._store.transaction() as tx:
            await require_judge(tx, judge_id)
            slots = await tx.read_slots()
        return [slot for slot in slots if slot.occupant_id != judge_id]

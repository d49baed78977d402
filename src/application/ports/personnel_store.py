"""Personnel store port for transactional slot and judge access.

This module defines the abstract interface the reassignment engines use to
read and write assignment slots and judge records.

Developer Golden Rules:
1. ONE TRANSACTION PER OPERATION - Every engine call opens exactly one
   transaction; all of its writes commit together or not at all
2. COMPARE-AND-SET - Every write names the version it expects; a mismatch
   raises ConcurrentModificationError
3. READ-TIME NAMES - Slots store the occupant's id; the occupant's display
   name is resolved when the slot is read
4. ROLLBACK ON ERROR - Any exception leaving the transaction context rolls
   back every write issued inside it
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.assignment_slot import AssignmentSlot
from src.domain.models.judge import Judge, JudgeStatus


class PersonnelTransactionProtocol(Protocol):
    """Unit of work over the assignment slot table and personnel registry.

    Obtained from PersonnelStoreProtocol.transaction(); valid only inside
    that context.
    """

    # Assignment slots

    async def read_slots(self) -> list[AssignmentSlot]:
        """Read every assignment slot, ordered by part then sort order.

        Returns:
            All slots with occupant names resolved.
        """
        ...

    async def read_slot(self, assignment_id: UUID) -> AssignmentSlot | None:
        """Read one assignment slot.

        Args:
            assignment_id: The slot to read.

        Returns:
            The slot if found, None otherwise.
        """
        ...

    async def find_slots_by_occupant(self, judge_id: UUID) -> list[AssignmentSlot]:
        """Find every slot whose occupant is the given judge.

        More than one result indicates corrupted data; callers decide how
        to react.

        Args:
            judge_id: The occupying judge.

        Returns:
            Matching slots (normally zero or one).
        """
        ...

    async def write_slot_occupant(
        self,
        assignment_id: UUID,
        judge_id: UUID | None,
        expected_version: int,
    ) -> AssignmentSlot:
        """Set or clear a slot's occupant.

        Args:
            assignment_id: The slot to update.
            judge_id: The new occupant, or None to empty the slot.
            expected_version: Version the caller read.

        Returns:
            The updated slot at its new version.

        Raises:
            AssignmentSlotNotFoundError: If the slot does not exist.
            ConcurrentModificationError: If the version does not match.
        """
        ...

    async def next_slot_sort_order(self) -> int:
        """Return the sort order one past the current maximum."""
        ...

    async def insert_slot(self, slot: AssignmentSlot) -> AssignmentSlot:
        """Insert a new assignment slot.

        Args:
            slot: The slot to insert.

        Returns:
            The stored slot with occupant name resolved.
        """
        ...

    # Judges

    async def read_judge(self, judge_id: UUID) -> Judge | None:
        """Read one judge.

        Args:
            judge_id: The judge to read.

        Returns:
            The judge if found, None otherwise.
        """
        ...

    async def read_judges(self, status: JudgeStatus | None = None) -> list[Judge]:
        """Read judges, optionally filtered by status, ordered by display name."""
        ...

    async def find_judges_by_name(self, name: str) -> list[Judge]:
        """Find judges whose display name or full name matches, ignoring case.

        Args:
            name: Display name ("A. SMITH") or full name ("Alice Smith").

        Returns:
            Matching judges (normally zero or one).
        """
        ...

    async def find_judges_by_chambers(self, chambers_room: str) -> list[Judge]:
        """Find judges holding the given chambers room."""
        ...

    async def insert_judge(self, judge: Judge) -> Judge:
        """Insert a new judge record.

        Args:
            judge: The judge to insert.

        Returns:
            The stored judge.
        """
        ...

    async def write_judge_status(
        self,
        judge_id: UUID,
        status: JudgeStatus,
        expected_version: int,
        departed_on: date | None = None,
    ) -> Judge:
        """Set a judge's status with its title, availability and departure date.

        Args:
            judge_id: The judge to update.
            status: The new status.
            expected_version: Version the caller read.
            departed_on: Departure date, used only for DEPARTED.

        Returns:
            The updated judge at its new version.

        Raises:
            JudgeNotFoundError: If the judge does not exist.
            ConcurrentModificationError: If the version does not match.
        """
        ...

    async def write_judge_chambers(
        self,
        judge_id: UUID,
        chambers_room: str | None,
        expected_version: int,
    ) -> Judge:
        """Set or clear a judge's chambers room.

        Args:
            judge_id: The judge to update.
            chambers_room: The new chambers room, or None to vacate.
            expected_version: Version the caller read.

        Returns:
            The updated judge at its new version.

        Raises:
            JudgeNotFoundError: If the judge does not exist.
            ConcurrentModificationError: If the version does not match.
        """
        ...

    async def write_judge_court_attorney(
        self,
        judge_id: UUID,
        court_attorney: str | None,
        expected_version: int,
    ) -> Judge:
        """Set or clear a judge's court attorney.

        Args:
            judge_id: The judge to update.
            court_attorney: The court attorney, or None to clear.
            expected_version: Version the caller read.

        Returns:
            The updated judge at its new version.

        Raises:
            JudgeNotFoundError: If the judge does not exist.
            ConcurrentModificationError: If the version does not match.
        """
        ...


class PersonnelStoreProtocol(Protocol):
    """Transactional store holding assignment slots and judge records.

    Usage:
        async with store.transaction() as tx:
            slot = await tx.read_slot(assignment_id)
            await tx.write_slot_occupant(slot.id, judge.id, slot.version)
    """

    def transaction(self) -> AbstractAsyncContextManager[PersonnelTransactionProtocol]:
        """Open a transaction.

        The context commits on normal exit and rolls back when an exception
        propagates out of it.

        Raises:
            StorageFailureError: If the transaction cannot begin or commit.
        """
        ...

"""Personnel registry service.

This module manages judge personnel records: lookup, onboarding, status
changes between the assignable statuses, attribute edits, and the summary
shown before a departure.

Developer Golden Rules:
1. DEPARTURE IS NOT A STATUS EDIT - Only the departure engine sets DEPARTED
2. UNIQUE DISPLAY NAMES - Name lookups must resolve to exactly one judge
3. EXCLUSIVE CHAMBERS - A chambers room is held by at most one judge
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final
from uuid import UUID

from uuid6 import uuid7

from src.application.services.base import LoggingMixin
from src.application.services.personnel_lookup import (
    ensure_version,
    find_judge_by_name,
    find_occupied_slot,
    require_judge,
)
from src.domain.errors.personnel import (
    AlreadyDepartedError,
    ChambersOccupiedError,
    DuplicateJudgeNameError,
    InvalidStatusChangeError,
)
from src.domain.exceptions import CourtPersonnelError
from src.domain.models.assignment_slot import AssignmentSlot, CourtroomPlacement
from src.domain.models.judge import Judge, JudgeStatus, normalize_optional_text
from src.domain.models.reassignment import DepartureInfo

if TYPE_CHECKING:
    from src.application.ports.personnel_store import (
        PersonnelStoreProtocol,
        PersonnelTransactionProtocol,
    )


class _Unset:
    """Marker for "leave this field unchanged"."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()


async def _ensure_chambers_free(
    tx: PersonnelTransactionProtocol, chambers_room: str, judge_id: UUID
) -> None:
    for holder in await tx.find_judges_by_chambers(chambers_room):
        if holder.id != judge_id:
            raise ChambersOccupiedError(chambers_room, holder.id)


class PersonnelRegistryService(LoggingMixin):
    """Registry of judges and their chambers and court attorney attributes.

    Attributes:
        _store: Transactional personnel store.
    """

    def __init__(self, store: PersonnelStoreProtocol) -> None:
        """Initialize the registry.

        Args:
            store: Transactional personnel store.
        """
        self._store = store
        self._init_logger()

    async def get_judge(self, judge_id: UUID) -> Judge:
        """Read a judge.

        Raises:
            JudgeNotFoundError: If the judge does not exist.
        """
        async with self._store.transaction() as tx:
            return await require_judge(tx, judge_id)

    async def find_judge_by_name(self, name: str) -> Judge | None:
        """Find a judge by display name or full name, ignoring case.

        Args:
            name: e.g. "A. SMITH" or "Alice Smith".

        Returns:
            The judge, or None if nobody matches.

        Raises:
            DuplicateJudgeNameError: If the name is ambiguous.
        """
        async with self._store.transaction() as tx:
            return await find_judge_by_name(tx, name)

    async def list_judges(self, status: JudgeStatus | None = None) -> list[Judge]:
        """List judges ordered by display name, optionally by status."""
        log = self._log_operation("list_judges", status=status.value if status else None)
        async with self._store.transaction() as tx:
            judges = await tx.read_judges(status)
        log.debug("judges_listed", count=len(judges))
        return judges

    async def add_judge(
        self,
        first_name: str,
        last_name: str,
        status: JudgeStatus = JudgeStatus.ACTIVE,
        court_attorney: str | None = None,
        chambers_room: str | None = None,
        courtroom: CourtroomPlacement | None = None,
    ) -> Judge:
        """Add a judge, optionally seating them in a new courtroom slot.

        The judge record and the courtroom slot are created in one
        transaction.

        Args:
            first_name: Given name.
            last_name: Surname.
            status: ACTIVE or JHO.
            court_attorney: Court attorney, if any.
            chambers_room: Chambers room, if any.
            courtroom: Room and part for a new assignment slot, if any.

        Returns:
            The stored judge.

        Raises:
            InvalidStatusChangeError: If status is DEPARTED.
            DuplicateJudgeNameError: If the display name is already in use.
            ChambersOccupiedError: If the chambers room is already held.
        """
        judge_id = uuid7()
        log = self._log_operation(
            "add_judge", judge_id=str(judge_id), status=status.value
        )
        try:
            if status == JudgeStatus.DEPARTED:
                raise InvalidStatusChangeError(
                    judge_id, status.value, "a judge cannot be added as departed"
                )
            judge = Judge.create(
                judge_id=judge_id,
                first_name=first_name,
                last_name=last_name,
                status=status,
                chambers_room=chambers_room,
                court_attorney=court_attorney,
            )
            async with self._store.transaction() as tx:
                existing = await tx.find_judges_by_name(judge.display_name)
                if existing:
                    raise DuplicateJudgeNameError(
                        judge.display_name, tuple(j.id for j in existing)
                    )
                if judge.chambers_room:
                    await _ensure_chambers_free(tx, judge.chambers_room, judge.id)

                stored = await tx.insert_judge(judge)
                slot: AssignmentSlot | None = None
                if courtroom is not None:
                    slot = await tx.insert_slot(
                        AssignmentSlot(
                            id=uuid7(),
                            room_id=courtroom.room_id,
                            room_number=courtroom.room_number,
                            part=courtroom.part,
                            occupant_id=stored.id,
                            sort_order=await tx.next_slot_sort_order(),
                        )
                    )
        except CourtPersonnelError as e:
            self._log_rejection(log, "add_judge_rejected", e)
            raise

        log.info(
            "judge_added",
            display_name=stored.display_name,
            assignment_id=str(slot.id) if slot else None,
        )
        return stored

    async def update_status(
        self,
        judge_id: UUID,
        status: JudgeStatus,
        expected_version: int | None = None,
    ) -> Judge:
        """Move a judge between the assignable statuses.

        ACTIVE sets the title "Justice", JHO sets "JHO"; both make the judge
        available and clear any departure date, so this also reinstates a
        departed judge.

        Args:
            judge_id: The judge to update.
            status: ACTIVE or JHO.
            expected_version: Version the caller read, if any.

        Returns:
            The updated judge.

        Raises:
            InvalidStatusChangeError: If status is DEPARTED.
            JudgeNotFoundError: If the judge does not exist.
            ConcurrentModificationError: If the judge changed since it was read.
        """
        log = self._log_operation(
            "update_status", judge_id=str(judge_id), status=status.value
        )
        try:
            if status == JudgeStatus.DEPARTED:
                raise InvalidStatusChangeError(
                    judge_id, status.value, "use the departure workflow to mark a judge departed"
                )
            async with self._store.transaction() as tx:
                judge = await require_judge(tx, judge_id)
                ensure_version("judge", judge_id, expected_version, judge.version)
                updated = await tx.write_judge_status(judge_id, status, judge.version)
        except CourtPersonnelError as e:
            self._log_rejection(log, "status_update_rejected", e)
            raise

        log.info("judge_status_updated", previous_status=judge.status.value)
        return updated

    async def update_details(
        self,
        judge_id: UUID,
        court_attorney: str | None | _Unset = UNSET,
        chambers_room: str | None | _Unset = UNSET,
        expected_version: int | None = None,
    ) -> Judge:
        """Edit a judge's court attorney and/or chambers room.

        Fields left as UNSET are not touched. Blank strings clear the field.

        Args:
            judge_id: The judge to update.
            court_attorney: New court attorney, None to clear, UNSET to keep.
            chambers_room: New chambers room, None to vacate, UNSET to keep.
            expected_version: Version the caller read, if any.

        Returns:
            The updated judge.

        Raises:
            JudgeNotFoundError: If the judge does not exist.
            AlreadyDepartedError: If chambers are given to a departed judge.
            ChambersOccupiedError: If another judge holds the chambers room.
            ConcurrentModificationError: If the judge changed since it was read.
        """
        log = self._log_operation("update_details", judge_id=str(judge_id))

        try:
            async with self._store.transaction() as tx:
                judge = await require_judge(tx, judge_id)
                ensure_version("judge", judge_id, expected_version, judge.version)

                if not isinstance(court_attorney, _Unset):
                    value = normalize_optional_text(court_attorney)
                    if value != judge.court_attorney:
                        judge = await tx.write_judge_court_attorney(judge_id, value, judge.version)

                if not isinstance(chambers_room, _Unset):
                    room = normalize_optional_text(chambers_room)
                    if room is not None:
                        if judge.is_departed:
                            raise AlreadyDepartedError(judge.id, judge.display_name)
                        await _ensure_chambers_free(tx, room, judge_id)
                    if room != judge.chambers_room:
                        judge = await tx.write_judge_chambers(judge_id, room, judge.version)
        except CourtPersonnelError as e:
            self._log_rejection(log, "details_update_rejected", e)
            raise

        log.info("judge_details_updated", version=judge.version)
        return judge

    async def get_departure_info(self, judge_id: UUID) -> DepartureInfo:
        """Summarise what a judge holds ahead of a departure.

        Args:
            judge_id: The judge to summarise.

        Returns:
            Display name, court attorney, chambers room and current slot.

        Raises:
            JudgeNotFoundError: If the judge does not exist.
            DuplicateSlotOccupancyError: If several slots reference the judge.
        """
        async with self._store.transaction() as tx:
            judge = await require_judge(tx, judge_id)
            slot = await find_occupied_slot(tx, judge_id)
        return DepartureInfo(
            judge_id=judge.id,
            display_name=judge.display_name,
            court_attorney=judge.court_attorney,
            chambers_room=judge.chambers_room,
            assignment=slot,
        )

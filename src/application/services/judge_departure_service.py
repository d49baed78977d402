"""Judge departure service.

This module marks a judge as departed while resolving, in the same store
transaction, what happens to their courtroom assignment slot and their
chambers room.

Departure States (derived, not persisted):
- HOLDING: status is active/jho, judge may occupy a slot and chambers
- DEPARTED: status is departed, judge occupies no slot and no chambers

Algorithm:
1. Validate the request (replacement names present and distinct)
2. Resolve the judge, their current slot and their chambers room
3. Slot present: CLEAR empties it, REASSIGN seats the replacement judge
4. Chambers present: CLEAR vacates it, REASSIGN hands it to the new occupant
5. Clear the court attorney and set status DEPARTED
6. Commit 3-5 together; any failure rolls every write back

Developer Golden Rules:
1. VALIDATE FIRST - No write is issued until every check has passed
2. ALL OR NOTHING - A partial departure is never committed
3. NO RE-DEPARTURE - A departed judge is rejected, never re-processed
4. ABSENCE IS NOT AN ERROR - No slot or no chambers skips that step
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from src.application.services.base import LoggingMixin
from src.application.services.personnel_lookup import (
    ensure_version,
    find_occupied_slot,
    require_judge,
    require_judge_by_name,
)
from src.domain.errors.personnel import (
    AlreadyDepartedError,
    DisplayNameMismatchError,
    InvalidReassignmentError,
)
from src.domain.exceptions import CourtPersonnelError
from src.domain.models.judge import Judge, JudgeStatus
from src.domain.models.reassignment import DepartureRequest, DepartureResult

if TYPE_CHECKING:
    from src.application.ports.personnel_store import (
        PersonnelStoreProtocol,
        PersonnelTransactionProtocol,
    )


class JudgeDepartureService(LoggingMixin):
    """Processes judge departures as a single atomic unit.

    Attributes:
        _store: Transactional personnel store.
    """

    def __init__(self, store: PersonnelStoreProtocol) -> None:
        """Initialize the departure service.

        Args:
            store: Transactional personnel store.
        """
        self._store = store
        self._init_logger()

    async def process_departure(
        self,
        request: DepartureRequest,
        judge_version: int | None = None,
    ) -> DepartureResult:
        """Mark a judge departed and hand off their courtroom and chambers.

        Args:
            request: Departure instructions.
            judge_version: Version of the departing judge the caller read, if any.

        Returns:
            DepartureResult describing what was vacated and who took over.

        Raises:
            ReassignmentTargetMissingError: If a REASSIGN action lacks a
                replacement name or names the departing judge.
            JudgeNotFoundError: If the judge or a replacement does not resolve.
            DisplayNameMismatchError: If request.display_name is not the
                judge's display name.
            AlreadyDepartedError: If the judge has already departed.
            InvalidReassignmentError: If a replacement has departed or
                already sits in another courtroom.
            ConcurrentModificationError: If the judge changed since it was read.
            StorageFailureError: If the transaction fails; nothing is committed.
        """
        log = self._log_operation(
            "process_departure",
            judge_id=str(request.judge_id),
            assignment_action=request.assignment_action.value,
            chambers_action=request.chambers_action.value,
        )

        try:
            request.validate()
            async with self._store.transaction() as tx:
                result = await self._depart(tx, request, judge_version)
        except CourtPersonnelError as e:
            self._log_rejection(log, "departure_rejected", e)
            raise

        log.info(
            "judge_departed",
            display_name=result.display_name,
            assignment_id=str(result.assignment_id) if result.assignment_id else None,
            assignment_successor=result.assignment_successor,
            chambers_room=result.chambers_room,
            chambers_successor=result.chambers_successor,
        )
        return result

    async def _depart(
        self,
        tx: PersonnelTransactionProtocol,
        request: DepartureRequest,
        judge_version: int | None,
    ) -> DepartureResult:
        judge = await require_judge(tx, request.judge_id)
        if judge.display_name.casefold() != request.display_name.strip().casefold():
            raise DisplayNameMismatchError(judge.id, request.display_name, judge.display_name)
        if judge.is_departed:
            raise AlreadyDepartedError(judge.id, judge.display_name)
        ensure_version("judge", judge.id, judge_version, judge.version)

        slot = await find_occupied_slot(tx, judge.id)
        chambers_room = judge.chambers_room

        # Resolve every replacement before the first write.
        slot_successor: Judge | None = None
        if slot is not None and request.assignment_successor is not None:
            slot_successor = await self._resolve_successor(
                tx, judge, request.assignment_successor
            )
            seated = await find_occupied_slot(tx, slot_successor.id)
            if seated is not None:
                raise InvalidReassignmentError(
                    slot_successor.display_name,
                    f"already sits in part {seated.part}, room {seated.room_number}",
                )

        chambers_successor: Judge | None = None
        if chambers_room is not None and request.chambers_successor is not None:
            chambers_successor = await self._resolve_successor(
                tx, judge, request.chambers_successor
            )

        if slot is not None:
            await tx.write_slot_occupant(
                slot.id,
                slot_successor.id if slot_successor else None,
                slot.version,
            )

        vacated_chambers: str | None = None
        if chambers_room is not None:
            judge = await tx.write_judge_chambers(judge.id, None, judge.version)
            if chambers_successor is not None:
                vacated_chambers = chambers_successor.chambers_room
                await tx.write_judge_chambers(
                    chambers_successor.id, chambers_room, chambers_successor.version
                )

        if judge.court_attorney is not None:
            judge = await tx.write_judge_court_attorney(judge.id, None, judge.version)

        departed_on = request.departed_on or date.today()
        judge = await tx.write_judge_status(
            judge.id, JudgeStatus.DEPARTED, judge.version, departed_on=departed_on
        )

        return DepartureResult(
            judge_id=judge.id,
            display_name=judge.display_name,
            departed_on=departed_on,
            assignment_id=slot.id if slot else None,
            assignment_successor=slot_successor.display_name if slot_successor else None,
            chambers_room=chambers_room,
            chambers_successor=chambers_successor.display_name if chambers_successor else None,
            vacated_chambers=vacated_chambers,
        )

    async def _resolve_successor(
        self,
        tx: PersonnelTransactionProtocol,
        departing: Judge,
        name: str,
    ) -> Judge:
        successor = await require_judge_by_name(tx, name)
        if successor.id == departing.id:
            raise InvalidReassignmentError(successor.display_name, "is the departing judge")
        if successor.is_departed:
            raise InvalidReassignmentError(successor.display_name, "has departed")
        return successor

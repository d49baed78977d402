"""Judge move service: relocate a judge or swap two judges between slots.

Policy:
- Empty target: the judge moves in and their previous slot (if any) is
  emptied. This is a MOVE.
- Occupied target: the judge moves in and the target's occupant takes the
  judge's previous slot. This is a SWAP and requires the judge to hold a
  slot; otherwise the displaced occupant would have nowhere to go.

Both writes of a move or swap are issued in one store transaction, so no
reader ever sees one slot updated without the other. Calling the same swap
twice restores the original arrangement.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from src.application.services.base import LoggingMixin
from src.application.services.personnel_lookup import (
    ensure_version,
    find_occupied_slot,
    require_judge_by_name,
    require_slot,
)
from src.domain.errors.personnel import (
    AlreadyDepartedError,
    InvalidMoveError,
    InvalidSwapError,
    StaleSourceSlotError,
)
from src.domain.exceptions import CourtPersonnelError
from src.domain.models.reassignment import MoveKind, MoveResult

if TYPE_CHECKING:
    from src.application.ports.personnel_store import PersonnelStoreProtocol


class JudgeMoveService(LoggingMixin):
    """Moves judges between courtroom assignment slots.

    Thread Safety:
    - Each call runs in a single store transaction
    - Version compare-and-set on both slots rejects interleaved writers

    Attributes:
        _store: Transactional personnel store.
    """

    def __init__(self, store: PersonnelStoreProtocol) -> None:
        """Initialize the move service.

        Args:
            store: Transactional personnel store.
        """
        self._store = store
        self._init_logger()

    async def move(
        self,
        judge_name: str,
        target_assignment_id: UUID,
        source_assignment_id: UUID | None = None,
        target_version: int | None = None,
        source_version: int | None = None,
    ) -> MoveResult:
        """Move a judge into a target slot, swapping if it is occupied.

        Args:
            judge_name: Display name of the judge to move.
            target_assignment_id: Destination slot.
            source_assignment_id: The slot the caller believes the judge holds.
                When given, it must match the judge's actual slot.
            target_version: Version of the target slot the caller read, if any.
            source_version: Version of the source slot the caller read, if any.

        Returns:
            MoveResult describing whether a MOVE or SWAP was applied.

        Raises:
            JudgeNotFoundError: If the judge name does not resolve.
            AssignmentSlotNotFoundError: If the target slot does not exist.
            AlreadyDepartedError: If the judge has departed.
            InvalidMoveError: If the judge already occupies the target.
            InvalidSwapError: If the target is occupied and the judge has no slot.
            StaleSourceSlotError: If source_assignment_id is out of date.
            ConcurrentModificationError: If a slot changed since it was read.
            DuplicateJudgeNameError: If the judge name is ambiguous.
            DuplicateSlotOccupancyError: If the judge occupies several slots.
        """
        log = self._log_operation(
            "move",
            judge_name=judge_name,
            target_assignment_id=str(target_assignment_id),
        )

        try:
            async with self._store.transaction() as tx:
                judge = await require_judge_by_name(tx, judge_name)
                if judge.is_departed:
                    raise AlreadyDepartedError(judge.id, judge.display_name)

                source = await find_occupied_slot(tx, judge.id)
                actual_source_id = source.id if source else None
                if (
                    source_assignment_id is not None
                    and source_assignment_id != actual_source_id
                ):
                    raise StaleSourceSlotError(
                        judge.display_name, source_assignment_id, actual_source_id
                    )

                target = await require_slot(tx, target_assignment_id)
                if target.occupant_id == judge.id:
                    raise InvalidMoveError(judge.display_name, target.id)
                ensure_version("assignment_slot", target.id, target_version, target.version)
                if source is not None:
                    ensure_version("assignment_slot", source.id, source_version, source.version)

                if target.occupant_id is None:
                    if source is not None:
                        await tx.write_slot_occupant(source.id, None, source.version)
                    await tx.write_slot_occupant(target.id, judge.id, target.version)
                    result = MoveResult(
                        kind=MoveKind.MOVE,
                        judge_id=judge.id,
                        judge_name=judge.display_name,
                        target_assignment_id=target.id,
                        source_assignment_id=actual_source_id,
                    )
                else:
                    displaced = target.occupant_name or str(target.occupant_id)
                    if source is None:
                        raise InvalidSwapError(judge.display_name, target.id, displaced)
                    await tx.write_slot_occupant(source.id, target.occupant_id, source.version)
                    await tx.write_slot_occupant(target.id, judge.id, target.version)
                    result = MoveResult(
                        kind=MoveKind.SWAP,
                        judge_id=judge.id,
                        judge_name=judge.display_name,
                        target_assignment_id=target.id,
                        source_assignment_id=source.id,
                        displaced_judge_name=displaced,
                    )
        except CourtPersonnelError as e:
            self._log_rejection(log, "move_rejected", e)
            raise

        log.info(
            "judge_moved",
            kind=result.kind.value,
            source_assignment_id=str(result.source_assignment_id)
            if result.source_assignment_id
            else None,
            displaced_judge_name=result.displaced_judge_name,
        )
        return result

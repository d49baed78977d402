"""Chambers swap service: exchange chambers rooms between two judges.

Both chambers writes are issued in one store transaction. The swap is
symmetric and self-inverse: swapping the same pair twice restores both
judges' original chambers. A judge without chambers swaps as "no chambers".
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from src.application.services.base import LoggingMixin
from src.application.services.personnel_lookup import ensure_version, require_judge
from src.domain.errors.personnel import AlreadyDepartedError, InvalidChambersSwapError
from src.domain.exceptions import CourtPersonnelError
from src.domain.models.reassignment import ChambersSwapResult

if TYPE_CHECKING:
    from src.application.ports.personnel_store import PersonnelStoreProtocol


class ChambersSwapService(LoggingMixin):
    """Exchanges the chambers attribute between two judges.

    Attributes:
        _store: Transactional personnel store.
    """

    def __init__(self, store: PersonnelStoreProtocol) -> None:
        """Initialize the chambers swap service.

        Args:
            store: Transactional personnel store.
        """
        self._store = store
        self._init_logger()

    async def swap_chambers(
        self,
        judge_a_id: UUID,
        judge_b_id: UUID,
        version_a: int | None = None,
        version_b: int | None = None,
    ) -> ChambersSwapResult:
        """Swap chambers between two judges.

        Args:
            judge_a_id: First judge.
            judge_b_id: Second judge.
            version_a: Version of the first judge the caller read, if any.
            version_b: Version of the second judge the caller read, if any.

        Returns:
            ChambersSwapResult with each judge's new chambers.

        Raises:
            InvalidChambersSwapError: If both ids name the same judge.
            JudgeNotFoundError: If either judge does not exist.
            AlreadyDepartedError: If either judge has departed.
            ConcurrentModificationError: If a judge changed since it was read.
        """
        log = self._log_operation(
            "swap_chambers",
            judge_a_id=str(judge_a_id),
            judge_b_id=str(judge_b_id),
        )

        try:
            if judge_a_id == judge_b_id:
                raise InvalidChambersSwapError(judge_a_id)

            async with self._store.transaction() as tx:
                judge_a = await require_judge(tx, judge_a_id)
                judge_b = await require_judge(tx, judge_b_id)
                for judge in (judge_a, judge_b):
                    if judge.is_departed:
                        raise AlreadyDepartedError(judge.id, judge.display_name)
                ensure_version("judge", judge_a.id, version_a, judge_a.version)
                ensure_version("judge", judge_b.id, version_b, judge_b.version)

                room_a = judge_a.chambers_room
                room_b = judge_b.chambers_room
                if room_a != room_b:
                    await tx.write_judge_chambers(judge_a.id, room_b, judge_a.version)
                    await tx.write_judge_chambers(judge_b.id, room_a, judge_b.version)
        except CourtPersonnelError as e:
            self._log_rejection(log, "chambers_swap_rejected", e)
            raise

        log.info("chambers_swapped", chambers_a=room_b, chambers_b=room_a)
        return ChambersSwapResult(
            judge_a_id=judge_a.id,
            judge_b_id=judge_b.id,
            chambers_a=room_b,
            chambers_b=room_a,
        )

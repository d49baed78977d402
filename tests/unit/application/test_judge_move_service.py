"""Unit tests for JudgeMoveService.

Covers plain moves into empty slots, swaps between occupied slots, the
rejections issued before any write, and rollback on storage failure.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from src.application.services.judge_move_service import JudgeMoveService
from src.domain.errors import (
    AlreadyDepartedError,
    AssignmentSlotNotFoundError,
    ConcurrentModificationError,
    DuplicateJudgeNameError,
    DuplicateSlotOccupancyError,
    InvalidMoveError,
    InvalidSwapError,
    JudgeNotFoundError,
    StaleSourceSlotError,
    StorageFailureError,
)
from src.domain.models.judge import JudgeStatus
from src.domain.models.reassignment import MoveKind
from src.infrastructure.stubs.personnel_store_stub import PersonnelStoreStub
from tests.helpers import Roster


@pytest.fixture
def service(store: PersonnelStoreStub) -> JudgeMoveService:
    """Create a JudgeMoveService over the in-memory store."""
    return JudgeMoveService(store)


class TestMoveToEmptySlot:
    """Judge moves into a slot nobody occupies."""

    @pytest.mark.asyncio
    async def test_move_vacates_source(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        result = await service.move("A. SMITH", roster.part_64.id)

        assert result.kind == MoveKind.MOVE
        assert result.source_assignment_id == roster.part_62.id
        assert result.displaced_judge_name is None
        assert store.peek_slot(roster.part_64.id).occupant_name == "A. SMITH"
        assert store.peek_slot(roster.part_62.id).occupant_id is None

    @pytest.mark.asyncio
    async def test_judge_without_slot_is_seated(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        result = await service.move("C. LEE", roster.part_64.id)

        assert result.kind == MoveKind.MOVE
        assert result.source_assignment_id is None
        assert store.peek_slot(roster.part_64.id).occupant_id == roster.lee.id
        assert [w.entity_id for w in store.get_writes()] == [roster.part_64.id]

    @pytest.mark.asyncio
    async def test_full_name_resolves_case_insensitively(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        result = await service.move("alice smith", roster.part_64.id)

        assert result.judge_id == roster.smith.id

    @pytest.mark.asyncio
    async def test_slot_versions_advance(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        await service.move("A. SMITH", roster.part_64.id)

        assert store.peek_slot(roster.part_62.id).version == 2
        assert store.peek_slot(roster.part_64.id).version == 2


class TestSwap:
    """Judge moves into a slot another judge occupies."""

    @pytest.mark.asyncio
    async def test_swap_exchanges_occupants(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        result = await service.move("A. SMITH", roster.part_63.id)

        assert result.kind == MoveKind.SWAP
        assert result.displaced_judge_name == "B. JONES"
        assert store.peek_slot(roster.part_63.id).occupant_id == roster.smith.id
        assert store.peek_slot(roster.part_62.id).occupant_id == roster.jones.id

    @pytest.mark.asyncio
    async def test_double_swap_restores_arrangement(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        await service.move("A. SMITH", roster.part_63.id)
        await service.move("A. SMITH", roster.part_62.id)

        assert store.peek_slot(roster.part_62.id).occupant_id == roster.smith.id
        assert store.peek_slot(roster.part_63.id).occupant_id == roster.jones.id

    @pytest.mark.asyncio
    async def test_swap_without_source_slot_rejected(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        with pytest.raises(InvalidSwapError) as exc_info:
            await service.move("C. LEE", roster.part_62.id)

        assert exc_info.value.occupant == "A. SMITH"
        assert store.get_writes() == []
        assert store.peek_slot(roster.part_62.id).occupant_id == roster.smith.id


class TestMoveRejections:
    """Every rejection leaves the store untouched."""

    @pytest.mark.asyncio
    async def test_own_slot_rejected(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        with pytest.raises(InvalidMoveError):
            await service.move("A. SMITH", roster.part_62.id)

        assert store.get_writes() == []

    @pytest.mark.asyncio
    async def test_unknown_judge(self, service: JudgeMoveService, roster: Roster) -> None:
        with pytest.raises(JudgeNotFoundError):
            await service.move("Z. NOBODY", roster.part_64.id)

    @pytest.mark.asyncio
    async def test_unknown_target(self, service: JudgeMoveService, roster: Roster) -> None:
        with pytest.raises(AssignmentSlotNotFoundError):
            await service.move("A. SMITH", uuid4())

    @pytest.mark.asyncio
    async def test_departed_judge(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        store.seed_judge("Dana", "Wu", status=JudgeStatus.DEPARTED)

        with pytest.raises(AlreadyDepartedError):
            await service.move("D. WU", roster.part_64.id)

    @pytest.mark.asyncio
    async def test_stale_source_slot(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        with pytest.raises(StaleSourceSlotError) as exc_info:
            await service.move(
                "A. SMITH", roster.part_64.id, source_assignment_id=roster.part_63.id
            )

        assert exc_info.value.actual_assignment_id == roster.part_62.id
        assert store.get_writes() == []

    @pytest.mark.asyncio
    async def test_matching_source_slot_accepted(
        self, service: JudgeMoveService, roster: Roster
    ) -> None:
        result = await service.move(
            "A. SMITH", roster.part_64.id, source_assignment_id=roster.part_62.id
        )

        assert result.kind == MoveKind.MOVE

    @pytest.mark.asyncio
    async def test_stale_target_version(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        await service.move("C. LEE", roster.part_64.id)

        with pytest.raises(ConcurrentModificationError) as exc_info:
            await service.move("A. SMITH", roster.part_64.id, target_version=1)

        assert exc_info.value.actual_version == 2
        assert store.peek_slot(roster.part_62.id).occupant_id == roster.smith.id

    @pytest.mark.asyncio
    async def test_ambiguous_name(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        store.seed_judge("Adam", "Smith")

        with pytest.raises(DuplicateJudgeNameError):
            await service.move("A. SMITH", roster.part_64.id)

    @pytest.mark.asyncio
    async def test_judge_in_two_slots(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        store.seed_slot("304", "65", occupant=roster.smith)

        with pytest.raises(DuplicateSlotOccupancyError):
            await service.move("A. SMITH", roster.part_64.id)


class TestMoveAtomicity:
    @pytest.mark.asyncio
    async def test_commit_failure_rolls_back_both_writes(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        store.fail_next_commit()

        with pytest.raises(StorageFailureError):
            await service.move("A. SMITH", roster.part_63.id)

        assert store.peek_slot(roster.part_62.id).occupant_id == roster.smith.id
        assert store.peek_slot(roster.part_63.id).occupant_id == roster.jones.id
        assert store.get_writes() == []
        assert store.rolled_back_count == 1

    @pytest.mark.asyncio
    async def test_write_failure_rolls_back(
        self, service: JudgeMoveService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        store.fail_on("write_slot_occupant")

        with pytest.raises(StorageFailureError):
            await service.move("A. SMITH", roster.part_64.id)

        assert store.peek_slot(roster.part_62.id).version == 1
        assert store.peek_slot(roster.part_64.id).occupant_id is None

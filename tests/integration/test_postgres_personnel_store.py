"""Integration tests for the PostgreSQL personnel store.

Runs the reassignment engines against a real PostgreSQL 16 container to
verify locking, version compare-and-set, deferred occupancy constraints
and all-or-nothing commits.
"""

from uuid import UUID

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.application.services.chambers_swap_service import ChambersSwapService
from src.application.services.judge_departure_service import JudgeDepartureService
from src.application.services.judge_move_service import JudgeMoveService
from src.application.services.personnel_registry_service import PersonnelRegistryService
from src.application.services.slot_directory_service import SlotDirectoryService
from src.domain.errors import (
    AlreadyDepartedError,
    ConcurrentModificationError,
    DuplicateJudgeNameError,
    StorageFailureError,
)
from src.domain.models.assignment_slot import CourtroomPlacement
from src.domain.models.judge import Judge, JudgeStatus
from src.domain.models.reassignment import DepartureRequest, HandoffAction, MoveKind
from src.infrastructure.adapters.persistence.postgres_personnel_store import (
    PostgresPersonnelStore,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def registry(postgres_store: PostgresPersonnelStore) -> PersonnelRegistryService:
    return PersonnelRegistryService(postgres_store)


@pytest.fixture
def directory(postgres_store: PostgresPersonnelStore) -> SlotDirectoryService:
    return SlotDirectoryService(postgres_store)


@pytest.fixture
async def smith(registry: PersonnelRegistryService) -> Judge:
    return await registry.add_judge(
        "Alice",
        "Smith",
        chambers_room="1240",
        court_attorney="R. Patel",
        courtroom=CourtroomPlacement(room_id="room-301", room_number="301", part="62"),
    )


@pytest.fixture
async def jones(registry: PersonnelRegistryService) -> Judge:
    return await registry.add_judge(
        "Brian",
        "Jones",
        chambers_room="1305",
        courtroom=CourtroomPlacement(room_id="room-302", room_number="302", part="63"),
    )


async def _slot_id(directory: SlotDirectoryService, judge_id: UUID) -> UUID:
    slot = await directory.get_slot_for_judge(judge_id)
    assert slot is not None
    return slot.id


class TestSlotDirectory:
    async def test_occupant_names_joined_on_read(
        self, directory: SlotDirectoryService, smith: Judge, jones: Judge
    ) -> None:
        slots = await directory.list_slots()

        assert [(s.part, s.occupant_name) for s in slots] == [
            ("62", "A. SMITH"),
            ("63", "B. JONES"),
        ]

    async def test_duplicate_display_name_rejected(
        self, registry: PersonnelRegistryService, smith: Judge
    ) -> None:
        with pytest.raises(DuplicateJudgeNameError):
            await registry.add_judge("Adam", "Smith")


class TestMoveEngine:
    async def test_swap_is_atomic_and_self_inverse(
        self,
        postgres_store: PostgresPersonnelStore,
        directory: SlotDirectoryService,
        smith: Judge,
        jones: Judge,
    ) -> None:
        service = JudgeMoveService(postgres_store)
        smith_slot = await _slot_id(directory, smith.id)
        jones_slot = await _slot_id(directory, jones.id)

        result = await service.move("A. SMITH", jones_slot)

        assert result.kind == MoveKind.SWAP
        assert await _slot_id(directory, smith.id) == jones_slot
        assert await _slot_id(directory, jones.id) == smith_slot

        await service.move("A. SMITH", smith_slot)

        assert await _slot_id(directory, smith.id) == smith_slot
        assert await _slot_id(directory, jones.id) == jones_slot

    async def test_stale_target_version_rejected(
        self,
        postgres_store: PostgresPersonnelStore,
        directory: SlotDirectoryService,
        smith: Judge,
        jones: Judge,
    ) -> None:
        jones_slot = await directory.get_slot_for_judge(jones.id)
        assert jones_slot is not None

        with pytest.raises(ConcurrentModificationError):
            await JudgeMoveService(postgres_store).move(
                "A. SMITH", jones_slot.id, target_version=jones_slot.version + 1
            )


class TestChambersSwap:
    async def test_swap_passes_through_deferred_unique_constraint(
        self,
        postgres_store: PostgresPersonnelStore,
        registry: PersonnelRegistryService,
        smith: Judge,
        jones: Judge,
    ) -> None:
        result = await ChambersSwapService(postgres_store).swap_chambers(smith.id, jones.id)

        assert result.chambers_a == "1305"
        assert (await registry.get_judge(jones.id)).chambers_room == "1240"


class TestDepartureEngine:
    async def test_departure_with_handoff(
        self,
        postgres_store: PostgresPersonnelStore,
        registry: PersonnelRegistryService,
        directory: SlotDirectoryService,
        smith: Judge,
    ) -> None:
        successor = await registry.add_judge("Dana", "Wu", chambers_room="1410")
        smith_slot = await _slot_id(directory, smith.id)

        result = await JudgeDepartureService(postgres_store).process_departure(
            DepartureRequest(
                judge_id=smith.id,
                display_name="A. SMITH",
                assignment_action=HandoffAction.REASSIGN,
                new_justice_for_assignment="D. WU",
                chambers_action=HandoffAction.REASSIGN,
                new_chambers_occupant="D. WU",
            )
        )

        departed = await registry.get_judge(smith.id)
        wu = await registry.get_judge(successor.id)
        assert result.vacated_chambers == "1410"
        assert departed.status == JudgeStatus.DEPARTED
        assert departed.chambers_room is None
        assert departed.court_attorney is None
        assert departed.is_available_for_assignment is False
        assert wu.chambers_room == "1240"
        assert await _slot_id(directory, successor.id) == smith_slot

    async def test_repeat_departure_rejected(
        self, postgres_store: PostgresPersonnelStore, smith: Judge
    ) -> None:
        service = JudgeDepartureService(postgres_store)
        request = DepartureRequest(judge_id=smith.id, display_name="A. SMITH")
        await service.process_departure(request)

        with pytest.raises(AlreadyDepartedError):
            await service.process_departure(request)


class TestCommitTimeConstraints:
    async def test_double_occupancy_rolls_back_whole_transaction(
        self,
        postgres_store: PostgresPersonnelStore,
        session_factory: async_sessionmaker[AsyncSession],
        directory: SlotDirectoryService,
        smith: Judge,
        jones: Judge,
    ) -> None:
        jones_slot = await directory.get_slot_for_judge(jones.id)
        assert jones_slot is not None

        with pytest.raises(StorageFailureError):
            async with postgres_store.transaction() as tx:
                await tx.write_judge_court_attorney(smith.id, None, smith.version)
                await tx.write_slot_occupant(jones_slot.id, smith.id, jones_slot.version)

        async with session_factory() as session:
            attorney = await session.scalar(
                text("SELECT court_attorney FROM personnel_profiles WHERE id = :id"),
                {"id": smith.id},
            )
        assert attorney == "R. Patel"
        assert (await directory.get_slot_for_judge(jones.id)) is not None

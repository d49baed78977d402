"""Unit tests for ChambersSwapService."""

from __future__ import annotations

from uuid import uuid4

import pytest

from src.application.services.chambers_swap_service import ChambersSwapService
from src.domain.errors import (
    AlreadyDepartedError,
    ConcurrentModificationError,
    InvalidChambersSwapError,
    JudgeNotFoundError,
    StorageFailureError,
)
from src.domain.models.judge import JudgeStatus
from src.infrastructure.stubs.personnel_store_stub import PersonnelStoreStub
from tests.helpers import Roster


@pytest.fixture
def service(store: PersonnelStoreStub) -> ChambersSwapService:
    """Create a ChambersSwapService over the in-memory store."""
    return ChambersSwapService(store)


class TestSwapChambers:
    @pytest.mark.asyncio
    async def test_rooms_are_exchanged(
        self, service: ChambersSwapService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        result = await service.swap_chambers(roster.smith.id, roster.jones.id)

        assert result.chambers_a == "1202"
        assert result.chambers_b == "1201"
        assert store.peek_judge(roster.smith.id).chambers_room == "1202"
        assert store.peek_judge(roster.jones.id).chambers_room == "1201"

    @pytest.mark.asyncio
    async def test_swap_is_self_inverse(
        self, service: ChambersSwapService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        await service.swap_chambers(roster.smith.id, roster.jones.id)
        await service.swap_chambers(roster.smith.id, roster.jones.id)

        assert store.peek_judge(roster.smith.id).chambers_room == "1201"
        assert store.peek_judge(roster.jones.id).chambers_room == "1202"

    @pytest.mark.asyncio
    async def test_absent_chambers_swaps_as_absent(
        self, service: ChambersSwapService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        result = await service.swap_chambers(roster.smith.id, roster.lee.id)

        assert result.chambers_a is None
        assert result.chambers_b == "1201"
        assert store.peek_judge(roster.smith.id).chambers_room is None
        assert store.peek_judge(roster.lee.id).chambers_room == "1201"

    @pytest.mark.asyncio
    async def test_both_without_chambers_writes_nothing(
        self, service: ChambersSwapService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        other = store.seed_judge("Evan", "Park")

        await service.swap_chambers(roster.lee.id, other.id)

        assert store.get_writes() == []


class TestSwapChambersRejections:
    @pytest.mark.asyncio
    async def test_same_judge_twice(self, service: ChambersSwapService, roster: Roster) -> None:
        with pytest.raises(InvalidChambersSwapError):
            await service.swap_chambers(roster.smith.id, roster.smith.id)

    @pytest.mark.asyncio
    async def test_unknown_judge(self, service: ChambersSwapService, roster: Roster) -> None:
        with pytest.raises(JudgeNotFoundError):
            await service.swap_chambers(roster.smith.id, uuid4())

    @pytest.mark.asyncio
    async def test_departed_judge(
        self, service: ChambersSwapService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        departed = store.seed_judge("Dana", "Wu", status=JudgeStatus.DEPARTED)

        with pytest.raises(AlreadyDepartedError):
            await service.swap_chambers(roster.smith.id, departed.id)

        assert store.get_writes() == []

    @pytest.mark.asyncio
    async def test_stale_version(
        self, service: ChambersSwapService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        with pytest.raises(ConcurrentModificationError):
            await service.swap_chambers(roster.smith.id, roster.jones.id, version_b=7)

        assert store.peek_judge(roster.smith.id).chambers_room == "1201"

    @pytest.mark.asyncio
    async def test_commit_failure_rolls_back_both_writes(
        self, service: ChambersSwapService, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        store.fail_next_commit()

        with pytest.raises(StorageFailureError):
            await service.swap_chambers(roster.smith.id, roster.jones.id)

        assert store.peek_judge(roster.smith.id).chambers_room == "1201"
        assert store.peek_judge(roster.jones.id).chambers_room == "1202"

"""Unit tests for PersonnelStoreStub.

The stub backs every engine unit test, so its transaction semantics are
tested directly: snapshot rollback, commit-time occupancy checks, version
compare-and-set, and failure injection.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from src.domain.errors import (
    AssignmentSlotNotFoundError,
    ConcurrentModificationError,
    JudgeNotFoundError,
    StorageFailureError,
)
from src.domain.models.judge import JudgeStatus
from src.infrastructure.stubs.personnel_store_stub import PersonnelStoreStub, StoreWrite
from tests.helpers import Roster


class TestCommitAndRollback:
    @pytest.mark.asyncio
    async def test_commit_records_writes(
        self, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        async with store.transaction() as tx:
            await tx.write_slot_occupant(roster.part_64.id, roster.lee.id, 1)

        assert store.get_writes() == [
            StoreWrite("write_slot_occupant", roster.part_64.id, roster.lee.id)
        ]
        assert store.committed_count == 1

    @pytest.mark.asyncio
    async def test_exception_restores_snapshot(
        self, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        with pytest.raises(RuntimeError):
            async with store.transaction() as tx:
                await tx.write_judge_chambers(roster.smith.id, None, 1)
                raise RuntimeError("abort")

        assert store.peek_judge(roster.smith.id).chambers_room == "1201"
        assert store.get_writes() == []
        assert store.rolled_back_count == 1

    @pytest.mark.asyncio
    async def test_transaction_handle_expires(
        self, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        async with store.transaction() as tx:
            pass

        with pytest.raises(RuntimeError, match="no longer active"):
            await tx.read_slots()


class TestCommitInvariants:
    @pytest.mark.asyncio
    async def test_judge_in_two_slots_fails_commit(
        self, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        with pytest.raises(StorageFailureError, match="more than one slot"):
            async with store.transaction() as tx:
                await tx.write_slot_occupant(roster.part_64.id, roster.smith.id, 1)

        assert store.peek_slot(roster.part_64.id).occupant_id is None

    @pytest.mark.asyncio
    async def test_shared_chambers_fails_commit(
        self, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        with pytest.raises(StorageFailureError, match="chambers room 1201"):
            async with store.transaction() as tx:
                await tx.write_judge_chambers(roster.lee.id, "1201", 1)

        assert store.peek_judge(roster.lee.id).chambers_room is None

    @pytest.mark.asyncio
    async def test_intermediate_duplicate_allowed_inside_transaction(
        self, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        async with store.transaction() as tx:
            await tx.write_judge_chambers(roster.smith.id, "1202", 1)
            await tx.write_judge_chambers(roster.jones.id, "1201", 1)

        assert store.peek_judge(roster.smith.id).chambers_room == "1202"


class TestCompareAndSet:
    @pytest.mark.asyncio
    async def test_stale_slot_version(self, store: PersonnelStoreStub, roster: Roster) -> None:
        with pytest.raises(ConcurrentModificationError) as exc_info:
            async with store.transaction() as tx:
                await tx.write_slot_occupant(roster.part_64.id, roster.lee.id, 5)

        assert exc_info.value.actual_version == 1

    @pytest.mark.asyncio
    async def test_stale_judge_version(self, store: PersonnelStoreStub, roster: Roster) -> None:
        with pytest.raises(ConcurrentModificationError):
            async with store.transaction() as tx:
                await tx.write_judge_status(roster.smith.id, JudgeStatus.JHO, 2)

    @pytest.mark.asyncio
    async def test_missing_rows(self, store: PersonnelStoreStub, roster: Roster) -> None:
        with pytest.raises(AssignmentSlotNotFoundError):
            async with store.transaction() as tx:
                await tx.write_slot_occupant(uuid4(), None, 1)
        with pytest.raises(JudgeNotFoundError):
            async with store.transaction() as tx:
                await tx.write_judge_court_attorney(uuid4(), None, 1)


class TestReads:
    @pytest.mark.asyncio
    async def test_occupant_name_follows_judge(
        self, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        async with store.transaction() as tx:
            slot = await tx.read_slot(roster.part_62.id)
            found = await tx.find_judges_by_name(" a. smith ")
            by_room = await tx.find_judges_by_chambers("1202")

        assert slot is not None
        assert slot.occupant_name == "A. SMITH"
        assert [j.id for j in found] == [roster.smith.id]
        assert [j.id for j in by_room] == [roster.jones.id]


class TestFailureInjection:
    @pytest.mark.asyncio
    async def test_fail_on_operation(self, store: PersonnelStoreStub, roster: Roster) -> None:
        store.fail_on("write_judge_chambers")

        with pytest.raises(StorageFailureError, match="write_judge_chambers"):
            async with store.transaction() as tx:
                await tx.write_judge_chambers(roster.smith.id, None, 1)

    @pytest.mark.asyncio
    async def test_fail_next_commit_is_one_shot(
        self, store: PersonnelStoreStub, roster: Roster
    ) -> None:
        store.fail_next_commit()

        with pytest.raises(StorageFailureError, match="commit"):
            async with store.transaction():
                pass
        async with store.transaction():
            pass

        assert store.committed_count == 1

    def test_clear(self, store: PersonnelStoreStub, roster: Roster) -> None:
        store.fail_on("insert_judge")

        store.clear()

        assert store.get_writes() == []
        with pytest.raises(KeyError):
            store.peek_judge(roster.smith.id)

"""Personnel store stub implementation.

This module provides an in-memory implementation of PersonnelStoreProtocol
for development and testing purposes.

Transaction Semantics:
- Transactions are serialised with an asyncio.Lock
- State is snapshotted when a transaction begins and restored on rollback
- Occupancy invariants (one slot per judge, one judge per chambers room)
  are checked at commit, mirroring the deferred unique constraints of the
  PostgreSQL schema

Testing Features:
- Seed helpers for judges and slots
- Committed write log for assertions (rolled-back writes never appear)
- Failure injection on a named write operation or at commit
"""

from __future__ import annotations

import asyncio
from collections import Counter
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from uuid6 import uuid7

from src.domain.errors.personnel import (
    AssignmentSlotNotFoundError,
    ConcurrentModificationError,
    JudgeNotFoundError,
)
from src.domain.errors.storage import StorageFailureError
from src.domain.models.assignment_slot import AssignmentSlot
from src.domain.models.judge import Judge, JudgeStatus


@dataclass(frozen=True)
class StoreWrite:
    """Record of a committed store write for test assertions.

    Attributes:
        operation: The write method name (write_slot_occupant, etc.)
        entity_id: The slot or judge that was written
        value: The value written
    """

    operation: str
    entity_id: UUID
    value: object


class PersonnelStoreStub:
    """In-memory stub implementation of PersonnelStoreProtocol.

    Attributes:
        _judges: Dictionary of judge_id -> Judge
        _slots: Dictionary of assignment_id -> AssignmentSlot (names unresolved)
        _writes: Committed StoreWrite records
        _fail_on: Write operation name that raises StorageFailureError
        _fail_on_commit: Whether the next commit raises StorageFailureError
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._judges: dict[UUID, Judge] = {}
        self._slots: dict[UUID, AssignmentSlot] = {}
        self._writes: list[StoreWrite] = []
        self._lock = asyncio.Lock()
        self._fail_on: str | None = None
        self._fail_on_commit = False
        self.committed_count = 0
        self.rolled_back_count = 0

    # Seeding and inspection

    def seed_judge(
        self,
        first_name: str,
        last_name: str,
        status: JudgeStatus = JudgeStatus.ACTIVE,
        chambers_room: str | None = None,
        court_attorney: str | None = None,
        judge_id: UUID | None = None,
    ) -> Judge:
        """Add a judge directly, bypassing transactions.

        A DEPARTED judge is created active and then marked departed so that
        title and availability follow the normal rules.
        """
        initial = JudgeStatus.ACTIVE if status == JudgeStatus.DEPARTED else status
        judge = Judge.create(
            judge_id=judge_id or uuid7(),
            first_name=first_name,
            last_name=last_name,
            status=initial,
            chambers_room=chambers_room,
            court_attorney=court_attorney,
        )
        if status == JudgeStatus.DEPARTED:
            judge = judge.with_status(JudgeStatus.DEPARTED)
        self._judges[judge.id] = judge
        return judge

    def seed_slot(
        self,
        room_number: str,
        part: str,
        occupant: Judge | None = None,
        room_id: str | None = None,
        assignment_id: UUID | None = None,
    ) -> AssignmentSlot:
        """Add an assignment slot directly, bypassing transactions."""
        slot = AssignmentSlot(
            id=assignment_id or uuid7(),
            room_id=room_id or f"room-{room_number}",
            room_number=room_number,
            part=part,
            occupant_id=occupant.id if occupant else None,
            sort_order=len(self._slots) + 1,
        )
        self._slots[slot.id] = slot
        return self._resolve(slot)

    def peek_judge(self, judge_id: UUID) -> Judge:
        """Return the committed state of a judge."""
        return self._judges[judge_id]

    def peek_slot(self, assignment_id: UUID) -> AssignmentSlot:
        """Return the committed state of a slot with its occupant name."""
        return self._resolve(self._slots[assignment_id])

    def fail_on(self, operation: str | None) -> None:
        """Make the named write operation raise StorageFailureError."""
        self._fail_on = operation

    def fail_next_commit(self) -> None:
        """Make the next commit raise StorageFailureError."""
        self._fail_on_commit = True

    def get_writes(self) -> list[StoreWrite]:
        """Return all committed writes, in order."""
        return list(self._writes)

    def clear(self) -> None:
        """Clear all stored data (for test cleanup)."""
        self._judges.clear()
        self._slots.clear()
        self._writes.clear()
        self._fail_on = None
        self._fail_on_commit = False
        self.committed_count = 0
        self.rolled_back_count = 0

    # Protocol

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[_StubTransaction]:
        """Open a serialised transaction with snapshot rollback."""
        async with self._lock:
            judges_snapshot = dict(self._judges)
            slots_snapshot = dict(self._slots)
            tx = _StubTransaction(self)
            try:
                yield tx
                self._commit(tx)
            except BaseException:
                self._judges = judges_snapshot
                self._slots = slots_snapshot
                self.rolled_back_count += 1
                raise
            finally:
                tx.closed = True

    # Internals

    def _commit(self, tx: _StubTransaction) -> None:
        if self._fail_on_commit:
            self._fail_on_commit = False
            raise StorageFailureError("commit", "injected commit failure")

        occupants = Counter(
            slot.occupant_id for slot in self._slots.values() if slot.occupant_id
        )
        doubled = [judge_id for judge_id, count in occupants.items() if count > 1]
        if doubled:
            raise StorageFailureError(
                "commit", f"judge {doubled[0]} would occupy more than one slot"
            )

        rooms = Counter(
            judge.chambers_room for judge in self._judges.values() if judge.chambers_room
        )
        shared = [room for room, count in rooms.items() if count > 1]
        if shared:
            raise StorageFailureError(
                "commit", f"chambers room {shared[0]} would be held by more than one judge"
            )

        self._writes.extend(tx.pending_writes)
        self.committed_count += 1

    def _resolve(self, slot: AssignmentSlot) -> AssignmentSlot:
        if slot.occupant_id is None:
            return slot
        occupant = self._judges.get(slot.occupant_id)
        return slot.with_occupant(
            slot.occupant_id, occupant.display_name if occupant else None
        )


class _StubTransaction:
    """Transaction handle over PersonnelStoreStub state."""

    def __init__(self, store: PersonnelStoreStub) -> None:
        self._store = store
        self.pending_writes: list[StoreWrite] = []
        self.closed = False

    def _ensure_open(self) -> None:
        if self.closed:
            raise RuntimeError("Transaction is no longer active")

    def _record(self, operation: str, entity_id: UUID, value: object) -> None:
        if self._store._fail_on == operation:
            raise StorageFailureError(operation, "injected write failure")
        self.pending_writes.append(StoreWrite(operation, entity_id, value))

    def _current_judge(self, judge_id: UUID, expected_version: int) -> Judge:
        current = self._store._judges.get(judge_id)
        if current is None:
            raise JudgeNotFoundError(judge_id)
        if current.version != expected_version:
            raise ConcurrentModificationError(
                "judge", judge_id, expected_version, current.version
            )
        return current

    # Assignment slots

    async def read_slots(self) -> list[AssignmentSlot]:
        self._ensure_open()
        slots = sorted(self._store._slots.values(), key=lambda s: (s.part, s.sort_order))
        return [self._store._resolve(slot) for slot in slots]

    async def read_slot(self, assignment_id: UUID) -> AssignmentSlot | None:
        self._ensure_open()
        slot = self._store._slots.get(assignment_id)
        return self._store._resolve(slot) if slot else None

    async def find_slots_by_occupant(self, judge_id: UUID) -> list[AssignmentSlot]:
        self._ensure_open()
        return [
            self._store._resolve(slot)
            for slot in self._store._slots.values()
            if slot.occupant_id == judge_id
        ]

    async def write_slot_occupant(
        self,
        assignment_id: UUID,
        judge_id: UUID | None,
        expected_version: int,
    ) -> AssignmentSlot:
        self._ensure_open()
        current = self._store._slots.get(assignment_id)
        if current is None:
            raise AssignmentSlotNotFoundError(assignment_id)
        if current.version != expected_version:
            raise ConcurrentModificationError(
                "assignment_slot", assignment_id, expected_version, current.version
            )
        self._record("write_slot_occupant", assignment_id, judge_id)
        updated = current.with_occupant(judge_id).next_version()
        self._store._slots[assignment_id] = updated
        return self._store._resolve(updated)

    async def next_slot_sort_order(self) -> int:
        self._ensure_open()
        return max((s.sort_order for s in self._store._slots.values()), default=0) + 1

    async def insert_slot(self, slot: AssignmentSlot) -> AssignmentSlot:
        self._ensure_open()
        if slot.id in self._store._slots:
            raise StorageFailureError("insert_slot", f"assignment {slot.id} already exists")
        self._record("insert_slot", slot.id, slot.occupant_id)
        stored = slot.with_occupant(slot.occupant_id)
        self._store._slots[slot.id] = stored
        return self._store._resolve(stored)

    # Judges

    async def read_judge(self, judge_id: UUID) -> Judge | None:
        self._ensure_open()
        return self._store._judges.get(judge_id)

    async def read_judges(self, status: JudgeStatus | None = None) -> list[Judge]:
        self._ensure_open()
        judges = [
            judge
            for judge in self._store._judges.values()
            if status is None or judge.status == status
        ]
        return sorted(judges, key=lambda j: j.display_name)

    async def find_judges_by_name(self, name: str) -> list[Judge]:
        self._ensure_open()
        return [judge for judge in self._store._judges.values() if judge.matches_name(name)]

    async def find_judges_by_chambers(self, chambers_room: str) -> list[Judge]:
        self._ensure_open()
        wanted = chambers_room.strip()
        return [
            judge for judge in self._store._judges.values() if judge.chambers_room == wanted
        ]

    async def insert_judge(self, judge: Judge) -> Judge:
        self._ensure_open()
        if judge.id in self._store._judges:
            raise StorageFailureError("insert_judge", f"judge {judge.id} already exists")
        self._record("insert_judge", judge.id, judge.display_name)
        self._store._judges[judge.id] = judge
        return judge

    async def write_judge_status(
        self,
        judge_id: UUID,
        status: JudgeStatus,
        expected_version: int,
        departed_on: date | None = None,
    ) -> Judge:
        self._ensure_open()
        current = self._current_judge(judge_id, expected_version)
        self._record("write_judge_status", judge_id, status)
        updated = current.with_status(status, departed_on).next_version()
        self._store._judges[judge_id] = updated
        return updated

    async def write_judge_chambers(
        self,
        judge_id: UUID,
        chambers_room: str | None,
        expected_version: int,
    ) -> Judge:
        self._ensure_open()
        current = self._current_judge(judge_id, expected_version)
        self._record("write_judge_chambers", judge_id, chambers_room)
        updated = current.with_chambers(chambers_room).next_version()
        self._store._judges[judge_id] = updated
        return updated

    async def write_judge_court_attorney(
        self,
        judge_id: UUID,
        court_attorney: str | None,
        expected_version: int,
    ) -> Judge:
        self._ensure_open()
        current = self._current_judge(judge_id, expected_version)
        self._record("write_judge_court_attorney", judge_id, court_attorney)
        updated = current.with_court_attorney(court_attorney).next_version()
        self._store._judges[judge_id] = updated
        return updated

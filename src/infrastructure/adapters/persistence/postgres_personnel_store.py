"""PostgreSQL implementation of the personnel store.

Tables (see migrations/001_create_court_personnel.sql):
- personnel_profiles: one row per judge, chambers_room_number unique
- court_assignments: one row per courtroom slot, justice_id unique

Transaction Semantics:
- One AsyncSession per transaction(), opened with session.begin()
- Single-row reads take FOR UPDATE locks held until commit
- Updates are compare-and-set on the version column; a lost race raises
  ConcurrentModificationError instead of silently overwriting
- The unique constraints are deferred, so occupancy violations surface at
  commit and are reported as StorageFailureError
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from src.domain.errors.personnel import (
    AssignmentSlotNotFoundError,
    ConcurrentModificationError,
    JudgeNotFoundError,
)
from src.domain.errors.storage import StorageFailureError
from src.domain.models.assignment_slot import AssignmentSlot
from src.domain.models.judge import JUDGE_TITLES, Judge, JudgeStatus

logger = get_logger()

_JUDGE_COLUMNS = """
    id, first_name, last_name, display_name, status, title,
    chambers_room_number, court_attorney, is_available_for_assignment,
    departed_on, version, created_at, updated_at
"""

_SLOT_SELECT = """
    SELECT a.id, a.room_id, a.room_number, a.part, a.justice_id,
           p.display_name AS occupant_name, a.sort_order, a.version
    FROM court_assignments a
    LEFT JOIN personnel_profiles p ON p.id = a.justice_id
"""


def _row_to_judge(row: Mapping[str, Any]) -> Judge:
    return Judge(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        display_name=row["display_name"],
        status=JudgeStatus(row["status"]),
        title=row["title"],
        chambers_room=row["chambers_room_number"],
        court_attorney=row["court_attorney"],
        is_available_for_assignment=row["is_available_for_assignment"],
        departed_on=row["departed_on"],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _row_to_slot(row: Mapping[str, Any]) -> AssignmentSlot:
    occupant_id = row["justice_id"]
    return AssignmentSlot(
        id=row["id"],
        room_id=row["room_id"],
        room_number=row["room_number"],
        part=row["part"],
        occupant_id=occupant_id,
        occupant_name=row["occupant_name"] if occupant_id else None,
        sort_order=row["sort_order"],
        version=row["version"],
    )


class PostgresPersonnelStore:
    """PersonnelStoreProtocol backed by PostgreSQL via SQLAlchemy async.

    Attributes:
        _session_factory: Factory for AsyncSession instances.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the store.

        Args:
            session_factory: SQLAlchemy async session factory.
        """
        self._session_factory = session_factory
        self._log = logger.bind(component="personnel_store", store="postgres")

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[PostgresPersonnelTransaction]:
        """Open a database transaction; commits on success, rolls back on error.

        Raises:
            StorageFailureError: If the database rejects a statement or the commit.
        """
        try:
            async with self._session_factory() as session, session.begin():
                yield PostgresPersonnelTransaction(session)
        except SQLAlchemyError as e:
            self._log.error("personnel_transaction_failed", error=str(e))
            raise StorageFailureError("transaction", str(e)) from e


class PostgresPersonnelTransaction:
    """Unit of work bound to one AsyncSession transaction."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _fetch_one(self, sql: str, params: dict[str, Any]) -> Mapping[str, Any] | None:
        result = await self._session.execute(text(sql), params)
        return result.mappings().first()

    async def _fetch_all(
        self, sql: str, params: dict[str, Any] | None = None
    ) -> list[Mapping[str, Any]]:
        result = await self._session.execute(text(sql), params or {})
        return list(result.mappings().all())

    # Assignment slots

    async def read_slots(self) -> list[AssignmentSlot]:
        rows = await self._fetch_all(_SLOT_SELECT + " ORDER BY a.part, a.sort_order")
        return [_row_to_slot(row) for row in rows]

    async def read_slot(self, assignment_id: UUID) -> AssignmentSlot | None:
        row = await self._fetch_one(
            _SLOT_SELECT + " WHERE a.id = :id FOR UPDATE OF a",
            {"id": assignment_id},
        )
        return _row_to_slot(row) if row else None

    async def find_slots_by_occupant(self, judge_id: UUID) -> list[AssignmentSlot]:
        rows = await self._fetch_all(
            _SLOT_SELECT + " WHERE a.justice_id = :judge_id ORDER BY a.sort_order FOR UPDATE OF a",
            {"judge_id": judge_id},
        )
        return [_row_to_slot(row) for row in rows]

    async def write_slot_occupant(
        self,
        assignment_id: UUID,
        judge_id: UUID | None,
        expected_version: int,
    ) -> AssignmentSlot:
        row = await self._fetch_one(
            """
            UPDATE court_assignments
            SET justice_id = :judge_id, version = version + 1, updated_at = now()
            WHERE id = :id AND version = :expected_version
            RETURNING id
            """,
            {"id": assignment_id, "judge_id": judge_id, "expected_version": expected_version},
        )
        if row is None:
            current = await self._fetch_one(
                "SELECT version FROM court_assignments WHERE id = :id",
                {"id": assignment_id},
            )
            if current is None:
                raise AssignmentSlotNotFoundError(assignment_id)
            raise ConcurrentModificationError(
                "assignment_slot", assignment_id, expected_version, current["version"]
            )
        slot = await self.read_slot(assignment_id)
        assert slot is not None
        return slot

    async def next_slot_sort_order(self) -> int:
        row = await self._fetch_one(
            "SELECT COALESCE(MAX(sort_order), 0) + 1 AS next_order FROM court_assignments",
            {},
        )
        return int(row["next_order"]) if row else 1

    async def insert_slot(self, slot: AssignmentSlot) -> AssignmentSlot:
        await self._session.execute(
            text(
                """
                INSERT INTO court_assignments
                    (id, room_id, room_number, part, justice_id, sort_order, version)
                VALUES
                    (:id, :room_id, :room_number, :part, :justice_id, :sort_order, :version)
                """
            ),
            {
                "id": slot.id,
                "room_id": slot.room_id,
                "room_number": slot.room_number,
                "part": slot.part,
                "justice_id": slot.occupant_id,
                "sort_order": slot.sort_order,
                "version": slot.version,
            },
        )
        stored = await self.read_slot(slot.id)
        assert stored is not None
        return stored

    # Judges

    async def read_judge(self, judge_id: UUID) -> Judge | None:
        row = await self._fetch_one(
            f"SELECT {_JUDGE_COLUMNS} FROM personnel_profiles WHERE id = :id FOR UPDATE",
            {"id": judge_id},
        )
        return _row_to_judge(row) if row else None

    async def read_judges(self, status: JudgeStatus | None = None) -> list[Judge]:
        if status is None:
            rows = await self._fetch_all(
                f"SELECT {_JUDGE_COLUMNS} FROM personnel_profiles ORDER BY display_name"
            )
        else:
            rows = await self._fetch_all(
                f"SELECT {_JUDGE_COLUMNS} FROM personnel_profiles "
                "WHERE status = :status ORDER BY display_name",
                {"status": status.value},
            )
        return [_row_to_judge(row) for row in rows]

    async def find_judges_by_name(self, name: str) -> list[Judge]:
        rows = await self._fetch_all(
            f"""
            SELECT {_JUDGE_COLUMNS} FROM personnel_profiles
            WHERE lower(display_name) = lower(CAST(:name AS TEXT))
               OR lower(first_name || ' ' || last_name) = lower(CAST(:name AS TEXT))
            ORDER BY display_name
            FOR UPDATE
            """,
            {"name": name.strip()},
        )
        return [_row_to_judge(row) for row in rows]

    async def find_judges_by_chambers(self, chambers_room: str) -> list[Judge]:
        rows = await self._fetch_all(
            f"SELECT {_JUDGE_COLUMNS} FROM personnel_profiles "
            "WHERE chambers_room_number = :room FOR UPDATE",
            {"room": chambers_room.strip()},
        )
        return [_row_to_judge(row) for row in rows]

    async def insert_judge(self, judge: Judge) -> Judge:
        row = await self._fetch_one(
            f"""
            INSERT INTO personnel_profiles (
                id, first_name, last_name, display_name, status, title,
                chambers_room_number, court_attorney, is_available_for_assignment,
                departed_on, version, created_at, updated_at
            ) VALUES (
                :id, :first_name, :last_name, :display_name, :status, :title,
                :chambers_room, :court_attorney, :is_available,
                :departed_on, :version, :created_at, :updated_at
            )
            RETURNING {_JUDGE_COLUMNS}
            """,
            {
                "id": judge.id,
                "first_name": judge.first_name,
                "last_name": judge.last_name,
                "display_name": judge.display_name,
                "status": judge.status.value,
                "title": judge.title,
                "chambers_room": judge.chambers_room,
                "court_attorney": judge.court_attorney,
                "is_available": judge.is_available_for_assignment,
                "departed_on": judge.departed_on,
                "version": judge.version,
                "created_at": judge.created_at,
                "updated_at": judge.updated_at,
            },
        )
        assert row is not None
        return _row_to_judge(row)

    async def _update_judge(
        self,
        judge_id: UUID,
        expected_version: int,
        assignments: str,
        params: dict[str, Any],
    ) -> Judge:
        row = await self._fetch_one(
            f"""
            UPDATE personnel_profiles
            SET {assignments}, version = version + 1, updated_at = now()
            WHERE id = :id AND version = :expected_version
            RETURNING {_JUDGE_COLUMNS}
            """,
            {"id": judge_id, "expected_version": expected_version, **params},
        )
        if row is not None:
            return _row_to_judge(row)
        current = await self._fetch_one(
            "SELECT version FROM personnel_profiles WHERE id = :id",
            {"id": judge_id},
        )
        if current is None:
            raise JudgeNotFoundError(judge_id)
        raise ConcurrentModificationError(
            "judge", judge_id, expected_version, current["version"]
        )

    async def write_judge_status(
        self,
        judge_id: UUID,
        status: JudgeStatus,
        expected_version: int,
        departed_on: date | None = None,
    ) -> Judge:
        if status == JudgeStatus.DEPARTED:
            return await self._update_judge(
                judge_id,
                expected_version,
                "status = :status, is_available_for_assignment = FALSE, "
                "departed_on = :departed_on",
                {"status": status.value, "departed_on": departed_on or date.today()},
            )
        return await self._update_judge(
            judge_id,
            expected_version,
            "status = :status, title = :title, is_available_for_assignment = TRUE, "
            "departed_on = NULL",
            {"status": status.value, "title": JUDGE_TITLES[status]},
        )

    async def write_judge_chambers(
        self,
        judge_id: UUID,
        chambers_room: str | None,
        expected_version: int,
    ) -> Judge:
        return await self._update_judge(
            judge_id,
            expected_version,
            "chambers_room_number = :chambers_room",
            {"chambers_room": chambers_room},
        )

    async def write_judge_court_attorney(
        self,
        judge_id: UUID,
        court_attorney: str | None,
        expected_version: int,
    ) -> Judge:
        return await self._update_judge(
            judge_id,
            expected_version,
            "court_attorney = :court_attorney",
            {"court_attorney": court_attorney},
        )

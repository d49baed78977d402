"""Judge domain model for the personnel registry.

This module defines the Judge personnel record, its status lifecycle and the
display-name convention shared by the registry and the engines.

Developer Golden Rules:
1. IMMUTABILITY - Judge is a frozen dataclass; changes return new instances
2. NO HARD DELETE - A judge leaves by transitioning to DEPARTED
3. DEPARTED HOLDS NOTHING - A departed judge has no slot and no chambers
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID


class JudgeStatus(Enum):
    """Personnel status of a judge.

    Statuses:
        ACTIVE: Sitting Justice, available for assignment
        JHO: Judicial Hearing Officer, available for assignment
        DEPARTED: No longer sitting; holds no courtroom or chambers
    """

    ACTIVE = "active"
    JHO = "jho"
    DEPARTED = "departed"


# Title recorded for each assignable status. Departure keeps the last title.
JUDGE_TITLES: dict[JudgeStatus, str] = {
    JudgeStatus.ACTIVE: "Justice",
    JudgeStatus.JHO: "JHO",
}


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


def format_display_name(first_name: str, last_name: str) -> str:
    """Build the roster display name for a judge.

    The roster shows judges as first initial plus surname in capitals,
    e.g. ("Alice", "Smith") -> "A. SMITH".

    Args:
        first_name: Given name.
        last_name: Surname.

    Returns:
        The display name.

    Raises:
        ValueError: If either name is blank.
    """
    first = first_name.strip()
    last = last_name.strip()
    if not first or not last:
        raise ValueError("Judge first_name and last_name cannot be empty")
    return f"{first[0].upper()}. {last.upper()}"


def normalize_optional_text(value: str | None) -> str | None:
    """Collapse blank strings to None and strip surrounding whitespace."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True, eq=True)
class Judge:
    """A judge's personnel record.

    Attributes:
        id: Unique identifier (UUIDv7).
        first_name: Given name.
        last_name: Surname.
        display_name: Roster name, e.g. "A. SMITH".
        status: Current personnel status.
        title: "Justice" or "JHO"; retained on departure.
        chambers_room: Chambers room held by the judge, if any.
        court_attorney: The judge's court attorney, if any.
        is_available_for_assignment: False once departed.
        departed_on: Departure date, set only while DEPARTED.
        version: Revision counter, incremented by the store on every write.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    id: UUID
    first_name: str
    last_name: str
    display_name: str
    status: JudgeStatus = field(default=JudgeStatus.ACTIVE)
    title: str = field(default="Justice")
    chambers_room: str | None = field(default=None)
    court_attorney: str | None = field(default=None)
    is_available_for_assignment: bool = field(default=True)
    departed_on: date | None = field(default=None)
    version: int = field(default=1)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Validate judge fields."""
        if not self.display_name.strip():
            raise ValueError("Judge display_name cannot be empty")
        if self.version < 1:
            raise ValueError(f"Judge version must be positive, got {self.version}")
        if self.status == JudgeStatus.DEPARTED and self.is_available_for_assignment:
            raise ValueError("A departed judge cannot be available for assignment")

    @classmethod
    def create(
        cls,
        judge_id: UUID,
        first_name: str,
        last_name: str,
        status: JudgeStatus = JudgeStatus.ACTIVE,
        chambers_room: str | None = None,
        court_attorney: str | None = None,
    ) -> Judge:
        """Create a new judge record with a derived display name.

        Args:
            judge_id: Identifier for the new judge.
            first_name: Given name.
            last_name: Surname.
            status: Initial status (ACTIVE or JHO).
            chambers_room: Initial chambers room, if any.
            court_attorney: Court attorney, if any.

        Returns:
            New Judge at version 1.

        Raises:
            ValueError: If names are blank or status is DEPARTED.
        """
        if status == JudgeStatus.DEPARTED:
            raise ValueError("A judge cannot be created as departed")
        return cls(
            id=judge_id,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            display_name=format_display_name(first_name, last_name),
            status=status,
            title=JUDGE_TITLES[status],
            chambers_room=normalize_optional_text(chambers_room),
            court_attorney=normalize_optional_text(court_attorney),
        )

    @property
    def full_name(self) -> str:
        """Given name and surname."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_departed(self) -> bool:
        """Check if the judge has departed."""
        return self.status == JudgeStatus.DEPARTED

    def with_status(self, new_status: JudgeStatus, departed_on: date | None = None) -> Judge:
        """Create new judge with updated status.

        Assignable statuses reset title and availability and clear the
        departure date. DEPARTED keeps the title, drops availability and
        records the departure date (today if not given).

        Args:
            new_status: The status to set.
            departed_on: Departure date, only used for DEPARTED.

        Returns:
            New Judge with updated status fields.
        """
        if new_status == JudgeStatus.DEPARTED:
            return replace(
                self,
                status=new_status,
                is_available_for_assignment=False,
                departed_on=departed_on or date.today(),
                updated_at=_utc_now(),
            )
        return replace(
            self,
            status=new_status,
            title=JUDGE_TITLES[new_status],
            is_available_for_assignment=True,
            departed_on=None,
            updated_at=_utc_now(),
        )

    def with_chambers(self, chambers_room: str | None) -> Judge:
        """Create new judge holding the given chambers room (None vacates)."""
        return replace(
            self,
            chambers_room=normalize_optional_text(chambers_room),
            updated_at=_utc_now(),
        )

    def with_court_attorney(self, court_attorney: str | None) -> Judge:
        """Create new judge with the given court attorney (None clears)."""
        return replace(
            self,
            court_attorney=normalize_optional_text(court_attorney),
            updated_at=_utc_now(),
        )

    def next_version(self) -> Judge:
        """Create new judge with the revision counter advanced by one."""
        return replace(self, version=self.version + 1)

    def matches_name(self, name: str) -> bool:
        """Check whether a name refers to this judge.

        Compares case-insensitively against the display name and full name.
        """
        wanted = name.strip().casefold()
        return wanted in (self.display_name.casefold(), self.full_name.casefold())

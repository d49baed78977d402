"""Assignment slot domain model for the slot directory.

An assignment slot is a courtroom's assignment record: one part sitting in
one room, carrying at most one occupying judge.

Developer Golden Rules:
1. ID LINKAGE - The occupant is referenced by judge id; the display name is
   resolved at read time and never written back
2. ONE SLOT PER JUDGE - No judge occupies two courtrooms at once
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from uuid import UUID


@dataclass(frozen=True, eq=True)
class AssignmentSlot:
    """A courtroom assignment slot.

    Attributes:
        id: Assignment identifier.
        room_id: Identifier of the courtroom's room record.
        room_number: Room number shown on the roster, e.g. "301".
        part: Court part sitting in the room, e.g. "62".
        occupant_id: Id of the occupying judge, if any.
        occupant_name: Display name of the occupying judge, resolved on read.
        sort_order: Roster position.
        version: Revision counter, incremented by the store on every write.
    """

    id: UUID
    room_id: str
    room_number: str
    part: str
    occupant_id: UUID | None = field(default=None)
    occupant_name: str | None = field(default=None)
    sort_order: int = field(default=0)
    version: int = field(default=1)

    def __post_init__(self) -> None:
        """Validate slot fields."""
        if self.occupant_id is None and self.occupant_name is not None:
            raise ValueError("An empty slot cannot carry an occupant_name")
        if self.version < 1:
            raise ValueError(f"Slot version must be positive, got {self.version}")

    @property
    def is_occupied(self) -> bool:
        """Check if a judge sits in this slot."""
        return self.occupant_id is not None

    def with_occupant(self, occupant_id: UUID | None, occupant_name: str | None = None) -> AssignmentSlot:
        """Create new slot with the given occupant (None empties the slot)."""
        if occupant_id is None:
            occupant_name = None
        return replace(self, occupant_id=occupant_id, occupant_name=occupant_name)

    def next_version(self) -> AssignmentSlot:
        """Create new slot with the revision counter advanced by one."""
        return replace(self, version=self.version + 1)


@dataclass(frozen=True)
class CourtroomPlacement:
    """Courtroom details for seating a newly added judge.

    Attributes:
        room_id: Identifier of the courtroom's room record.
        room_number: Room number shown on the roster.
        part: Court part the judge will sit in.
    """

    room_id: str
    room_number: str
    part: str

    def __post_init__(self) -> None:
        """Validate placement fields."""
        if not self.part.strip():
            raise ValueError("Courtroom placement requires a part")

"""Request and result value objects for the reassignment engines.

Covers the move engine (move or swap between assignment slots), the
chambers swap engine, and the departure engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from uuid import UUID

from src.domain.errors.personnel import ReassignmentTargetMissingError
from src.domain.models.assignment_slot import AssignmentSlot


class HandoffAction(Enum):
    """What happens to a departing judge's courtroom or chambers.

    Actions:
        CLEAR: Leave the courtroom or chambers vacant
        REASSIGN: Hand it to a named replacement judge
    """

    CLEAR = "clear"
    REASSIGN = "reassign"


class MoveKind(Enum):
    """Outcome of a move engine call.

    Kinds:
        MOVE: Judge relocated into a previously empty slot
        SWAP: Two judges exchanged slots
    """

    MOVE = "move"
    SWAP = "swap"


def _clean_name(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True)
class DepartureRequest:
    """Instructions for processing a judge's departure.

    Attributes:
        judge_id: The departing judge.
        display_name: The departing judge's display name as the caller saw it.
        assignment_action: CLEAR or REASSIGN for the courtroom slot.
        chambers_action: CLEAR or REASSIGN for the chambers room.
        new_justice_for_assignment: Replacement judge's name for REASSIGN.
        new_chambers_occupant: Incoming chambers occupant's name for REASSIGN.
        departed_on: Departure date; today when omitted.
    """

    judge_id: UUID
    display_name: str
    assignment_action: HandoffAction = field(default=HandoffAction.CLEAR)
    chambers_action: HandoffAction = field(default=HandoffAction.CLEAR)
    new_justice_for_assignment: str | None = field(default=None)
    new_chambers_occupant: str | None = field(default=None)
    departed_on: date | None = field(default=None)

    @property
    def assignment_successor(self) -> str | None:
        """Replacement name for the courtroom, or None when clearing."""
        if self.assignment_action != HandoffAction.REASSIGN:
            return None
        return _clean_name(self.new_justice_for_assignment)

    @property
    def chambers_successor(self) -> str | None:
        """Incoming chambers occupant, or None when clearing."""
        if self.chambers_action != HandoffAction.REASSIGN:
            return None
        return _clean_name(self.new_chambers_occupant)

    def validate(self) -> None:
        """Check companion fields for REASSIGN actions.

        Raises:
            ReassignmentTargetMissingError: If a REASSIGN action has no
                replacement name, or names the departing judge.
        """
        departing = self.display_name.strip().casefold()
        checks = (
            (self.assignment_action, self.assignment_successor, "new_justice_for_assignment"),
            (self.chambers_action, self.chambers_successor, "new_chambers_occupant"),
        )
        for action, successor, field_name in checks:
            if action != HandoffAction.REASSIGN:
                continue
            if successor is None:
                raise ReassignmentTargetMissingError(field_name)
            if successor.casefold() == departing:
                raise ReassignmentTargetMissingError(
                    field_name, reason="must name someone other than the departing judge"
                )


@dataclass(frozen=True)
class DepartureInfo:
    """Everything held by a judge, as shown before a departure.

    Attributes:
        judge_id: The judge.
        display_name: The judge's display name.
        court_attorney: The judge's court attorney, if any.
        chambers_room: The judge's chambers room, if any.
        assignment: The judge's current assignment slot, if any.
    """

    judge_id: UUID
    display_name: str
    court_attorney: str | None
    chambers_room: str | None
    assignment: AssignmentSlot | None


@dataclass(frozen=True)
class DepartureResult:
    """Outcome of a processed departure.

    Attributes:
        judge_id: The departed judge.
        display_name: The departed judge's display name.
        departed_on: Recorded departure date.
        assignment_id: The slot the judge vacated, if any.
        assignment_successor: Who took over the slot, if reassigned.
        chambers_room: The chambers room the judge vacated, if any.
        chambers_successor: Who took over the chambers, if reassigned.
        vacated_chambers: The successor's previous chambers, released by the move.
    """

    judge_id: UUID
    display_name: str
    departed_on: date
    assignment_id: UUID | None = field(default=None)
    assignment_successor: str | None = field(default=None)
    chambers_room: str | None = field(default=None)
    chambers_successor: str | None = field(default=None)
    vacated_chambers: str | None = field(default=None)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move engine call.

    Attributes:
        kind: MOVE or SWAP.
        judge_id: The judge who moved.
        judge_name: The judge's display name.
        target_assignment_id: Slot the judge now occupies.
        source_assignment_id: Slot the judge left, if any.
        displaced_judge_name: For SWAP, the judge now sitting in the source slot.
    """

    kind: MoveKind
    judge_id: UUID
    judge_name: str
    target_assignment_id: UUID
    source_assignment_id: UUID | None = field(default=None)
    displaced_judge_name: str | None = field(default=None)


@dataclass(frozen=True)
class ChambersSwapResult:
    """Outcome of a chambers swap, with each judge's new chambers.

    Attributes:
        judge_a_id: First judge.
        judge_b_id: Second judge.
        chambers_a: Chambers now held by the first judge.
        chambers_b: Chambers now held by the second judge.
    """

    judge_a_id: UUID
    judge_b_id: UUID
    chambers_a: str | None
    chambers_b: str | None

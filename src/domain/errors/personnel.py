"""Personnel reassignment domain errors.

This module provides exception classes for failures in the slot directory,
personnel registry, and the move, chambers swap and departure engines.

Propagation Rules:
- Engines validate preconditions and raise before touching storage
- Errors raised inside a store transaction roll the whole transaction back
- A failed operation leaves every slot and judge exactly as it was
"""

from __future__ import annotations

from uuid import UUID

from src.domain.exceptions import CourtPersonnelError


class NotFoundError(CourtPersonnelError):
    """Base error for a referenced judge or slot that does not exist."""

    pass


class JudgeNotFoundError(NotFoundError):
    """Raised when a judge id or name does not resolve.

    Attributes:
        judge_ref: The id or display name that failed to resolve.
    """

    def __init__(self, judge_ref: UUID | str) -> None:
        """Initialize the error.

        Args:
            judge_ref: The id or display name that failed to resolve.
        """
        self.judge_ref = judge_ref
        super().__init__(f"Judge not found: {judge_ref}")


class AssignmentSlotNotFoundError(NotFoundError):
    """Raised when an assignment slot id does not resolve.

    Attributes:
        assignment_id: The slot id that failed to resolve.
    """

    def __init__(self, assignment_id: UUID) -> None:
        """Initialize the error.

        Args:
            assignment_id: The slot id that failed to resolve.
        """
        self.assignment_id = assignment_id
        super().__init__(f"Assignment slot not found: {assignment_id}")


class ValidationError(CourtPersonnelError):
    """Base error for requests rejected before any write is attempted."""

    pass


class ReassignmentTargetMissingError(ValidationError):
    """Raised when a reassign action has no usable replacement name.

    Attributes:
        field: The request field that was missing or invalid.
    """

    def __init__(self, field: str, reason: str = "is required for reassign") -> None:
        """Initialize the error.

        Args:
            field: The request field that was missing or invalid.
            reason: Why the field was rejected.
        """
        self.field = field
        self.reason = reason
        super().__init__(f"{field} {reason}")


class InvalidReassignmentError(ValidationError):
    """Raised when a replacement judge cannot take over a slot or chambers.

    Attributes:
        judge_name: Display name of the rejected replacement.
        reason: Why the replacement was rejected.
    """

    def __init__(self, judge_name: str, reason: str) -> None:
        """Initialize the error.

        Args:
            judge_name: Display name of the rejected replacement.
            reason: Why the replacement was rejected.
        """
        self.judge_name = judge_name
        self.reason = reason
        super().__init__(f"Cannot reassign to {judge_name}: {reason}")


class InvalidMoveError(ValidationError):
    """Raised when a move targets the slot the judge already occupies."""

    def __init__(self, judge_name: str, assignment_id: UUID) -> None:
        """Initialize the error.

        Args:
            judge_name: Display name of the judge being moved.
            assignment_id: The slot the judge already occupies.
        """
        self.judge_name = judge_name
        self.assignment_id = assignment_id
        super().__init__(f"{judge_name} already occupies assignment {assignment_id}")


class InvalidChambersSwapError(ValidationError):
    """Raised when a chambers swap names the same judge twice."""

    def __init__(self, judge_id: UUID) -> None:
        """Initialize the error.

        Args:
            judge_id: The judge named on both sides of the swap.
        """
        self.judge_id = judge_id
        super().__init__(f"Cannot swap chambers of judge {judge_id} with itself")


class InvalidStatusChangeError(ValidationError):
    """Raised when a status change bypasses the departure workflow."""

    def __init__(self, judge_id: UUID, requested_status: str, reason: str) -> None:
        """Initialize the error.

        Args:
            judge_id: The judge whose status change was rejected.
            requested_status: The status that was requested.
            reason: Why the change was rejected.
        """
        self.judge_id = judge_id
        self.requested_status = requested_status
        self.reason = reason
        super().__init__(
            f"Cannot set status of judge {judge_id} to {requested_status}: {reason}"
        )


class ChambersOccupiedError(ValidationError):
    """Raised when a chambers room is already held by another judge.

    Attributes:
        chambers_room: The contested room.
        holder_id: The judge currently holding the room.
    """

    def __init__(self, chambers_room: str, holder_id: UUID) -> None:
        """Initialize the error.

        Args:
            chambers_room: The contested room.
            holder_id: The judge currently holding the room.
        """
        self.chambers_room = chambers_room
        self.holder_id = holder_id
        super().__init__(
            f"Chambers room {chambers_room} is already held by judge {holder_id}"
        )


class DisplayNameMismatchError(ValidationError):
    """Raised when a request's display name disagrees with the stored judge."""

    def __init__(self, judge_id: UUID, expected: str, actual: str) -> None:
        """Initialize the error.

        Args:
            judge_id: The judge being processed.
            expected: The display name supplied by the caller.
            actual: The display name on record.
        """
        self.judge_id = judge_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Judge {judge_id} is recorded as {actual!r}, not {expected!r}"
        )


class InvalidSwapError(CourtPersonnelError):
    """Raised when a swap is required but the mover has no source slot.

    The displaced occupant of the target would have nowhere to go.
    """

    def __init__(self, judge_name: str, target_assignment_id: UUID, occupant: str) -> None:
        """Initialize the error.

        Args:
            judge_name: Display name of the judge being moved.
            target_assignment_id: The occupied target slot.
            occupant: Display name of the target's current occupant.
        """
        self.judge_name = judge_name
        self.target_assignment_id = target_assignment_id
        self.occupant = occupant
        super().__init__(
            f"Cannot swap {judge_name} with {occupant}: "
            f"{judge_name} holds no assignment for {occupant} to take"
        )


class AlreadyDepartedError(CourtPersonnelError):
    """Raised when an operation targets a judge who has already departed."""

    def __init__(self, judge_id: UUID, display_name: str) -> None:
        """Initialize the error.

        Args:
            judge_id: The departed judge.
            display_name: The departed judge's display name.
        """
        self.judge_id = judge_id
        self.display_name = display_name
        super().__init__(f"Judge {display_name} ({judge_id}) has already departed")


class IntegrityError(CourtPersonnelError):
    """Base error for stored data that violates an occupancy invariant."""

    pass


class DuplicateSlotOccupancyError(IntegrityError):
    """Raised when more than one slot references the same judge.

    Attributes:
        judge_id: The judge referenced by several slots.
        assignment_ids: Every slot referencing the judge.
    """

    def __init__(self, judge_id: UUID, assignment_ids: tuple[UUID, ...]) -> None:
        """Initialize the error.

        Args:
            judge_id: The judge referenced by several slots.
            assignment_ids: Every slot referencing the judge.
        """
        self.judge_id = judge_id
        self.assignment_ids = assignment_ids
        super().__init__(
            f"Judge {judge_id} occupies {len(assignment_ids)} assignment slots"
        )


class DuplicateJudgeNameError(IntegrityError):
    """Raised when a display name resolves to more than one judge."""

    def __init__(self, display_name: str, judge_ids: tuple[UUID, ...]) -> None:
        """Initialize the error.

        Args:
            display_name: The ambiguous display name.
            judge_ids: Every judge carrying that name.
        """
        self.display_name = display_name
        self.judge_ids = judge_ids
        super().__init__(
            f"Display name {display_name!r} matches {len(judge_ids)} judges"
        )


class ConflictError(CourtPersonnelError):
    """Base error for writes rejected because the row changed underneath.

    This is a recoverable error - the caller should re-read and retry.
    """

    pass


class ConcurrentModificationError(ConflictError):
    """Raised when a version compare-and-set fails.

    Attributes:
        entity: "judge" or "assignment_slot".
        entity_id: The row whose version did not match.
        expected_version: The version the caller read.
        actual_version: The version currently stored, if known.
    """

    def __init__(
        self,
        entity: str,
        entity_id: UUID,
        expected_version: int,
        actual_version: int | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            entity: "judge" or "assignment_slot".
            entity_id: The row whose version did not match.
            expected_version: The version the caller read.
            actual_version: The version currently stored, if known.
        """
        self.entity = entity
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        found = "unknown" if actual_version is None else str(actual_version)
        super().__init__(
            f"Concurrent modification of {entity} {entity_id}: "
            f"expected version {expected_version}, found {found}"
        )


class StaleSourceSlotError(ConflictError):
    """Raised when the caller's idea of a judge's current slot is out of date."""

    def __init__(
        self,
        judge_name: str,
        claimed_assignment_id: UUID | None,
        actual_assignment_id: UUID | None,
    ) -> None:
        """Initialize the error.

        Args:
            judge_name: The judge being moved.
            claimed_assignment_id: The source slot the caller supplied.
            actual_assignment_id: The slot the judge actually occupies.
        """
        self.judge_name = judge_name
        self.claimed_assignment_id = claimed_assignment_id
        self.actual_assignment_id = actual_assignment_id
        super().__init__(
            f"{judge_name} occupies {actual_assignment_id}, "
            f"not {claimed_assignment_id}"
        )

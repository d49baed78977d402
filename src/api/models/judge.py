"""Court personnel API request/response models.

Pydantic models for the slot directory, judge registry, move, chambers
swap and departure endpoints.

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic handles schema validation
2. FAIL LOUD - Rejected requests return RFC 7807 problem details
3. VERSIONS ROUND-TRIP - Every read returns the version a later write may echo
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from src.domain.models.assignment_slot import AssignmentSlot
from src.domain.models.judge import Judge, JudgeStatus
from src.domain.models.reassignment import (
    ChambersSwapResult,
    DepartureInfo,
    DepartureResult,
    HandoffAction,
    MoveKind,
    MoveResult,
)

# ISO 8601 with Z suffix (Pydantic v2)
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class AssignmentSlotResponse(BaseModel):
    """One row of the courtroom assignment directory."""

    assignment_id: UUID = Field(..., description="Assignment slot identifier")
    room_id: str = Field(..., description="Courtroom room record identifier")
    room_number: str = Field(..., description="Room number shown on the roster")
    part: str = Field(..., description="Court part sitting in the room")
    occupant_id: UUID | None = Field(default=None, description="Occupying judge id")
    occupant_name: str | None = Field(
        default=None, description="Occupying judge display name"
    )
    sort_order: int = Field(..., description="Roster position")
    version: int = Field(..., ge=1, description="Revision for compare-and-set writes")

    @classmethod
    def from_domain(cls, slot: AssignmentSlot) -> AssignmentSlotResponse:
        return cls(
            assignment_id=slot.id,
            room_id=slot.room_id,
            room_number=slot.room_number,
            part=slot.part,
            occupant_id=slot.occupant_id,
            occupant_name=slot.occupant_name,
            sort_order=slot.sort_order,
            version=slot.version,
        )


class AssignmentListResponse(BaseModel):
    """Courtroom assignment directory ordered by part."""

    assignments: list[AssignmentSlotResponse]
    total: int = Field(..., ge=0)


class JudgeResponse(BaseModel):
    """A judge's personnel record."""

    judge_id: UUID
    first_name: str
    last_name: str
    display_name: str = Field(..., description='Roster name, e.g. "A. SMITH"')
    status: JudgeStatus
    title: str
    chambers_room: str | None = None
    court_attorney: str | None = None
    is_available_for_assignment: bool
    departed_on: date | None = None
    version: int = Field(..., ge=1)
    updated_at: DateTimeWithZ

    @classmethod
    def from_domain(cls, judge: Judge) -> JudgeResponse:
        return cls(
            judge_id=judge.id,
            first_name=judge.first_name,
            last_name=judge.last_name,
            display_name=judge.display_name,
            status=judge.status,
            title=judge.title,
            chambers_room=judge.chambers_room,
            court_attorney=judge.court_attorney,
            is_available_for_assignment=judge.is_available_for_assignment,
            departed_on=judge.departed_on,
            version=judge.version,
            updated_at=judge.updated_at,
        )


class JudgeListResponse(BaseModel):
    """Judges ordered by display name."""

    judges: list[JudgeResponse]
    total: int = Field(..., ge=0)


class CourtroomPlacementRequest(BaseModel):
    """Courtroom to seat a newly added judge in."""

    model_config = ConfigDict(str_strip_whitespace=True)

    room_id: str = Field(..., min_length=1)
    room_number: str = Field(..., min_length=1)
    part: str = Field(..., min_length=1)


class AddJudgeRequest(BaseModel):
    """Request to add a judge to the registry."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    status: JudgeStatus = Field(default=JudgeStatus.ACTIVE)
    court_attorney: str | None = Field(default=None, max_length=200)
    chambers_room: str | None = Field(default=None, max_length=50)
    courtroom: CourtroomPlacementRequest | None = None


class UpdateStatusRequest(BaseModel):
    """Request to move a judge between active and JHO."""

    status: JudgeStatus
    expected_version: int | None = Field(default=None, ge=1)


class UpdateDetailsRequest(BaseModel):
    """Request to edit a judge's court attorney and chambers.

    Omitted fields are left unchanged; null or blank clears the field.
    """

    court_attorney: str | None = Field(default=None, max_length=200)
    chambers_room: str | None = Field(default=None, max_length=50)
    expected_version: int | None = Field(default=None, ge=1)


class DepartureInfoResponse(BaseModel):
    """What a judge holds, shown before confirming a departure."""

    judge_id: UUID
    display_name: str
    court_attorney: str | None = None
    chambers_room: str | None = None
    assignment: AssignmentSlotResponse | None = None

    @classmethod
    def from_domain(cls, info: DepartureInfo) -> DepartureInfoResponse:
        return cls(
            judge_id=info.judge_id,
            display_name=info.display_name,
            court_attorney=info.court_attorney,
            chambers_room=info.chambers_room,
            assignment=AssignmentSlotResponse.from_domain(info.assignment)
            if info.assignment
            else None,
        )


class MoveRequest(BaseModel):
    """Request to move a judge into a slot, swapping if it is occupied."""

    judge_name: str = Field(..., min_length=1, description="Display name of the judge")
    target_assignment_id: UUID
    source_assignment_id: UUID | None = Field(
        default=None, description="Slot the caller believes the judge holds"
    )
    target_version: int | None = Field(default=None, ge=1)
    source_version: int | None = Field(default=None, ge=1)


class MoveResponse(BaseModel):
    """Outcome of a move or swap."""

    kind: MoveKind
    judge_id: UUID
    judge_name: str
    target_assignment_id: UUID
    source_assignment_id: UUID | None = None
    displaced_judge_name: str | None = None

    @classmethod
    def from_domain(cls, result: MoveResult) -> MoveResponse:
        return cls(
            kind=result.kind,
            judge_id=result.judge_id,
            judge_name=result.judge_name,
            target_assignment_id=result.target_assignment_id,
            source_assignment_id=result.source_assignment_id,
            displaced_judge_name=result.displaced_judge_name,
        )


class ChambersSwapRequest(BaseModel):
    """Request to exchange chambers between two judges."""

    judge_a_id: UUID
    judge_b_id: UUID
    version_a: int | None = Field(default=None, ge=1)
    version_b: int | None = Field(default=None, ge=1)


class ChambersSwapResponse(BaseModel):
    """Each judge's chambers after the swap."""

    judge_a_id: UUID
    judge_b_id: UUID
    chambers_a: str | None = None
    chambers_b: str | None = None

    @classmethod
    def from_domain(cls, result: ChambersSwapResult) -> ChambersSwapResponse:
        return cls(
            judge_a_id=result.judge_a_id,
            judge_b_id=result.judge_b_id,
            chambers_a=result.chambers_a,
            chambers_b=result.chambers_b,
        )


class DepartureRequestBody(BaseModel):
    """Request to mark a judge departed."""

    display_name: str = Field(..., min_length=1)
    assignment_action: HandoffAction = Field(default=HandoffAction.CLEAR)
    new_justice_for_assignment: str | None = None
    chambers_action: HandoffAction = Field(default=HandoffAction.CLEAR)
    new_chambers_occupant: str | None = None
    departed_on: date | None = None
    judge_version: int | None = Field(default=None, ge=1)


class DepartureResponse(BaseModel):
    """What a departure vacated and who took over."""

    judge_id: UUID
    display_name: str
    departed_on: date
    assignment_id: UUID | None = None
    assignment_successor: str | None = None
    chambers_room: str | None = None
    chambers_successor: str | None = None
    vacated_chambers: str | None = None

    @classmethod
    def from_domain(cls, result: DepartureResult) -> DepartureResponse:
        return cls(
            judge_id=result.judge_id,
            display_name=result.display_name,
            departed_on=result.departed_on,
            assignment_id=result.assignment_id,
            assignment_successor=result.assignment_successor,
            chambers_room=result.chambers_room,
            chambers_successor=result.chambers_successor,
            vacated_chambers=result.vacated_chambers,
        )


class ProblemDetailResponse(BaseModel):
    """RFC 7807 problem detail body."""

    type: str
    title: str
    status: int
    detail: str
    instance: str
    error: str = Field(..., description="Domain error class name")

"""Courtroom assignment directory routes.

Read-only listing of assignment slots, ordered by part, with each slot's
occupant resolved to a display name.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from src.api.dependencies.personnel import get_slot_directory_service
from src.api.models.judge import (
    AssignmentListResponse,
    AssignmentSlotResponse,
    ProblemDetailResponse,
)
from src.api.problem_details import to_http_exception
from src.application.services.slot_directory_service import SlotDirectoryService
from src.domain.exceptions import CourtPersonnelError

router = APIRouter(prefix="/v1/assignments", tags=["assignments"])


@router.get(
    "",
    response_model=AssignmentListResponse,
    responses={503: {"model": ProblemDetailResponse, "description": "Store unavailable"}},
    summary="List courtroom assignment slots",
)
async def list_assignments(
    request: Request,
    directory: SlotDirectoryService = Depends(get_slot_directory_service),
) -> AssignmentListResponse:
    """List every assignment slot ordered by part."""
    try:
        slots = await directory.list_slots()
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return AssignmentListResponse(
        assignments=[AssignmentSlotResponse.from_domain(slot) for slot in slots],
        total=len(slots),
    )


@router.get(
    "/destinations/{judge_id}",
    response_model=AssignmentListResponse,
    responses={404: {"model": ProblemDetailResponse, "description": "Judge not found"}},
    summary="List slots a judge can be moved into",
)
async def list_destinations(
    judge_id: UUID,
    request: Request,
    directory: SlotDirectoryService = Depends(get_slot_directory_service),
) -> AssignmentListResponse:
    """Every slot except the judge's own; occupied slots imply a swap."""
    try:
        slots = await directory.list_destinations(judge_id)
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return AssignmentListResponse(
        assignments=[AssignmentSlotResponse.from_domain(slot) for slot in slots],
        total=len(slots),
    )

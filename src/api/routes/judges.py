"""Judge registry and reassignment routes.

FastAPI router exposing the personnel registry, the move engine, the
chambers swap engine and the departure engine as request/response calls.

Developer Golden Rules:
1. THIN HANDLERS - Routes translate HTTP to service calls and back
2. FAIL LOUD - Domain errors become RFC 7807 problem details
3. ECHO VERSIONS - Writes accept the version the client last read
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from src.api.dependencies.personnel import (
    get_chambers_swap_service,
    get_judge_departure_service,
    get_judge_move_service,
    get_personnel_registry_service,
    get_slot_directory_service,
)
from src.api.models.judge import (
    AddJudgeRequest,
    AssignmentSlotResponse,
    ChambersSwapRequest,
    ChambersSwapResponse,
    DepartureInfoResponse,
    DepartureRequestBody,
    DepartureResponse,
    JudgeListResponse,
    JudgeResponse,
    MoveRequest,
    MoveResponse,
    ProblemDetailResponse,
    UpdateDetailsRequest,
    UpdateStatusRequest,
)
from src.api.problem_details import to_http_exception
from src.application.services.chambers_swap_service import ChambersSwapService
from src.application.services.judge_departure_service import JudgeDepartureService
from src.application.services.judge_move_service import JudgeMoveService
from src.application.services.personnel_registry_service import (
    UNSET,
    PersonnelRegistryService,
)
from src.application.services.slot_directory_service import SlotDirectoryService
from src.domain.exceptions import CourtPersonnelError
from src.domain.models.assignment_slot import CourtroomPlacement
from src.domain.models.judge import JudgeStatus
from src.domain.models.reassignment import DepartureRequest

router = APIRouter(prefix="/v1/judges", tags=["judges"])

_NOT_FOUND = {404: {"model": ProblemDetailResponse, "description": "Judge not found"}}
_WRITE_ERRORS = {
    404: {"model": ProblemDetailResponse, "description": "Judge or slot not found"},
    409: {
        "model": ProblemDetailResponse,
        "description": "Already departed, integrity violation or stale version",
    },
    422: {"model": ProblemDetailResponse, "description": "Request rejected"},
    503: {"model": ProblemDetailResponse, "description": "Store unavailable"},
}


@router.get("", response_model=JudgeListResponse, summary="List judges")
async def list_judges(
    request: Request,
    status: JudgeStatus | None = None,
    registry: PersonnelRegistryService = Depends(get_personnel_registry_service),
) -> JudgeListResponse:
    """List judges ordered by display name, optionally filtered by status."""
    try:
        judges = await registry.list_judges(status)
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return JudgeListResponse(
        judges=[JudgeResponse.from_domain(judge) for judge in judges],
        total=len(judges),
    )


@router.post(
    "",
    response_model=JudgeResponse,
    status_code=201,
    responses=_WRITE_ERRORS,
    summary="Add a judge",
)
async def add_judge(
    body: AddJudgeRequest,
    request: Request,
    registry: PersonnelRegistryService = Depends(get_personnel_registry_service),
) -> JudgeResponse:
    """Add a judge, optionally seating them in a new courtroom slot."""
    courtroom = (
        CourtroomPlacement(
            room_id=body.courtroom.room_id,
            room_number=body.courtroom.room_number,
            part=body.courtroom.part,
        )
        if body.courtroom
        else None
    )
    try:
        judge = await registry.add_judge(
            first_name=body.first_name,
            last_name=body.last_name,
            status=body.status,
            court_attorney=body.court_attorney,
            chambers_room=body.chambers_room,
            courtroom=courtroom,
        )
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return JudgeResponse.from_domain(judge)


@router.post(
    "/move",
    response_model=MoveResponse,
    responses={
        **_WRITE_ERRORS,
        400: {"model": ProblemDetailResponse, "description": "Swap without a source slot"},
    },
    summary="Move a judge to a slot, swapping if occupied",
)
async def move_judge(
    body: MoveRequest,
    request: Request,
    service: JudgeMoveService = Depends(get_judge_move_service),
) -> MoveResponse:
    try:
        result = await service.move(
            judge_name=body.judge_name,
            target_assignment_id=body.target_assignment_id,
            source_assignment_id=body.source_assignment_id,
            target_version=body.target_version,
            source_version=body.source_version,
        )
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return MoveResponse.from_domain(result)


@router.post(
    "/chambers-swap",
    response_model=ChambersSwapResponse,
    responses=_WRITE_ERRORS,
    summary="Exchange chambers between two judges",
)
async def swap_chambers(
    body: ChambersSwapRequest,
    request: Request,
    service: ChambersSwapService = Depends(get_chambers_swap_service),
) -> ChambersSwapResponse:
    try:
        result = await service.swap_chambers(
            body.judge_a_id,
            body.judge_b_id,
            version_a=body.version_a,
            version_b=body.version_b,
        )
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return ChambersSwapResponse.from_domain(result)


@router.get(
    "/{judge_id}", response_model=JudgeResponse, responses=_NOT_FOUND, summary="Get a judge"
)
async def get_judge(
    judge_id: UUID,
    request: Request,
    registry: PersonnelRegistryService = Depends(get_personnel_registry_service),
) -> JudgeResponse:
    try:
        judge = await registry.get_judge(judge_id)
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return JudgeResponse.from_domain(judge)


@router.get(
    "/{judge_id}/assignment",
    response_model=AssignmentSlotResponse | None,
    responses=_NOT_FOUND,
    summary="Get the slot a judge occupies",
)
async def get_judge_assignment(
    judge_id: UUID,
    request: Request,
    directory: SlotDirectoryService = Depends(get_slot_directory_service),
) -> AssignmentSlotResponse | None:
    """Return the judge's slot, or null if they hold no courtroom."""
    try:
        slot = await directory.get_slot_for_judge(judge_id)
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return AssignmentSlotResponse.from_domain(slot) if slot else None


@router.patch(
    "/{judge_id}/status",
    response_model=JudgeResponse,
    responses=_WRITE_ERRORS,
    summary="Change a judge between active and JHO",
)
async def update_status(
    judge_id: UUID,
    body: UpdateStatusRequest,
    request: Request,
    registry: PersonnelRegistryService = Depends(get_personnel_registry_service),
) -> JudgeResponse:
    """Departed is rejected here; use the departure endpoint."""
    try:
        judge = await registry.update_status(
            judge_id, body.status, expected_version=body.expected_version
        )
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return JudgeResponse.from_domain(judge)


@router.patch(
    "/{judge_id}/details",
    response_model=JudgeResponse,
    responses=_WRITE_ERRORS,
    summary="Edit a judge's court attorney and chambers",
)
async def update_details(
    judge_id: UUID,
    body: UpdateDetailsRequest,
    request: Request,
    registry: PersonnelRegistryService = Depends(get_personnel_registry_service),
) -> JudgeResponse:
    """Only fields present in the body are changed."""
    provided = body.model_fields_set
    try:
        judge = await registry.update_details(
            judge_id,
            court_attorney=body.court_attorney if "court_attorney" in provided else UNSET,
            chambers_room=body.chambers_room if "chambers_room" in provided else UNSET,
            expected_version=body.expected_version,
        )
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return JudgeResponse.from_domain(judge)


@router.get(
    "/{judge_id}/departure-info",
    response_model=DepartureInfoResponse,
    responses=_NOT_FOUND,
    summary="Summarise what a judge holds before departure",
)
async def get_departure_info(
    judge_id: UUID,
    request: Request,
    registry: PersonnelRegistryService = Depends(get_personnel_registry_service),
) -> DepartureInfoResponse:
    try:
        info = await registry.get_departure_info(judge_id)
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return DepartureInfoResponse.from_domain(info)


@router.post(
    "/{judge_id}/departure",
    response_model=DepartureResponse,
    responses=_WRITE_ERRORS,
    summary="Mark a judge departed and hand off courtroom and chambers",
)
async def process_departure(
    judge_id: UUID,
    body: DepartureRequestBody,
    request: Request,
    service: JudgeDepartureService = Depends(get_judge_departure_service),
) -> DepartureResponse:
    """Departure, courtroom handoff and chambers handoff commit together."""
    departure = DepartureRequest(
        judge_id=judge_id,
        display_name=body.display_name,
        assignment_action=body.assignment_action,
        chambers_action=body.chambers_action,
        new_justice_for_assignment=body.new_justice_for_assignment,
        new_chambers_occupant=body.new_chambers_occupant,
        departed_on=body.departed_on,
    )
    try:
        result = await service.process_departure(departure, judge_version=body.judge_version)
    except CourtPersonnelError as e:
        raise to_http_exception(e, request) from None
    return DepartureResponse.from_domain(result)

"""Health check endpoint for the court personnel API."""

from fastapi import APIRouter, Depends, HTTPException

from src.api.dependencies.personnel import get_slot_directory_service
from src.api.models.health import HealthResponse
from src.application.services.slot_directory_service import SlotDirectoryService
from src.bootstrap.personnel import get_personnel_config
from src.domain.errors import StorageFailureError

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    directory: SlotDirectoryService = Depends(get_slot_directory_service),
) -> HealthResponse:
    """Return health status after a read against the personnel store.

    Raises:
        HTTPException 503: If the store cannot be read.
    """
    backend = get_personnel_config().store_backend
    try:
        await directory.list_slots()
    except StorageFailureError:
        raise HTTPException(
            status_code=503, detail={"status": "unhealthy", "store_backend": backend}
        ) from None
    return HealthResponse(status="healthy", store_backend=backend)

"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: "healthy" when the personnel store answers a read.
        store_backend: Configured store backend ("memory" or "postgres").
    """

    status: str
    store_backend: str

"""FastAPI application entry point for court personnel."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.middleware.logging_middleware import LoggingMiddleware
from src.api.routes.assignments import router as assignments_router
from src.api.routes.health import router as health_router
from src.api.routes.judges import router as judges_router
from src.api.startup import shutdown_personnel, startup_personnel


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    startup_personnel()
    yield
    await shutdown_personnel()


app = FastAPI(
    title="Court Personnel API",
    description="Judge reassignment engine for courtroom and chambers occupancy",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.include_router(health_router)
app.include_router(assignments_router)
app.include_router(judges_router)

"""Startup and shutdown hooks for the court personnel API.

Startup configures structured logging and selects the personnel store;
shutdown disposes of the database engine when the postgres store is used.

Usage in FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        startup_personnel()
        yield
        await shutdown_personnel()
"""

from structlog import get_logger

from src.bootstrap.database import close_database_engine
from src.bootstrap.logging import configure_logging
from src.bootstrap.personnel import get_personnel_config, get_personnel_store

logger = get_logger()


def startup_personnel() -> None:
    """Configure logging and build the personnel store.

    Raises:
        ValueError: If the configuration is invalid (fails startup).
    """
    config = get_personnel_config()
    configure_logging(config)
    get_personnel_store()
    logger.info(
        "personnel_service_started",
        environment=config.environment,
        store_backend=config.store_backend,
    )


async def shutdown_personnel() -> None:
    """Release database connections."""
    await close_database_engine()
    logger.info("personnel_service_stopped")

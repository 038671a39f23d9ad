# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, events_router, health_router
from .core.config import get_settings
from .di.container import get_container
from .domain.exceptions import StoreUnavailableError
from .domain.repositories.event_repository import EventRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the events index exists on startup and closes the shared
    MongoDB client on shutdown.
    """
    event_repository = get_container().get(EventRepository)
    ensure_indexes = getattr(event_repository, "ensure_indexes", None)
    if ensure_indexes is not None:
        try:
            await ensure_indexes()
            logger.info("Event indexes ensured")
        except StoreUnavailableError as e:
            # Queries still work without the index, only slower
            logger.error(f"Could not ensure event indexes: {e.message}")

    yield

    close_database()
    logger.info("Application shutdown complete")


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("calendar_backend").setLevel(level)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging level from settings
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Event Calendar API",
        version="1.0.0",
        description="Personal event calendar backend",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(events_router, prefix="/api/v1/events")
    application.include_router(health_router, prefix="/health")

    return application


# Create application instance
app = create_application()

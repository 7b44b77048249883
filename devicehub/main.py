# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import device_router, health_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import configure_logging
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Logs the configured device store on startup and releases the MongoDB
    client on shutdown.
    """
    settings = get_settings()
    logger.info(f"DeviceHub starting with device store '{settings.device_store}'")

    yield

    try:
        close_database()
        logger.info("MongoDB client closed")
    except Exception as e:
        logger.error(f"Error closing MongoDB client: {e}", exc_info=True)

    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers
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
        title="DeviceHub API",
        version="1.0.0",
        description="Device registry with lifecycle-aware updates",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(health_router)
    application.include_router(device_router, prefix="/api/v1/devices")

    return application


# Create application instance
app = create_application()

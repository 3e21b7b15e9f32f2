# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.error_handlers import register_exception_handlers
from .api.v1 import face_router, meta_router, vision_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)

APP_TITLE = "Face & Vision Bridge"
APP_VERSION = "1.1.0"
APP_DESCRIPTION = (
    "Endpoints bridging to Azure Face API and Azure Computer Vision. "
    "Face supports detection and qualityForRecognition; Vision prefers v4 with v3.2 fallback."
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Closes the pooled upstream HTTP client on shutdown.
    """
    settings = get_settings()
    logger.info(
        f"Face service configured: {settings.face_service.is_configured}, "
        f"Vision service configured: {settings.vision_service.is_configured}"
    )

    yield

    await close_shared_http_client()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - Exception handlers mapping errors to JSON bodies
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    # The OpenAPI document and docs routes are served by meta_router (proxy-aware)
    application = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        description=APP_DESCRIPTION,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(meta_router)
    application.include_router(face_router, prefix="/face")
    application.include_router(vision_router, prefix="/vision")

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Serve the application on HOST:PORT."""
    settings = get_settings()
    logger.info(f"Bridge listening at http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()

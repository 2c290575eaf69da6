# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import users_router, fallback_router
from .core.config import get_settings
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import (
    connect,
    ensure_user_indexes,
    get_database,
    get_user_collection,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connects to MongoDB, ensures the unique user indexes and builds the DI
    container. A failed connection aborts startup. When the application was
    created with a ready container (tests), nothing is connected.
    """
    if getattr(app.state, "container", None) is not None:
        yield
        return

    settings = get_settings()

    logger.info("starting server")
    client = await connect(settings)
    try:
        database = get_database(client, settings)
        await ensure_user_indexes(get_user_collection(database, settings))
        app.state.container = DIContainer(database=database, settings=settings)
        yield
    finally:
        client.close()
        app.state.container = None
        logger.info("stopping server")


async def handle_request_validation_error(request: Request, exception: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors, not 422s"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "invalid request body"},
    )


async def handle_unexpected_error(request: Request, exception: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exception}", exc_info=exception)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "internal server error"},
    )


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Error handlers
    - API route registration

    Args:
        container: Pre-built DI container; skips the MongoDB connection

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    # Create FastAPI app
    application = FastAPI(
        title="Users Registration API",
        version="1.0.0",
        description="Register, authenticate, retrieve, modify and unregister users",
        lifespan=lifespan
    )
    application.state.container = container

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(Exception, handle_unexpected_error)

    @application.get("/", include_in_schema=False)
    async def welcome() -> str:
        return "Welcome to Users Registration API"

    # Register API routers; the fallback must stay last
    application.include_router(users_router, prefix="/api")
    application.include_router(fallback_router, prefix="/api")

    return application


# Create application instance
app = create_application()

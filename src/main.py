"""
Main FastAPI application entry point.

Builds the application: trace middleware, RFC 7807 exception handlers,
system endpoints and the v1 API. The lifespan loads the access policy
before the first request and, on shutdown, waits for queued notification
deliveries before closing the database engine.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import (
    get_database,
    get_logger,
    get_notification_dispatcher,
    init_access_policy,
)
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: Load the access policy (fails fast if the files are broken)
    - Shutdown: Drain pending notifications, dispose the engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    init_access_policy()
    logger.info("application_started", environment=settings.environment.value)

    yield

    await get_notification_dispatcher().drain()
    await get_database().close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application.

    Returns:
        FastAPI: Configured application.
    """
    application = FastAPI(
        title=settings.app_name,
        description="Access control and paginated queries for the marketing dashboard",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Request correlation
    application.add_middleware(TraceMiddleware)

    # RFC 7807 error responses
    register_exception_handlers(application)

    application.include_router(system_router)
    application.include_router(v1_router)
    return application


app = create_app()

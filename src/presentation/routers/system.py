"""Unversioned endpoints: service banner, health check, development config dump."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Service banner."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Database ping; 503 with "degraded" when it fails.

    Returns:
        JSONResponse: 200 when the database answers, 503 otherwise.
    """
    database_ok = await get_database().check_connection()
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={
            "status": "healthy" if database_ok else "degraded",
            "database": "ok" if database_ok else "unavailable",
        },
    )


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Non-secret settings, development only (403 elsewhere)."""
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "/config is disabled outside development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "v1_prefix": settings.api_v1_prefix,
            },
            "pagination": {
                "default_page_size": settings.default_page_size,
                "max_page_size": settings.max_page_size,
            },
            "authorization": {
                "model": settings.authz_model_path,
                "policy": settings.authz_policy_path,
                "role_claim": settings.identity_role_claim,
            },
        }
    )

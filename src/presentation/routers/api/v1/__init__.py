"""API v1 routers.

Resources:
    /api/v1/blogs                     - Blog post mutations
    /api/v1/collections/{collection}  - Paginated collection reads
    /api/v1/dashboard/stats           - Lead counts per status and source
    /api/v1/navigation                - Role-filtered dashboard menu
    /api/v1/users                     - Profile administration
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.blogs import router as blogs_router
from src.presentation.routers.api.v1.collections import router as collections_router
from src.presentation.routers.api.v1.dashboard import router as dashboard_router
from src.presentation.routers.api.v1.navigation import router as navigation_router
from src.presentation.routers.api.v1.users import router as users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(blogs_router)
v1_router.include_router(collections_router)
v1_router.include_router(dashboard_router)
v1_router.include_router(navigation_router)
v1_router.include_router(users_router)

__all__ = [
    "v1_router",
]

"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import CollectionPageResponse, ProfileUpdateRequest
"""

from src.schemas.blog_schemas import BlogCreateRequest, BlogResponse, BlogUpdateRequest
from src.schemas.collection_schemas import CollectionPageResponse
from src.schemas.common_schemas import PaginatedMeta
from src.schemas.dashboard_schemas import LeadStatsResponse
from src.schemas.navigation_schemas import NavigationItemResponse, NavigationResponse
from src.schemas.profile_schemas import (
    ProfileCreateRequest,
    ProfileResponse,
    ProfileUpdateRequest,
)

__all__ = [
    "BlogCreateRequest",
    "BlogResponse",
    "BlogUpdateRequest",
    "CollectionPageResponse",
    "LeadStatsResponse",
    "NavigationItemResponse",
    "NavigationResponse",
    "PaginatedMeta",
    "ProfileCreateRequest",
    "ProfileResponse",
    "ProfileUpdateRequest",
]

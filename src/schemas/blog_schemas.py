"""Blog request/response schemas.

Endpoints:
    POST   /api/v1/blogs          - Create a post
    PATCH  /api/v1/blogs/{id}     - Update a post
    DELETE /api/v1/blogs/{id}     - Delete a post
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import Blog


class BlogCreateRequest(BaseModel):
    """Request schema for blog creation.

    POST /api/v1/blogs
    Returns: 201 Created
    """

    title: str = Field(..., max_length=255, examples=["Local SEO checklist"])
    description: str = Field(..., examples=["Ten fixes for a small business site"])
    content: str | None = None
    feature_image: str | None = Field(None, max_length=500)
    category: str = Field("Other", max_length=64, examples=["Marketing"])
    tags: list[str] = Field(default_factory=list, examples=[["seo", "local"]])
    status: str = Field("draft", examples=["published"])


class BlogUpdateRequest(BaseModel):
    """Request schema for blog updates. Omitted fields are unchanged.

    PATCH /api/v1/blogs/{id}
    Returns: 200 OK
    """

    title: str | None = Field(None, max_length=255)
    description: str | None = None
    content: str | None = None
    feature_image: str | None = Field(None, max_length=500)
    category: str | None = Field(None, max_length=64)
    tags: list[str] | None = None
    status: str | None = None

    model_config = ConfigDict(json_schema_extra={"example": {"status": "published"}})


class BlogResponse(BaseModel):
    """Blog resource."""

    id: UUID
    title: str
    description: str
    content: str | None = None
    feature_image: str | None = None
    category: str
    tags: list[str]
    author_id: UUID | None = None
    status: str
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, blog: Blog) -> "BlogResponse":
        """Build the response from a Blog entity."""
        return cls(
            id=blog.id,
            title=blog.title,
            description=blog.description,
            content=blog.content,
            feature_image=blog.feature_image,
            category=blog.category,
            tags=list(blog.tags),
            author_id=blog.author_id,
            status=blog.status.value,
            published_at=blog.published_at,
            created_at=blog.created_at,
            updated_at=blog.updated_at,
        )

"""Navigation schemas.

GET /api/v1/navigation
"""

from pydantic import BaseModel, Field


class NavigationItemResponse(BaseModel):
    """A dashboard menu entry."""

    name: str = Field(..., examples=["Leads"])
    path: str = Field(..., examples=["/leads"])
    resource: str = Field(..., examples=["leads"])


class NavigationResponse(BaseModel):
    """Menu entries visible to the caller, in menu order."""

    role: str | None = Field(None, description="Caller's role (None if unknown)")
    items: list[NavigationItemResponse]

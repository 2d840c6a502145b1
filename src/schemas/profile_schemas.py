"""Profile request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST   /api/v1/users          - Register (self sign-up or admin invite)
    PATCH  /api/v1/users/{id}     - Update details and/or role
    DELETE /api/v1/users/{id}     - Delete
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.entities import Profile


class ProfileCreateRequest(BaseModel):
    """Request schema for profile registration.

    POST /api/v1/users
    Returns: 201 Created
    """

    username: str = Field(..., min_length=1, max_length=64, examples=["jane"])
    email: EmailStr | None = Field(None, examples=["jane@example.com"])
    phone: str | None = Field(None, max_length=32, examples=["+1 555 0100"])
    role: str = Field(
        "client",
        description="Requested role (invites only; self sign-up is always client)",
        examples=["sales_person"],
    )


class ProfileUpdateRequest(BaseModel):
    """Request schema for profile updates. Omitted fields are unchanged.

    PATCH /api/v1/users/{id}
    Returns: 200 OK
    """

    username: str | None = Field(None, min_length=1, max_length=64)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=32)
    role: str | None = Field(None, examples=["seo_manager"])
    is_client_paid: bool | None = None
    subscription_plan: str | None = Field(None, max_length=64)
    subscription_start: date | None = None
    subscription_end: date | None = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"role": "sales_manager"}}
    )


class ProfileResponse(BaseModel):
    """Profile resource."""

    id: UUID
    username: str
    email: str | None = None
    phone: str | None = None
    role: str
    is_client_paid: bool
    subscription_plan: str | None = None
    subscription_start: date | None = None
    subscription_end: date | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        """Build the response from a Profile entity."""
        return cls(
            id=profile.id,
            username=profile.username,
            email=profile.email,
            phone=profile.phone,
            role=profile.role.value,
            is_client_paid=profile.is_client_paid,
            subscription_plan=profile.subscription_plan,
            subscription_start=profile.subscription_start,
            subscription_end=profile.subscription_end,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

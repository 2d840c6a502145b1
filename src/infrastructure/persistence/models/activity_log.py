"""Activity log database model (append-only).

One row per successful mutation. Rows are never updated, so the model
extends BaseModel (no updated_at).
"""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class ActivityLogModel(BaseModel):
    """Activity log model.

    Fields:
        user_id: Acting profile (kept after the profile is deleted)
        action: ActivityAction value
        resource_type: Kind of resource mutated
        resource_id: Identifier of the mutated resource
        details: JSON context (changed fields, old/new role)
    """

    __tablename__ = "activity_logs"

    user_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    action: Mapped[str] = mapped_column(String(64), nullable=False)
    resource_type: Mapped[str] = mapped_column(String(64), nullable=False)
    resource_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    details: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    __table_args__ = (
        Index("idx_activity_logs_user_action", "user_id", "action"),
        Index("idx_activity_logs_resource", "resource_type", "resource_id"),
    )

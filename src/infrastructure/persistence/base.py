"""Declarative bases for the dashboard tables.

Every collection pages by (created_at, id), so both columns live here.
Ids are UUIDv7: rows created within one clock tick still sort in insert
order. Append-only tables (activity_logs) extend BaseModel; tables whose
rows get edited extend BaseMutableModel and gain updated_at.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BaseModel(DeclarativeBase):
    """UUIDv7 `id` plus indexed `created_at`."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
        index=True,
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Column name -> value for every mapped column."""
        return {column.name: getattr(self, column.key) for column in self.__table__.columns}


class TimestampMixin:
    """Adds updated_at, refreshed on every UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
        onupdate=_utcnow,
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Adds updated_at; mixin order fixed here."""

    __abstract__ = True

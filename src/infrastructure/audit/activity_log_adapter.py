"""SQLAlchemy implementation of ActivityLogProtocol.

Append-only activity trail. Each entry is written in its own session and
committed immediately, independent of the mutation's session, so a failed
audit write never rolls back the mutation it describes.

Usage:
    adapter = ActivityLogAdapter(database)
    result = await adapter.record(
        actor_id=identity.id,
        action=ActivityAction.DELETE_USER,
        resource_type="profile",
        resource_id=str(profile_id),
        details={"username": "jane"},
    )
"""

from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import ActivityAction
from src.domain.errors import AuditError
from src.infrastructure.persistence.models.activity_log import ActivityLogModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.database import Database


class ActivityLogAdapter:
    """Activity log writer backed by the activity_logs table.

    Attributes:
        _database: Database providing per-entry sessions.
    """

    def __init__(self, database: "Database") -> None:
        self._database = database

    async def record(
        self,
        *,
        actor_id: UUID,
        action: ActivityAction,
        resource_type: str,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> Result[None, AuditError]:
        """Append one activity log entry.

        Returns:
            Result[None, AuditError]:
                - Success(None) if the entry was committed
                - Failure(AuditError) if the database rejected it
        """
        try:
            async with self._database.get_session() as session:
                session.add(
                    ActivityLogModel(
                        user_id=actor_id,
                        action=action.value,
                        resource_type=resource_type,
                        resource_id=resource_id,
                        details=details,
                    )
                )
        except SQLAlchemyError as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Failed to record activity log: {e}",
                    details={
                        "action": action.value,
                        "resource_type": resource_type,
                        "error_type": type(e).__name__,
                    },
                )
            )
        return Success(value=None)

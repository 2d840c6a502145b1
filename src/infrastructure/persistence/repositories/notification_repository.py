"""NotificationRepository - SQLAlchemy implementation.

Notifications are written from fire-and-forget tasks that outlive the
request, so each write opens its own short session instead of sharing the
request session.
"""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import ADMINISTRATOR_ROLES
from src.domain.errors import NotificationError
from src.domain.value_objects import NotificationMessage
from src.infrastructure.persistence.models.notification import NotificationModel
from src.infrastructure.persistence.models.profile import ProfileModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.database import Database


def _to_model(user_id: UUID, message: NotificationMessage) -> NotificationModel:
    return NotificationModel(
        user_id=user_id,
        title=message.title,
        message=message.message,
        type=message.severity.value,
        action_type=message.action_type,
        resource_type=message.resource_type,
        resource_id=message.resource_id,
        is_read=False,
    )


class NotificationRepository:
    """SQLAlchemy notification writer.

    Attributes:
        _database: Database providing per-write sessions.
    """

    def __init__(self, database: "Database") -> None:
        self._database = database

    async def create(
        self, user_id: UUID, message: NotificationMessage
    ) -> Result[None, NotificationError]:
        """Store one notification for one profile."""
        try:
            async with self._database.get_session() as session:
                session.add(_to_model(user_id, message))
        except SQLAlchemyError as e:
            return Failure(
                error=NotificationError(
                    code=ErrorCode.NOTIFICATION_FAILED,
                    message=f"Failed to store notification: {e}",
                    details={"user_id": str(user_id)},
                )
            )
        return Success(value=None)

    async def create_for_admins(
        self, message: NotificationMessage
    ) -> Result[int, NotificationError]:
        """Store one notification per administrator profile, in one transaction."""
        admin_roles = sorted(role.value for role in ADMINISTRATOR_ROLES)
        try:
            async with self._database.get_session() as session:
                result = await session.execute(
                    select(ProfileModel.id).where(ProfileModel.role.in_(admin_roles))
                )
                admin_ids = list(result.scalars().all())
                session.add_all(_to_model(admin_id, message) for admin_id in admin_ids)
        except SQLAlchemyError as e:
            return Failure(
                error=NotificationError(
                    code=ErrorCode.NOTIFICATION_FAILED,
                    message=f"Failed to store admin notifications: {e}",
                )
            )
        return Success(value=len(admin_ids))

"""NotificationRepository protocol for in-app notifications.

Port used by the notification dispatcher. A write either targets one
profile or every administrator profile.
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.errors import NotificationError
from src.domain.value_objects import NotificationMessage


class NotificationRepository(Protocol):
    """Notification persistence protocol (port)."""

    async def create(
        self, user_id: UUID, message: NotificationMessage
    ) -> Result[None, NotificationError]:
        """Store one notification for one profile."""
        ...

    async def create_for_admins(
        self, message: NotificationMessage
    ) -> Result[int, NotificationError]:
        """Store one notification per administrator profile.

        Returns:
            Success(count) with the number of notifications written.
        """
        ...

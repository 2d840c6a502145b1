"""Notification message value object.

The payload of one in-app notification, independent of who receives it.
The same message is written once per recipient.
"""

from dataclasses import dataclass

from src.domain.enums.notification_severity import NotificationSeverity


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationMessage:
    """In-app notification payload.

    Attributes:
        title: Short headline.
        message: Body text.
        severity: Rendering severity.
        action_type: What happened (usually an ActivityAction value).
        resource_type: Kind of resource involved.
        resource_id: Identifier of the resource involved.
    """

    title: str
    message: str
    severity: NotificationSeverity = NotificationSeverity.INFO
    action_type: str | None = None
    resource_type: str | None = None
    resource_id: str | None = None

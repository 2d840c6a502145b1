"""Notification severity levels.

Severity drives how the dashboard renders a notification (toast colour,
badge). Values match the notification table's `type` column.
"""

from enum import Enum


class NotificationSeverity(str, Enum):
    """Severity of an in-app notification."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"

"""Notification delivery error types.

Returned by notification repositories when a notification row cannot be
written. The dispatcher logs it and never surfaces it to the mutation that
triggered the notification.
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationError(DomainError):
    """Notification write failure.

    Attributes:
        code: ErrorCode enum (NOTIFICATION_FAILED).
        message: Human-readable message.
        details: Additional context.
    """

    pass

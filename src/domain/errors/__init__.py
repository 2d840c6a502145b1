"""Errors raised by ports: record store, activity log, notifications."""

from src.domain.errors.audit_error import AuditError
from src.domain.errors.notification_error import NotificationError
from src.domain.errors.store_error import StoreUnavailableError

__all__ = [
    "AuditError",
    "NotificationError",
    "StoreUnavailableError",
]

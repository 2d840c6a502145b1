"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import RecordStoreProtocol, ProfileRepository
"""

# Service protocols
from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.record_store_protocol import RecordStoreProtocol

# Repository protocols
from src.domain.protocols.blog_repository import BlogRepository
from src.domain.protocols.notification_repository import NotificationRepository
from src.domain.protocols.profile_repository import ProfileRepository

__all__ = [
    # Service protocols
    "ActivityLogProtocol",
    "LoggerProtocol",
    "RecordStoreProtocol",
    # Repository protocols
    "BlogRepository",
    "NotificationRepository",
    "ProfileRepository",
]

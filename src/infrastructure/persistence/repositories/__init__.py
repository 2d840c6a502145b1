"""Repository implementations (adapters for hexagonal architecture)."""

from src.infrastructure.persistence.repositories.blog_repository import (
    BlogRepository,
)
from src.infrastructure.persistence.repositories.notification_repository import (
    NotificationRepository,
)
from src.infrastructure.persistence.repositories.profile_repository import (
    ProfileRepository,
)

__all__ = [
    "BlogRepository",
    "NotificationRepository",
    "ProfileRepository",
]

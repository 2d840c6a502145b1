"""Database models for the persistence layer.

SQLAlchemy models mapping the dashboard's tables. Domain entities live in
src/domain/entities/ and are mapped to/from these models by repositories.

Models:
    - ProfileModel: profiles
    - LeadModel: leads
    - BlogModel: blogs
    - ActivityLogModel: activity_logs (append-only)
    - NotificationModel: notifications
"""

from src.infrastructure.persistence.models.activity_log import ActivityLogModel
from src.infrastructure.persistence.models.blog import BlogModel
from src.infrastructure.persistence.models.lead import LeadModel
from src.infrastructure.persistence.models.notification import NotificationModel
from src.infrastructure.persistence.models.profile import ProfileModel

__all__ = [
    "ActivityLogModel",
    "BlogModel",
    "LeadModel",
    "NotificationModel",
    "ProfileModel",
]

"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - UserRole: RBAC roles (closed set of seven roles)
    - Resource: Protected resources for authorization
    - Action: Actions on resources (read, write, delete)
    - NotificationSeverity: success/error/info/warning
    - ActivityAction: Activity log action types
    - BlogStatus: draft/published/archived
"""

from src.domain.enums.activity_action import ActivityAction
from src.domain.enums.blog_status import BlogStatus
from src.domain.enums.notification_severity import NotificationSeverity
from src.domain.enums.permission import Action, Resource
from src.domain.enums.user_role import ADMINISTRATOR_ROLES, UserRole

__all__ = [
    "ADMINISTRATOR_ROLES",
    "Action",
    "ActivityAction",
    "BlogStatus",
    "NotificationSeverity",
    "Resource",
    "UserRole",
]

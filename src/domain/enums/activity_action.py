"""Activity log action types.

Every successful mutation records one activity log entry. Values are the
strings stored in `activity_logs.action`; profile actions are reused as the
notification `action_type`, blog notifications carry their own blog_* types.

Naming Convention:
    VERB_RESOURCE (create_user, update_blog, ...)
"""

from enum import Enum


class ActivityAction(str, Enum):
    """Actions recorded in the activity log."""

    CREATE_USER = "create_user"
    UPDATE_USER = "update_user"
    CHANGE_ROLE = "change_role"
    DELETE_USER = "delete_user"
    CREATE_BLOG = "create_blog"
    UPDATE_BLOG = "update_blog"
    DELETE_BLOG = "delete_blog"

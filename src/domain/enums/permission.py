"""Permission components for RBAC authorization.

This module defines Resource and Action enums used for permission checks.
Permissions are expressed as resource:action pairs (e.g., "leads:read").

Resources mirror the dashboard's screens, so every gated affordance (menu
entry, edit button, delete button) maps to exactly one pair.

Usage:
    from src.domain.enums import Resource, Action

    allowed = policy.can(identity.role, Resource.BLOGS, Action.DELETE)
"""

from enum import Enum


class Resource(str, Enum):
    """Resources that can be protected by authorization.

    String Enum:
        Inherits from str for easy serialization and Casbin compatibility.

    Resource Categories:
        Marketing:
            - DASHBOARD, LEADS, SEO, BLOGS
        Administration:
            - SITES, IP_SECURITY, USERS, PERMISSIONS, ACTIVITY_LOGS
        Account:
            - SUBSCRIPTION, NOTIFICATIONS
    """

    # Marketing resources
    DASHBOARD = "dashboard"
    """Analytics overview."""

    LEADS = "leads"
    """Inbound leads captured from forms and ad platforms."""

    SEO = "seo"
    """SEO meta tags per page."""

    BLOGS = "blogs"
    """Blog posts."""

    # Administration resources
    SITES = "sites"
    """Managed websites."""

    IP_SECURITY = "ip_security"
    """IP allow/deny lists."""

    USERS = "users"
    """User profiles and role assignment."""

    PERMISSIONS = "permissions"
    """Permission matrix screen."""

    ACTIVITY_LOGS = "activity_logs"
    """Audit trail of mutations."""

    # Account resources
    SUBSCRIPTION = "subscription"
    """Client subscription details."""

    NOTIFICATIONS = "notifications"
    """In-app notifications."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource values as strings.

        Returns:
            list[str]: List of resource values.
        """
        return [resource.value for resource in cls]


class Action(str, Enum):
    """Actions that can be performed on resources.

    Action Semantics:
        READ: View, list, get operations (no side effects)
        WRITE: Create and update operations
        DELETE: Removal, granted separately from WRITE
    """

    READ = "read"
    """View/list access to resource."""

    WRITE = "write"
    """Create/update access to resource."""

    DELETE = "delete"
    """Delete access to resource."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]

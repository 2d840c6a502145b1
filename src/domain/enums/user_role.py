"""User roles for RBAC authorization.

This enum is the closed set of roles a profile may hold. Roles are used by
the access policy to decide which resource/action pairs a caller may use.

There is no role hierarchy: every permission is granted explicitly in the
policy file. SUPER_ADMIN gets nothing it is not explicitly given.

Usage:
    from src.domain.enums import UserRole

    role = UserRole.parse(profile_row["role"])  # None when unrecognized
    if policy.can(role, Resource.USERS, Action.WRITE):
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for RBAC authorization.

    String Enum:
        Inherits from str for easy serialization and Casbin compatibility.
        Values are lowercase snake_case to match the policy file.

    Roles:
        SUPER_ADMIN: Platform owner (sites, permissions)
        ADMIN: Dashboard administrator (users, IP security)
        SALES_MANAGER / SALES_PERSON: Lead pipeline
        SEO_MANAGER / SEO_PERSON: SEO meta tags and blogs
        CLIENT: Paying customer with access to own leads and subscription
    """

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    SALES_MANAGER = "sales_manager"
    SALES_PERSON = "sales_person"
    SEO_MANAGER = "seo_manager"
    SEO_PERSON = "seo_person"
    CLIENT = "client"

    @property
    def is_administrator(self) -> bool:
        """Whether the role receives admin notifications and bootstrap checks."""
        return self in (UserRole.SUPER_ADMIN, UserRole.ADMIN)

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()

    @classmethod
    def parse(cls, value: "str | UserRole | None") -> "UserRole | None":
        """Convert a raw role value to a UserRole without raising.

        Args:
            value: Role member, role string, or None.

        Returns:
            UserRole | None: The matching role, or None if unrecognized.
        """
        if isinstance(value, UserRole):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


ADMINISTRATOR_ROLES: frozenset[UserRole] = frozenset(
    role for role in UserRole if role.is_administrator
)

"""Profile domain entity.

Identity record owned by the identity provider. This layer reads profiles
for authorization and lets authorized administrators update or delete them.

Business Rules:
    - Role is one of the closed UserRole values.
    - A profile never changes its own role; role changes go through the
      UpdateProfile command issued by an administrator.
    - Subscription fields are only meaningful for CLIENT profiles.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from src.domain.enums.user_role import UserRole


@dataclass
class Profile:
    """Profile entity.

    Attributes:
        id: Stable profile identifier.
        username: Unique login name.
        email: Contact email (optional).
        phone: Contact phone (optional).
        role: Assigned role.
        is_client_paid: Whether a client's subscription is paid.
        subscription_plan: Plan name (clients only).
        subscription_start: Subscription start date.
        subscription_end: Subscription end date.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.

    Example:
        >>> profile = Profile(
        ...     id=uuid7(),
        ...     username="jane",
        ...     email="jane@example.com",
        ...     role=UserRole.CLIENT,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> profile.has_active_subscription(date(2025, 1, 1))
        False
    """

    id: UUID
    username: str
    role: UserRole
    created_at: datetime
    updated_at: datetime
    email: str | None = None
    phone: str | None = None
    is_client_paid: bool = False
    subscription_plan: str | None = None
    subscription_start: date | None = None
    subscription_end: date | None = None

    def is_administrator(self) -> bool:
        """Check if the profile receives admin notifications.

        Returns:
            bool: True for SUPER_ADMIN and ADMIN.
        """
        return self.role.is_administrator

    def has_active_subscription(self, today: date | None = None) -> bool:
        """Check whether a paid client subscription covers `today`.

        Args:
            today: Date to check (defaults to the current UTC date).

        Returns:
            bool: True if the profile is a paid client inside its window.
        """
        if self.role is not UserRole.CLIENT or not self.is_client_paid:
            return False
        today = today or datetime.now(UTC).date()
        if self.subscription_start is not None and today < self.subscription_start:
            return False
        if self.subscription_end is not None and today > self.subscription_end:
            return False
        return True

    def change_role(self, role: UserRole) -> bool:
        """Assign a new role.

        Args:
            role: Role to assign.

        Returns:
            bool: True if the role actually changed.
        """
        if role is self.role:
            return False
        self.role = role
        self.updated_at = datetime.now(UTC)
        return True

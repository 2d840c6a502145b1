"""Profile commands (CQRS write operations).

Commands represent intent to change profiles. All commands are immutable
(frozen=True) and keyword-only. Administrative commands carry the acting
identity explicitly; handlers check it against the access policy before
any write.
"""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.domain.enums import UserRole
from src.domain.value_objects import SessionIdentity


@dataclass(frozen=True, kw_only=True)
class RegisterProfile:
    """Create a profile.

    Self sign-up when `invited_by` is None; otherwise an administrator
    invite, which requires users:write. The first profile ever stored
    becomes ADMIN regardless of `role`.

    Attributes:
        username: Unique login name.
        email: Contact email.
        phone: Contact phone.
        role: Requested role (defaults to CLIENT).
        invited_by: Administrator creating the profile, if any.

    Example:
        >>> command = RegisterProfile(username="jane", email="jane@example.com")
        >>> result = await handler.handle(command)
    """

    username: str
    email: str | None = None
    phone: str | None = None
    role: UserRole | str = UserRole.CLIENT
    invited_by: SessionIdentity | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Update a profile's details and/or role (requires users:write).

    Fields left as None are not changed.

    Attributes:
        actor: Identity performing the update.
        profile_id: Profile to update.
        username, email, phone: Contact details.
        role: New role (UserRole or its string value).
        is_client_paid, subscription_plan, subscription_start,
            subscription_end: Subscription fields.
    """

    actor: SessionIdentity
    profile_id: UUID
    username: str | None = None
    email: str | None = None
    phone: str | None = None
    role: UserRole | str | None = None
    is_client_paid: bool | None = None
    subscription_plan: str | None = None
    subscription_start: date | None = None
    subscription_end: date | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteProfile:
    """Delete a profile (requires users:delete).

    Attributes:
        actor: Identity performing the deletion.
        profile_id: Profile to delete.
    """

    actor: SessionIdentity
    profile_id: UUID

"""Session identity value object.

The identity provider (external auth service) owns login, tokens and
refresh. This layer only consumes the caller's id and role, passed
explicitly into every check instead of read from ambient global state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums.user_role import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionIdentity:
    """Current caller as seen by the authorization layer.

    Attributes:
        id: Stable profile identifier.
        role: Parsed role, or None when the provider supplied an
            unrecognized value (treated as no permissions).
    """

    id: UUID
    role: UserRole | None

    @classmethod
    def from_claims(cls, user_id: UUID, role: str | None) -> "SessionIdentity":
        """Build an identity from raw provider claims.

        Args:
            user_id: Profile id from the provider.
            role: Raw role string from the provider.

        Returns:
            SessionIdentity: Identity with the role parsed (None if unknown).
        """
        return cls(id=user_id, role=UserRole.parse(role))

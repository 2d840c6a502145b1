"""ProfileRepository protocol for profile persistence.

Port (interface) for hexagonal architecture. Infrastructure provides the
SQLAlchemy implementation.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.profile import Profile
from src.domain.enums import UserRole


class ProfileRepository(Protocol):
    """Profile repository protocol (port).

    Methods:
        find_by_id: Retrieve a profile by ID
        find_by_username: Retrieve a profile by username (case-insensitive)
        create_with_bootstrap: Create a profile, promoting the first one
        update: Persist changes to an existing profile
        delete: Remove a profile
        count_admins: Number of administrator profiles
        list_admin_ids: IDs of every administrator profile
    """

    async def find_by_id(self, profile_id: UUID) -> Profile | None:
        """Find profile by ID.

        Returns:
            Profile if found, None otherwise.
        """
        ...

    async def find_by_username(self, username: str) -> Profile | None:
        """Find profile by username (case-insensitive)."""
        ...

    async def create_with_bootstrap(
        self, profile: Profile, *, bootstrap_role: UserRole = UserRole.ADMIN
    ) -> Profile:
        """Create a profile, granting `bootstrap_role` to the first one.

        Runs as one transaction. When the profiles table is empty, the new
        profile is stored with `bootstrap_role` instead of its requested
        role. Concurrent registrations serialize, so only the first profile
        ever stored is promoted; an emptied administrator set never
        re-enables promotion.

        Args:
            profile: Profile to create (role is the requested default).
            bootstrap_role: Role given to the first profile.

        Returns:
            Profile: The stored profile with its final role.

        Raises:
            IntegrityError: If the username is already taken.
        """
        ...

    async def update(self, profile: Profile) -> None:
        """Persist changes to an existing profile.

        Raises:
            NoResultFound: If the profile does not exist.
        """
        ...

    async def delete(self, profile_id: UUID) -> bool:
        """Delete a profile.

        Returns:
            bool: True if a row was removed.
        """
        ...

    async def count_admins(self) -> int:
        """Number of SUPER_ADMIN and ADMIN profiles."""
        ...

    async def list_admin_ids(self) -> list[UUID]:
        """IDs of every SUPER_ADMIN and ADMIN profile."""
        ...

"""ProfileRepository - SQLAlchemy implementation of ProfileRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Profile entities and database ProfileModel.
"""

from uuid import UUID

from sqlalchemy import delete, func, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.profile import Profile
from src.domain.enums import ADMINISTRATOR_ROLES, UserRole
from src.infrastructure.persistence.models.profile import ProfileModel

# pg_advisory_xact_lock key serializing first-profile bootstrap checks.
BOOTSTRAP_LOCK_KEY = 0x70_72_6F_66  # "prof"

_ADMIN_ROLE_VALUES = sorted(role.value for role in ADMINISTRATOR_ROLES)


class ProfileRepository:
    """SQLAlchemy implementation of ProfileRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = ProfileRepository(session)
        ...     profile = await repo.find_by_id(profile_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, profile_id: UUID) -> Profile | None:
        """Find profile by ID.

        Returns:
            Domain Profile if found, None otherwise.
        """
        stmt = select(ProfileModel).where(ProfileModel.id == profile_id)
        result = await self.session.execute(stmt)
        profile_model = result.scalar_one_or_none()
        if profile_model is None:
            return None
        return self._to_domain(profile_model)

    async def find_by_username(self, username: str) -> Profile | None:
        """Find profile by username (case-insensitive)."""
        stmt = select(ProfileModel).where(
            func.lower(ProfileModel.username) == username.lower()
        )
        result = await self.session.execute(stmt)
        profile_model = result.scalar_one_or_none()
        if profile_model is None:
            return None
        return self._to_domain(profile_model)

    async def create_with_bootstrap(
        self, profile: Profile, *, bootstrap_role: UserRole = UserRole.ADMIN
    ) -> Profile:
        """Create a profile, promoting it when the profiles table is empty.

        On PostgreSQL a transaction-scoped advisory lock is taken before the
        emptiness check so concurrent registrations run one at a time; only
        the very first profile ever stored is promoted.

        Args:
            profile: Profile to create.
            bootstrap_role: Role given to the first profile.

        Returns:
            Profile: Stored profile with its final role.

        Raises:
            IntegrityError: If the username is already taken.
        """
        if self.session.get_bind().dialect.name == "postgresql":
            await self.session.execute(
                text("SELECT pg_advisory_xact_lock(:key)"), {"key": BOOTSTRAP_LOCK_KEY}
            )

        any_profile = select(ProfileModel.id).limit(1)
        is_first = (await self.session.execute(any_profile)).first() is None

        profile_model = self._to_model(profile)
        if is_first and not profile.role.is_administrator:
            profile_model.role = bootstrap_role.value

        self.session.add(profile_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise
        await self.session.refresh(profile_model)
        return self._to_domain(profile_model)

    async def update(self, profile: Profile) -> None:
        """Update an existing profile.

        Raises:
            NoResultFound: If the profile doesn't exist.
        """
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self.session.execute(stmt)
        profile_model = result.scalar_one()

        profile_model.username = profile.username
        profile_model.email = profile.email
        profile_model.phone = profile.phone
        profile_model.role = profile.role.value
        profile_model.is_client_paid = profile.is_client_paid
        profile_model.subscription_plan = profile.subscription_plan
        profile_model.subscription_start = profile.subscription_start
        profile_model.subscription_end = profile.subscription_end
        profile_model.updated_at = profile.updated_at

        await self.session.commit()

    async def delete(self, profile_id: UUID) -> bool:
        """Delete a profile (hard delete).

        Returns:
            bool: True if a row was removed.
        """
        result = await self.session.execute(
            delete(ProfileModel).where(ProfileModel.id == profile_id)
        )
        await self.session.commit()
        return bool(result.rowcount)

    async def count_admins(self) -> int:
        """Number of SUPER_ADMIN and ADMIN profiles."""
        stmt = select(func.count()).where(ProfileModel.role.in_(_ADMIN_ROLE_VALUES))
        return int((await self.session.execute(stmt)).scalar_one())

    async def list_admin_ids(self) -> list[UUID]:
        """IDs of every administrator profile, oldest first."""
        stmt = (
            select(ProfileModel.id)
            .where(ProfileModel.role.in_(_ADMIN_ROLE_VALUES))
            .order_by(ProfileModel.created_at, ProfileModel.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    def _to_domain(self, profile_model: ProfileModel) -> Profile:
        # Unknown stored roles degrade to CLIENT, the least-privileged role.
        role = UserRole.parse(profile_model.role) or UserRole.CLIENT
        return Profile(
            id=profile_model.id,
            username=profile_model.username,
            email=profile_model.email,
            phone=profile_model.phone,
            role=role,
            is_client_paid=profile_model.is_client_paid,
            subscription_plan=profile_model.subscription_plan,
            subscription_start=profile_model.subscription_start,
            subscription_end=profile_model.subscription_end,
            created_at=profile_model.created_at,
            updated_at=profile_model.updated_at,
        )

    def _to_model(self, profile: Profile) -> ProfileModel:
        return ProfileModel(
            id=profile.id,
            username=profile.username,
            email=profile.email,
            phone=profile.phone,
            role=profile.role.value,
            is_client_paid=profile.is_client_paid,
            subscription_plan=profile.subscription_plan,
            subscription_start=profile.subscription_start,
            subscription_end=profile.subscription_end,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

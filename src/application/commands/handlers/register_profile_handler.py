"""RegisterProfile command handler.

Flow:
1. Administrator invites are checked against users:write first
2. Validate username and requested role (self sign-up is client only)
3. Check username uniqueness
4. Create the profile (the first profile ever stored becomes ADMIN)
5. Record a create_user activity entry
6. Notify administrators (and the new profile, for invites), fire-and-forget
7. Return Success(profile)
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.application.commands.handlers.activity import record_activity
from src.application.commands.profile_commands import RegisterProfile
from src.application.services.access_guard import authorize
from src.application.services.notification_dispatcher import (
    ALL_ADMINS,
    NotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.profile import Profile
from src.domain.enums import (
    Action,
    ActivityAction,
    NotificationSeverity,
    Resource,
    UserRole,
)
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import AccessPolicy

if TYPE_CHECKING:
    from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.profile_repository import ProfileRepository


def _username_taken(username: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.USERNAME_ALREADY_EXISTS,
        message=f"Username '{username}' is already taken",
        resource_type="profile",
        conflicting_field="username",
    )


class RegisterProfileHandler:
    """Handler for RegisterProfile commands."""

    def __init__(
        self,
        profile_repo: "ProfileRepository",
        activity_log: "ActivityLogProtocol",
        notifier: NotificationDispatcher,
        policy: AccessPolicy,
        logger: "LoggerProtocol",
    ) -> None:
        self._profile_repo = profile_repo
        self._activity_log = activity_log
        self._notifier = notifier
        self._policy = policy
        self._logger = logger

    async def handle(self, cmd: RegisterProfile) -> Result[Profile, DomainError]:
        """Handle profile registration.

        Returns:
            Success(Profile) with the stored profile and its final role.
            Failure(AuthorizationError) if an invite is not permitted.
            Failure(ValidationError) for a blank username or unknown role.
            Failure(ConflictError) if the username is taken.
            Failure(StoreUnavailableError) if the write failed.
        """
        if cmd.invited_by is not None:
            match authorize(self._policy, cmd.invited_by, Resource.USERS, Action.WRITE):
                case Failure(error=error):
                    self._logger.warning(
                        "profile_registration_denied",
                        actor_id=str(cmd.invited_by.id),
                        permission=error.required_permission,
                    )
                    return Failure(error=error)

        username = cmd.username.strip()
        if not username:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="username must not be blank",
                    field="username",
                )
            )
        role = UserRole.parse(cmd.role)
        if role is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ROLE,
                    message=f"Unknown role '{cmd.role}'",
                    field="role",
                )
            )
        if cmd.invited_by is None and role is not UserRole.CLIENT:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Self sign-up may only request the client role",
                    required_permission=f"{Resource.USERS.value}:{Action.WRITE.value}",
                )
            )

        if await self._profile_repo.find_by_username(username) is not None:
            return Failure(error=_username_taken(username))

        now = datetime.now(UTC)
        profile = Profile(
            id=uuid7(),
            username=username,
            email=cmd.email,
            phone=cmd.phone,
            role=role,
            created_at=now,
            updated_at=now,
        )
        try:
            stored = await self._profile_repo.create_with_bootstrap(profile)
        except IntegrityError:
            # Lost a race with a concurrent sign-up for the same username.
            self._logger.warning("profile_registration_conflict", username=username)
            return Failure(error=_username_taken(username))
        except Exception as e:
            self._logger.error("profile_registration_failed", error=e, username=username)
            return Failure(
                error=StoreUnavailableError(
                    code=ErrorCode.STORE_UNAVAILABLE,
                    message="Could not store profile",
                    collection="profiles",
                    details={"error_type": type(e).__name__},
                )
            )

        bootstrapped = stored.role is not role
        self._logger.info(
            "profile_registered",
            profile_id=str(stored.id),
            role=stored.role.value,
            bootstrapped=bootstrapped,
            invited=cmd.invited_by is not None,
        )

        actor_id = cmd.invited_by.id if cmd.invited_by is not None else stored.id
        notice = {
            "title": "New user registered",
            "message": f"{stored.username} joined as {stored.role.value}",
            "severity": NotificationSeverity.INFO,
            "action_type": ActivityAction.CREATE_USER.value,
            "resource_type": "profile",
            "resource_id": str(stored.id),
        }
        self._notifier.dispatch(ALL_ADMINS, **notice)
        if cmd.invited_by is not None:
            self._notifier.dispatch(
                stored.id,
                **{**notice, "title": "Welcome", "severity": NotificationSeverity.SUCCESS},
            )

        await record_activity(
            self._activity_log,
            self._logger,
            actor_id=actor_id,
            action=ActivityAction.CREATE_USER,
            resource_type="profile",
            resource_id=str(stored.id),
            details={
                "username": stored.username,
                "role": stored.role.value,
                "bootstrapped": bootstrapped,
            },
        )
        return Success(value=stored)

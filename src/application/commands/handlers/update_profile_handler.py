"""UpdateProfile command handler.

Flow:
1. Check users:write for the acting identity (before any read or write)
2. Load the profile (NotFound if missing)
3. Validate and apply the requested changes (the last administrator
   cannot be demoted)
4. Persist
5. Record update_user, or change_role when the role changed
6. Notify the profile and all administrators, fire-and-forget
7. Return Success(profile)
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from src.application.commands.handlers.activity import record_activity
from src.application.commands.profile_commands import UpdateProfile
from src.application.services.access_guard import authorize, keep_an_administrator
from src.application.services.notification_dispatcher import (
    ALL_ADMINS,
    NotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.profile import Profile
from src.domain.enums import Action, ActivityAction, NotificationSeverity, Resource, UserRole
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import AccessPolicy

if TYPE_CHECKING:
    from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.profile_repository import ProfileRepository

_DETAIL_FIELDS = (
    "email",
    "phone",
    "is_client_paid",
    "subscription_plan",
    "subscription_start",
    "subscription_end",
)


def _jsonable(value: Any) -> Any:
    return value.isoformat() if hasattr(value, "isoformat") else value


class UpdateProfileHandler:
    """Handler for UpdateProfile commands."""

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

    async def handle(self, cmd: UpdateProfile) -> Result[Profile, DomainError]:
        """Handle a profile update.

        Returns:
            Success(Profile) with the updated profile.
            Failure(AuthorizationError) if the actor lacks users:write.
            Failure(NotFoundError) if the profile does not exist.
            Failure(ValidationError) for a blank username or unknown role.
            Failure(ConflictError) if the new username is taken or the
                last administrator would be demoted.
            Failure(StoreUnavailableError) if the write failed.
        """
        match authorize(self._policy, cmd.actor, Resource.USERS, Action.WRITE):
            case Failure(error=error):
                self._logger.warning(
                    "profile_update_denied",
                    actor_id=str(cmd.actor.id),
                    profile_id=str(cmd.profile_id),
                    permission=error.required_permission,
                )
                return Failure(error=error)

        profile = await self._profile_repo.find_by_id(cmd.profile_id)
        if profile is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PROFILE_NOT_FOUND,
                    message="Profile not found",
                    resource_type="profile",
                    resource_id=str(cmd.profile_id),
                )
            )

        new_role: UserRole | None = None
        if cmd.role is not None:
            new_role = UserRole.parse(cmd.role)
            if new_role is None:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_ROLE,
                        message=f"Unknown role '{cmd.role}'",
                        field="role",
                    )
                )
            match await keep_an_administrator(self._profile_repo, profile, new_role):
                case Failure(error=error):
                    self._logger.warning(
                        "profile_demotion_refused",
                        profile_id=str(profile.id),
                        requested_role=new_role.value,
                    )
                    return Failure(error=error)

        changes: dict[str, Any] = {}
        if cmd.username is not None:
            username = cmd.username.strip()
            if not username:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message="username must not be blank",
                        field="username",
                    )
                )
            if username != profile.username:
                existing = await self._profile_repo.find_by_username(username)
                if existing is not None and existing.id != profile.id:
                    return Failure(
                        error=ConflictError(
                            code=ErrorCode.USERNAME_ALREADY_EXISTS,
                            message=f"Username '{username}' is already taken",
                            resource_type="profile",
                            conflicting_field="username",
                        )
                    )
                changes["username"] = username
                profile.username = username

        for name in _DETAIL_FIELDS:
            value = getattr(cmd, name)
            if value is not None and value != getattr(profile, name):
                changes[name] = _jsonable(value)
                setattr(profile, name, value)

        previous_role = profile.role
        role_changed = new_role is not None and profile.change_role(new_role)
        if role_changed:
            changes["role"] = {"from": previous_role.value, "to": profile.role.value}
        profile.updated_at = datetime.now(UTC)

        try:
            await self._profile_repo.update(profile)
        except Exception as e:
            self._logger.error(
                "profile_update_failed", error=e, profile_id=str(profile.id)
            )
            return Failure(
                error=StoreUnavailableError(
                    code=ErrorCode.STORE_UNAVAILABLE,
                    message="Could not update profile",
                    collection="profiles",
                    details={"error_type": type(e).__name__},
                )
            )

        action = ActivityAction.CHANGE_ROLE if role_changed else ActivityAction.UPDATE_USER
        self._logger.info(
            "profile_updated",
            profile_id=str(profile.id),
            actor_id=str(cmd.actor.id),
            action=action.value,
            changed_fields=sorted(changes),
        )

        if role_changed:
            title = "Role updated"
            message = f"{profile.username} is now {profile.role.value}"
        else:
            title = "Profile updated"
            message = f"{profile.username}'s profile was updated"
        for target in (profile.id, ALL_ADMINS):
            self._notifier.dispatch(
                target,
                title=title,
                message=message,
                severity=NotificationSeverity.INFO,
                action_type=action.value,
                resource_type="profile",
                resource_id=str(profile.id),
            )

        await record_activity(
            self._activity_log,
            self._logger,
            actor_id=cmd.actor.id,
            action=action,
            resource_type="profile",
            resource_id=str(profile.id),
            details=changes,
        )
        return Success(value=profile)

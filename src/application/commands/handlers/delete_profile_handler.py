"""DeleteProfile command handler.

Flow:
1. Check users:delete for the acting identity (before any read or write)
2. Load the profile (NotFound if missing)
3. Refuse to delete the last administrator
4. Delete
5. Record a delete_user activity entry
6. Notify all administrators, fire-and-forget
7. Return Success(None)
"""

from typing import TYPE_CHECKING

from src.application.commands.handlers.activity import record_activity
from src.application.commands.profile_commands import DeleteProfile
from src.application.services.access_guard import authorize, keep_an_administrator
from src.application.services.notification_dispatcher import (
    ALL_ADMINS,
    NotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.enums import Action, ActivityAction, NotificationSeverity, Resource
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import AccessPolicy

if TYPE_CHECKING:
    from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.profile_repository import ProfileRepository


class DeleteProfileHandler:
    """Handler for DeleteProfile commands."""

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

    async def handle(self, cmd: DeleteProfile) -> Result[None, DomainError]:
        """Handle a profile deletion.

        Returns:
            Success(None) when deleted.
            Failure(AuthorizationError) if the actor lacks users:delete.
            Failure(NotFoundError) if the profile does not exist.
            Failure(ConflictError) if it is the last administrator.
            Failure(StoreUnavailableError) if the delete failed.
        """
        match authorize(self._policy, cmd.actor, Resource.USERS, Action.DELETE):
            case Failure(error=error):
                self._logger.warning(
                    "profile_delete_denied",
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

        match await keep_an_administrator(self._profile_repo, profile):
            case Failure(error=error):
                self._logger.warning(
                    "profile_delete_refused",
                    profile_id=str(profile.id),
                    actor_id=str(cmd.actor.id),
                )
                return Failure(error=error)

        try:
            await self._profile_repo.delete(profile.id)
        except Exception as e:
            self._logger.error(
                "profile_delete_failed", error=e, profile_id=str(profile.id)
            )
            return Failure(
                error=StoreUnavailableError(
                    code=ErrorCode.STORE_UNAVAILABLE,
                    message="Could not delete profile",
                    collection="profiles",
                    details={"error_type": type(e).__name__},
                )
            )

        self._logger.info(
            "profile_deleted", profile_id=str(profile.id), actor_id=str(cmd.actor.id)
        )
        self._notifier.dispatch(
            ALL_ADMINS,
            title="User deleted",
            message=f"{profile.username} was removed",
            severity=NotificationSeverity.WARNING,
            action_type=ActivityAction.DELETE_USER.value,
            resource_type="profile",
            resource_id=str(profile.id),
        )
        await record_activity(
            self._activity_log,
            self._logger,
            actor_id=cmd.actor.id,
            action=ActivityAction.DELETE_USER,
            resource_type="profile",
            resource_id=str(profile.id),
            details={"username": profile.username, "role": profile.role.value},
        )
        return Success(value=None)

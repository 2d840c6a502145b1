"""Guards run by command handlers before any write.

`authorize` checks the access policy for the acting identity; a denial
returns an AuthorizationError and the mutation is not attempted.
Unauthenticated callers never reach a handler: the HTTP layer answers 401
and self sign-up goes through RegisterProfile without an actor.

`keep_an_administrator` refuses a demotion or deletion that would leave
no SUPER_ADMIN or ADMIN profile.

Usage:
    match authorize(policy, identity, Resource.USERS, Action.WRITE):
        case Failure(error=error):
            return Failure(error=error)
"""

from typing import TYPE_CHECKING

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities.profile import Profile
from src.domain.enums import Action, Resource, UserRole
from src.domain.value_objects import AccessPolicy, SessionIdentity

if TYPE_CHECKING:
    from src.domain.protocols.profile_repository import ProfileRepository


def authorize(
    policy: AccessPolicy,
    identity: SessionIdentity,
    resource: Resource | str,
    action: Action | str,
) -> Result[None, AuthorizationError]:
    """Check that the caller may perform `action` on `resource`.

    Returns:
        Success(None) when allowed.
        Failure(AuthorizationError) with PERMISSION_DENIED otherwise.
    """
    resource_value = resource.value if isinstance(resource, Resource) else resource
    action_value = action.value if isinstance(action, Action) else action
    permission = f"{resource_value}:{action_value}"

    if not policy.can(identity.role, resource_value, action_value):
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message=f"Permission denied: {permission}",
                required_permission=permission,
                details={"role": identity.role.value if identity.role else None},
            )
        )
    return Success(value=None)


async def keep_an_administrator(
    profile_repo: "ProfileRepository",
    profile: Profile,
    new_role: UserRole | None = None,
) -> Result[None, ConflictError]:
    """Refuse to remove the last administrator.

    Args:
        profile_repo: Repository counting administrators.
        profile: Profile being demoted or deleted.
        new_role: Role it is moving to; None means the profile is deleted.

    Returns:
        Success(None) when another administrator remains or the profile
            keeps an administrator role.
        Failure(ConflictError) with LAST_ADMINISTRATOR otherwise.
    """
    if not profile.is_administrator():
        return Success(value=None)
    if new_role is not None and new_role.is_administrator:
        return Success(value=None)
    if await profile_repo.count_admins() > 1:
        return Success(value=None)
    return Failure(
        error=ConflictError(
            code=ErrorCode.LAST_ADMINISTRATOR,
            message="At least one administrator must remain",
            resource_type="profile",
            conflicting_field="role",
            details={"profile_id": str(profile.id)},
        )
    )

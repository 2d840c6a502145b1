"""Access policy dependencies.

FastAPI dependencies that gate a route on `AccessPolicy.can(role,
resource, action)`. Read routes use them directly; mutations are also
checked inside their command handlers before touching the store.

Usage:
    @router.get("/activity")
    async def list_activity(
        identity: SessionIdentity = Depends(
            require_permission(Resource.ACTIVITY_LOGS, Action.READ)
        ),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status

from src.core.container import get_access_policy
from src.domain.enums import Action, Resource
from src.domain.value_objects import AccessPolicy, SessionIdentity
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
)


def ensure_permission(
    policy: AccessPolicy,
    identity: SessionIdentity,
    resource: Resource | str,
    action: Action | str,
) -> None:
    """Raise 403 unless the identity's role is granted resource:action.

    Raises:
        HTTPException 403: If the policy denies the request.
    """
    if not policy.can(identity.role, resource, action):
        resource_value = resource.value if isinstance(resource, Resource) else resource
        action_value = action.value if isinstance(action, Action) else action
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: {resource_value}:{action_value}",
        )


def require_permission(
    resource: Resource | str,
    action: Action | str,
) -> Callable[..., Awaitable[SessionIdentity]]:
    """Create a dependency that requires a specific permission.

    Args:
        resource: Resource name (leads, users, ...).
        action: Action name (read, write, delete).

    Returns:
        Dependency returning the authorized SessionIdentity.

    Raises:
        HTTPException 401: If there is no authenticated caller.
        HTTPException 403: If the caller's role is not granted the permission.
    """

    async def permission_checker(
        identity: Annotated[SessionIdentity, Depends(get_current_identity)],
        policy: Annotated[AccessPolicy, Depends(get_access_policy)],
    ) -> SessionIdentity:
        ensure_permission(policy, identity, resource, action)
        return identity

    return permission_checker

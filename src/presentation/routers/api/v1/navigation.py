"""Navigation resource handler.

GET /api/v1/navigation - Dashboard menu entries the caller may open.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.services import visible_navigation
from src.core.container import get_access_policy
from src.domain.value_objects import AccessPolicy, SessionIdentity
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
)
from src.schemas import NavigationItemResponse, NavigationResponse

router = APIRouter(prefix="/navigation", tags=["Navigation"])


@router.get("", response_model=NavigationResponse, summary="Get visible navigation")
async def get_navigation(
    identity: Annotated[SessionIdentity, Depends(get_current_identity)],
    policy: Annotated[AccessPolicy, Depends(get_access_policy)],
) -> NavigationResponse:
    """Return the menu filtered by the caller's role.

    A caller whose role is unknown gets an empty menu, not an error.
    """
    items = visible_navigation(policy, identity.role)
    return NavigationResponse(
        role=identity.role.value if identity.role else None,
        items=[
            NavigationItemResponse(
                name=item.name,
                path=item.path,
                resource=item.resource.value,
            )
            for item in items
        ],
    )

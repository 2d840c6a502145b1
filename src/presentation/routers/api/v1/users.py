"""Users resource handlers.

Profile administration endpoints. Permission checks happen inside the
command handlers, before any write.

Handlers:
    create_user - Self sign-up (anonymous) or administrator invite
    update_user - Update details and/or role (users:write)
    delete_user - Delete a profile (users:delete)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import DeleteProfile, RegisterProfile, UpdateProfile
from src.application.commands.handlers import (
    DeleteProfileHandler,
    RegisterProfileHandler,
    UpdateProfileHandler,
)
from src.core.container import (
    get_delete_profile_handler,
    get_register_profile_handler,
    get_update_profile_handler,
)
from src.core.result import Failure, Success
from src.domain.value_objects import SessionIdentity
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
    get_optional_identity,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas import ProfileCreateRequest, ProfileResponse, ProfileUpdateRequest

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a profile",
)
async def create_user(
    request: Request,
    data: ProfileCreateRequest,
    identity: Annotated[SessionIdentity | None, Depends(get_optional_identity)],
    handler: Annotated[RegisterProfileHandler, Depends(get_register_profile_handler)],
) -> ProfileResponse | JSONResponse:
    """Create a profile.

    POST /api/v1/users → 201 Created

    Anonymous callers sign themselves up as clients; authenticated callers
    invite someone and need users:write. The very first profile becomes
    the administrator.
    """
    command = RegisterProfile(
        username=data.username,
        email=data.email,
        phone=data.phone,
        role=data.role,
        invited_by=identity,
    )

    match await handler.handle(command):
        case Success(value=profile):
            return ProfileResponse.from_entity(profile)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


@router.patch(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Update a profile",
)
async def update_user(
    request: Request,
    profile_id: UUID,
    data: ProfileUpdateRequest,
    identity: Annotated[SessionIdentity, Depends(get_current_identity)],
    handler: Annotated[UpdateProfileHandler, Depends(get_update_profile_handler)],
) -> ProfileResponse | JSONResponse:
    """Update profile details and/or role.

    PATCH /api/v1/users/{id} → 200 OK
    """
    command = UpdateProfile(
        actor=identity,
        profile_id=profile_id,
        **data.model_dump(exclude_none=True),
    )

    match await handler.handle(command):
        case Success(value=profile):
            return ProfileResponse.from_entity(profile)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


@router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a profile",
)
async def delete_user(
    request: Request,
    profile_id: UUID,
    identity: Annotated[SessionIdentity, Depends(get_current_identity)],
    handler: Annotated[DeleteProfileHandler, Depends(get_delete_profile_handler)],
) -> Response:
    """Delete a profile.

    DELETE /api/v1/users/{id} → 204 No Content
    """
    match await handler.handle(DeleteProfile(actor=identity, profile_id=profile_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )

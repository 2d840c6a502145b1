"""Identity dependencies.

The identity provider authenticates callers; this module only turns the
bearer token on the request into a SessionIdentity. A gateway or
middleware that already resolved the caller may set
`request.state.identity` instead, which takes precedence.

Usage:
    @router.get("/navigation")
    async def get_navigation(
        identity: SessionIdentity = Depends(get_current_identity),
    ):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_identity_verifier
from src.core.result import Failure, Success
from src.domain.value_objects import SessionIdentity
from src.infrastructure.security import IdentityTokenVerifier

# auto_error=False so a missing header becomes our own 401 problem response
bearer_scheme_optional = HTTPBearer(auto_error=False)


async def get_optional_identity(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme_optional)
    ],
    verifier: Annotated[IdentityTokenVerifier, Depends(get_identity_verifier)],
) -> SessionIdentity | None:
    """Resolve the caller, or None when the request is anonymous.

    Raises:
        HTTPException 401: If a bearer token is present but invalid.
    """
    identity = getattr(request.state, "identity", None)
    if isinstance(identity, SessionIdentity):
        return identity
    if credentials is None:
        return None

    match verifier.verify(credentials.credentials):
        case Success(value=verified):
            request.state.identity = verified
            return verified
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error.message,
                headers={"WWW-Authenticate": "Bearer"},
            )


async def get_current_identity(
    identity: Annotated[SessionIdentity | None, Depends(get_optional_identity)],
) -> SessionIdentity:
    """Resolve the caller, rejecting anonymous requests.

    Raises:
        HTTPException 401: If there is no authenticated caller.
    """
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity

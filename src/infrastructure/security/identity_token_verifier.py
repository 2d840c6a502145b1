"""Identity token verifier (adapter).

Verifies access tokens issued by the external identity provider and turns
them into a SessionIdentity. This service never issues tokens; login,
refresh and revocation stay with the provider.

Security:
    - HMAC signature check (HS256 by default) with a shared secret
    - Expiration checked by PyJWT when the token carries 'exp'
    - Optional audience check
    - Unknown role claim values yield an identity with role None
"""

from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.value_objects import SessionIdentity


class IdentityTokenVerifier:
    """Verify provider access tokens and extract the caller identity.

    Usage:
        verifier = IdentityTokenVerifier(secret_key=settings.identity_jwt_secret)
        match verifier.verify(token):
            case Success(value=identity):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        audience: str | None = None,
        role_claim: str = "user_role",
    ) -> None:
        """Initialize verifier.

        Args:
            secret_key: Shared secret the provider signs tokens with.
            algorithm: JWT signature algorithm.
            audience: Expected 'aud' claim, or None to skip the check.
            role_claim: Claim name holding the dashboard role.

        Raises:
            ValueError: If secret_key is empty.
        """
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._audience = audience
        self._role_claim = role_claim

    def verify(self, token: str) -> Result[SessionIdentity, AuthorizationError]:
        """Validate a token and build the caller identity.

        Args:
            token: Encoded JWT from the Authorization header.

        Returns:
            Success(SessionIdentity) for a valid token with a UUID 'sub'.
            Failure(AuthorizationError) with AUTHENTICATION_REQUIRED otherwise.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={"require": ["sub"], "verify_aud": self._audience is not None},
            )
        except InvalidTokenError:
            return Failure(error=_invalid_token())

        try:
            user_id = UUID(str(payload["sub"]))
        except ValueError:
            return Failure(error=_invalid_token())

        role = payload.get(self._role_claim)
        return Success(
            value=SessionIdentity.from_claims(
                user_id, role if isinstance(role, str) else None
            )
        )


def _invalid_token() -> AuthorizationError:
    return AuthorizationError(
        code=ErrorCode.AUTHENTICATION_REQUIRED,
        message="Invalid or expired access token",
    )

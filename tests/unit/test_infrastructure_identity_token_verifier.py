"""Unit tests for IdentityTokenVerifier."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.infrastructure.security import IdentityTokenVerifier

SECRET = "test-identity-secret-0123456789abcdef"


def _token(claims: dict, secret: str = SECRET) -> str:
    return jwt.encode(claims, secret, algorithm="HS256")


@pytest.fixture
def verifier():
    return IdentityTokenVerifier(secret_key=SECRET)


@pytest.mark.unit
class TestIdentityTokenVerifier:
    """Test token verification."""

    def test_valid_token(self, verifier):
        # Arrange
        user_id = uuid7()
        token = _token(
            {
                "sub": str(user_id),
                "user_role": "sales_manager",
                "exp": datetime.now(UTC) + timedelta(minutes=5),
            }
        )

        # Act
        result = verifier.verify(token)

        # Assert
        match result:
            case Success(value=identity):
                assert identity.id == user_id
                assert identity.role is UserRole.SALES_MANAGER
            case Failure(error=error):
                pytest.fail(f"Unexpected failure: {error}")

    def test_unknown_role_yields_no_role(self, verifier):
        result = verifier.verify(_token({"sub": str(uuid7()), "user_role": "owner"}))

        assert result.value.role is None

    def test_missing_role_claim(self, verifier):
        result = verifier.verify(_token({"sub": str(uuid7())}))

        assert result.value.role is None

    def test_custom_role_claim(self):
        verifier = IdentityTokenVerifier(secret_key=SECRET, role_claim="role")

        result = verifier.verify(_token({"sub": str(uuid7()), "role": "admin"}))

        assert result.value.role is UserRole.ADMIN

    @pytest.mark.parametrize(
        "token",
        [
            "not-a-jwt",
            _token({"sub": "00000000-0000-0000-0000-000000000001"}, secret="wrong-secret-0123456789abcdef-0123456789"),
            _token({"user_role": "admin"}),
            _token({"sub": "not-a-uuid"}),
            _token(
                {
                    "sub": "00000000-0000-0000-0000-000000000001",
                    "exp": datetime.now(UTC) - timedelta(minutes=1),
                }
            ),
        ],
        ids=["malformed", "bad_signature", "missing_sub", "non_uuid_sub", "expired"],
    )
    def test_invalid_tokens(self, verifier, token):
        result = verifier.verify(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.AUTHENTICATION_REQUIRED

    def test_audience_is_checked_when_configured(self):
        verifier = IdentityTokenVerifier(secret_key=SECRET, audience="dashboard")
        sub = str(uuid7())

        assert isinstance(verifier.verify(_token({"sub": sub, "aud": "dashboard"})), Success)
        assert isinstance(verifier.verify(_token({"sub": sub, "aud": "billing"})), Failure)

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            IdentityTokenVerifier(secret_key="")

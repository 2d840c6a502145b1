"""API test fixtures.

The app is exercised through TestClient without its lifespan, so the
access policy is installed directly and handler factories are replaced
through app.dependency_overrides.
"""

import jwt
import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from src.core.container import set_access_policy
from src.main import app


@pytest.fixture
def client(access_policy):
    """TestClient with the shipped policy installed."""
    set_access_policy(access_policy)
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
    set_access_policy(None)


@pytest.fixture
def auth_headers():
    """Factory: auth_headers(identity) -> Authorization header for that caller."""

    def _make(identity, role: str | None = None) -> dict[str, str]:
        claims = {"sub": str(identity.id)}
        role_value = role if role is not None else (identity.role and identity.role.value)
        if role_value:
            claims[settings.identity_role_claim] = role_value
        token = jwt.encode(
            claims,
            settings.identity_jwt_secret,
            algorithm=settings.identity_jwt_algorithm,
        )
        return {"Authorization": f"Bearer {token}"}

    return _make

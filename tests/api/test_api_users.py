"""API tests for the /api/v1/users endpoints.

Handlers are replaced with stubs; these tests cover HTTP mapping only
(status codes, request parsing, identity forwarding, problem details).
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.core.container import (
    get_delete_profile_handler,
    get_register_profile_handler,
    get_update_profile_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, ConflictError, NotFoundError
from src.core.result import Failure, Success
from src.domain.entities.profile import Profile
from src.domain.enums import UserRole
from src.main import app


def _profile(username: str = "jane", role: UserRole = UserRole.CLIENT) -> Profile:
    now = datetime.now(UTC)
    return Profile(id=uuid7(), username=username, role=role, created_at=now, updated_at=now)


class StubHandler:
    """Command handler double returning a fixed result."""

    def __init__(self, result):
        self.result = result
        self.commands = []

    async def handle(self, command):
        self.commands.append(command)
        return self.result


def _install(factory, result) -> StubHandler:
    handler = StubHandler(result)
    app.dependency_overrides[factory] = lambda: handler
    return handler


# =============================================================================
# POST /api/v1/users
# =============================================================================


@pytest.mark.api
class TestCreateUser:
    """Test registration."""

    def test_anonymous_sign_up(self, client):
        # Arrange
        profile = _profile()
        handler = _install(get_register_profile_handler, Success(value=profile))

        # Act
        response = client.post(
            "/api/v1/users", json={"username": "jane", "email": "jane@example.com"}
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["id"] == str(profile.id)
        assert response.json()["role"] == "client"
        [command] = handler.commands
        assert command.invited_by is None
        assert command.email == "jane@example.com"

    def test_invite_forwards_identity(self, client, auth_headers, identity_for):
        admin = identity_for(UserRole.ADMIN)
        handler = _install(
            get_register_profile_handler, Success(value=_profile("sam", UserRole.SALES_PERSON))
        )

        response = client.post(
            "/api/v1/users",
            json={"username": "sam", "role": "sales_person"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 201
        assert handler.commands[0].invited_by == admin
        assert handler.commands[0].role == "sales_person"

    def test_conflict_is_409(self, client):
        _install(
            get_register_profile_handler,
            Failure(
                error=ConflictError(
                    code=ErrorCode.USERNAME_ALREADY_EXISTS,
                    message="Username 'jane' is already taken",
                    resource_type="profile",
                    conflicting_field="username",
                )
            ),
        )

        response = client.post("/api/v1/users", json={"username": "jane"})

        assert response.status_code == 409
        assert response.json()["detail"] == "Username 'jane' is already taken"

    def test_invalid_email_is_422(self, client):
        _install(get_register_profile_handler, Success(value=_profile()))

        response = client.post(
            "/api/v1/users", json={"username": "jane", "email": "not-an-email"}
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "email"


# =============================================================================
# PATCH /api/v1/users/{id}
# =============================================================================


@pytest.mark.api
class TestUpdateUser:
    """Test updates."""

    def test_role_change(self, client, auth_headers, identity_for):
        # Arrange
        target = _profile("sam", UserRole.SALES_MANAGER)
        handler = _install(get_update_profile_handler, Success(value=target))
        admin = identity_for(UserRole.ADMIN)

        # Act
        response = client.patch(
            f"/api/v1/users/{target.id}",
            json={"role": "sales_manager"},
            headers=auth_headers(admin),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["role"] == "sales_manager"
        [command] = handler.commands
        assert command.actor == admin
        assert command.profile_id == target.id
        assert command.role == "sales_manager"
        assert command.username is None

    def test_forbidden_is_403(self, client, auth_headers, identity_for):
        _install(
            get_update_profile_handler,
            Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Permission denied: users:write",
                    required_permission="users:write",
                )
            ),
        )

        response = client.patch(
            f"/api/v1/users/{uuid7()}",
            json={"role": "admin"},
            headers=auth_headers(identity_for(UserRole.CLIENT)),
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: users:write"

    def test_anonymous_is_401(self, client):
        handler = _install(get_update_profile_handler, Success(value=_profile()))

        response = client.patch(f"/api/v1/users/{uuid7()}", json={"role": "admin"})

        assert response.status_code == 401
        assert handler.commands == []

    def test_invalid_profile_id_is_422(self, client, auth_headers, identity_for):
        _install(get_update_profile_handler, Success(value=_profile()))

        response = client.patch(
            "/api/v1/users/not-a-uuid",
            json={},
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.status_code == 422


# =============================================================================
# DELETE /api/v1/users/{id}
# =============================================================================


@pytest.mark.api
class TestDeleteUser:
    """Test deletion."""

    def test_delete_is_204(self, client, auth_headers, identity_for):
        handler = _install(get_delete_profile_handler, Success(value=None))
        profile_id = uuid7()

        response = client.delete(
            f"/api/v1/users/{profile_id}",
            headers=auth_headers(identity_for(UserRole.SUPER_ADMIN)),
        )

        assert response.status_code == 204
        assert response.content == b""
        assert handler.commands[0].profile_id == profile_id

    def test_missing_profile_is_404(self, client, auth_headers, identity_for):
        profile_id = uuid7()
        _install(
            get_delete_profile_handler,
            Failure(
                error=NotFoundError(
                    code=ErrorCode.PROFILE_NOT_FOUND,
                    message="Profile not found",
                    resource_type="profile",
                    resource_id=str(profile_id),
                )
            ),
        )

        response = client.delete(
            f"/api/v1/users/{profile_id}",
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.status_code == 404
        assert response.json()["title"] == "Resource Not Found"

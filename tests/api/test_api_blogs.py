"""API tests for the /api/v1/blogs endpoints.

Handlers are replaced with stubs; these tests cover HTTP mapping only
(status codes, request parsing, identity forwarding, problem details).
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.core.container import (
    get_create_blog_handler,
    get_delete_blog_handler,
    get_update_blog_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.entities.blog import Blog
from src.domain.enums import BlogStatus, UserRole
from src.main import app


def _blog(**fields) -> Blog:
    now = datetime.now(UTC)
    return Blog(
        id=uuid7(),
        title="Local SEO",
        description="Checklist",
        created_at=now,
        updated_at=now,
        **fields,
    )


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
# POST /api/v1/blogs
# =============================================================================


@pytest.mark.api
class TestCreateBlog:
    """Test blog creation."""

    def test_create(self, client, auth_headers, identity_for):
        # Arrange
        author = identity_for(UserRole.SEO_PERSON)
        blog = _blog(tags=["seo"], author_id=author.id)
        handler = _install(get_create_blog_handler, Success(value=blog))

        # Act
        response = client.post(
            "/api/v1/blogs",
            json={"title": "Local SEO", "description": "Checklist", "tags": ["seo"]},
            headers=auth_headers(author),
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == str(blog.id)
        assert data["status"] == "draft"
        assert data["tags"] == ["seo"]
        assert data["author_id"] == str(author.id)
        [command] = handler.commands
        assert command.actor == author
        assert command.category == "Other"
        assert command.status == "draft"

    def test_blank_title_is_400(self, client, auth_headers, identity_for):
        _install(
            get_create_blog_handler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="title is required",
                    field="title",
                )
            ),
        )

        response = client.post(
            "/api/v1/blogs",
            json={"title": " ", "description": "Checklist"},
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"

    def test_missing_description_is_422(self, client, auth_headers, identity_for):
        handler = _install(get_create_blog_handler, Success(value=_blog()))

        response = client.post(
            "/api/v1/blogs",
            json={"title": "Local SEO"},
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.status_code == 422
        assert handler.commands == []

    def test_forbidden_is_403(self, client, auth_headers, identity_for):
        _install(
            get_create_blog_handler,
            Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Permission denied: blogs:write",
                    required_permission="blogs:write",
                )
            ),
        )

        response = client.post(
            "/api/v1/blogs",
            json={"title": "Spam", "description": "Spam"},
            headers=auth_headers(identity_for(UserRole.CLIENT)),
        )

        assert response.status_code == 403

    def test_anonymous_is_401(self, client):
        handler = _install(get_create_blog_handler, Success(value=_blog()))

        response = client.post(
            "/api/v1/blogs", json={"title": "Local SEO", "description": "Checklist"}
        )

        assert response.status_code == 401
        assert handler.commands == []


# =============================================================================
# PATCH /api/v1/blogs/{id}
# =============================================================================


@pytest.mark.api
class TestUpdateBlog:
    """Test blog updates."""

    def test_publish(self, client, auth_headers, identity_for):
        # Arrange
        blog = _blog(status=BlogStatus.PUBLISHED, published_at=datetime.now(UTC))
        handler = _install(get_update_blog_handler, Success(value=blog))
        manager = identity_for(UserRole.SEO_MANAGER)

        # Act
        response = client.patch(
            f"/api/v1/blogs/{blog.id}",
            json={"status": "published"},
            headers=auth_headers(manager),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "published"
        assert response.json()["published_at"] is not None
        [command] = handler.commands
        assert command.actor == manager
        assert command.blog_id == blog.id
        assert command.status == "published"
        assert command.title is None
        assert command.tags is None

    def test_unknown_blog_is_404(self, client, auth_headers, identity_for):
        _install(
            get_update_blog_handler,
            Failure(
                error=NotFoundError(
                    code=ErrorCode.BLOG_NOT_FOUND,
                    message="Blog not found",
                    resource_type="blog",
                    resource_id="x",
                )
            ),
        )

        response = client.patch(
            f"/api/v1/blogs/{uuid7()}",
            json={"title": "New"},
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Blog not found"


# =============================================================================
# DELETE /api/v1/blogs/{id}
# =============================================================================


@pytest.mark.api
class TestDeleteBlog:
    """Test blog deletion."""

    def test_delete_is_204(self, client, auth_headers, identity_for):
        handler = _install(get_delete_blog_handler, Success(value=None))
        blog_id = uuid7()

        response = client.delete(
            f"/api/v1/blogs/{blog_id}",
            headers=auth_headers(identity_for(UserRole.SEO_MANAGER)),
        )

        assert response.status_code == 204
        assert response.content == b""
        assert handler.commands[0].blog_id == blog_id

    def test_forbidden_is_403(self, client, auth_headers, identity_for):
        _install(
            get_delete_blog_handler,
            Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Permission denied: blogs:delete",
                    required_permission="blogs:delete",
                )
            ),
        )

        response = client.delete(
            f"/api/v1/blogs/{uuid7()}",
            headers=auth_headers(identity_for(UserRole.SEO_PERSON)),
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: blogs:delete"

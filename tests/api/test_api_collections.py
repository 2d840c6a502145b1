"""API tests for GET /api/v1/collections/{collection}.

Tests cover:
- Paged responses with metadata
- Query-string filters and search
- 400 for rejected paging input, 401/403 for identity and permission
- 503 when the backing store is unavailable
- Owner-scoped collections (notifications, client leads)
"""

from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from src.application.queries.handlers import PaginateCollectionHandler
from src.core.container import get_paginate_collection_handler
from src.domain.enums import UserRole
from src.infrastructure.persistence.in_memory_record_store import InMemoryRecordStore
from src.main import app
from tests.conftest import BASE_TIME, make_records


@pytest.fixture
def store():
    leads = make_records(45, name="Lead", email=None, phone=None, status="new", source="web")
    for record in leads[:5]:
        record["status"] = "won"
        record["name"] = "Acme"
    return InMemoryRecordStore({"leads": leads})


@pytest.fixture
def client_with_store(client, store, mock_logger):
    handler = PaginateCollectionHandler(store=store, logger=mock_logger)
    app.dependency_overrides[get_paginate_collection_handler] = lambda: handler
    return client


@pytest.mark.api
class TestCollectionPages:
    """Test successful page responses."""

    def test_first_page(self, client_with_store, auth_headers, identity_for):
        # Act
        response = client_with_store.get(
            "/api/v1/collections/leads",
            params={"page": 1, "page_size": 20},
            headers=auth_headers(identity_for(UserRole.SALES_PERSON)),
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["collection"] == "leads"
        assert len(data["records"]) == 20
        assert data["meta"] == {
            "page": 1,
            "page_size": 20,
            "total_count": 45,
            "total_pages": 3,
            "has_next": True,
            "has_previous": False,
        }

    def test_last_page(self, client_with_store, auth_headers, identity_for):
        response = client_with_store.get(
            "/api/v1/collections/leads?page=3&page_size=20",
            headers=auth_headers(identity_for(UserRole.SALES_PERSON)),
        )

        assert len(response.json()["records"]) == 5
        assert response.json()["meta"]["has_next"] is False

    def test_default_page_size(self, client_with_store, auth_headers, identity_for):
        response = client_with_store.get(
            "/api/v1/collections/leads",
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.json()["meta"]["page_size"] == 20

    def test_filter_and_search(self, client_with_store, auth_headers, identity_for):
        response = client_with_store.get(
            "/api/v1/collections/leads",
            params={"status": "won", "search": "acme"},
            headers=auth_headers(identity_for(UserRole.SALES_MANAGER)),
        )

        assert response.status_code == 200
        assert response.json()["meta"]["total_count"] == 5

    def test_blank_search_is_ignored(self, client_with_store, auth_headers, identity_for):
        response = client_with_store.get(
            "/api/v1/collections/leads",
            params={"search": "   "},
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.json()["meta"]["total_count"] == 45

    def test_trace_id_is_echoed(self, client_with_store, auth_headers, identity_for):
        headers = {**auth_headers(identity_for(UserRole.ADMIN)), "X-Trace-Id": "trace-123"}

        response = client_with_store.get("/api/v1/collections/leads", headers=headers)

        assert response.headers["X-Trace-Id"] == "trace-123"


@pytest.mark.api
class TestCollectionErrors:
    """Test problem-details error responses."""

    @pytest.mark.parametrize(
        ("params", "field"),
        [({"page": 0}, "page"), ({"page_size": 0}, "page_size"), ({"page_size": 101}, "page_size")],
    )
    def test_invalid_paging_is_rejected(
        self, client_with_store, store, auth_headers, identity_for, params, field
    ):
        # Act
        response = client_with_store.get(
            "/api/v1/collections/leads",
            params=params,
            headers={**auth_headers(identity_for(UserRole.ADMIN)), "X-Trace-Id": "t-1"},
        )

        # Assert
        assert response.status_code == 400
        data = response.json()
        assert data["status"] == 400
        assert data["title"] == "Validation Failed"
        assert data["type"].endswith("/errors/validation_failed")
        assert data["instance"] == "/api/v1/collections/leads"
        assert data["trace_id"] == "t-1"
        assert data["errors"][0]["field"] == field
        assert store.calls == 0

    def test_unknown_filter_lists_allowed_fields(
        self, client_with_store, auth_headers, identity_for
    ):
        response = client_with_store.get(
            "/api/v1/collections/leads",
            params={"owner": "me"},
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["allowed"] == ["client_id", "source", "status"]

    def test_unknown_collection(self, client_with_store, auth_headers, identity_for):
        response = client_with_store.get(
            "/api/v1/collections/widgets",
            headers=auth_headers(identity_for(UserRole.SUPER_ADMIN)),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "unknown_collection"

    def test_non_integer_page_is_422(self, client_with_store, auth_headers, identity_for):
        response = client_with_store.get(
            "/api/v1/collections/leads?page=abc",
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "page"

    def test_anonymous_is_401(self, client_with_store):
        response = client_with_store.get("/api/v1/collections/leads")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token_is_401(self, client_with_store):
        response = client_with_store.get(
            "/api/v1/collections/leads", headers={"Authorization": "Bearer nope"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired access token"

    @pytest.mark.parametrize(
        ("role", "collection"),
        [("seo_person", "leads"), ("client", "profiles"), ("sales_person", "blogs")],
    )
    def test_role_without_read_is_403(
        self, client_with_store, store, auth_headers, identity_for, role, collection
    ):
        response = client_with_store.get(
            f"/api/v1/collections/{collection}",
            headers=auth_headers(identity_for(UserRole(role))),
        )

        assert response.status_code == 403
        assert response.json()["title"] == "Access Denied"
        assert store.calls == 0

    def test_unknown_role_is_403(self, client_with_store, auth_headers, identity_for):
        response = client_with_store.get(
            "/api/v1/collections/leads",
            headers=auth_headers(identity_for(None), role="owner"),
        )

        assert response.status_code == 403

    def test_store_unavailable_is_503(
        self, client_with_store, store, auth_headers, identity_for
    ):
        store.available = False

        response = client_with_store.get(
            "/api/v1/collections/leads",
            headers=auth_headers(identity_for(UserRole.ADMIN)),
        )

        assert response.status_code == 503
        assert response.json()["title"] == "Service Unavailable"


@pytest.mark.api
class TestOwnerScopedCollections:
    """Callers only see rows that belong to them where a collection is per-owner."""

    @pytest.fixture
    def owners(self, store, identity_for):
        alice = identity_for(UserRole.CLIENT)
        bob = identity_for(UserRole.CLIENT)
        admin = identity_for(UserRole.ADMIN)
        for index, (owner, title) in enumerate(
            [(alice, "Your report"), (bob, "Role updated for bob"), (admin, "New user")]
        ):
            store.add(
                "notifications",
                {
                    "id": uuid7(),
                    "created_at": BASE_TIME + timedelta(minutes=index),
                    "user_id": owner.id,
                    "title": title,
                    "message": "",
                    "type": "info",
                    "is_read": False,
                },
            )
        store.add(
            "leads",
            {
                "id": uuid7(),
                "created_at": BASE_TIME,
                "name": "Alice's lead",
                "status": "new",
                "client_id": alice.id,
            },
        )
        return {"alice": alice, "bob": bob, "admin": admin}

    def test_client_cannot_see_another_clients_notification(
        self, client_with_store, owners, auth_headers
    ):
        # Act
        response = client_with_store.get(
            "/api/v1/collections/notifications",
            headers=auth_headers(owners["alice"]),
        )

        # Assert
        assert response.status_code == 200
        titles = [record["title"] for record in response.json()["records"]]
        assert titles == ["Your report"]
        assert response.json()["meta"]["total_count"] == 1

    def test_owner_filter_cannot_be_overridden(
        self, client_with_store, owners, auth_headers
    ):
        response = client_with_store.get(
            "/api/v1/collections/notifications",
            params={"user_id": str(owners["bob"].id)},
            headers=auth_headers(owners["alice"]),
        )

        assert [r["title"] for r in response.json()["records"]] == ["Your report"]

    def test_administrators_read_their_own_inbox(
        self, client_with_store, owners, auth_headers
    ):
        response = client_with_store.get(
            "/api/v1/collections/notifications",
            headers=auth_headers(owners["admin"]),
        )

        assert [r["title"] for r in response.json()["records"]] == ["New user"]

    def test_client_sees_only_own_leads(self, client_with_store, owners, auth_headers):
        response = client_with_store.get(
            "/api/v1/collections/leads",
            headers=auth_headers(owners["alice"]),
        )

        assert response.json()["meta"]["total_count"] == 1
        assert response.json()["records"][0]["name"] == "Alice's lead"

    def test_sales_roles_see_every_lead(
        self, client_with_store, owners, auth_headers, identity_for
    ):
        response = client_with_store.get(
            "/api/v1/collections/leads",
            headers=auth_headers(identity_for(UserRole.SALES_MANAGER)),
        )

        assert response.json()["meta"]["total_count"] == 46

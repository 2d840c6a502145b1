"""Integration tests for SqlRecordStore against SQLite.

Tests cover:
- Ordered windows and filtered totals
- Case-insensitive search with literal % and _
- Query-string coercion for boolean and UUID filters
- GROUP BY counts
- Unknown tables and columns fail as StoreUnavailableError
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.queries.collection_queries import PaginateCollection
from src.application.queries.handlers.paginate_collection_handler import (
    PaginateCollectionHandler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.persistence import Database
from src.infrastructure.persistence.models.lead import LeadModel
from src.infrastructure.persistence.models.profile import ProfileModel
from src.infrastructure.persistence.record_store import SqlRecordStore, escape_like

BASE_TIME = datetime(2025, 3, 1, tzinfo=UTC)


async def _add_leads(database, names, **fields):
    async with database.get_session() as session:
        for index, name in enumerate(names):
            session.add(
                LeadModel(
                    id=UUID(int=index + 1),
                    name=name,
                    status=fields.get("status", "new"),
                    source=fields.get("source"),
                    created_at=BASE_TIME + timedelta(minutes=index),
                )
            )


@pytest.fixture
def store(database, mock_logger):
    return SqlRecordStore(database=database, logger=mock_logger)


async def _fetch(store, collection="leads", **overrides):
    arguments = {
        "filters": {},
        "search": None,
        "search_fields": ("name", "email", "phone"),
        "order_by": ("created_at", "id"),
        "limit": 20,
        "offset": 0,
    }
    arguments.update(overrides)
    return await store.fetch_page(collection, **arguments)


@pytest.mark.unit
class TestEscapeLike:
    """Test LIKE escaping."""

    def test_wildcards_are_escaped(self):
        assert escape_like("50%_off\\") == "50\\%\\_off\\\\"


@pytest.mark.integration
class TestSqlRecordStorePaging:
    """Test windows and totals."""

    async def test_window_and_total(self, database, store):
        # Arrange
        await _add_leads(database, [f"Lead {n:02d}" for n in range(45)])

        # Act
        result = await _fetch(store, limit=20, offset=40)

        # Assert
        match result:
            case Success(value=page):
                assert page.total == 45
                assert [r["name"] for r in page.records] == [
                    f"Lead {n:02d}" for n in range(40, 45)
                ]
            case Failure(error=error):
                pytest.fail(f"Unexpected failure: {error}")

    async def test_offset_past_end_is_empty(self, database, store):
        await _add_leads(database, ["A", "B"])

        result = await _fetch(store, offset=40)

        assert result.value.records == ()
        assert result.value.total == 2

    async def test_handler_pages_partition_table(self, database, store, mock_logger):
        await _add_leads(database, [f"Lead {n}" for n in range(45)])
        handler = PaginateCollectionHandler(store=store, logger=mock_logger)

        ids = []
        for page in (1, 2, 3):
            result = await handler.handle(
                PaginateCollection(collection="leads", page=page, page_size=20)
            )
            ids.extend(record["id"] for record in result.value.records)

        assert len(ids) == len(set(ids)) == 45


@pytest.mark.integration
class TestSqlRecordStoreFiltering:
    """Test search and filter behaviour."""

    async def test_search_is_case_insensitive(self, database, store):
        await _add_leads(database, ["Acme Corp", "acme labs", "Globex"])

        result = await _fetch(store, search="ACME")

        assert result.value.total == 2

    async def test_wildcards_in_search_match_literally(self, database, store):
        await _add_leads(database, ["50% off", "500 units", "snake_case", "snakeXcase"])

        percent = await _fetch(store, search="50%")
        underscore = await _fetch(store, search="snake_")

        assert [r["name"] for r in percent.value.records] == ["50% off"]
        assert [r["name"] for r in underscore.value.records] == ["snake_case"]

    async def test_filter_and_search_compose(self, database, store):
        async with database.get_session() as session:
            for index, (name, status) in enumerate(
                [("Acme", "new"), ("Acme 2", "won"), ("Globex", "new")]
            ):
                session.add(
                    LeadModel(
                        name=name,
                        status=status,
                        created_at=BASE_TIME + timedelta(minutes=index),
                    )
                )

        result = await _fetch(store, search="acme", filters={"status": "new"})

        assert [r["name"] for r in result.value.records] == ["Acme"]
        assert result.value.total == 1

    async def test_boolean_filter_from_query_string(self, database, mock_logger):
        # Arrange
        async with database.get_session() as session:
            for index, paid in enumerate([True, False, True]):
                session.add(
                    ProfileModel(
                        username=f"client{index}",
                        role="client",
                        is_client_paid=paid,
                        created_at=BASE_TIME + timedelta(minutes=index),
                    )
                )
        store = SqlRecordStore(database=database, logger=mock_logger)

        # Act
        paid = await _fetch(
            store, "profiles", search_fields=("username",), filters={"is_client_paid": "true"}
        )
        nonsense = await _fetch(
            store, "profiles", search_fields=("username",), filters={"is_client_paid": "maybe"}
        )

        # Assert
        assert paid.value.total == 2
        assert nonsense.value.total == 0

    @pytest.mark.parametrize(
        ("text", "expected"), [("1", 2), ("yes", 2), ("on", 2), ("0", 1), ("off", 1)]
    )
    async def test_boolean_filter_text_forms(self, database, store, text, expected):
        async with database.get_session() as session:
            for index, paid in enumerate([True, False, True]):
                session.add(
                    ProfileModel(
                        username=f"client{index}",
                        role="client",
                        is_client_paid=paid,
                        created_at=BASE_TIME + timedelta(minutes=index),
                    )
                )

        result = await _fetch(
            store, "profiles", search_fields=("username",), filters={"is_client_paid": text}
        )

        assert result.value.total == expected

    async def test_uuid_filter_from_query_string(self, database, store):
        client_id = uuid7()
        async with database.get_session() as session:
            session.add(LeadModel(name="Owned", client_id=client_id, created_at=BASE_TIME))
            session.add(LeadModel(name="Unowned", created_at=BASE_TIME))

        owned = await _fetch(store, filters={"client_id": str(client_id)})
        invalid = await _fetch(store, filters={"client_id": "not-a-uuid"})

        assert [r["name"] for r in owned.value.records] == ["Owned"]
        assert invalid.value.total == 0


@pytest.mark.integration
class TestSqlRecordStoreCountBy:
    """Test GROUP BY counts."""

    async def test_counts_per_value_after_filters(self, database, store):
        async with database.get_session() as session:
            for index, (status, source) in enumerate(
                [
                    ("pending", "seo"),
                    ("pending", "seo"),
                    ("completed", "form"),
                    ("remainder", "seo"),
                    ("pending", None),
                ]
            ):
                session.add(
                    LeadModel(
                        name=f"Lead {index}",
                        status=status,
                        source=source,
                        created_at=BASE_TIME + timedelta(minutes=index),
                    )
                )

        by_status = await store.count_by("leads", group_by="status", filters={})
        by_source = await store.count_by(
            "leads", group_by="source", filters={"status": "pending"}
        )

        assert by_status.value == {"pending": 3, "completed": 1, "remainder": 1}
        assert by_source.value == {"seo": 2, None: 1}

    async def test_uuid_filter_text(self, database, store):
        client_id = uuid7()
        async with database.get_session() as session:
            session.add(
                LeadModel(
                    name="Owned", status="pending", client_id=client_id, created_at=BASE_TIME
                )
            )
            session.add(LeadModel(name="Unowned", status="pending", created_at=BASE_TIME))

        result = await store.count_by(
            "leads", group_by="status", filters={"client_id": str(client_id)}
        )

        assert result.value == {"pending": 1}

    async def test_unknown_group_column(self, store):
        result = await store.count_by("leads", group_by="colour", filters={})

        assert isinstance(result, Failure)
        assert result.error.details == {"columns": ["colour"]}


@pytest.mark.integration
class TestSqlRecordStoreFailures:
    """Test misconfigured collections fail cleanly."""

    async def test_unknown_table(self, store, mock_logger):
        result = await _fetch(store, "widgets")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE
        assert result.error.collection == "widgets"
        mock_logger.error.assert_called_once()

    async def test_unknown_column(self, store):
        result = await _fetch(store, filters={"owner": "me"})

        assert result.error.details == {"columns": ["owner"]}

    async def test_unreachable_database_reports_unavailable(self, tmp_path, mock_logger):
        # A directory cannot be opened as a SQLite database
        broken = Database(f"sqlite+aiosqlite:///{tmp_path}")
        store = SqlRecordStore(database=broken, logger=mock_logger)

        result = await _fetch(store)

        assert result.error.code == ErrorCode.STORE_UNAVAILABLE
        assert mock_logger.error.call_args[0][0] == "record_store_query_failed"
        await broken.close()

"""Unit tests for InMemoryRecordStore.

Tests cover:
- Query-string filter coercion matches SqlRecordStore
- Per-value counts over the filtered set
- Unavailable store fails as StoreUnavailableError
"""

from uuid import UUID

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure
from src.infrastructure.persistence.filter_values import parse_bool
from src.infrastructure.persistence.in_memory_record_store import InMemoryRecordStore
from tests.conftest import make_records


async def _total(store, collection, filters):
    result = await store.fetch_page(
        collection,
        filters=filters,
        search=None,
        search_fields=(),
        order_by=("created_at", "id"),
        limit=20,
        offset=0,
    )
    return result.value.total


@pytest.fixture
def profiles():
    return InMemoryRecordStore(
        {
            "profiles": [
                *make_records(2, is_client_paid=True),
                *make_records(1, is_client_paid=False),
            ]
        }
    )


@pytest.mark.unit
class TestParseBool:
    """Test the text forms shared by both stores."""

    @pytest.mark.parametrize("text", ["true", "1", "yes", "on", " TRUE "])
    def test_true_forms(self, text):
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["false", "0", "no", "Off"])
    def test_false_forms(self, text):
        assert parse_bool(text) is False

    def test_other_text_is_unknown(self):
        assert parse_bool("maybe") is None


@pytest.mark.unit
class TestInMemoryFilterCoercion:
    """Test text filters against typed values."""

    @pytest.mark.parametrize("text", ["true", "1", "yes", "on"])
    async def test_true_text_matches_true_values(self, profiles, text):
        assert await _total(profiles, "profiles", {"is_client_paid": text}) == 2

    @pytest.mark.parametrize("text", ["false", "0", "no"])
    async def test_false_text_matches_false_values(self, profiles, text):
        assert await _total(profiles, "profiles", {"is_client_paid": text}) == 1

    async def test_unknown_boolean_text_matches_nothing(self, profiles):
        assert await _total(profiles, "profiles", {"is_client_paid": "maybe"}) == 0

    async def test_uuid_text_matches_uuid_values(self):
        client_id = UUID(int=42)
        store = InMemoryRecordStore(
            {"leads": [*make_records(1, client_id=client_id)]}
        )

        assert await _total(store, "leads", {"client_id": str(client_id)}) == 1
        assert await _total(store, "leads", {"client_id": str(client_id).upper()}) == 1
        assert await _total(store, "leads", {"client_id": "not-a-uuid"}) == 0


@pytest.mark.unit
class TestInMemoryCountBy:
    """Test grouped counts."""

    async def test_counts_per_value_after_filters(self):
        store = InMemoryRecordStore(
            {
                "leads": [
                    *make_records(3, status="pending", source="seo"),
                    *make_records(2, status="completed", source="seo"),
                    *make_records(1, status="pending", source="form"),
                ]
            }
        )

        by_status = await store.count_by("leads", group_by="status", filters={})
        seo_only = await store.count_by(
            "leads", group_by="status", filters={"source": "seo"}
        )

        assert by_status.value == {"pending": 4, "completed": 2}
        assert seo_only.value == {"pending": 3, "completed": 2}

    async def test_unknown_collection_counts_nothing(self):
        result = await InMemoryRecordStore().count_by(
            "leads", group_by="status", filters={}
        )

        assert result.value == {}

    async def test_unavailable_store(self):
        store = InMemoryRecordStore()
        store.available = False

        result = await store.count_by("leads", group_by="status", filters={})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE
        assert store.calls == 1

"""Unit tests for PageSpec, PageResult and CollectionDefinition."""

import pytest

from src.config.collections import COLLECTIONS
from src.domain.enums import UserRole
from src.domain.value_objects import PageResult, PageSpec


@pytest.mark.unit
class TestPageSpec:
    """Test derived values of a page request."""

    @pytest.mark.parametrize(
        ("page", "page_size", "offset"), [(1, 20, 0), (2, 20, 20), (3, 7, 14)]
    )
    def test_offset(self, page, page_size, offset):
        assert PageSpec(page=page, page_size=page_size).offset == offset

    @pytest.mark.parametrize("search", [None, "", "   ", "\t\n"])
    def test_blank_search_has_no_term(self, search):
        assert PageSpec(page=1, page_size=10, search=search).search_term is None

    def test_search_term_is_stripped(self):
        assert PageSpec(page=1, page_size=10, search="  acme ").search_term == "acme"

    def test_filters_are_copied_and_read_only(self):
        filters = {"status": "new"}
        spec = PageSpec(page=1, page_size=10, filters=filters)

        filters["status"] = "lost"

        assert spec.filters["status"] == "new"
        with pytest.raises(TypeError):
            spec.filters["status"] = "won"  # type: ignore[index]


@pytest.mark.unit
class TestPageResult:
    """Test totals and navigation flags."""

    @pytest.mark.parametrize(
        ("total", "page_size", "pages"), [(0, 20, 0), (1, 20, 1), (40, 20, 2), (45, 20, 3)]
    )
    def test_total_pages_rounds_up(self, total, page_size, pages):
        result = PageResult(records=(), total=total, page=1, page_size=page_size)

        assert result.total_pages == pages

    def test_navigation_flags_on_middle_page(self):
        result = PageResult(records=(), total=45, page=2, page_size=20)

        assert result.has_next
        assert result.has_previous

    def test_navigation_flags_on_last_page(self):
        result = PageResult(records=(), total=45, page=3, page_size=20)

        assert not result.has_next
        assert result.has_previous

    def test_empty_set_has_no_next_page(self):
        result = PageResult(records=(), total=0, page=1, page_size=20)

        assert not result.has_next
        assert not result.has_previous


@pytest.mark.unit
class TestCollectionOwnerScope:
    """Test which callers are pinned to their own rows."""

    @pytest.mark.parametrize("role", [*UserRole, None])
    def test_notifications_are_scoped_for_everyone(self, role):
        assert COLLECTIONS["notifications"].owner_scope(role) == "user_id"

    def test_leads_are_scoped_for_clients_only(self):
        leads = COLLECTIONS["leads"]

        assert leads.owner_scope(UserRole.CLIENT) == "client_id"
        assert leads.owner_scope(UserRole.SALES_PERSON) is None
        assert leads.owner_scope(UserRole.ADMIN) is None

    def test_unscoped_collection(self):
        assert COLLECTIONS["blogs"].owner_scope(UserRole.CLIENT) is None

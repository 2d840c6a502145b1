"""Unit tests for the Profile entity."""

from datetime import UTC, date, datetime

import pytest
from uuid_extensions import uuid7

from src.domain.entities.profile import Profile
from src.domain.enums import UserRole


def _client(**overrides) -> Profile:
    now = datetime.now(UTC)
    fields = {
        "id": uuid7(),
        "username": "client",
        "role": UserRole.CLIENT,
        "created_at": now,
        "updated_at": now,
        "is_client_paid": True,
        "subscription_start": date(2025, 1, 1),
        "subscription_end": date(2025, 12, 31),
    }
    fields.update(overrides)
    return Profile(**fields)


@pytest.mark.unit
class TestProfileSubscription:
    """Test has_active_subscription."""

    def test_paid_client_inside_window(self):
        assert _client().has_active_subscription(date(2025, 6, 1))

    @pytest.mark.parametrize("today", [date(2024, 12, 31), date(2026, 1, 1)])
    def test_outside_window(self, today):
        assert not _client().has_active_subscription(today)

    def test_unpaid_client(self):
        assert not _client(is_client_paid=False).has_active_subscription(date(2025, 6, 1))

    def test_non_client_never_has_subscription(self):
        assert not _client(role=UserRole.ADMIN).has_active_subscription(date(2025, 6, 1))


@pytest.mark.unit
class TestProfileRole:
    """Test change_role and is_administrator."""

    def test_change_role_reports_change(self):
        profile = _client()

        assert profile.change_role(UserRole.SALES_PERSON) is True
        assert profile.role is UserRole.SALES_PERSON
        assert profile.change_role(UserRole.SALES_PERSON) is False

    def test_is_administrator(self):
        assert _client(role=UserRole.SUPER_ADMIN).is_administrator()
        assert not _client().is_administrator()

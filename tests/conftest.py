"""Shared pytest fixtures.

Provides:
- mock_logger: Mock satisfying LoggerProtocol
- access_policy: Policy compiled from the shipped Casbin files
- identity factory for each role
- make_records: Deterministic collection rows for pagination tests
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.core.config import settings
from src.core.result import Success
from src.domain.enums import UserRole
from src.domain.value_objects import AccessPolicy, SessionIdentity
from src.infrastructure.authorization import load_access_policy

BASE_TIME = datetime(2025, 1, 1, tzinfo=UTC)


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double; assert on calls like mock_logger.warning.assert_called()."""
    logger = Mock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture(scope="session")
def access_policy() -> AccessPolicy:
    """Policy loaded from the default model.conf and policy.csv."""
    return load_access_policy(
        settings.authz_model_path, settings.authz_policy_path, Mock()
    )


@pytest.fixture
def identity_for():
    """Factory: identity_for(UserRole.ADMIN) -> SessionIdentity."""

    def _make(role: UserRole | None, user_id: UUID | None = None) -> SessionIdentity:
        return SessionIdentity(id=user_id or uuid7(), role=role)

    return _make


@pytest.fixture
def mock_activity_log() -> AsyncMock:
    """Activity log double that always succeeds."""
    activity_log = AsyncMock()
    activity_log.record.return_value = Success(value=None)
    return activity_log


@pytest.fixture
def mock_notifier() -> Mock:
    """Notification dispatcher double (dispatch is synchronous)."""
    return Mock()


def make_records(count: int, **fields: Any) -> list[dict[str, Any]]:
    """Rows with increasing created_at and ids, plus any fixed fields."""
    return [
        {
            "id": UUID(int=index + 1),
            "created_at": BASE_TIME + timedelta(minutes=index),
            **fields,
        }
        for index in range(count)
    ]


def pytest_collection_modifyitems(config, items):
    """Mark tests by directory (unit, integration, api)."""
    for item in items:
        path = str(item.fspath)
        for marker in ("unit", "integration", "api"):
            if f"/tests/{marker}/" in path:
                item.add_marker(getattr(pytest.mark, marker))

"""Process-wide infrastructure singletons.

Logger, database, record store, activity log and notification dispatcher
are built once (lru_cache) from settings. get_db_session is the only
request-scoped factory.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.application.services.notification_dispatcher import (
        NotificationDispatcher,
    )
    from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.record_store_protocol import RecordStoreProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Console logger bound with app, version and env."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    adapter = ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
    )
    return adapter.bind(
        app=settings.app_name,
        version=settings.app_version,
        env=settings.environment.value,
    )


@lru_cache()
def get_database() -> Database:
    """Shared engine; sessions come from get_db_session."""
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_record_store() -> "RecordStoreProtocol":
    """Get the SQL record store singleton (app-scoped)."""
    from src.infrastructure.persistence.record_store import SqlRecordStore

    return SqlRecordStore(database=get_database(), logger=get_logger())


@lru_cache()
def get_activity_log() -> "ActivityLogProtocol":
    """Get the activity log adapter (app-scoped, one session per entry)."""
    from src.infrastructure.audit.activity_log_adapter import ActivityLogAdapter

    return ActivityLogAdapter(database=get_database())


@lru_cache()
def get_notification_dispatcher() -> "NotificationDispatcher":
    """Get the notification dispatcher singleton.

    App-scoped so background deliveries can be drained at shutdown.
    """
    from src.application.services.notification_dispatcher import (
        NotificationDispatcher,
    )
    from src.infrastructure.persistence.repositories.notification_repository import (
        NotificationRepository,
    )

    return NotificationDispatcher(
        repository=NotificationRepository(database=get_database()),
        logger=get_logger(),
        timeout_seconds=settings.notification_timeout_seconds,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Per-request session; commits when the endpoint returns, rolls back if it raises."""
    db = get_database()
    async with db.get_session() as session:
        yield session

"""Container module - Centralized dependency injection.

    from src.core.container import get_logger, get_access_policy, ...

The container is organized into modules:
- infrastructure: Logging, database, record store, activity log, notifications
- authorization: Access policy singleton (Casbin-loaded)
- handlers: Query and command handler factories
"""

from src.core.container.authorization import (
    get_access_policy,
    get_identity_verifier,
    init_access_policy,
    set_access_policy,
)
from src.core.container.handlers import (
    get_blog_repository,
    get_create_blog_handler,
    get_delete_blog_handler,
    get_delete_profile_handler,
    get_lead_stats_handler,
    get_paginate_collection_handler,
    get_profile_repository,
    get_register_profile_handler,
    get_update_blog_handler,
    get_update_profile_handler,
)
from src.core.container.infrastructure import (
    get_activity_log,
    get_database,
    get_db_session,
    get_logger,
    get_notification_dispatcher,
    get_record_store,
)

__all__ = [
    # Infrastructure
    "get_activity_log",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_notification_dispatcher",
    "get_record_store",
    # Authorization
    "get_access_policy",
    "get_identity_verifier",
    "init_access_policy",
    "set_access_policy",
    # Handlers
    "get_blog_repository",
    "get_create_blog_handler",
    "get_delete_blog_handler",
    "get_delete_profile_handler",
    "get_lead_stats_handler",
    "get_paginate_collection_handler",
    "get_profile_repository",
    "get_register_profile_handler",
    "get_update_blog_handler",
    "get_update_profile_handler",
]

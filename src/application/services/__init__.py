"""Application services.

Exports:
    authorize: Access check run before every mutation
    keep_an_administrator: Last-administrator guard for demotions and deletions
    visible_navigation: Menu entries a role may open
    NotificationDispatcher, ALL_ADMINS: Best-effort notification fan-out
    LatestPageLoader: Last-request-wins page loading
"""

from src.application.services.access_guard import authorize, keep_an_administrator
from src.application.services.navigation import visible_navigation
from src.application.services.notification_dispatcher import (
    ALL_ADMINS,
    NotificationDispatcher,
)
from src.application.services.page_loader import LatestPageLoader

__all__ = [
    "ALL_ADMINS",
    "LatestPageLoader",
    "NotificationDispatcher",
    "authorize",
    "keep_an_administrator",
    "visible_navigation",
]

"""Collection query configuration.

This module defines which collections the pagination engine serves and,
for each one, the fixed search fields, the exact-match filter fields and the
resource that gates reads.

Usage:
    ```python
    from src.config.collections import COLLECTIONS

    definition = COLLECTIONS.get("leads")
    if definition is None:
        ...  # unknown collection
    ```
"""

from src.domain.enums import Resource, UserRole
from src.domain.value_objects import CollectionDefinition

# =============================================================================
# Paginated Collections
# =============================================================================
#
# Keys are the collection names accepted by PaginateCollection and by
# GET /api/v1/collections/{collection}. Every collection pages in
# (created_at, id) order. Owner-scoped collections pin `owner_field` to the
# caller for the listed roles (every role when None), whatever filter the
# caller sent for that field.
#
# =============================================================================

COLLECTIONS: dict[str, CollectionDefinition] = {
    "profiles": CollectionDefinition(
        name="profiles",
        resource=Resource.USERS,
        search_fields=("username", "email"),
        filter_fields=frozenset({"role", "is_client_paid", "subscription_plan"}),
    ),
    "leads": CollectionDefinition(
        name="leads",
        resource=Resource.LEADS,
        search_fields=("name", "email", "phone"),
        filter_fields=frozenset({"status", "source", "client_id"}),
        owner_field="client_id",
        owner_scoped_roles=frozenset({UserRole.CLIENT}),
    ),
    "blogs": CollectionDefinition(
        name="blogs",
        resource=Resource.BLOGS,
        search_fields=("title", "description"),
        filter_fields=frozenset({"status", "category", "author_id"}),
    ),
    "activity_logs": CollectionDefinition(
        name="activity_logs",
        resource=Resource.ACTIVITY_LOGS,
        search_fields=("action", "resource_type"),
        filter_fields=frozenset({"user_id", "action", "resource_type"}),
    ),
    "notifications": CollectionDefinition(
        name="notifications",
        resource=Resource.NOTIFICATIONS,
        search_fields=("title", "message"),
        filter_fields=frozenset({"user_id", "type", "is_read"}),
        owner_field="user_id",
    ),
}

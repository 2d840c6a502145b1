"""Domain value objects.

Immutable objects defined by their attributes rather than identity.

Exports:
    AccessPolicy, PermissionRule: RBAC evaluator and its rules
    SessionIdentity: Caller id + role
    PageSpec, PageResult, StorePage: Pagination request/response
    CollectionDefinition: Per-collection search/filter/order rules
    LeadStats: Dashboard lead counts per status and source
    NotificationMessage: In-app notification payload
"""

from src.domain.value_objects.access_policy import AccessPolicy, PermissionRule
from src.domain.value_objects.collection import CollectionDefinition
from src.domain.value_objects.identity import SessionIdentity
from src.domain.value_objects.lead_stats import LEAD_SOURCES, LeadStats
from src.domain.value_objects.notification import NotificationMessage
from src.domain.value_objects.pagination import PageResult, PageSpec, StorePage

__all__ = [
    "AccessPolicy",
    "CollectionDefinition",
    "LEAD_SOURCES",
    "LeadStats",
    "NotificationMessage",
    "PageResult",
    "PageSpec",
    "PermissionRule",
    "SessionIdentity",
    "StorePage",
]

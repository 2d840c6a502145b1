"""Collection definition value object.

Describes how a backing-store collection may be queried: which text fields
free-text search looks at, which fields accept exact-match filters, the
deterministic order used for paging and, for per-owner collections, the
column that ties a row to one profile.
"""

from dataclasses import dataclass

from src.domain.enums.permission import Resource
from src.domain.enums.user_role import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class CollectionDefinition:
    """Query rules for one collection.

    Attributes:
        name: Collection (table) name.
        resource: Resource gating reads of this collection.
        search_fields: Text fields matched case-insensitively by search.
        filter_fields: Fields accepted as exact-match filters.
        order_by: Sort keys giving a stable total order (ends with the
            primary key so ties never reorder between calls).
        owner_field: Column holding the owning profile id, if rows belong
            to one profile.
        owner_scoped_roles: Roles that only ever see their own rows; None
            means every role.
    """

    name: str
    resource: Resource
    search_fields: tuple[str, ...]
    filter_fields: frozenset[str]
    order_by: tuple[str, ...] = ("created_at", "id")
    owner_field: str | None = None
    owner_scoped_roles: frozenset[UserRole] | None = None

    def owner_scope(self, role: UserRole | None) -> str | None:
        """Column to pin to the caller's id for `role`, or None for all rows."""
        if self.owner_field is None:
            return None
        if self.owner_scoped_roles is not None and role not in self.owner_scoped_roles:
            return None
        return self.owner_field

"""Collection queries for CQRS read operations.

One query covers every paginated collection: the collection name picks the
search fields, filterable fields and resource from the collection registry.

Architecture:
- Queries are immutable (frozen dataclasses)
- NO business logic in queries (just data transfer)
- Handlers validate and fetch
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.value_objects import SessionIdentity


@dataclass(frozen=True, kw_only=True)
class PaginateCollection:
    """Query for page N of a filtered, searched collection.

    Attributes:
        collection: Collection name (profiles, leads, blogs, ...).
        page: 1-based page number.
        page_size: Records per page.
        search: Free-text term; None, empty or whitespace means no search.
        filters: Field -> exact value, ANDed.
        viewer: Caller; owner-scoped collections only return its own rows.
            None for trusted internal reads.

    Example:
        >>> query = PaginateCollection(
        ...     collection="profiles",
        ...     page=1,
        ...     page_size=20,
        ...     search="jane",
        ...     filters={"role": "client"},
        ... )
        >>> result = await handler.handle(query)
    """

    collection: str
    page: int = 1
    page_size: int = 20
    search: str | None = None
    filters: Mapping[str, Any] = field(default_factory=dict)
    viewer: SessionIdentity | None = None

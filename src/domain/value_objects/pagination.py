"""Pagination value objects.

PageSpec describes one request for a bounded slice of a collection;
PageResult is the slice plus the total size of the filtered set. StorePage
is the raw (records, total) pair a backing store returns.

Invariants (PageResult):
    - len(records) <= page_size
    - total >= len(records)
    - pages 1..total_pages of an unchanged set partition it exactly
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class PageSpec:
    """Immutable page request.

    Attributes:
        page: 1-based page number.
        page_size: Maximum records per page.
        search: Free-text search term (None or blank means no search).
        filters: Field name -> exact-match value, ANDed together.
    """

    page: int
    page_size: int
    search: str | None = None
    filters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy so later mutation of the caller's dict cannot leak in.
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters)))

    @property
    def offset(self) -> int:
        """Number of records skipped before this page."""
        return (self.page - 1) * self.page_size

    @property
    def search_term(self) -> str | None:
        """Search term with surrounding whitespace removed; None when empty."""
        if self.search is None:
            return None
        term = self.search.strip()
        return term or None


@dataclass(frozen=True, slots=True, kw_only=True)
class StorePage:
    """Raw backing-store answer for one limit/offset window.

    Attributes:
        records: Records in store order for the requested window.
        total: Size of the full filtered set.
    """

    records: tuple[dict[str, Any], ...]
    total: int


@dataclass(frozen=True, slots=True, kw_only=True)
class PageResult:
    """One page of a filtered collection.

    Attributes:
        records: Records on this page (at most page_size).
        total: Size of the full filtered set, independent of paging.
        page: Page number that was requested.
        page_size: Page size that was requested.
    """

    records: tuple[dict[str, Any], ...]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """ceil(total / page_size); 0 for an empty set."""
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        """Whether a later page holds records."""
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Whether an earlier page exists."""
        return self.page > 1

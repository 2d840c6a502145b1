"""Record store protocol (port) for paginated reads.

The pagination engine validates a page request and then asks a record store
for one limit/offset window of a collection plus the size of the whole
filtered set. Store adapters (SQLAlchemy, in-memory) implement this protocol
without inheritance.

Contract:
    - Filters are exact-match and ANDed together.
    - `search` is already stripped and non-empty when given; a record
      matches when ANY of `search_fields` contains it, ignoring case.
      Filters and search are ANDed.
    - Records come back in `order_by` order (ascending); the last key is
      unique so the order is total.
    - `total` counts the filtered set, not the window.
    - `count_by` groups the filtered set by one field.
    - Failures are returned as StoreUnavailableError, never raised.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from src.core.result import Result
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import StorePage


class RecordStoreProtocol(Protocol):
    """Backing store able to answer page and count queries."""

    async def fetch_page(
        self,
        collection: str,
        *,
        filters: Mapping[str, Any],
        search: str | None,
        search_fields: Sequence[str],
        order_by: Sequence[str],
        limit: int,
        offset: int,
    ) -> Result[StorePage, StoreUnavailableError]:
        """Fetch one window of a filtered, searched collection.

        Args:
            collection: Collection (table) name.
            filters: Field -> exact value, ANDed.
            search: Case-insensitive substring, or None for no search.
            search_fields: Fields the search term is matched against.
            order_by: Ascending sort keys.
            limit: Maximum records to return.
            offset: Records to skip.

        Returns:
            Success(StorePage) with the window and the filtered total.
            Failure(StoreUnavailableError) if the store could not answer.
        """
        ...

    async def count_by(
        self,
        collection: str,
        *,
        group_by: str,
        filters: Mapping[str, Any],
    ) -> Result[dict[Any, int], StoreUnavailableError]:
        """Count the filtered records per distinct value of one field.

        Args:
            collection: Collection (table) name.
            group_by: Field whose values are counted.
            filters: Field -> exact value, ANDed (same coercion as fetch_page).

        Returns:
            Success(dict) mapping each present value to its count; values
            with no records are absent.
            Failure(StoreUnavailableError) if the store could not answer.
        """
        ...

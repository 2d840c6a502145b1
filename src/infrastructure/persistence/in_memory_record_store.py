"""In-memory implementation of RecordStoreProtocol.

Holds collections as lists of dicts. Used by unit tests and local demos;
semantics match SqlRecordStore (exact-match filters with the same text
coercion, case-insensitive substring search over any search field,
ascending order, filtered total, per-value counts).
"""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Any
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import StorePage
from src.infrastructure.persistence.filter_values import parse_bool, parse_uuid


def _equals(actual: Any, expected: Any) -> bool:
    if actual == expected:
        return True
    # Query-string filters arrive as text ("true", "1", a UUID string).
    if not isinstance(expected, str) or actual is None or isinstance(actual, str):
        return False
    if isinstance(actual, bool):
        return parse_bool(expected) is actual
    if isinstance(actual, UUID):
        return parse_uuid(expected) == actual
    return str(actual) == expected.strip()


def _contains(record: Mapping[str, Any], fields: Sequence[str], needle: str) -> bool:
    return any(
        record.get(field) is not None and needle in str(record[field]).casefold()
        for field in fields
    )


class InMemoryRecordStore:
    """Dict-backed record store.

    Args:
        collections: Initial records per collection name.

    Example:
        >>> store = InMemoryRecordStore({"leads": [{"id": 1, "name": "Ann"}]})
        >>> store.available = False  # next fetch returns StoreUnavailableError
    """

    def __init__(
        self, collections: Mapping[str, Iterable[Mapping[str, Any]]] | None = None
    ) -> None:
        self._collections: dict[str, list[dict[str, Any]]] = {
            name: [dict(record) for record in records]
            for name, records in (collections or {}).items()
        }
        self.available = True
        self.calls = 0

    def add(self, collection: str, record: Mapping[str, Any]) -> None:
        """Append a record to a collection (created if missing)."""
        self._collections.setdefault(collection, []).append(dict(record))

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
        self.calls += 1
        if not self.available:
            return self._unavailable(collection)

        matched = self._matching(collection, filters)
        if search:
            needle = search.casefold()
            matched = [r for r in matched if _contains(r, search_fields, needle)]

        matched.sort(key=lambda record: tuple(record.get(key) for key in order_by))
        window = matched[offset : offset + limit]
        return Success(
            value=StorePage(
                records=tuple(dict(record) for record in window), total=len(matched)
            )
        )

    async def count_by(
        self,
        collection: str,
        *,
        group_by: str,
        filters: Mapping[str, Any],
    ) -> Result[dict[Any, int], StoreUnavailableError]:
        self.calls += 1
        if not self.available:
            return self._unavailable(collection)
        counts = Counter(
            record.get(group_by) for record in self._matching(collection, filters)
        )
        return Success(value=dict(counts))

    def _matching(
        self, collection: str, filters: Mapping[str, Any]
    ) -> list[dict[str, Any]]:
        return [
            record
            for record in self._collections.get(collection, [])
            if all(_equals(record.get(f), v) for f, v in filters.items())
        ]

    @staticmethod
    def _unavailable(collection: str) -> Failure[StoreUnavailableError]:
        return Failure(
            error=StoreUnavailableError(
                code=ErrorCode.STORE_UNAVAILABLE,
                message="In-memory store marked unavailable",
                collection=collection,
            )
        )

"""PaginateCollection query handler.

Returns page N of a collection after applying exact-match filters and a
free-text search, together with the size of the whole filtered set.

Flow:
1. Validate the request (collection, page, page size, filter fields).
   Invalid input is rejected, never clamped, and no store call is made.
2. Pin the owner column to the viewer for owner-scoped collections.
3. Normalize the search term (strip; blank means no search).
4. Ask the record store for one (created_at, id)-ordered window.
5. Return Success(PageResult) or the store's Failure unmodified.

Architecture:
- Stateless: concurrent calls share nothing but the injected store.
- NO retries: StoreUnavailableError goes straight back to the caller.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from src.application.queries.collection_queries import PaginateCollection
from src.config.collections import COLLECTIONS
from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.value_objects import (
    CollectionDefinition,
    PageResult,
    PageSpec,
    SessionIdentity,
)

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.record_store_protocol import RecordStoreProtocol


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class PaginateCollectionHandler:
    """Handler for PaginateCollection queries.

    Attributes:
        _store: Record store answering page queries.
        _logger: Structured logger.
        _collections: Collection registry (name -> definition).
        _max_page_size: Largest accepted page size.
    """

    def __init__(
        self,
        store: "RecordStoreProtocol",
        logger: "LoggerProtocol",
        collections: Mapping[str, CollectionDefinition] | None = None,
        max_page_size: int | None = None,
    ) -> None:
        self._store = store
        self._logger = logger
        self._collections = COLLECTIONS if collections is None else collections
        self._max_page_size = (
            settings.max_page_size if max_page_size is None else max_page_size
        )

    def definition(self, collection: str) -> CollectionDefinition | None:
        """Registry entry for a collection, or None if unknown."""
        return self._collections.get(collection)

    def _validate(
        self, query: PaginateCollection
    ) -> Result[CollectionDefinition, ValidationError]:
        definition = self._collections.get(query.collection)
        if definition is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.UNKNOWN_COLLECTION,
                    message=f"Unknown collection '{query.collection}'",
                    field="collection",
                )
            )
        if not _is_int(query.page) or query.page < 1:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_PAGE,
                    message="page must be an integer >= 1",
                    field="page",
                )
            )
        if not _is_int(query.page_size) or not 1 <= query.page_size <= self._max_page_size:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_PAGE_SIZE,
                    message=f"page_size must be an integer between 1 and {self._max_page_size}",
                    field="page_size",
                )
            )
        if query.search is not None and not isinstance(query.search, str):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="search must be a string",
                    field="search",
                )
            )
        for name in query.filters:
            if name not in definition.filter_fields:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_FILTER_FIELD,
                        message=f"Collection '{definition.name}' cannot be filtered by '{name}'",
                        field=name,
                        details={"allowed": sorted(definition.filter_fields)},
                    )
                )
        return Success(value=definition)

    async def handle(self, query: PaginateCollection) -> Result[PageResult, DomainError]:
        """Handle a PaginateCollection query.

        Args:
            query: Collection, page, page size, search term and filters.

        Returns:
            Success(PageResult) with at most page_size records and the
                filtered total. A page past the end is empty, not an error.
            Failure(ValidationError) for malformed requests.
            Failure(StoreUnavailableError) if the store could not answer.
        """
        match self._validate(query):
            case Failure(error=error):
                self._logger.warning(
                    "collection_page_rejected",
                    collection=query.collection,
                    error_code=error.code.value,
                    field=error.field,
                )
                return Failure(error=error)
            case Success(value=definition):
                pass

        filters = dict(query.filters)
        if query.viewer is not None:
            owner_field = definition.owner_scope(query.viewer.role)
            if owner_field is not None:
                filters[owner_field] = query.viewer.id

        spec = PageSpec(
            page=query.page,
            page_size=query.page_size,
            search=query.search,
            filters=filters,
        )
        store_result = await self._store.fetch_page(
            definition.name,
            filters=spec.filters,
            search=spec.search_term,
            search_fields=definition.search_fields,
            order_by=definition.order_by,
            limit=spec.page_size,
            offset=spec.offset,
        )

        match store_result:
            case Failure(error=error):
                self._logger.error(
                    "collection_page_failed",
                    collection=definition.name,
                    error_code=error.code.value,
                    page=spec.page,
                )
                return Failure(error=error)
            case Success(value=store_page):
                page = PageResult(
                    records=store_page.records[: spec.page_size],
                    total=store_page.total,
                    page=spec.page,
                    page_size=spec.page_size,
                )
                self._logger.debug(
                    "collection_page_loaded",
                    collection=definition.name,
                    page=page.page,
                    page_size=page.page_size,
                    returned=len(page.records),
                    total=page.total,
                    searched=spec.search_term is not None,
                    filter_fields=sorted(spec.filters),
                )
                return Success(value=page)

    async def paginate(
        self, collection: str, spec: PageSpec, viewer: SessionIdentity | None = None
    ) -> Result[PageResult, DomainError]:
        """Convenience wrapper taking a collection name and a PageSpec."""
        return await self.handle(
            PaginateCollection(
                collection=collection,
                page=spec.page,
                page_size=spec.page_size,
                search=spec.search,
                filters=spec.filters,
                viewer=viewer,
            )
        )

"""Collections resource handlers.

GET /api/v1/collections/{collection} - One page of a filtered, searched
collection plus the total size of the filtered set.

Query parameters:
    page, page_size: 1-based page and its size (rejected, not clamped)
    search: Free-text term (blank means no search)
    <field>=<value>: Exact-match filter on a filterable field

Notifications, and leads for clients, only ever contain the caller's own
rows.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries import PaginateCollection
from src.application.queries.handlers import PaginateCollectionHandler
from src.core.config import settings
from src.core.container import get_access_policy, get_paginate_collection_handler
from src.core.result import Failure, Success
from src.domain.enums import Action
from src.domain.value_objects import AccessPolicy, SessionIdentity
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    ensure_permission,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas import CollectionPageResponse

router = APIRouter(prefix="/collections", tags=["Collections"])

_RESERVED_PARAMS = frozenset({"page", "page_size", "search"})


@router.get(
    "/{collection}",
    response_model=CollectionPageResponse,
    summary="Get a page of a collection",
)
async def get_collection_page(
    request: Request,
    collection: str,
    identity: Annotated[SessionIdentity, Depends(get_current_identity)],
    policy: Annotated[AccessPolicy, Depends(get_access_policy)],
    handler: Annotated[
        PaginateCollectionHandler, Depends(get_paginate_collection_handler)
    ],
    page: int = Query(1, description="Page number (1-indexed)"),
    page_size: int = Query(
        settings.default_page_size, description="Items per page"
    ),
    search: str | None = Query(None, description="Case-insensitive search term"),
) -> CollectionPageResponse | JSONResponse:
    """Return page N of a collection.

    Requires read access to the collection's resource. Unknown collections
    are rejected by the query handler (400) before any permission lookup
    can match them.
    """
    definition = handler.definition(collection)
    if definition is not None:
        ensure_permission(policy, identity, definition.resource, Action.READ)

    filters = {
        name: value
        for name, value in request.query_params.items()
        if name not in _RESERVED_PARAMS
    }
    query = PaginateCollection(
        collection=collection,
        page=page,
        page_size=page_size,
        search=search,
        filters=filters,
        viewer=identity,
    )

    match await handler.handle(query):
        case Success(value=result):
            return CollectionPageResponse.from_page_result(collection, result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )

"""Dashboard resource handler.

GET /api/v1/dashboard/stats - Lead counts per status and per source.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.queries import GetLeadStats
from src.application.queries.handlers import GetLeadStatsHandler
from src.core.container import get_access_policy, get_lead_stats_handler
from src.core.result import Failure, Success
from src.domain.enums import Action, Resource
from src.domain.value_objects import AccessPolicy, SessionIdentity
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    ensure_permission,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas import LeadStatsResponse

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/stats",
    response_model=LeadStatsResponse,
    summary="Get lead statistics",
)
async def get_lead_stats(
    request: Request,
    identity: Annotated[SessionIdentity, Depends(get_current_identity)],
    policy: Annotated[AccessPolicy, Depends(get_access_policy)],
    handler: Annotated[GetLeadStatsHandler, Depends(get_lead_stats_handler)],
) -> LeadStatsResponse | JSONResponse:
    """Return lead totals for the dashboard.

    Requires dashboard read access. Clients only count their own leads.
    """
    ensure_permission(policy, identity, Resource.DASHBOARD, Action.READ)

    match await handler.handle(GetLeadStats(viewer=identity)):
        case Success(value=stats):
            return LeadStatsResponse.from_stats(stats)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )

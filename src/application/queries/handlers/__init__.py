"""Query handlers."""

from src.application.queries.handlers.get_lead_stats_handler import (
    GetLeadStatsHandler,
)
from src.application.queries.handlers.paginate_collection_handler import (
    PaginateCollectionHandler,
)

__all__ = ["GetLeadStatsHandler", "PaginateCollectionHandler"]

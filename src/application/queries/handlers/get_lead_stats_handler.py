"""GetLeadStats query handler.

Flow:
1. Scope the leads collection to the viewer (clients see their own leads).
2. Count leads grouped by status, then grouped by source.
3. Return Success(LeadStats) or the first store Failure unmodified.
"""

from typing import TYPE_CHECKING

from src.application.queries.dashboard_queries import GetLeadStats
from src.config.collections import COLLECTIONS
from src.core.result import Failure, Result, Success
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import CollectionDefinition, LeadStats

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.record_store_protocol import RecordStoreProtocol


class GetLeadStatsHandler:
    """Handler for GetLeadStats queries.

    Attributes:
        _store: Record store answering grouped counts.
        _logger: Structured logger.
        _leads: Leads collection definition (name and owner scope).
    """

    def __init__(
        self,
        store: "RecordStoreProtocol",
        logger: "LoggerProtocol",
        leads: CollectionDefinition | None = None,
    ) -> None:
        self._store = store
        self._logger = logger
        self._leads = COLLECTIONS["leads"] if leads is None else leads

    async def handle(
        self, query: GetLeadStats
    ) -> Result[LeadStats, StoreUnavailableError]:
        """Handle a GetLeadStats query.

        Returns:
            Success(LeadStats) with zero-filled buckets.
            Failure(StoreUnavailableError) if the store could not answer.
        """
        filters: dict[str, object] = {}
        if query.viewer is not None:
            owner_field = self._leads.owner_scope(query.viewer.role)
            if owner_field is not None:
                filters[owner_field] = query.viewer.id

        counts: dict[str, dict] = {}
        for group_by in ("status", "source"):
            match await self._store.count_by(
                self._leads.name, group_by=group_by, filters=filters
            ):
                case Failure(error=error):
                    self._logger.error(
                        "lead_stats_failed",
                        group_by=group_by,
                        error_code=error.code.value,
                    )
                    return Failure(error=error)
                case Success(value=grouped):
                    counts[group_by] = grouped

        stats = LeadStats.from_counts(counts["status"], counts["source"])
        self._logger.debug(
            "lead_stats_loaded",
            total=stats.total,
            scoped=bool(filters),
        )
        return Success(value=stats)

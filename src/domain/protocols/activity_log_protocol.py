"""Activity log protocol (port) for the mutation audit trail.

Every successful mutation records who did what to which resource. Entries
are append-only.

Usage:
    result = await activity_log.record(
        actor_id=identity.id,
        action=ActivityAction.CHANGE_ROLE,
        resource_type="profile",
        resource_id=str(profile_id),
        details={"from": "client", "to": "sales_person"},
    )
    if isinstance(result, Failure):
        logger.error("activity_log_failed", error_code=result.error.code.value)
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.enums import ActivityAction
from src.domain.errors import AuditError


class ActivityLogProtocol(Protocol):
    """Protocol for activity log writers.

    Error Handling:
        Returns Result types. NEVER raises; a failed write is returned as
        Failure(AuditError) so the caller can log it and move on.
    """

    async def record(
        self,
        *,
        actor_id: UUID,
        action: ActivityAction,
        resource_type: str,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> Result[None, AuditError]:
        """Append one activity log entry.

        Args:
            actor_id: Profile that performed the mutation.
            action: What was done.
            resource_type: Kind of resource mutated (profile, blog, ...).
            resource_id: Identifier of the mutated resource.
            details: Extra context (changed fields, old/new role).

        Returns:
            Success(None) if recorded, Failure(AuditError) otherwise.
        """
        ...

"""Activity log helper shared by command handlers."""

from typing import TYPE_CHECKING, Any
from uuid import UUID

from src.core.result import Failure
from src.domain.enums import ActivityAction

if TYPE_CHECKING:
    from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


async def record_activity(
    activity_log: "ActivityLogProtocol",
    logger: "LoggerProtocol",
    *,
    actor_id: UUID,
    action: ActivityAction,
    resource_type: str,
    resource_id: str | None,
    details: dict[str, Any] | None = None,
) -> bool:
    """Record an activity entry; a failed write is logged, not returned.

    Returns:
        bool: True if the entry was stored.
    """
    result = await activity_log.record(
        actor_id=actor_id,
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        details=details,
    )
    if isinstance(result, Failure):
        logger.error(
            "activity_log_failed",
            action=action.value,
            resource_type=resource_type,
            resource_id=resource_id,
            error_code=result.error.code.value,
            error_message=result.error.message,
        )
        return False
    return True

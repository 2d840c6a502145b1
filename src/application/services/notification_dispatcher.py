"""Notification fan-out.

Successful mutations notify the affected profile, every administrator, or
both. Delivery is best effort: a failed or slow write is logged and never
reaches the mutation that triggered it.

Two ways to send:
    - await notify_user / notify_admins / notify_user_and_admins
      (returns whether delivery succeeded, never raises)
    - dispatch(target, ...) schedules delivery as a background task and
      returns immediately (fire-and-forget). drain() waits for everything
      still pending, for shutdown and tests.

Usage:
    dispatcher.dispatch(
        profile.id,
        title="Role updated",
        message="Your role is now sales_person",
        severity=NotificationSeverity.INFO,
        action_type=ActivityAction.CHANGE_ROLE.value,
        resource_type="profile",
        resource_id=str(profile.id),
    )
    dispatcher.dispatch(ALL_ADMINS, title=..., message=...)
"""

import asyncio
from collections.abc import Awaitable
from enum import Enum
from typing import TYPE_CHECKING, Literal
from uuid import UUID

from src.core.result import Failure
from src.domain.enums import NotificationSeverity
from src.domain.value_objects import NotificationMessage

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.notification_repository import NotificationRepository


class Audience(Enum):
    """Broadcast notification targets."""

    ALL_ADMINS = "all_admins"


ALL_ADMINS = Audience.ALL_ADMINS

type NotificationTarget = UUID | Literal[Audience.ALL_ADMINS]


class NotificationDispatcher:
    """Best-effort notification sender.

    Attributes:
        _repository: Notification persistence.
        _logger: Structured logger.
        _timeout: Seconds allowed for one delivery.
        _pending: Strong references to in-flight background deliveries.
    """

    def __init__(
        self,
        repository: "NotificationRepository",
        logger: "LoggerProtocol",
        timeout_seconds: float = 5.0,
    ) -> None:
        self._repository = repository
        self._logger = logger
        self._timeout = timeout_seconds
        self._pending: set[asyncio.Task[bool]] = set()

    @property
    def pending_count(self) -> int:
        """Background deliveries not yet finished."""
        return len(self._pending)

    async def _deliver(
        self, target: NotificationTarget, call: Awaitable[object]
    ) -> bool:
        target_label = target.value if isinstance(target, Audience) else str(target)
        try:
            result = await asyncio.wait_for(call, timeout=self._timeout)
        except TimeoutError:
            self._logger.error(
                "notification_dispatch_timeout",
                target=target_label,
                timeout_seconds=self._timeout,
            )
            return False
        except Exception as e:
            self._logger.error("notification_dispatch_failed", error=e, target=target_label)
            return False

        if isinstance(result, Failure):
            self._logger.error(
                "notification_dispatch_failed",
                target=target_label,
                error_code=result.error.code.value,
                error_message=result.error.message,
            )
            return False
        return True

    async def send(self, target: NotificationTarget, message: NotificationMessage) -> bool:
        """Deliver one message to a profile or to every administrator.

        Returns:
            bool: True if stored, False if it failed (already logged).
        """
        if target is ALL_ADMINS:
            return await self._deliver(target, self._repository.create_for_admins(message))
        return await self._deliver(target, self._repository.create(target, message))

    async def notify_user(
        self,
        user_id: UUID,
        title: str,
        message: str,
        severity: NotificationSeverity = NotificationSeverity.INFO,
        action_type: str | None = None,
        resource_type: str | None = None,
        resource_id: str | None = None,
    ) -> bool:
        """Notify one profile."""
        return await self.send(
            user_id,
            NotificationMessage(
                title=title,
                message=message,
                severity=severity,
                action_type=action_type,
                resource_type=resource_type,
                resource_id=resource_id,
            ),
        )

    async def notify_admins(
        self,
        title: str,
        message: str,
        severity: NotificationSeverity = NotificationSeverity.INFO,
        action_type: str | None = None,
        resource_type: str | None = None,
        resource_id: str | None = None,
    ) -> bool:
        """Notify every SUPER_ADMIN and ADMIN profile."""
        return await self.send(
            ALL_ADMINS,
            NotificationMessage(
                title=title,
                message=message,
                severity=severity,
                action_type=action_type,
                resource_type=resource_type,
                resource_id=resource_id,
            ),
        )

    async def notify_user_and_admins(
        self,
        user_id: UUID,
        title: str,
        message: str,
        severity: NotificationSeverity = NotificationSeverity.INFO,
        action_type: str | None = None,
        resource_type: str | None = None,
        resource_id: str | None = None,
    ) -> tuple[bool, bool]:
        """Notify one profile and every administrator concurrently.

        Returns:
            tuple[bool, bool]: (user delivered, admins delivered).
        """
        payload = NotificationMessage(
            title=title,
            message=message,
            severity=severity,
            action_type=action_type,
            resource_type=resource_type,
            resource_id=resource_id,
        )
        user_ok, admins_ok = await asyncio.gather(
            self.send(user_id, payload), self.send(ALL_ADMINS, payload)
        )
        return user_ok, admins_ok

    def dispatch(
        self,
        target: NotificationTarget,
        *,
        title: str,
        message: str,
        severity: NotificationSeverity = NotificationSeverity.INFO,
        action_type: str | None = None,
        resource_type: str | None = None,
        resource_id: str | None = None,
    ) -> asyncio.Task[bool]:
        """Schedule delivery in the background and return at once.

        Must be called from a running event loop.

        Returns:
            asyncio.Task[bool]: The delivery task (callers need not await it).
        """
        payload = NotificationMessage(
            title=title,
            message=message,
            severity=severity,
            action_type=action_type,
            resource_type=resource_type,
            resource_id=resource_id,
        )
        task = asyncio.create_task(self.send(target, payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait until every background delivery has finished."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

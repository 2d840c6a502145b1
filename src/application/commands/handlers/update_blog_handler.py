"""UpdateBlog command handler.

Flow:
1. Check blogs:write for the acting identity (before any read or write)
2. Load the post (NotFound if missing)
3. Validate and apply the requested changes
4. Persist
5. Notify the actor and all administrators, fire-and-forget
6. Record an update_blog activity entry
7. Return Success(blog)
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from src.application.commands.blog_commands import UpdateBlog
from src.application.commands.handlers.activity import record_activity
from src.application.commands.handlers.blog_fields import parse_status, required_text
from src.application.services.access_guard import authorize
from src.application.services.notification_dispatcher import (
    ALL_ADMINS,
    NotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.blog import Blog, clean_tags
from src.domain.enums import Action, ActivityAction, NotificationSeverity, Resource
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import AccessPolicy

if TYPE_CHECKING:
    from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
    from src.domain.protocols.blog_repository import BlogRepository
    from src.domain.protocols.logger_protocol import LoggerProtocol

_OPTIONAL_FIELDS = ("content", "feature_image", "category")


class UpdateBlogHandler:
    """Handler for UpdateBlog commands."""

    def __init__(
        self,
        blog_repo: "BlogRepository",
        activity_log: "ActivityLogProtocol",
        notifier: NotificationDispatcher,
        policy: AccessPolicy,
        logger: "LoggerProtocol",
    ) -> None:
        self._blog_repo = blog_repo
        self._activity_log = activity_log
        self._notifier = notifier
        self._policy = policy
        self._logger = logger

    async def handle(self, cmd: UpdateBlog) -> Result[Blog, DomainError]:
        """Handle a blog update.

        Returns:
            Success(Blog) with the updated post.
            Failure(AuthorizationError) if the actor lacks blogs:write.
            Failure(NotFoundError) if the post does not exist.
            Failure(ValidationError) for a blank title or description, or an
                unknown status.
            Failure(StoreUnavailableError) if the write failed.
        """
        match authorize(self._policy, cmd.actor, Resource.BLOGS, Action.WRITE):
            case Failure(error=error):
                self._logger.warning(
                    "blog_update_denied",
                    actor_id=str(cmd.actor.id),
                    blog_id=str(cmd.blog_id),
                    permission=error.required_permission,
                )
                return Failure(error=error)

        blog = await self._blog_repo.find_by_id(cmd.blog_id)
        if blog is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.BLOG_NOT_FOUND,
                    message="Blog not found",
                    resource_type="blog",
                    resource_id=str(cmd.blog_id),
                )
            )

        changes: dict[str, Any] = {}
        for name in ("title", "description"):
            value = getattr(cmd, name)
            if value is None:
                continue
            match required_text(value, name):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=text):
                    if text != getattr(blog, name):
                        changes[name] = text

        status = None
        if cmd.status is not None:
            match parse_status(cmd.status):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=status):
                    pass

        for name in _OPTIONAL_FIELDS:
            value = getattr(cmd, name)
            if value is not None and value != getattr(blog, name):
                changes[name] = value
        if cmd.tags is not None:
            tags = clean_tags(cmd.tags)
            if tags != blog.tags:
                changes["tags"] = tags

        for name, value in changes.items():
            setattr(blog, name, value)
        now = datetime.now(UTC)
        previous_status = blog.status
        if status is not None and blog.set_status(status, now):
            changes["status"] = {"from": previous_status.value, "to": status.value}
        blog.updated_at = now

        try:
            await self._blog_repo.update(blog)
        except Exception as e:
            self._logger.error("blog_update_failed", error=e, blog_id=str(blog.id))
            return Failure(
                error=StoreUnavailableError(
                    code=ErrorCode.STORE_UNAVAILABLE,
                    message="Could not update blog",
                    collection="blogs",
                    details={"error_type": type(e).__name__},
                )
            )

        self._logger.info(
            "blog_updated",
            blog_id=str(blog.id),
            actor_id=str(cmd.actor.id),
            changed_fields=sorted(changes),
        )
        for target in (cmd.actor.id, ALL_ADMINS):
            self._notifier.dispatch(
                target,
                title="Blog Updated",
                message=f'Blog "{blog.title}" has been updated.',
                severity=NotificationSeverity.SUCCESS,
                action_type="blog_updated",
                resource_type="blog",
                resource_id=str(blog.id),
            )
        await record_activity(
            self._activity_log,
            self._logger,
            actor_id=cmd.actor.id,
            action=ActivityAction.UPDATE_BLOG,
            resource_type="blog",
            resource_id=str(blog.id),
            details={"title": blog.title},
        )
        return Success(value=blog)

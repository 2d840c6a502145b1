"""CreateBlog command handler.

Flow:
1. Check blogs:write for the acting identity (before any write)
2. Validate title, description and status; clean the tags
3. Store the post, authored by the actor
4. Notify the author and all administrators, fire-and-forget
5. Record a create_blog activity entry
6. Return Success(blog)
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from uuid_extensions import uuid7

from src.application.commands.blog_commands import CreateBlog
from src.application.commands.handlers.activity import record_activity
from src.application.commands.handlers.blog_fields import parse_status, required_text
from src.application.services.access_guard import authorize
from src.application.services.notification_dispatcher import (
    ALL_ADMINS,
    NotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.blog import Blog, clean_tags
from src.domain.enums import Action, ActivityAction, NotificationSeverity, Resource
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import AccessPolicy

if TYPE_CHECKING:
    from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
    from src.domain.protocols.blog_repository import BlogRepository
    from src.domain.protocols.logger_protocol import LoggerProtocol


class CreateBlogHandler:
    """Handler for CreateBlog commands."""

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

    async def handle(self, cmd: CreateBlog) -> Result[Blog, DomainError]:
        """Handle a blog creation.

        Returns:
            Success(Blog) with the stored post.
            Failure(AuthorizationError) if the actor lacks blogs:write.
            Failure(ValidationError) for a blank title or description, or an
                unknown status.
            Failure(StoreUnavailableError) if the write failed.
        """
        match authorize(self._policy, cmd.actor, Resource.BLOGS, Action.WRITE):
            case Failure(error=error):
                self._logger.warning(
                    "blog_create_denied",
                    actor_id=str(cmd.actor.id),
                    permission=error.required_permission,
                )
                return Failure(error=error)

        match required_text(cmd.title, "title"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=title):
                pass
        match required_text(cmd.description, "description"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=description):
                pass
        match parse_status(cmd.status):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=status):
                pass

        now = datetime.now(UTC)
        blog = Blog(
            id=uuid7(),
            title=title,
            description=description,
            content=cmd.content,
            feature_image=cmd.feature_image,
            category=cmd.category,
            tags=clean_tags(cmd.tags),
            author_id=cmd.actor.id,
            created_at=now,
            updated_at=now,
        )
        blog.set_status(status, now)

        try:
            await self._blog_repo.create(blog)
        except Exception as e:
            self._logger.error("blog_create_failed", error=e, blog_id=str(blog.id))
            return Failure(
                error=StoreUnavailableError(
                    code=ErrorCode.STORE_UNAVAILABLE,
                    message="Could not create blog",
                    collection="blogs",
                    details={"error_type": type(e).__name__},
                )
            )

        self._logger.info(
            "blog_created",
            blog_id=str(blog.id),
            actor_id=str(cmd.actor.id),
            status=blog.status.value,
        )
        for target in (cmd.actor.id, ALL_ADMINS):
            self._notifier.dispatch(
                target,
                title="Blog Created",
                message=f'New blog "{blog.title}" has been created.',
                severity=NotificationSeverity.SUCCESS,
                action_type="blog_created",
                resource_type="blog",
                resource_id=str(blog.id),
            )
        await record_activity(
            self._activity_log,
            self._logger,
            actor_id=cmd.actor.id,
            action=ActivityAction.CREATE_BLOG,
            resource_type="blog",
            resource_id=str(blog.id),
            details={"title": blog.title},
        )
        return Success(value=blog)

"""DeleteBlog command handler.

Flow:
1. Check blogs:delete for the acting identity (before any read or write)
2. Load the post (NotFound if missing)
3. Delete
4. Notify all administrators, fire-and-forget
5. Record a delete_blog activity entry
6. Return Success(None)
"""

from typing import TYPE_CHECKING

from src.application.commands.blog_commands import DeleteBlog
from src.application.commands.handlers.activity import record_activity
from src.application.services.access_guard import authorize
from src.application.services.notification_dispatcher import (
    ALL_ADMINS,
    NotificationDispatcher,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.enums import Action, ActivityAction, NotificationSeverity, Resource
from src.domain.errors import StoreUnavailableError
from src.domain.value_objects import AccessPolicy

if TYPE_CHECKING:
    from src.domain.protocols.activity_log_protocol import ActivityLogProtocol
    from src.domain.protocols.blog_repository import BlogRepository
    from src.domain.protocols.logger_protocol import LoggerProtocol


class DeleteBlogHandler:
    """Handler for DeleteBlog commands."""

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

    async def handle(self, cmd: DeleteBlog) -> Result[None, DomainError]:
        """Handle a blog deletion.

        Returns:
            Success(None) when deleted.
            Failure(AuthorizationError) if the actor lacks blogs:delete.
            Failure(NotFoundError) if the post does not exist.
            Failure(StoreUnavailableError) if the delete failed.
        """
        match authorize(self._policy, cmd.actor, Resource.BLOGS, Action.DELETE):
            case Failure(error=error):
                self._logger.warning(
                    "blog_delete_denied",
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

        try:
            await self._blog_repo.delete(blog.id)
        except Exception as e:
            self._logger.error("blog_delete_failed", error=e, blog_id=str(blog.id))
            return Failure(
                error=StoreUnavailableError(
                    code=ErrorCode.STORE_UNAVAILABLE,
                    message="Could not delete blog",
                    collection="blogs",
                    details={"error_type": type(e).__name__},
                )
            )

        self._logger.info(
            "blog_deleted", blog_id=str(blog.id), actor_id=str(cmd.actor.id)
        )
        self._notifier.dispatch(
            ALL_ADMINS,
            title="Blog Deleted",
            message=f'Blog "{blog.title}" has been deleted.',
            severity=NotificationSeverity.WARNING,
            action_type="blog_deleted",
            resource_type="blog",
            resource_id=str(blog.id),
        )
        await record_activity(
            self._activity_log,
            self._logger,
            actor_id=cmd.actor.id,
            action=ActivityAction.DELETE_BLOG,
            resource_type="blog",
            resource_id=str(blog.id),
            details={"title": blog.title},
        )
        return Success(value=None)

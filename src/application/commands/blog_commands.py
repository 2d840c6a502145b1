"""Blog commands (CQRS write operations).

Every blog command carries the acting identity; handlers check it against
the access policy (blogs:write or blogs:delete) before any write.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from src.domain.entities.blog import DEFAULT_CATEGORY
from src.domain.enums import BlogStatus
from src.domain.value_objects import SessionIdentity


@dataclass(frozen=True, kw_only=True)
class CreateBlog:
    """Create a blog post authored by `actor`.

    Attributes:
        actor: Identity creating the post.
        title: Headline (required, not blank).
        description: Summary (required, not blank).
        content: Body.
        feature_image: Image URL.
        category: Editorial category.
        tags: Tag strings; blank tags are dropped.
        status: Initial status (BlogStatus or its string value).

    Example:
        >>> command = CreateBlog(
        ...     actor=identity, title="Local SEO", description="Checklist"
        ... )
        >>> result = await handler.handle(command)
    """

    actor: SessionIdentity
    title: str
    description: str
    content: str | None = None
    feature_image: str | None = None
    category: str = DEFAULT_CATEGORY
    tags: Sequence[str] = ()
    status: BlogStatus | str = BlogStatus.DRAFT


@dataclass(frozen=True, kw_only=True)
class UpdateBlog:
    """Update a blog post. Fields left as None are not changed.

    Attributes:
        actor: Identity performing the update.
        blog_id: Post to update.
        title, description: Must not be blank when given.
        content, feature_image, category, tags, status: New values.
    """

    actor: SessionIdentity
    blog_id: UUID
    title: str | None = None
    description: str | None = None
    content: str | None = None
    feature_image: str | None = None
    category: str | None = None
    tags: Sequence[str] | None = None
    status: BlogStatus | str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteBlog:
    """Delete a blog post (requires blogs:delete).

    Attributes:
        actor: Identity performing the deletion.
        blog_id: Post to delete.
    """

    actor: SessionIdentity
    blog_id: UUID

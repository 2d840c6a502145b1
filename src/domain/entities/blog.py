"""Blog domain entity.

Business Rules:
    - Title and description are never blank.
    - Tags are stripped, non-empty strings.
    - `published_at` is stamped the first time a post is published and kept
      when it is later archived or unpublished.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums.blog_status import BlogStatus

DEFAULT_CATEGORY = "Other"


def clean_tags(tags: Iterable[str]) -> list[str]:
    """Strip tags and drop empty ones, keeping order."""
    return [tag.strip() for tag in tags if tag and tag.strip()]


@dataclass
class Blog:
    """Blog post entity.

    Attributes:
        id: Post identifier.
        title: Headline (searchable).
        description: Summary (searchable).
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        content: Body, optional while drafting.
        feature_image: Image URL.
        category: Editorial category.
        tags: Tag strings.
        author_id: Profile that created the post.
        status: Publication state.
        published_at: First publication timestamp.
    """

    id: UUID
    title: str
    description: str
    created_at: datetime
    updated_at: datetime
    content: str | None = None
    feature_image: str | None = None
    category: str = DEFAULT_CATEGORY
    tags: list[str] = field(default_factory=list)
    author_id: UUID | None = None
    status: BlogStatus = BlogStatus.DRAFT
    published_at: datetime | None = None

    def set_status(self, status: BlogStatus, now: datetime) -> bool:
        """Move to `status`, stamping the first publication.

        Returns:
            bool: True if the status changed.
        """
        if status is BlogStatus.PUBLISHED and self.published_at is None:
            self.published_at = now
        if status is self.status:
            return False
        self.status = status
        return True

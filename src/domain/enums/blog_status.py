"""Blog post publication states."""

from enum import Enum


class BlogStatus(str, Enum):
    """Lifecycle of a blog post. Values match the blogs.status column."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    @classmethod
    def parse(cls, value: "str | BlogStatus | None") -> "BlogStatus | None":
        """Convert a raw status to a BlogStatus, or None if unrecognized."""
        if isinstance(value, BlogStatus):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

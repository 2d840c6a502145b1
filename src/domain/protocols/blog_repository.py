"""BlogRepository protocol for blog post persistence.

Port (interface) for hexagonal architecture. Infrastructure provides the
SQLAlchemy implementation.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.blog import Blog


class BlogRepository(Protocol):
    """Blog repository protocol (port).

    Methods:
        find_by_id: Retrieve a post by ID
        create: Store a new post
        update: Persist changes to an existing post
        delete: Remove a post
    """

    async def find_by_id(self, blog_id: UUID) -> Blog | None:
        """Find a post by ID.

        Returns:
            Blog if found, None otherwise.
        """
        ...

    async def create(self, blog: Blog) -> None:
        """Store a new post."""
        ...

    async def update(self, blog: Blog) -> None:
        """Persist changes to an existing post.

        Raises:
            NoResultFound: If the post does not exist.
        """
        ...

    async def delete(self, blog_id: UUID) -> bool:
        """Delete a post.

        Returns:
            bool: True if a row was removed.
        """
        ...

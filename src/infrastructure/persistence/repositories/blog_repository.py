"""BlogRepository - SQLAlchemy implementation of BlogRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Blog entities and database BlogModel.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.blog import Blog
from src.domain.enums import BlogStatus
from src.infrastructure.persistence.models.blog import BlogModel


class BlogRepository:
    """SQLAlchemy implementation of BlogRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, blog_id: UUID) -> Blog | None:
        """Find a post by ID."""
        stmt = select(BlogModel).where(BlogModel.id == blog_id)
        result = await self.session.execute(stmt)
        blog_model = result.scalar_one_or_none()
        if blog_model is None:
            return None
        return self._to_domain(blog_model)

    async def create(self, blog: Blog) -> None:
        self.session.add(self._to_model(blog))
        await self.session.commit()

    async def update(self, blog: Blog) -> None:
        """Update an existing post.

        Raises:
            NoResultFound: If the post doesn't exist.
        """
        stmt = select(BlogModel).where(BlogModel.id == blog.id)
        result = await self.session.execute(stmt)
        blog_model = result.scalar_one()

        blog_model.title = blog.title
        blog_model.description = blog.description
        blog_model.content = blog.content
        blog_model.feature_image = blog.feature_image
        blog_model.category = blog.category
        blog_model.tags = list(blog.tags)
        blog_model.status = blog.status.value
        blog_model.published_at = blog.published_at
        blog_model.updated_at = blog.updated_at

        await self.session.commit()

    async def delete(self, blog_id: UUID) -> bool:
        """Delete a post (hard delete)."""
        result = await self.session.execute(
            delete(BlogModel).where(BlogModel.id == blog_id)
        )
        await self.session.commit()
        return bool(result.rowcount)

    def _to_domain(self, blog_model: BlogModel) -> Blog:
        return Blog(
            id=blog_model.id,
            title=blog_model.title,
            description=blog_model.description,
            content=blog_model.content,
            feature_image=blog_model.feature_image,
            category=blog_model.category,
            tags=list(blog_model.tags or []),
            author_id=blog_model.author_id,
            status=BlogStatus.parse(blog_model.status) or BlogStatus.DRAFT,
            published_at=blog_model.published_at,
            created_at=blog_model.created_at,
            updated_at=blog_model.updated_at,
        )

    def _to_model(self, blog: Blog) -> BlogModel:
        return BlogModel(
            id=blog.id,
            title=blog.title,
            description=blog.description,
            content=blog.content,
            feature_image=blog.feature_image,
            category=blog.category,
            tags=list(blog.tags),
            author_id=blog.author_id,
            status=blog.status.value,
            published_at=blog.published_at,
            created_at=blog.created_at,
            updated_at=blog.updated_at,
        )

"""Handler dependency factories.

Query handlers are app-scoped (stateless over the shared record store).
Command handlers are request-scoped because the repositories share the
request's database session.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.commands.handlers import (
    CreateBlogHandler,
    DeleteBlogHandler,
    DeleteProfileHandler,
    RegisterProfileHandler,
    UpdateBlogHandler,
    UpdateProfileHandler,
)
from src.application.queries.handlers import (
    GetLeadStatsHandler,
    PaginateCollectionHandler,
)
from src.core.config import settings
from src.core.container.authorization import get_access_policy
from src.core.container.infrastructure import (
    get_activity_log,
    get_db_session,
    get_logger,
    get_notification_dispatcher,
    get_record_store,
)
from src.infrastructure.persistence.repositories import BlogRepository, ProfileRepository


@lru_cache()
def get_paginate_collection_handler() -> PaginateCollectionHandler:
    """Get the PaginateCollection handler (app-scoped)."""
    return PaginateCollectionHandler(
        store=get_record_store(),
        logger=get_logger(),
        max_page_size=settings.max_page_size,
    )


@lru_cache()
def get_lead_stats_handler() -> GetLeadStatsHandler:
    """Get the GetLeadStats handler (app-scoped)."""
    return GetLeadStatsHandler(store=get_record_store(), logger=get_logger())


async def get_profile_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ProfileRepository:
    """Get profile repository (request-scoped)."""
    return ProfileRepository(session=session)


async def get_register_profile_handler(
    profile_repo: ProfileRepository = Depends(get_profile_repository),
) -> RegisterProfileHandler:
    """Get RegisterProfile handler (request-scoped)."""
    return RegisterProfileHandler(
        profile_repo=profile_repo,
        activity_log=get_activity_log(),
        notifier=get_notification_dispatcher(),
        policy=get_access_policy(),
        logger=get_logger(),
    )


async def get_update_profile_handler(
    profile_repo: ProfileRepository = Depends(get_profile_repository),
) -> UpdateProfileHandler:
    """Get UpdateProfile handler (request-scoped)."""
    return UpdateProfileHandler(
        profile_repo=profile_repo,
        activity_log=get_activity_log(),
        notifier=get_notification_dispatcher(),
        policy=get_access_policy(),
        logger=get_logger(),
    )


async def get_delete_profile_handler(
    profile_repo: ProfileRepository = Depends(get_profile_repository),
) -> DeleteProfileHandler:
    """Get DeleteProfile handler (request-scoped)."""
    return DeleteProfileHandler(
        profile_repo=profile_repo,
        activity_log=get_activity_log(),
        notifier=get_notification_dispatcher(),
        policy=get_access_policy(),
        logger=get_logger(),
    )


async def get_blog_repository(
    session: AsyncSession = Depends(get_db_session),
) -> BlogRepository:
    """Get blog repository (request-scoped)."""
    return BlogRepository(session=session)


async def get_create_blog_handler(
    blog_repo: BlogRepository = Depends(get_blog_repository),
) -> CreateBlogHandler:
    """Get CreateBlog handler (request-scoped)."""
    return CreateBlogHandler(
        blog_repo=blog_repo,
        activity_log=get_activity_log(),
        notifier=get_notification_dispatcher(),
        policy=get_access_policy(),
        logger=get_logger(),
    )


async def get_update_blog_handler(
    blog_repo: BlogRepository = Depends(get_blog_repository),
) -> UpdateBlogHandler:
    """Get UpdateBlog handler (request-scoped)."""
    return UpdateBlogHandler(
        blog_repo=blog_repo,
        activity_log=get_activity_log(),
        notifier=get_notification_dispatcher(),
        policy=get_access_policy(),
        logger=get_logger(),
    )


async def get_delete_blog_handler(
    blog_repo: BlogRepository = Depends(get_blog_repository),
) -> DeleteBlogHandler:
    """Get DeleteBlog handler (request-scoped)."""
    return DeleteBlogHandler(
        blog_repo=blog_repo,
        activity_log=get_activity_log(),
        notifier=get_notification_dispatcher(),
        policy=get_access_policy(),
        logger=get_logger(),
    )

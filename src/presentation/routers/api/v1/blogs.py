"""Blogs resource handlers.

Blog post mutations. Reads go through GET /api/v1/collections/blogs.
Permission checks happen inside the command handlers, before any write.

Handlers:
    create_blog - Create a post authored by the caller (blogs:write)
    update_blog - Update a post (blogs:write)
    delete_blog - Delete a post (blogs:delete)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import CreateBlog, DeleteBlog, UpdateBlog
from src.application.commands.handlers import (
    CreateBlogHandler,
    DeleteBlogHandler,
    UpdateBlogHandler,
)
from src.core.container import (
    get_create_blog_handler,
    get_delete_blog_handler,
    get_update_blog_handler,
)
from src.core.result import Failure, Success
from src.domain.value_objects import SessionIdentity
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas import BlogCreateRequest, BlogResponse, BlogUpdateRequest

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.post(
    "",
    response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a blog post",
)
async def create_blog(
    request: Request,
    data: BlogCreateRequest,
    identity: Annotated[SessionIdentity, Depends(get_current_identity)],
    handler: Annotated[CreateBlogHandler, Depends(get_create_blog_handler)],
) -> BlogResponse | JSONResponse:
    """Create a post.

    POST /api/v1/blogs → 201 Created
    """
    command = CreateBlog(actor=identity, **data.model_dump())

    match await handler.handle(command):
        case Success(value=blog):
            return BlogResponse.from_entity(blog)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


@router.patch(
    "/{blog_id}",
    response_model=BlogResponse,
    summary="Update a blog post",
)
async def update_blog(
    request: Request,
    blog_id: UUID,
    data: BlogUpdateRequest,
    identity: Annotated[SessionIdentity, Depends(get_current_identity)],
    handler: Annotated[UpdateBlogHandler, Depends(get_update_blog_handler)],
) -> BlogResponse | JSONResponse:
    """Update a post.

    PATCH /api/v1/blogs/{id} → 200 OK
    """
    command = UpdateBlog(
        actor=identity,
        blog_id=blog_id,
        **data.model_dump(exclude_none=True),
    )

    match await handler.handle(command):
        case Success(value=blog):
            return BlogResponse.from_entity(blog)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


@router.delete(
    "/{blog_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a blog post",
)
async def delete_blog(
    request: Request,
    blog_id: UUID,
    identity: Annotated[SessionIdentity, Depends(get_current_identity)],
    handler: Annotated[DeleteBlogHandler, Depends(get_delete_blog_handler)],
) -> Response:
    """Delete a post.

    DELETE /api/v1/blogs/{id} → 204 No Content
    """
    match await handler.handle(DeleteBlog(actor=identity, blog_id=blog_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )

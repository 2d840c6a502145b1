"""Command handlers."""

from src.application.commands.handlers.create_blog_handler import CreateBlogHandler
from src.application.commands.handlers.delete_blog_handler import DeleteBlogHandler
from src.application.commands.handlers.delete_profile_handler import (
    DeleteProfileHandler,
)
from src.application.commands.handlers.register_profile_handler import (
    RegisterProfileHandler,
)
from src.application.commands.handlers.update_blog_handler import UpdateBlogHandler
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)

__all__ = [
    "CreateBlogHandler",
    "DeleteBlogHandler",
    "DeleteProfileHandler",
    "RegisterProfileHandler",
    "UpdateBlogHandler",
    "UpdateProfileHandler",
]

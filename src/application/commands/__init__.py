"""Commands (CQRS write operations)."""

from src.application.commands.blog_commands import CreateBlog, DeleteBlog, UpdateBlog
from src.application.commands.profile_commands import (
    DeleteProfile,
    RegisterProfile,
    UpdateProfile,
)

__all__ = [
    "CreateBlog",
    "DeleteBlog",
    "DeleteProfile",
    "RegisterProfile",
    "UpdateBlog",
    "UpdateProfile",
]

"""Domain entities.

Exports:
    Profile: User profile with role and subscription fields
    Blog: Blog post with publication state
"""

from src.domain.entities.blog import Blog
from src.domain.entities.profile import Profile

__all__ = ["Blog", "Profile"]

"""Common schemas used across multiple API endpoints.

Provides the pagination metadata shared by paginated list responses.
"""

from pydantic import BaseModel, Field

from src.domain.value_objects import PageResult


class PaginatedMeta(BaseModel):
    """Pagination metadata for list responses.

    Attributes:
        page: Current page number.
        page_size: Items per page.
        total_count: Size of the whole filtered set.
        total_pages: Total number of pages.
        has_next: Whether a later page exists.
        has_previous: Whether an earlier page exists.
    """

    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Items per page")
    total_count: int = Field(..., description="Total items matching the query")
    total_pages: int = Field(..., description="Total number of pages")
    has_next: bool = Field(..., description="A later page exists")
    has_previous: bool = Field(..., description="An earlier page exists")

    @classmethod
    def from_page_result(cls, result: PageResult) -> "PaginatedMeta":
        """Create pagination metadata from a page result."""
        return cls(
            page=result.page,
            page_size=result.page_size,
            total_count=result.total,
            total_pages=result.total_pages,
            has_next=result.has_next,
            has_previous=result.has_previous,
        )

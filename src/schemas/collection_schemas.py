"""Collection page schemas.

GET /api/v1/collections/{collection}
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field

from src.domain.value_objects import PageResult
from src.schemas.common_schemas import PaginatedMeta


class CollectionPageResponse(BaseModel):
    """One page of a collection plus the size of the filtered set."""

    collection: str = Field(..., description="Collection name", examples=["leads"])
    records: list[dict[str, Any]] = Field(
        ..., description="Records on this page, oldest first"
    )
    meta: PaginatedMeta

    @classmethod
    def from_page_result(
        cls, collection: str, result: PageResult
    ) -> "CollectionPageResponse":
        """Build the response, encoding UUIDs and datetimes as strings."""
        return cls(
            collection=collection,
            records=jsonable_encoder(list(result.records)),
            meta=PaginatedMeta.from_page_result(result),
        )

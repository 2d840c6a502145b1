"""Dashboard schemas.

GET /api/v1/dashboard/stats
"""

from pydantic import BaseModel, Field

from src.domain.value_objects import LeadStats


class LeadStatsResponse(BaseModel):
    """Lead counts per status and per capture source."""

    total: int = Field(..., examples=[42])
    pending: int = Field(..., examples=[17])
    completed: int = Field(..., examples=[20])
    remainder: int = Field(..., examples=[5])
    by_source: dict[str, int] = Field(
        ...,
        description="Count per tracked source (facebook, linkedin, form, seo, website)",
        examples=[{"facebook": 8, "linkedin": 3, "form": 12, "seo": 15, "website": 4}],
    )

    @classmethod
    def from_stats(cls, stats: LeadStats) -> "LeadStatsResponse":
        return cls(
            total=stats.total,
            pending=stats.pending,
            completed=stats.completed,
            remainder=stats.remainder,
            by_source=dict(stats.by_source),
        )

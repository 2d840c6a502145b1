"""Lead statistics shown on the dashboard.

Counts come from two grouped reads of the leads collection (by status and
by source). Statuses and sources outside the tracked sets still count
toward `total` but get no bucket of their own.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

LEAD_SOURCES = ("facebook", "linkedin", "form", "seo", "website")


@dataclass(frozen=True, slots=True, kw_only=True)
class LeadStats:
    """Lead totals per status and per capture source.

    Attributes:
        total: Every lead visible to the viewer.
        pending: Leads with status "pending".
        completed: Leads with status "completed".
        remainder: Leads with status "remainder" (follow-up reminders).
        by_source: Count per tracked source, zero-filled.
    """

    total: int
    pending: int = 0
    completed: int = 0
    remainder: int = 0
    by_source: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_source", MappingProxyType(dict(self.by_source)))

    @classmethod
    def from_counts(
        cls, by_status: Mapping[Any, int], by_source: Mapping[Any, int]
    ) -> "LeadStats":
        """Build stats from grouped counts (value -> count)."""
        return cls(
            total=sum(by_status.values()),
            pending=by_status.get("pending", 0),
            completed=by_status.get("completed", 0),
            remainder=by_status.get("remainder", 0),
            by_source={source: by_source.get(source, 0) for source in LEAD_SOURCES},
        )

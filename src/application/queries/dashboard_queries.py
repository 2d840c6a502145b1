"""Dashboard queries for CQRS read operations."""

from dataclasses import dataclass

from src.domain.value_objects import SessionIdentity


@dataclass(frozen=True, kw_only=True)
class GetLeadStats:
    """Query for lead counts per status and per source.

    Attributes:
        viewer: Caller; clients only count their own leads. None for
            trusted internal reads.
    """

    viewer: SessionIdentity | None = None

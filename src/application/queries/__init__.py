"""Queries (CQRS read operations)."""

from src.application.queries.collection_queries import PaginateCollection
from src.application.queries.dashboard_queries import GetLeadStats

__all__ = ["GetLeadStats", "PaginateCollection"]

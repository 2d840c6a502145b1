"""Audit infrastructure implementations.

Concrete ActivityLogProtocol adapters.
"""

from src.infrastructure.audit.activity_log_adapter import ActivityLogAdapter

__all__ = ["ActivityLogAdapter"]

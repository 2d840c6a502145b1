"""Activity log write failure.

The activity trail records mutations that already succeeded, so handlers
log this error and still return Success for the mutation itself.
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditError(DomainError):
    """Activity entry could not be stored (code AUDIT_RECORD_FAILED)."""

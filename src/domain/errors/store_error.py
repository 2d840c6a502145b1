"""Backing store error types.

StoreUnavailableError is part of the RecordStoreProtocol contract: any
store adapter that cannot complete a read (connection refused, timeout,
driver error) returns it instead of raising. The pagination engine passes
it to the caller unmodified; there is no retry inside this layer.

Usage:
    from src.domain.errors import StoreUnavailableError
    from src.core.enums import ErrorCode

    return Failure(error=StoreUnavailableError(
        code=ErrorCode.STORE_UNAVAILABLE,
        message="Backing store query failed",
        collection="leads",
        details={"error_type": "OperationalError"},
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreUnavailableError(DomainError):
    """Backing store call failed or timed out.

    Attributes:
        code: ErrorCode enum (STORE_UNAVAILABLE).
        message: Human-readable message.
        collection: Collection the failed call targeted.
        details: Additional context (error_type, operation).
    """

    collection: str | None = None

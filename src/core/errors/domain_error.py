"""Base class for expected failures.

A rejected page request, a denied mutation or an unreachable store is not
exceptional: handlers return it inside Failure(error=...) and callers
match on it. DomainError is therefore a plain frozen dataclass, not an
Exception subclass; subclasses add fields (field, collection,
required_permission) without redefining the base ones.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class StoreUnavailableError(DomainError):
        collection: str | None = None
"""

from dataclasses import dataclass
from typing import Any

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Expected failure returned in a Result.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to show to the caller.
        details: Extra context (allowed filter fields, error type, ...).
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

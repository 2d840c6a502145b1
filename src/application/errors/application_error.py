"""Application layer error types.

Application errors wrap domain errors with the category the presentation
layer needs to pick a response (bad input, denied, missing, conflicting,
store down).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError
from src.domain.errors import StoreUnavailableError


class ApplicationErrorCode(Enum):
    """Application-level error codes."""

    VALIDATION_FAILED = "validation_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVICE_UNAVAILABLE = "service_unavailable"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        domain_error: Original domain error, when there is one.
        details: Additional context as key-value pairs.

    Examples:
        >>> error = ApplicationError.from_domain_error(
        ...     ValidationError(code=ErrorCode.INVALID_PAGE, message="...", field="page")
        ... )
        >>> error.code
        <ApplicationErrorCode.VALIDATION_FAILED: 'validation_failed'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Wrap a domain error with the matching application code."""
        match error:
            case ValidationError():
                code = ApplicationErrorCode.VALIDATION_FAILED
            case AuthorizationError() if error.code is ErrorCode.AUTHENTICATION_REQUIRED:
                code = ApplicationErrorCode.UNAUTHORIZED
            case AuthorizationError():
                code = ApplicationErrorCode.FORBIDDEN
            case NotFoundError():
                code = ApplicationErrorCode.NOT_FOUND
            case ConflictError():
                code = ApplicationErrorCode.CONFLICT
            case StoreUnavailableError():
                code = ApplicationErrorCode.SERVICE_UNAVAILABLE
            case _:
                code = ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        return cls(code=code, message=error.message, domain_error=error)

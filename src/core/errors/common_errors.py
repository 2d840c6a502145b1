"""Error types shared by the query engine and the profile commands.

- ValidationError: page, page_size, filter field or collection rejected
  before the store is touched; also blank usernames and unknown roles
- NotFoundError: profile or blog id with no row
- ConflictError: username already taken
- AuthorizationError: no caller, or the access policy denied the pair

Usage:
    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_PAGE_SIZE,
            message="page_size must be an integer between 1 and 100",
            field="page_size",
        )
    )
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Rejected input.

    Attributes:
        field: Offending parameter (page, page_size, a filter name, ...).
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Missing resource.

    Attributes:
        resource_type: Kind of resource ("profile").
        resource_id: Identifier that matched nothing.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Write would break a uniqueness rule.

    Attributes:
        resource_type: Kind of resource ("profile").
        conflicting_field: Field holding the duplicate value.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Caller missing, or not granted the resource/action pair.

    Attributes:
        required_permission: The pair that was checked, as "resource:action".
    """

    required_permission: str | None = None

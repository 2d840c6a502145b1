"""Machine-readable codes carried by every DomainError.

Values are lower snake case and appear verbatim in ErrorDetail `code`
fields and in log entries.
"""

from enum import Enum


class ErrorCode(Enum):
    """Grouped by the ApplicationErrorCode they map to."""

    # Validation errors
    INVALID_PAGE = "invalid_page"
    INVALID_PAGE_SIZE = "invalid_page_size"
    INVALID_FILTER_FIELD = "invalid_filter_field"
    UNKNOWN_COLLECTION = "unknown_collection"
    INVALID_ROLE = "invalid_role"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    PROFILE_NOT_FOUND = "profile_not_found"
    BLOG_NOT_FOUND = "blog_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    USERNAME_ALREADY_EXISTS = "username_already_exists"
    LAST_ADMINISTRATOR = "last_administrator"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    AUTHENTICATION_REQUIRED = "authentication_required"

    # Record store
    STORE_UNAVAILABLE = "store_unavailable"

    # Activity log and notifications (logged, never surfaced)
    AUDIT_RECORD_FAILED = "audit_record_failed"
    NOTIFICATION_FAILED = "notification_failed"

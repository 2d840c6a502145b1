"""Problem-details error responses for the v1 API.

Every non-2xx body (handler Failure, 401/403 from the identity and
permission dependencies, request validation, unexpected exceptions) uses
the same RFC 7807 shape carrying the request's trace id.
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]

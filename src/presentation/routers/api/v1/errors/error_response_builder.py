"""Turns a handler Failure into a ProblemDetails response.

A rejected query parameter carries one ErrorDetail; for filter fields it
also lists the allowed field names taken from the error details.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.errors import DomainError, ValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# code -> (HTTP status, title)
_RESPONSES: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.UNAUTHORIZED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ApplicationErrorCode.FORBIDDEN: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    ApplicationErrorCode.SERVICE_UNAVAILABLE: (
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Service Unavailable",
    ),
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Command Execution Failed",
    ),
}


def _field_errors(error: DomainError | None) -> list[ErrorDetail] | None:
    if not isinstance(error, ValidationError) or not error.field:
        return None
    allowed = (error.details or {}).get("allowed")
    return [
        ErrorDetail(
            field=error.field,
            code=error.code.value,
            message=error.message,
            allowed=list(allowed) if allowed is not None else None,
        )
    ]


class ErrorResponseBuilder:
    """Used by routers in the `case Failure(error=...)` branch:

        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError.from_domain_error(error),
            request=request,
            trace_id=trace_id,
        )

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Status and title follow the application error code; unknown codes give 500."""
        status_code, title = _RESPONSES.get(
            error.code,
            (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"),
        )
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=_field_errors(error.domain_error),
            trace_id=trace_id,
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

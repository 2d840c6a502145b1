"""RFC 7807 response bodies for every non-2xx dashboard response.

A rejected collection query carries one ErrorDetail naming the parameter
and, for filter fields, the allowed set, so the UI can show it next to
the offending control.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One rejected parameter or body field.

    Example:
        ErrorDetail(
            field="budget",
            code="invalid_filter_field",
            message="Field 'budget' is not filterable on 'leads'",
            allowed=["status", "source", "client_id"],
        )
    """

    field: str = Field(..., description="Parameter or body field name")
    code: str = Field(..., description="Lower-case error code")
    message: str = Field(..., description="Readable explanation")
    allowed: list[Any] | None = Field(
        None,
        description="Accepted values, when the set is closed",
    )


class ProblemDetails(BaseModel):
    """Problem document; `type` ends in the error slug, `instance` is the path."""

    type: str = Field(
        ...,
        description="Problem type URI",
        examples=["http://localhost:8000/errors/validation_failed"],
    )
    title: str = Field(..., description="Summary of the problem type", examples=["Validation Failed"])
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(
        ...,
        description="Explanation of this occurrence",
        examples=["page must be a positive integer"],
    )
    instance: str = Field(
        ...,
        description="Request path",
        examples=["/api/v1/collections/leads"],
    )
    errors: list[ErrorDetail] | None = Field(None, description="Per-field errors")
    trace_id: str | None = Field(None, description="X-Trace-Id of the request")

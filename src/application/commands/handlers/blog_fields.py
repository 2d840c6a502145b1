"""Field checks shared by the blog command handlers."""

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import BlogStatus


def required_text(value: str, field: str) -> Result[str, ValidationError]:
    """Strip `value`; blank text is a ValidationError on `field`."""
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field} is required",
                field=field,
            )
        )
    return Success(value=text)


def parse_status(value: BlogStatus | str) -> Result[BlogStatus, ValidationError]:
    status = BlogStatus.parse(value)
    if status is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"Unknown blog status '{value}'",
                field="status",
                details={"allowed": [member.value for member in BlogStatus]},
            )
        )
    return Success(value=status)

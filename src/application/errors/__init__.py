"""Application errors.

Handlers return domain errors; the presentation layer wraps them in an
ApplicationError to pick the HTTP status.
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = ["ApplicationError", "ApplicationErrorCode"]

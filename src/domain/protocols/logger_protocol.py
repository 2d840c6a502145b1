"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logging. Implementations MUST emit
structured records (event name plus key-value context) and never log
secrets or raw search input beyond what the caller passes.

Log Levels:
    - DEBUG: Per-query diagnostics (filters, offsets)
    - INFO: Normal operational events (policy loaded, profile updated)
    - WARNING: Skipped policy lines, denied mutations
    - ERROR: Store unavailable, notification or audit write failed
    - CRITICAL: Startup cannot continue (policy file unreadable)

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("collection_page_loaded", collection="leads", page=2, total=45)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("mutation_denied", permission="users:write")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (startup cannot continue)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context bound to every later call.

        The original logger is left unchanged.

        Example:
            handler_logger = logger.bind(handler="update_profile")
            handler_logger.info("profile_updated", profile_id=str(profile_id))
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...

"""LoggerProtocol definition for structured logging.

Every log call is an event name plus key-value context. Never log
credentials or tokens; principals are logged by username only.

Usage:
    from clusterauthz.core.container import get_logger

    logger = get_logger()
    logger.info("role_permissions_added", role="newRole", policy_count=1)

    request_logger = logger.bind(request_id=request_id)
    request_logger.warning("leader_read_retry", attempt=2)
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
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context to include in all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

"""Structured logging port.

Handlers, adapters and controllers take a logger in their constructor.
Entry points bind the Lambda request id once per invocation and pass the
bound logger down, so every entry of one invocation carries it.

Level usage in this code base:
    - DEBUG: parameters sent to AWS services
    - INFO: appointment saved, notification sent, record processed
    - WARNING: a fallback value was used (e.g. missing SentTimestamp)
    - ERROR: an operation failed; the error is then raised or returned

Usage:
    logger.info("Appointment saved", schedule_id="98701", status="pending")
    logger.error("Failed to send notification", error=e, topic_arn=arn)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Message plus keyword context; ``error=`` carries the failure."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure; implementations flatten ``error`` into fields."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger adding ``context`` to every entry (self is unchanged)."""
        ...

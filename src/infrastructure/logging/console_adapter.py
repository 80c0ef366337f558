"""structlog adapter writing one entry per line to stdout.

Lambda ships stdout to the function's log group, so stdout is the only
sink. Rendering depends on the environment:
- development: coloured key/value lines
- testing, ci, production: one JSON object per line

Failures passed as ``error=`` are flattened into ``error_type`` and
``error_message``; domain errors also contribute their ``error_code``.

ConsoleAdapter satisfies LoggerProtocol structurally (PEP 544), it does
not inherit from it.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any

import structlog


def build_processors(use_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    processors.append(renderer)
    return processors


def error_fields(error: Exception) -> dict[str, Any]:
    """Flatten an exception into log fields."""
    fields: dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    code = getattr(error, "code", None)
    if isinstance(code, Enum):
        fields["error_code"] = code.value
    return fields


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json: Render JSON lines instead of coloured console output.
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Example:
        >>> logger = ConsoleAdapter(level="DEBUG").bind(aws_request_id="abc")
        >>> logger.info("Appointment persisted", schedule_id="98701")
    """

    def __init__(self, *, use_json: bool = True, level: str = "INFO") -> None:
        # Not cached: each warm container may reconfigure with new settings
        structlog.configure(
            processors=build_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping()[level.upper()]
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=False,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, bound: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context.update(error_fields(error))
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context.update(error_fields(error))
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return an adapter that adds ``context`` to every entry."""
        return self._wrap(self._logger.bind(**context))

"""SQS record → ProcessedMessage mapping for the country processor."""

import json
from datetime import UTC, datetime
from typing import Any

from src.domain.entities.processed_message import ProcessedMessage
from src.domain.protocols.logger_protocol import LoggerProtocol


class SQSRecordMapper:
    """Turn raw SQS records into ProcessedMessage entities.

    Args:
        queue_name: Name of the queue this processor consumes.
        logger: Structured logger.
    """

    def __init__(self, queue_name: str, logger: LoggerProtocol) -> None:
        self._queue_name = queue_name
        self._logger = logger

    @property
    def queue_name(self) -> str:
        return self._queue_name

    def to_processed_message(self, record: dict[str, Any]) -> ProcessedMessage:
        """Map one record.

        Raises:
            ValueError: If the body is not a JSON object.
        """
        message_id = record.get("messageId", "")
        try:
            body = json.loads(record.get("body") or "")
        except json.JSONDecodeError as e:
            self._logger.error(
                "Failed to map SQS record to ProcessedMessage",
                error=e,
                message_id=message_id,
            )
            raise ValueError(f"Invalid SQS message format: {e}") from e

        if not isinstance(body, dict):
            self._logger.error(
                "SQS record body is not a JSON object",
                message_id=message_id,
                body_type=type(body).__name__,
            )
            raise ValueError("Invalid SQS message format: body must be a JSON object")

        return ProcessedMessage(
            id=message_id,
            data=body,
            queue_source=self._queue_name,
            timestamp=self._sent_at(record.get("attributes") or {}),
        )

    def _sent_at(self, attributes: dict[str, Any]) -> str:
        raw = attributes.get("SentTimestamp")
        try:
            millis = int(raw)
            return datetime.fromtimestamp(millis / 1000, tz=UTC).isoformat()
        except (TypeError, ValueError, OverflowError, OSError):
            self._logger.warning(
                "Invalid SentTimestamp, falling back to current time",
                raw_timestamp=raw,
            )
            return datetime.now(UTC).isoformat()

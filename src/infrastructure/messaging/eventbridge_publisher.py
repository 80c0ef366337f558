"""EventBridge implementation of EventPublisherProtocol.

The country processor announces every stored message on the event bus.
A rule on ``Source`` forwards the event to the scheduler's confirmation
queue, where it drives the appointment to completed.
"""

import json
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from src.domain.entities.processed_message import ProcessedMessage
from src.domain.errors import NotificationError
from src.domain.protocols.logger_protocol import LoggerProtocol

if TYPE_CHECKING:
    from mypy_boto3_events import EventBridgeClient

EVENT_SOURCE = "com.appointment.processor"
EVENT_DETAIL_TYPE = "APPOINTMENT_SAVED"


class EventBridgePublisher:
    """Publish processor confirmations to an EventBridge bus.

    Args:
        client: boto3 EventBridge client.
        event_bus_name: Target bus name.
        logger: Structured logger.
    """

    def __init__(
        self,
        client: "EventBridgeClient",
        event_bus_name: str,
        logger: LoggerProtocol,
    ) -> None:
        self._client = client
        self._event_bus_name = event_bus_name
        self._logger = logger

    async def publish_success(self, message: ProcessedMessage, record_id: str) -> None:
        """Publish an APPOINTMENT_SAVED event for the stored message.

        Args:
            message: Message that was stored.
            record_id: Id of the stored row.

        Raises:
            NotificationError: If the call fails or the entry is rejected.
        """
        detail = {
            "recordId": record_id,
            "insuredId": message.insured_id,
            "scheduleId": message.schedule_id,
        }
        self._logger.debug(
            "Publishing processor event",
            event_bus=self._event_bus_name,
            detail=detail,
        )

        try:
            response = self._client.put_events(
                Entries=[
                    {
                        "Source": EVENT_SOURCE,
                        "DetailType": EVENT_DETAIL_TYPE,
                        "Detail": json.dumps(detail),
                        "EventBusName": self._event_bus_name,
                    }
                ]
            )
        except (ClientError, BotoCoreError) as e:
            self._logger.error(
                "Failed to publish processor event",
                error=e,
                event_bus=self._event_bus_name,
                message_id=message.id,
            )
            raise NotificationError("Failed to publish processor event", e) from e

        if response.get("FailedEntryCount", 0):
            entry = response.get("Entries", [{}])[0]
            reason = entry.get("ErrorMessage") or entry.get("ErrorCode") or "rejected"
            self._logger.error(
                "Processor event rejected by event bus",
                event_bus=self._event_bus_name,
                message_id=message.id,
                reason=reason,
            )
            raise NotificationError(
                "Failed to publish processor event", RuntimeError(reason)
            )

        self._logger.info(
            "Processor event published",
            event_bus=self._event_bus_name,
            message_id=message.id,
            record_id=record_id,
        )

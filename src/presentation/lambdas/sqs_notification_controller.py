"""Queue controller for processor confirmations.

Each SQS record carries an EventBridge event whose ``detail`` names the
insured id and schedule id of a processed appointment. Records are handled
one at a time; the first failure is raised so the whole batch returns to
the queue and is redelivered.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.application.commands.appointment_commands import (
    ProcessAppointmentNotification,
)
from src.application.commands.handlers.process_appointment_notification_handler import (
    ProcessAppointmentNotificationHandler,
)
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.lambdas.errors import InvalidRequestError
from src.schemas.appointment_schemas import ConfirmationMessageBody

RAW_BODY_LOG_LIMIT = 256


class NotificationQueueController:
    """Apply processor confirmations to stored appointments.

    Args:
        process_handler: ProcessAppointmentNotification handler.
        logger: Structured logger.
    """

    def __init__(
        self,
        process_handler: ProcessAppointmentNotificationHandler,
        logger: LoggerProtocol,
    ) -> None:
        self._process_handler = process_handler
        self._logger = logger

    async def handle(self, event: dict[str, Any]) -> None:
        """Process every record of the batch in order.

        Raises:
            InvalidRequestError: If a record body is malformed.
            DomainError: The failure returned by the use case.
        """
        for record in event.get("Records", []):
            message_id = record.get("messageId")
            raw_body = record.get("body") or ""

            try:
                body = ConfirmationMessageBody.model_validate_json(raw_body)
            except PydanticValidationError as e:
                self._logger.error(
                    "Failed to process SQS notification message",
                    error=e,
                    message_id=message_id,
                    raw_body=raw_body[:RAW_BODY_LOG_LIMIT],
                )
                raise InvalidRequestError(
                    "Required identifiers (insuredId/scheduleId) not found in event detail"
                ) from e

            detail = body.detail
            self._logger.info(
                "Processing appointment notification",
                message_id=message_id,
                insured_id=detail.insured_id,
                schedule_id=detail.schedule_id,
            )

            result = await self._process_handler.handle(
                ProcessAppointmentNotification(
                    insured_id=detail.insured_id,
                    schedule_id=detail.schedule_id,
                )
            )
            if isinstance(result, Failure):
                self._logger.error(
                    "Failed to process SQS notification message",
                    error=result.error,
                    message_id=message_id,
                    raw_body=raw_body[:RAW_BODY_LOG_LIMIT],
                )
                raise result.error

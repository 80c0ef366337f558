"""SNS implementation of AppointmentNotifierProtocol.

Publishes each scheduled appointment to a single topic. Country queues
subscribe with a filter policy on the ``Country`` message attribute, so
the attribute value must be the normalized country code.
"""

import json
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from src.domain.entities.appointment import Appointment
from src.domain.errors import NotificationError
from src.domain.protocols.logger_protocol import LoggerProtocol

if TYPE_CHECKING:
    from mypy_boto3_sns import SNSClient

APPOINTMENT_SCHEDULED_EVENT = "APPOINTMENT_SCHEDULED"


class SNSAppointmentNotifier:
    """Publish scheduled appointments to an SNS topic.

    Args:
        client: boto3 SNS client.
        topic_arn: Target topic ARN.
        logger: Structured logger.
    """

    def __init__(
        self,
        client: "SNSClient",
        topic_arn: str,
        logger: LoggerProtocol,
    ) -> None:
        self._client = client
        self._topic_arn = topic_arn
        self._logger = logger

    async def send_appointment_scheduled(self, appointment: Appointment) -> None:
        """Publish the appointment payload with routing attributes.

        Raises:
            NotificationError: If SNS rejects the publish call.
        """
        country = appointment.country.value
        payload = appointment.to_dict()

        try:
            response = self._client.publish(
                TopicArn=self._topic_arn,
                Message=json.dumps(payload),
                Subject=f"New Appointment Scheduled for {country}",
                MessageAttributes={
                    "Country": {"DataType": "String", "StringValue": country},
                    "EventType": {
                        "DataType": "String",
                        "StringValue": APPOINTMENT_SCHEDULED_EVENT,
                    },
                },
            )
        except (ClientError, BotoCoreError) as e:
            self._logger.error(
                "Failed to publish appointment notification",
                error=e,
                topic_arn=self._topic_arn,
                country=country,
                schedule_id=payload["scheduleId"],
            )
            raise NotificationError("Failed to send appointment notification", e) from e

        self._logger.info(
            "Appointment notification published",
            topic_arn=self._topic_arn,
            country=country,
            sns_message_id=response.get("MessageId"),
        )

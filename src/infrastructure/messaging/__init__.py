"""Messaging adapters.

- SNSAppointmentNotifier: fans scheduled appointments out to country queues
- EventBridgePublisher: confirms processed appointments back to the scheduler
- SQSRecordMapper: turns country queue records into ProcessedMessage entities
"""

from src.infrastructure.messaging.eventbridge_publisher import EventBridgePublisher
from src.infrastructure.messaging.sns_appointment_notifier import (
    SNSAppointmentNotifier,
)
from src.infrastructure.messaging.sqs_record_mapper import SQSRecordMapper

__all__ = [
    "EventBridgePublisher",
    "SNSAppointmentNotifier",
    "SQSRecordMapper",
]

"""Appointment function entry point.

One Lambda serves both triggers:
    - SQS records (processor confirmations) → NotificationQueueController
    - Action envelopes ({"action": ...}) → ActionController
Anything else is rejected with ValueError.

The container is built once per warm Lambda container; every invocation
runs its own event loop.
"""

import asyncio
from functools import lru_cache
from typing import Any

from src.core.config import Settings
from src.core.container import AppointmentContainer, build_appointment_container
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.lambdas.http_controller import ActionController, ActionResponse
from src.presentation.lambdas.sqs_notification_controller import (
    NotificationQueueController,
)

SQS_EVENT_SOURCE = "aws:sqs"


@lru_cache()
def get_container() -> AppointmentContainer:
    return build_appointment_container(Settings())


def is_queue_event(event: Any) -> bool:
    if not isinstance(event, dict):
        return False
    records = event.get("Records")
    if not isinstance(records, list) or not records or not isinstance(records[0], dict):
        return False
    return records[0].get("eventSource") == SQS_EVENT_SOURCE


def is_action_event(event: Any) -> bool:
    return isinstance(event, dict) and bool(event.get("action"))


async def dispatch(
    event: Any, container: AppointmentContainer, logger: LoggerProtocol
) -> ActionResponse | None:
    """Route the raw event to the matching controller.

    Raises:
        ValueError: If the event is neither a queue batch nor an envelope.
    """
    if is_queue_event(event):
        logger.info("Routing queue event", records=len(event["Records"]))
        controller = NotificationQueueController(
            process_handler=container.process_notification,
            logger=logger,
        )
        await controller.handle(event)
        return None

    if is_action_event(event):
        return await ActionController(
            register_handler=container.register_appointment,
            find_handler=container.find_appointments,
            logger=logger,
        ).handle(event)

    logger.error("Unsupported event type", event_type=type(event).__name__)
    raise ValueError("Unsupported event type.")


def handler(event: Any, context: Any) -> ActionResponse | None:
    """Lambda handler."""
    container = get_container()
    logger = container.logger.bind(
        aws_request_id=getattr(context, "aws_request_id", None)
    )
    return asyncio.run(dispatch(event, container, logger))

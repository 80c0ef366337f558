"""Unit tests for NotificationQueueController.

Tests cover:
- detail as object or JSON string, numeric ids
- Sequential processing and abort on the first failure
- Malformed bodies
"""

import json
from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.appointment_commands import (
    ProcessAppointmentNotification,
)
from src.application.commands.handlers.process_appointment_notification_handler import (
    ProcessAppointmentNotificationHandler,
)
from src.core.result import Failure, Success
from src.domain.errors import InvalidScheduleIdError, RepositoryError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.lambdas.errors import InvalidRequestError
from src.presentation.lambdas.sqs_notification_controller import (
    NotificationQueueController,
)


def make_record(detail, message_id: str = "msg-1") -> dict:
    body = {
        "source": "com.appointment.processor",
        "detail-type": "APPOINTMENT_SAVED",
        "detail": detail,
    }
    return {"messageId": message_id, "eventSource": "aws:sqs", "body": json.dumps(body)}


def create_controller() -> tuple[NotificationQueueController, AsyncMock]:
    handler = AsyncMock(spec=ProcessAppointmentNotificationHandler)
    handler.handle.return_value = Success(value=None)
    controller = NotificationQueueController(
        process_handler=handler, logger=Mock(spec=LoggerProtocol)
    )
    return controller, handler


@pytest.mark.unit
class TestNotificationQueueController:
    """Test confirmation batch processing."""

    @pytest.mark.asyncio
    async def test_processes_each_record_in_order(self):
        # Arrange
        controller, handler = create_controller()
        event = {
            "Records": [
                make_record({"insuredId": "12345", "scheduleId": "1"}, "a"),
                make_record({"insuredId": "54321", "scheduleId": "2"}, "b"),
            ]
        }

        # Act
        await controller.handle(event)

        # Assert
        assert [c.args[0] for c in handler.handle.await_args_list] == [
            ProcessAppointmentNotification(insured_id="12345", schedule_id="1"),
            ProcessAppointmentNotification(insured_id="54321", schedule_id="2"),
        ]

    @pytest.mark.asyncio
    async def test_detail_as_json_string_and_numeric_schedule_id(self):
        controller, handler = create_controller()
        detail = json.dumps({"recordId": "9", "insuredId": "12345", "scheduleId": 98701})

        await controller.handle({"Records": [make_record(detail)]})

        handler.handle.assert_awaited_once_with(
            ProcessAppointmentNotification(insured_id="12345", schedule_id="98701")
        )

    @pytest.mark.asyncio
    async def test_failure_aborts_batch_and_is_raised(self):
        controller, handler = create_controller()
        error = RepositoryError("Failed to update appointment status", RuntimeError("x"))
        handler.handle.side_effect = [Failure(error=error), Success(value=None)]
        event = {
            "Records": [
                make_record({"insuredId": "12345", "scheduleId": "1"}, "a"),
                make_record({"insuredId": "12345", "scheduleId": "2"}, "b"),
            ]
        }

        with pytest.raises(RepositoryError) as exc_info:
            await controller.handle(event)

        assert exc_info.value is error
        assert handler.handle.await_count == 1

    @pytest.mark.asyncio
    async def test_validation_failure_is_raised(self):
        controller, handler = create_controller()
        handler.handle.return_value = Failure(
            error=InvalidScheduleIdError("ScheduleId must be numeric: 'abc'")
        )

        with pytest.raises(InvalidScheduleIdError):
            await controller.handle(
                {"Records": [make_record({"insuredId": "12345", "scheduleId": "abc"})]}
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "detail",
        [
            {"insuredId": "12345"},
            {"scheduleId": "1"},
            {"insuredId": "", "scheduleId": "1"},
            "not json",
        ],
    )
    async def test_missing_identifiers_raise_invalid_request(self, detail):
        controller, handler = create_controller()

        with pytest.raises(InvalidRequestError, match="insuredId/scheduleId"):
            await controller.handle({"Records": [make_record(detail)]})

        handler.handle.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_body_that_is_not_json_raises_invalid_request(self):
        controller, _ = create_controller()

        with pytest.raises(InvalidRequestError):
            await controller.handle({"Records": [{"messageId": "m", "body": "{{"}]})

    @pytest.mark.asyncio
    async def test_empty_batch_is_a_no_op(self):
        controller, handler = create_controller()

        await controller.handle({"Records": []})

        handler.handle.assert_not_awaited()

"""Unit tests for RegisterAppointmentHandler.

Tests cover:
- Successful registration (save then notify, confirmation payload)
- Validation failures and their order when several fields are invalid
- Repository and notifier failures propagated as Failure

Architecture:
- Unit tests with AsyncMock(spec=Protocol) collaborators
- Real IsoDateValidator (pure function)
"""

from dataclasses import replace
from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.appointment_commands import RegisterAppointment
from src.application.commands.handlers.register_appointment_handler import (
    RegisterAppointmentHandler,
    ScheduleAppointmentResult,
)
from src.core.result import Failure, Success
from src.domain.errors import (
    InvalidCenterIdError,
    InvalidCountryError,
    InvalidDateError,
    InvalidInsuredIdError,
    InvalidMedicIdError,
    InvalidScheduleIdError,
    InvalidSpecialtyIdError,
    NotificationError,
    RepositoryError,
)
from src.domain.protocols.appointment_notifier_protocol import (
    AppointmentNotifierProtocol,
)
from src.domain.protocols.appointment_repository import AppointmentRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.validation.iso_date_validator import IsoDateValidator

VALID_COMMAND = RegisterAppointment(
    insured_id="12345",
    schedule_id=98701,
    country_iso="PE",
    center_id=101,
    specialty_id=105,
    medic_id=201,
    date="2025-12-25T10:00:00Z",
)


def create_handler() -> tuple[RegisterAppointmentHandler, AsyncMock, AsyncMock]:
    """Create handler with mocked dependencies.

    Returns:
        Tuple of (handler, repo_mock, notifier_mock)
    """
    repo = AsyncMock(spec=AppointmentRepository)
    notifier = AsyncMock(spec=AppointmentNotifierProtocol)
    handler = RegisterAppointmentHandler(
        appointment_repo=repo,
        notifier=notifier,
        date_validator=IsoDateValidator(),
        logger=Mock(spec=LoggerProtocol),
    )
    return handler, repo, notifier


# =============================================================================
# Success Tests
# =============================================================================


@pytest.mark.unit
class TestRegisterAppointmentSuccess:
    """Test successful registration."""

    @pytest.mark.asyncio
    async def test_saves_pending_appointment_and_notifies(self):
        # Arrange
        handler, repo, notifier = create_handler()

        # Act
        result = await handler.handle(VALID_COMMAND)

        # Assert
        assert isinstance(result, Success)
        repo.save.assert_awaited_once()
        saved = repo.save.await_args.args[0]
        assert saved.insured_id.value == "12345"
        assert saved.country.value == "PE"
        assert saved.to_dict()["estado"] == "pending"
        notifier.send_appointment_scheduled.assert_awaited_once_with(saved)

    @pytest.mark.asyncio
    async def test_returns_confirmation_with_country_and_schedule_id(self):
        handler, _, _ = create_handler()

        result = await handler.handle(VALID_COMMAND)

        assert result == Success(
            value=ScheduleAppointmentResult(
                message="Appointment for PE received and being processed.",
                id="98701",
            )
        )
        assert result.value.to_dict() == {
            "message": "Appointment for PE received and being processed.",
            "id": "98701",
        }

    @pytest.mark.asyncio
    async def test_normalizes_lowercase_country(self):
        handler, repo, _ = create_handler()

        result = await handler.handle(replace(VALID_COMMAND, country_iso="cl"))

        assert isinstance(result, Success)
        assert "CL" in result.value.message
        assert repo.save.await_args.args[0].country.value == "CL"

    @pytest.mark.asyncio
    async def test_saves_before_notifying(self):
        handler, repo, notifier = create_handler()
        calls: list[str] = []
        repo.save.side_effect = lambda appointment: calls.append("save") or appointment
        notifier.send_appointment_scheduled.side_effect = lambda _: calls.append(
            "notify"
        )

        await handler.handle(VALID_COMMAND)

        assert calls == ["save", "notify"]


# =============================================================================
# Validation Tests
# =============================================================================


@pytest.mark.unit
class TestRegisterAppointmentValidation:
    """Test validation failures and ordering."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("overrides", "expected_error"),
        [
            ({"country_iso": "AR"}, InvalidCountryError),
            ({"date": "not-a-date"}, InvalidDateError),
            ({"insured_id": "123"}, InvalidInsuredIdError),
            ({"schedule_id": 0}, InvalidScheduleIdError),
            ({"center_id": -1}, InvalidCenterIdError),
            ({"specialty_id": 1.5}, InvalidSpecialtyIdError),
            ({"medic_id": 0}, InvalidMedicIdError),
        ],
    )
    async def test_single_invalid_field(self, overrides, expected_error):
        handler, repo, notifier = create_handler()

        result = await handler.handle(replace(VALID_COMMAND, **overrides))

        assert isinstance(result, Failure)
        assert isinstance(result.error, expected_error)
        repo.save.assert_not_awaited()
        notifier.send_appointment_scheduled.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_country_is_checked_before_every_other_field(self):
        handler, _, _ = create_handler()
        everything_invalid = RegisterAppointment(
            insured_id="1",
            schedule_id=0,
            country_iso="AR",
            center_id=0,
            specialty_id=0,
            medic_id=0,
            date="bad",
        )

        result = await handler.handle(everything_invalid)

        assert isinstance(result.error, InvalidCountryError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("overrides", "expected_error"),
        [
            ({"date": "bad", "insured_id": "1"}, InvalidDateError),
            ({"insured_id": "1", "schedule_id": 0}, InvalidInsuredIdError),
            ({"schedule_id": 0, "center_id": 0}, InvalidScheduleIdError),
            ({"center_id": 0, "specialty_id": 0}, InvalidCenterIdError),
            ({"specialty_id": 0, "medic_id": 0}, InvalidSpecialtyIdError),
        ],
    )
    async def test_first_invalid_field_in_order_wins(self, overrides, expected_error):
        handler, _, _ = create_handler()

        result = await handler.handle(replace(VALID_COMMAND, **overrides))

        assert isinstance(result, Failure)
        assert isinstance(result.error, expected_error)

    @pytest.mark.asyncio
    async def test_invalid_insured_id_never_reaches_repository(self):
        handler, repo, _ = create_handler()

        result = await handler.handle(replace(VALID_COMMAND, insured_id="123456"))

        assert isinstance(result.error, InvalidInsuredIdError)
        repo.save.assert_not_awaited()


# =============================================================================
# Collaborator Failure Tests
# =============================================================================


@pytest.mark.unit
class TestRegisterAppointmentCollaboratorFailures:
    """Test repository and notifier failures."""

    @pytest.mark.asyncio
    async def test_repository_failure_skips_notification(self):
        handler, repo, notifier = create_handler()
        repo.save.side_effect = RepositoryError(
            "Failed to persist appointment data", RuntimeError("throttled")
        )

        result = await handler.handle(VALID_COMMAND)

        assert isinstance(result, Failure)
        assert isinstance(result.error, RepositoryError)
        assert "throttled" in result.error.message
        notifier.send_appointment_scheduled.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_notifier_failure_is_returned_after_save(self):
        handler, repo, notifier = create_handler()
        notifier.send_appointment_scheduled.side_effect = NotificationError(
            "Failed to send appointment notification", RuntimeError("topic gone")
        )

        result = await handler.handle(VALID_COMMAND)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotificationError)
        repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unexpected_exception_propagates(self):
        handler, repo, _ = create_handler()
        repo.save.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError, match="bug"):
            await handler.handle(VALID_COMMAND)

"""Unit tests for the appointment error taxonomy.

Tests cover:
- Stable codes per error kind
- Infrastructure errors keep the wrapped message
- Not-found error context
"""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.domain.errors import (
    AppointmentNotFoundError,
    InvalidAppointmentStatusError,
    InvalidCenterIdError,
    InvalidCountryError,
    InvalidDateError,
    InvalidInsuredIdError,
    InvalidMedicIdError,
    InvalidScheduleIdError,
    InvalidSpecialtyIdError,
    NotificationError,
    RepositoryError,
    SecretsError,
)


@pytest.mark.unit
class TestErrorCodes:
    """Each error kind exposes its own code."""

    @pytest.mark.parametrize(
        ("error_class", "code"),
        [
            (InvalidInsuredIdError, "invalid_insured_id"),
            (InvalidScheduleIdError, "invalid_schedule_id"),
            (InvalidCenterIdError, "invalid_center_id"),
            (InvalidSpecialtyIdError, "invalid_specialty_id"),
            (InvalidMedicIdError, "invalid_medic_id"),
            (InvalidCountryError, "invalid_country"),
            (InvalidDateError, "invalid_date"),
            (InvalidAppointmentStatusError, "invalid_appointment_status"),
        ],
    )
    def test_validation_errors(self, error_class, code):
        error = error_class("bad input")

        assert isinstance(error, ValidationError)
        assert isinstance(error, ValueError)
        assert error.code.value == code
        assert str(error) == "bad input"

    def test_code_can_be_overridden_per_instance(self):
        error = SecretsError("Secret not found", code=ErrorCode.SECRET_NOT_FOUND)

        assert error.code == ErrorCode.SECRET_NOT_FOUND
        assert "secret_not_found" in repr(error)


@pytest.mark.unit
class TestInfrastructureErrors:
    """Collaborator failures are wrapped with context."""

    def test_repository_error_keeps_original_message(self):
        original = RuntimeError("ProvisionedThroughputExceeded")

        error = RepositoryError("Failed to persist appointment data", original)

        assert str(error) == "Failed to persist appointment data: ProvisionedThroughputExceeded"
        assert error.original_error is original
        assert error.code == ErrorCode.REPOSITORY_ERROR

    def test_notification_error_without_original(self):
        error = NotificationError("Failed to send appointment notification")

        assert str(error) == "Failed to send appointment notification"
        assert error.original_error is None
        assert error.code == ErrorCode.NOTIFICATION_ERROR


@pytest.mark.unit
class TestAppointmentNotFoundError:
    """Not-found error carries the insured id."""

    def test_message_and_details(self):
        error = AppointmentNotFoundError("12345")

        assert isinstance(error, NotFoundError)
        assert isinstance(error, DomainError)
        assert error.code == ErrorCode.APPOINTMENT_NOT_FOUND
        assert str(error) == "No appointments found for insured: 12345"
        assert error.details == {"insured_id": "12345"}
        assert error.insured_id == "12345"

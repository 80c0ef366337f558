"""Appointment domain errors.

Closed taxonomy of failures for the scheduling workflow. Each kind carries
a stable ErrorCode; the class name doubles as the ``error`` field of the
failure object returned to request/response callers.

Architecture:
    - Validation errors are raised by value objects at construction time
    - RepositoryError / NotificationError are part of the repository and
      notifier protocol contracts; adapters wrap client exceptions in them
    - Handlers return them inside Failure (railway-oriented programming)

Usage:
    from src.domain.errors import InvalidInsuredIdError

    if len(value) != 5:
        raise InvalidInsuredIdError("InsuredId must be exactly 5 characters")
"""

from src.core.enums import ErrorCode
from src.core.errors import InfrastructureError, NotFoundError, ValidationError

# -----------------------------------------------------------------------------
# Validation Errors
# -----------------------------------------------------------------------------


class InvalidInsuredIdError(ValidationError):
    """Insured id is empty or not exactly 5 characters."""

    code = ErrorCode.INVALID_INSURED_ID


class InvalidScheduleIdError(ValidationError):
    """Schedule id is missing, non-integral or not positive."""

    code = ErrorCode.INVALID_SCHEDULE_ID


class InvalidCenterIdError(ValidationError):
    """Center id is missing, non-integral or not positive."""

    code = ErrorCode.INVALID_CENTER_ID


class InvalidSpecialtyIdError(ValidationError):
    """Specialty id is missing, non-integral or not positive."""

    code = ErrorCode.INVALID_SPECIALTY_ID


class InvalidMedicIdError(ValidationError):
    """Medic id is missing, non-integral or not positive."""

    code = ErrorCode.INVALID_MEDIC_ID


class InvalidCountryError(ValidationError):
    """Country code is empty or not one of the supported countries."""

    code = ErrorCode.INVALID_COUNTRY


class InvalidDateError(ValidationError):
    """Appointment date is empty or rejected by the date validator."""

    code = ErrorCode.INVALID_DATE


class InvalidAppointmentStatusError(ValidationError):
    """Status is empty or not one of the lifecycle states."""

    code = ErrorCode.INVALID_APPOINTMENT_STATUS


# -----------------------------------------------------------------------------
# Resource Errors
# -----------------------------------------------------------------------------


class AppointmentNotFoundError(NotFoundError):
    """No appointment exists for the given insured id.

    The find use case reports absence as an empty list; this error is for
    collaborators that must tell "definitely absent" apart from an empty
    query result.
    """

    code = ErrorCode.APPOINTMENT_NOT_FOUND

    def __init__(self, insured_id: str) -> None:
        """Initialize not-found error.

        Args:
            insured_id: Insured id that has no appointments.
        """
        super().__init__(
            f"No appointments found for insured: {insured_id}",
            details={"insured_id": insured_id},
        )
        self.insured_id = insured_id


# -----------------------------------------------------------------------------
# Infrastructure Errors
# -----------------------------------------------------------------------------


class RepositoryError(InfrastructureError):
    """Appointment store failed (read, write or status update)."""

    code = ErrorCode.REPOSITORY_ERROR


class NotificationError(InfrastructureError):
    """Publishing to the notification topic or event bus failed."""

    code = ErrorCode.NOTIFICATION_ERROR

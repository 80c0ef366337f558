"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import InvalidInsuredIdError, RepositoryError
"""

from src.domain.errors.appointment_error import (
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
)
from src.domain.errors.secrets_error import SecretsError

__all__ = [
    # Validation errors
    "InvalidAppointmentStatusError",
    "InvalidCenterIdError",
    "InvalidCountryError",
    "InvalidDateError",
    "InvalidInsuredIdError",
    "InvalidMedicIdError",
    "InvalidScheduleIdError",
    "InvalidSpecialtyIdError",
    # Resource errors
    "AppointmentNotFoundError",
    # Infrastructure errors
    "NotificationError",
    "RepositoryError",
    "SecretsError",
]

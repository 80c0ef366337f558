"""Domain value objects with validation.

Immutable value objects that enforce field-level business constraints.
Construction is the only validation point: an instance is always valid.
"""

from src.domain.value_objects.appointment_date import AppointmentDate
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.domain.value_objects.country_iso import CountryISO
from src.domain.value_objects.insured_id import INSURED_ID_LENGTH, InsuredId
from src.domain.value_objects.positive_integer_id import (
    CenterId,
    MedicId,
    PositiveIntegerId,
    ScheduleId,
    SpecialtyId,
)

__all__ = [
    "AppointmentDate",
    "AppointmentStatus",
    "CenterId",
    "CountryISO",
    "INSURED_ID_LENGTH",
    "InsuredId",
    "MedicId",
    "PositiveIntegerId",
    "ScheduleId",
    "SpecialtyId",
]

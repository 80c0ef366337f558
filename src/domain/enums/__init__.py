"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - AppointmentState: Appointment lifecycle states
    - CountryCode: Countries the service operates in
"""

from src.domain.enums.appointment_state import AppointmentState
from src.domain.enums.country_code import CountryCode

__all__ = [
    "AppointmentState",
    "CountryCode",
]

"""Appointment state enumeration.

Defines the lifecycle states for a scheduled appointment.
"""

from enum import Enum


class AppointmentState(str, Enum):
    """Appointment lifecycle state.

    **Lifecycle Flow**:
        PENDING → CONFIRMED (entity confirm())
        PENDING → COMPLETED (processor confirmation received)
        PENDING → CANCELLED

    **Conventionally terminal**: CANCELLED, COMPLETED. The Appointment
    entity does not enforce this; any state can move to any other.
    """

    PENDING = "pending"
    """Registered and published, waiting for the country processor."""

    CONFIRMED = "confirmed"
    """Confirmed through the entity API."""

    CANCELLED = "cancelled"
    """Cancelled before being attended."""

    COMPLETED = "completed"
    """Country processor stored the appointment and sent its confirmation."""

    @classmethod
    def values(cls) -> list[str]:
        """Return the raw string values in declaration order.

        Returns:
            List of allowed status strings.
        """
        return [state.value for state in cls]

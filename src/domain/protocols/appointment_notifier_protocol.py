"""AppointmentNotifierProtocol for scheduled-appointment fan-out.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol

from src.domain.entities.appointment import Appointment


class AppointmentNotifierProtocol(Protocol):
    """Announces newly scheduled appointments to downstream processors.

    Error contract:
        Publishing failures are wrapped in NotificationError.
    """

    async def send_appointment_scheduled(self, appointment: Appointment) -> None:
        """Publish a scheduled appointment.

        Args:
            appointment: Appointment that was just persisted.

        Raises:
            NotificationError: If the message cannot be published.
        """
        ...

"""AppointmentRepository protocol for appointment persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from src.domain.entities.appointment import Appointment
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.domain.value_objects.insured_id import InsuredId
from src.domain.value_objects.positive_integer_id import ScheduleId


class AppointmentRepository(Protocol):
    """Appointment repository protocol (port).

    Defines the interface for appointment persistence operations.
    Infrastructure layer provides concrete implementation.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Error contract:
        Every method wraps store failures in RepositoryError.

    Methods:
        find_by_insured_id: Retrieve all appointments of an insured person
        save: Create or overwrite an appointment
        update_status: Change the status of one stored appointment

    Example Implementation:
        >>> class DynamoDBAppointmentRepository:
        ...     async def find_by_insured_id(self, insured_id: InsuredId) -> list[Appointment]:
        ...         # Query logic here
        ...         pass
    """

    async def find_by_insured_id(self, insured_id: InsuredId) -> list[Appointment]:
        """Find all appointments for an insured person.

        Args:
            insured_id: Validated insured identifier.

        Returns:
            Appointments in store order (empty if none found).

        Raises:
            RepositoryError: If the store cannot be queried.
        """
        ...

    async def save(self, appointment: Appointment) -> Appointment:
        """Persist an appointment.

        Args:
            appointment: Appointment to store.

        Returns:
            The persisted appointment.

        Raises:
            RepositoryError: If the write fails.
        """
        ...

    async def update_status(
        self,
        insured_id: InsuredId,
        schedule_id: ScheduleId,
        status: AppointmentStatus,
    ) -> None:
        """Set the status of a stored appointment.

        Args:
            insured_id: Insured identifier (partition).
            schedule_id: Schedule identifier (item within the partition).
            status: New status.

        Raises:
            RepositoryError: If the update fails.
        """
        ...

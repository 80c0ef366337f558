"""FindAppointments query handler.

Returns the appointments of an insured person exactly as the repository
returns them. An insured person without appointments gets an empty list,
not an error.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[list[Appointment], DomainError] (explicit error handling)
- No side effects beyond the repository read
"""

from src.application.queries.appointment_queries import FindAppointments
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.appointment import Appointment
from src.domain.protocols.appointment_repository import AppointmentRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import InsuredId


class FindAppointmentsHandler:
    """Handler for FindAppointments query.

    Dependencies (injected via constructor):
        - AppointmentRepository: For data retrieval
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._appointment_repo = appointment_repo
        self._logger = logger

    async def handle(
        self, query: FindAppointments
    ) -> Result[list[Appointment], DomainError]:
        """Handle FindAppointments query.

        The insured id is validated before the repository is touched.

        Args:
            query: FindAppointments query with the raw insured id.

        Returns:
            Success(list[Appointment]): Possibly empty list of appointments.
            Failure(DomainError): Invalid insured id or repository error.
        """
        self._logger.info("Finding appointments", insured_id=query.insured_id)

        try:
            insured_id = InsuredId(query.insured_id)
            appointments = await self._appointment_repo.find_by_insured_id(insured_id)
        except DomainError as e:
            return Failure(error=e)

        return Success(value=appointments)

"""RegisterAppointment command handler.

Validates a scheduling request, persists the appointment as pending and
announces it to the country processors.

Flow:
1. Build value objects in a fixed order; the first invalid field wins:
   country → date → insured id → schedule id → center id → specialty id → medic id
2. Create the Appointment entity (status pending)
3. Save it through the repository
4. Publish it through the notifier (only after the save succeeded)
5. Return Success(ScheduleAppointmentResult)

On failure:
- Return Failure(error) with the DomainError raised by the failing step
- Nothing is rolled back: a notifier failure leaves the saved appointment

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, value objects)
- Repository, notifier and date validator are injected via protocols
"""

from dataclasses import dataclass

from src.application.commands.appointment_commands import RegisterAppointment
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.appointment import Appointment
from src.domain.protocols.appointment_notifier_protocol import (
    AppointmentNotifierProtocol,
)
from src.domain.protocols.appointment_repository import AppointmentRepository
from src.domain.protocols.date_validator_protocol import DateValidatorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import (
    AppointmentDate,
    CenterId,
    CountryISO,
    InsuredId,
    MedicId,
    ScheduleId,
    SpecialtyId,
)


@dataclass(frozen=True, kw_only=True)
class ScheduleAppointmentResult:
    """Confirmation returned to the caller.

    Attributes:
        message: Human-readable confirmation naming the country.
        id: Schedule id of the new appointment, as text.
    """

    message: str
    id: str

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message, "id": self.id}


class RegisterAppointmentHandler:
    """Handler for RegisterAppointment command.

    Dependencies (injected via constructor):
        - AppointmentRepository: For persistence
        - AppointmentNotifierProtocol: For fan-out to country processors
        - DateValidatorProtocol: Date format policy for AppointmentDate
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        notifier: AppointmentNotifierProtocol,
        date_validator: DateValidatorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            appointment_repo: Appointment repository.
            notifier: Scheduled-appointment notifier.
            date_validator: Validator injected into AppointmentDate.
            logger: Structured logger.
        """
        self._appointment_repo = appointment_repo
        self._notifier = notifier
        self._date_validator = date_validator
        self._logger = logger

    async def handle(
        self, cmd: RegisterAppointment
    ) -> Result[ScheduleAppointmentResult, DomainError]:
        """Handle RegisterAppointment command.

        Args:
            cmd: RegisterAppointment command with raw request fields.

        Returns:
            Success(ScheduleAppointmentResult): Appointment saved and published.
            Failure(DomainError): Validation, repository or notification error.

        Side Effects:
            - Writes the appointment to the repository
            - Publishes the appointment through the notifier
        """
        self._logger.info("Scheduling appointment", insured_id=cmd.insured_id)

        try:
            appointment = self._build_appointment(cmd)
        except DomainError as e:
            self._logger.warning(
                "Appointment request rejected",
                insured_id=cmd.insured_id,
                error_code=e.code.value,
                reason=e.message,
            )
            return Failure(error=e)

        try:
            await self._appointment_repo.save(appointment)
            await self._notifier.send_appointment_scheduled(appointment)
        except DomainError as e:
            self._logger.error(
                "Appointment scheduling failed",
                error=e,
                schedule_id=str(appointment.schedule_id),
            )
            return Failure(error=e)

        return Success(
            value=ScheduleAppointmentResult(
                message=f"Appointment for {appointment.country} received and being processed.",
                id=str(appointment.schedule_id),
            )
        )

    def _build_appointment(self, cmd: RegisterAppointment) -> Appointment:
        """Build the entity, validating fields in their required order.

        Args:
            cmd: Raw request fields.

        Returns:
            Pending appointment.

        Raises:
            DomainError: Validation error of the first invalid field.
        """
        country = CountryISO(cmd.country_iso)
        date = AppointmentDate(cmd.date, self._date_validator)
        insured_id = InsuredId(cmd.insured_id)
        schedule_id = ScheduleId(cmd.schedule_id)
        center_id = CenterId(cmd.center_id)
        specialty_id = SpecialtyId(cmd.specialty_id)
        medic_id = MedicId(cmd.medic_id)

        return Appointment(
            insured_id=insured_id,
            schedule_id=schedule_id,
            country=country,
            center_id=center_id,
            specialty_id=specialty_id,
            medic_id=medic_id,
            date=date,
        )

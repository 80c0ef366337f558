"""ProcessAppointmentNotification command handler.

Marks a stored appointment as completed once its country processor has
confirmed it. The handler returns the failure instead of raising; the
queue controller re-raises it so the message is redelivered.
"""

from src.application.commands.appointment_commands import (
    ProcessAppointmentNotification,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.appointment_repository import AppointmentRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import AppointmentStatus, InsuredId, ScheduleId


class ProcessAppointmentNotificationHandler:
    """Handler for ProcessAppointmentNotification command.

    Dependencies (injected via constructor):
        - AppointmentRepository: For the status update
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
        self, cmd: ProcessAppointmentNotification
    ) -> Result[None, DomainError]:
        """Handle ProcessAppointmentNotification command.

        The target status is completed, not confirmed: the processor's
        confirmation is the last step of the workflow.

        Args:
            cmd: Raw insured id and schedule id from the confirmation event.

        Returns:
            Success(None): Status updated.
            Failure(DomainError): Invalid identifiers or repository error.
        """
        try:
            insured_id = InsuredId(cmd.insured_id)
            schedule_id = ScheduleId.from_string(cmd.schedule_id)
            await self._appointment_repo.update_status(
                insured_id=insured_id,
                schedule_id=schedule_id,
                status=AppointmentStatus.completed(),
            )
        except DomainError as e:
            self._logger.error(
                "Appointment notification failed",
                error=e,
                insured_id=cmd.insured_id,
                schedule_id=cmd.schedule_id,
            )
            return Failure(error=e)

        self._logger.info(
            "Appointment completed",
            insured_id=cmd.insured_id,
            schedule_id=cmd.schedule_id,
        )
        return Success(value=None)

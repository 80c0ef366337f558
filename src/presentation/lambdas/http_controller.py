"""Request/response controller for the action envelope.

Envelope:
    {"action": "register", "data": {...scheduling fields...}}
    {"action": "find", "data": "12345"}

Responses:
    register → {"message": "...", "id": "<scheduleId>"}
    find     → [<appointment>, ...]
    failure  → {"error": <error class>, "message": <text>, "code": <code>}

Every failure, including unexpected exceptions, is returned as a failure
object; nothing is raised back to the gateway.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.application.commands.appointment_commands import RegisterAppointment
from src.application.commands.handlers.register_appointment_handler import (
    RegisterAppointmentHandler,
)
from src.application.queries.appointment_queries import FindAppointments
from src.application.queries.handlers.find_appointments_handler import (
    FindAppointmentsHandler,
)
from src.core.errors import DomainError
from src.core.result import Failure, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.lambdas.errors import InvalidRequestError, UnsupportedActionError
from src.schemas.appointment_schemas import (
    SUPPORTED_ACTIONS,
    FindEnvelope,
    RegisterEnvelope,
    action_envelope_adapter,
)

UNKNOWN_ERROR_CODE = "unknown"

type ActionResponse = dict[str, Any] | list[dict[str, Any]]


def failure_object(error: Exception) -> dict[str, str]:
    """Render any exception as the transport failure object."""
    code = error.code.value if isinstance(error, DomainError) else UNKNOWN_ERROR_CODE
    return {
        "error": type(error).__name__,
        "message": str(error),
        "code": code,
    }


class ActionController:
    """Dispatch action envelopes to the register and find use cases.

    Args:
        register_handler: RegisterAppointment handler.
        find_handler: FindAppointments handler.
        logger: Structured logger.
    """

    def __init__(
        self,
        register_handler: RegisterAppointmentHandler,
        find_handler: FindAppointmentsHandler,
        logger: LoggerProtocol,
    ) -> None:
        self._register_handler = register_handler
        self._find_handler = find_handler
        self._logger = logger

    async def handle(self, event: dict[str, Any]) -> ActionResponse:
        action = event.get("action")
        self._logger.info("Executing action", action=action)

        try:
            envelope = self._parse(event)
            if isinstance(envelope, RegisterEnvelope):
                return await self._register(envelope)
            return await self._find(envelope)
        except Exception as e:
            self._logger.error("Action failed", error=e, action=action)
            return failure_object(e)

    def _parse(self, event: dict[str, Any]) -> RegisterEnvelope | FindEnvelope:
        action = event.get("action")
        if action not in SUPPORTED_ACTIONS:
            raise UnsupportedActionError(f"Unsupported action: {action}")
        try:
            return action_envelope_adapter.validate_python(event)
        except PydanticValidationError as e:
            raise InvalidRequestError(
                f"Invalid {action} request",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

    async def _register(self, envelope: RegisterEnvelope) -> ActionResponse:
        payload = envelope.data
        result = await self._register_handler.handle(
            RegisterAppointment(
                insured_id=payload.insured_id,
                schedule_id=payload.schedule_id,
                country_iso=payload.country_iso,
                center_id=payload.center_id,
                specialty_id=payload.specialty_id,
                medic_id=payload.medic_id,
                date=payload.date,
            )
        )
        match result:
            case Success(value=confirmation):
                self._logger.info("Appointment registered", schedule_id=confirmation.id)
                return confirmation.to_dict()
            case Failure(error=error):
                return failure_object(error)

    async def _find(self, envelope: FindEnvelope) -> ActionResponse:
        result = await self._find_handler.handle(FindAppointments(insured_id=envelope.data))
        match result:
            case Success(value=appointments):
                self._logger.info("Appointments found", count=len(appointments))
                return [appointment.to_dict() for appointment in appointments]
            case Failure(error=error):
                return failure_object(error)

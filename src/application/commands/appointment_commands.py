"""Appointment commands (CQRS write operations).

Commands carry raw primitives from the transport layer; handlers turn them
into value objects. All commands are immutable (frozen=True) and use
keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass

from src.domain.entities.processed_message import ProcessedMessage


@dataclass(frozen=True, kw_only=True)
class RegisterAppointment:
    """Schedule a new appointment.

    State Transition: (none) → pending

    Attributes:
        insured_id: Raw insured id (must be 5 characters).
        schedule_id: Raw schedule id (positive integer).
        country_iso: Raw country code (any case).
        center_id: Raw center id (positive integer).
        specialty_id: Raw specialty id (positive integer).
        medic_id: Raw medic id (positive integer).
        date: Raw appointment date/time text.

    Example:
        >>> command = RegisterAppointment(
        ...     insured_id="12345",
        ...     schedule_id=98701,
        ...     country_iso="PE",
        ...     center_id=101,
        ...     specialty_id=105,
        ...     medic_id=201,
        ...     date="2025-12-25T10:00:00Z",
        ... )
        >>> result = await handler.handle(command)
    """

    insured_id: str
    schedule_id: int | float
    country_iso: str
    center_id: int | float
    specialty_id: int | float
    medic_id: int | float
    date: str


@dataclass(frozen=True, kw_only=True)
class ProcessAppointmentNotification:
    """Apply a country processor confirmation to a stored appointment.

    State Transition: any → completed

    Attributes:
        insured_id: Raw insured id from the confirmation event.
        schedule_id: Schedule id as numeric text (e.g. "98701").
    """

    insured_id: str
    schedule_id: str


@dataclass(frozen=True, kw_only=True)
class SaveProcessedMessage:
    """Store a scheduled appointment in a country processor and confirm it.

    Attributes:
        message: Message mapped from the country queue record.
    """

    message: ProcessedMessage

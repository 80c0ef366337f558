"""Appointment domain entity.

Aggregates the identifier value objects, the appointment date and the
country, plus the only mutable part of the aggregate: its status.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Owns its value objects exclusively
    - State machine with unguarded transitions

Usage:
    from src.domain.entities import Appointment

    appointment = Appointment(
        insured_id=InsuredId("12345"),
        schedule_id=ScheduleId(98701),
        country=CountryISO("PE"),
        center_id=CenterId(101),
        specialty_id=SpecialtyId(105),
        medic_id=MedicId(201),
        date=AppointmentDate("2025-12-25T10:00:00Z", IsoDateValidator()),
    )
    appointment.confirm()
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.value_objects.appointment_date import AppointmentDate
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.domain.value_objects.country_iso import CountryISO
from src.domain.value_objects.insured_id import InsuredId
from src.domain.value_objects.positive_integer_id import (
    CenterId,
    MedicId,
    ScheduleId,
    SpecialtyId,
)


@dataclass
class Appointment:
    """A medical appointment scheduled for an insured person.

    State Machine:
        pending → confirmed | cancelled | completed

        Every transition is accepted from every state, including moving
        a completed appointment back to pending through assign_status().

    Identity:
        (insured_id, schedule_id) identifies an appointment in storage.

    Attributes:
        insured_id: Person the appointment is for.
        schedule_id: Appointment slot.
        country: Country the appointment is processed in.
        center_id: Medical center.
        specialty_id: Medical specialty.
        medic_id: Attending medic.
        date: Appointment date/time.
        status: Current lifecycle status (pending unless rehydrated).
    """

    insured_id: InsuredId
    schedule_id: ScheduleId
    country: CountryISO
    center_id: CenterId
    specialty_id: SpecialtyId
    medic_id: MedicId
    date: AppointmentDate
    status: AppointmentStatus = field(default_factory=AppointmentStatus.pending)

    # -------------------------------------------------------------------------
    # State Transition Methods
    # -------------------------------------------------------------------------

    def confirm(self) -> None:
        """Transition to confirmed."""
        self.status = AppointmentStatus.confirmed()

    def cancel(self) -> None:
        """Transition to cancelled."""
        self.status = AppointmentStatus.cancelled()

    def complete(self) -> None:
        """Transition to completed."""
        self.status = AppointmentStatus.completed()

    def assign_status(self, raw_status: str) -> None:
        """Set the status from its raw text form.

        Used when only the target status string is known (storage rows,
        workflow events).

        Args:
            raw_status: One of pending, confirmed, cancelled, completed.

        Raises:
            InvalidAppointmentStatusError: If raw_status is not a lifecycle state.
        """
        self.status = AppointmentStatus(raw_status)

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_pending(self) -> bool:
        return self.status.is_pending()

    def is_confirmed(self) -> bool:
        return self.status.is_confirmed()

    def is_cancelled(self) -> bool:
        return self.status.is_cancelled()

    def is_completed(self) -> bool:
        return self.status.is_completed()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to primitive fields.

        This is the shape published on the notification topic (country
        processors read insuredId and scheduleId from it) and returned by
        the find action.

        Returns:
            dict: Primitive fields only, no value-object wrappers.
        """
        return {
            "insuredId": self.insured_id.value,
            "countryId": self.country.value,
            "scheduleId": self.schedule_id.value,
            "centerId": self.center_id.value,
            "specialtyId": self.specialty_id.value,
            "medicId": self.medic_id.value,
            "date": self.date.value,
            "estado": str(self.status),
        }

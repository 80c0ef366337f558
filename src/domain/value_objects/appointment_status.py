"""AppointmentStatus value object.

Wraps an AppointmentState and validates raw status strings coming from
storage or from the notification workflow.
"""

from dataclasses import dataclass
from typing import Self

from src.domain.enums.appointment_state import AppointmentState
from src.domain.errors.appointment_error import InvalidAppointmentStatusError


@dataclass(frozen=True)
class AppointmentStatus:
    """Validated appointment status.

    Construct from a raw string (``AppointmentStatus("pending")``) or
    with a named constructor (``AppointmentStatus.pending()``).

    Attributes:
        value: The lifecycle state (raw strings are converted on init).

    Raises:
        InvalidAppointmentStatusError: If blank or not a lifecycle state.
    """

    value: AppointmentState

    def __post_init__(self) -> None:
        """Convert and validate the raw status.

        Raises:
            InvalidAppointmentStatusError: If the status is unknown.
        """
        if isinstance(self.value, AppointmentState):
            return

        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidAppointmentStatusError("Appointment status cannot be empty")

        try:
            state = AppointmentState(self.value)
        except ValueError as e:
            raise InvalidAppointmentStatusError(
                f"Status '{self.value}' is not valid. "
                f"Allowed statuses: {', '.join(AppointmentState.values())}"
            ) from e

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", state)

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def pending(cls) -> Self:
        return cls(AppointmentState.PENDING)

    @classmethod
    def confirmed(cls) -> Self:
        return cls(AppointmentState.CONFIRMED)

    @classmethod
    def cancelled(cls) -> Self:
        return cls(AppointmentState.CANCELLED)

    @classmethod
    def completed(cls) -> Self:
        return cls(AppointmentState.COMPLETED)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_pending(self) -> bool:
        return self.value == AppointmentState.PENDING

    def is_confirmed(self) -> bool:
        return self.value == AppointmentState.CONFIRMED

    def is_cancelled(self) -> bool:
        return self.value == AppointmentState.CANCELLED

    def is_completed(self) -> bool:
        return self.value == AppointmentState.COMPLETED

    def __str__(self) -> str:
        return self.value.value

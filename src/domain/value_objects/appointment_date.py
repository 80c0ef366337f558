"""AppointmentDate value object.

The accepted format is decided by an injected DateValidatorProtocol, not by
the value object itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.domain.errors.appointment_error import InvalidDateError

if TYPE_CHECKING:
    from src.domain.protocols.date_validator_protocol import DateValidatorProtocol


@dataclass(frozen=True)
class AppointmentDate:
    """Appointment date/time text, validated on construction.

    The raw string is stored unchanged; the validator only takes part in
    construction and is excluded from equality and repr.

    Attributes:
        value: The date text as supplied.
        validator: Format policy used to accept the text.

    Raises:
        InvalidDateError: If not a string, blank, or rejected by the validator.

    Example:
        >>> AppointmentDate("2025-12-25T10:00:00Z", IsoDateValidator()).value
        '2025-12-25T10:00:00Z'
    """

    value: str
    validator: DateValidatorProtocol = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the date text.

        Raises:
            InvalidDateError: If the date text is malformed.
        """
        if not isinstance(self.value, str):
            raise InvalidDateError("Appointment date must be a string")

        if not self.value.strip():
            raise InvalidDateError("Appointment date cannot be empty")

        if not self.validator.is_valid(self.value):
            raise InvalidDateError(
                f"Appointment date '{self.value}' is not a valid ISO 8601 date/time"
            )

    def __str__(self) -> str:
        return self.value

"""Positive integer identifier value objects.

Schedule, center, specialty and medic identifiers share one rule: a
positive whole number. Each gets its own type (so a CenterId never
compares equal to a MedicId) and its own error kind.
"""

from dataclasses import dataclass
from typing import ClassVar, Self

from src.core.errors import ValidationError
from src.domain.errors.appointment_error import (
    InvalidCenterIdError,
    InvalidMedicIdError,
    InvalidScheduleIdError,
    InvalidSpecialtyIdError,
)


@dataclass(frozen=True)
class PositiveIntegerId:
    """Base for identifiers that must be integers greater than zero.

    Integral floats (``5.0``) are accepted and stored as ``int``; booleans
    are rejected even though Python treats them as integers.

    Attributes:
        value: The identifier.
    """

    value: int

    label: ClassVar[str] = "Id"
    error_type: ClassVar[type[ValidationError]] = ValidationError

    def __post_init__(self) -> None:
        """Validate identifier after initialization.

        Raises:
            ValidationError: Subclass-specific error if the value is invalid.
        """
        value = self.value
        if value is None:
            raise self.error_type(f"{self.label} cannot be null")

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self.error_type(f"{self.label} must be a number")

        if value <= 0:
            raise self.error_type(f"{self.label} must be a positive number greater than zero")

        if isinstance(value, float):
            if not value.is_integer():
                raise self.error_type(f"{self.label} must be an integer")
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "value", int(value))

    @classmethod
    def from_string(cls, raw: str) -> Self:
        """Build an identifier from its decimal text form.

        Args:
            raw: Numeric text such as ``"98701"``.

        Returns:
            The identifier.

        Raises:
            ValidationError: Subclass-specific error if not numeric or invalid.
        """
        text = str(raw).strip()
        # int() would also take "1_000", signs and non-ASCII digits
        if not (text.isascii() and text.isdigit()):
            raise cls.error_type(f"{cls.label} must be numeric: {raw!r}")
        return cls(int(text))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ScheduleId(PositiveIntegerId):
    """Appointment slot identifier."""

    label: ClassVar[str] = "ScheduleId"
    error_type: ClassVar[type[ValidationError]] = InvalidScheduleIdError


@dataclass(frozen=True)
class CenterId(PositiveIntegerId):
    """Medical center identifier."""

    label: ClassVar[str] = "CenterId"
    error_type: ClassVar[type[ValidationError]] = InvalidCenterIdError


@dataclass(frozen=True)
class SpecialtyId(PositiveIntegerId):
    """Medical specialty identifier."""

    label: ClassVar[str] = "SpecialtyId"
    error_type: ClassVar[type[ValidationError]] = InvalidSpecialtyIdError


@dataclass(frozen=True)
class MedicId(PositiveIntegerId):
    """Attending medic identifier."""

    label: ClassVar[str] = "MedicId"
    error_type: ClassVar[type[ValidationError]] = InvalidMedicIdError

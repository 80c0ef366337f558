"""InsuredId value object.

Identifier of the person an appointment is scheduled for.
"""

from dataclasses import dataclass

from src.domain.errors.appointment_error import InvalidInsuredIdError

INSURED_ID_LENGTH = 5


@dataclass(frozen=True)
class InsuredId:
    """Insured person identifier (exactly 5 characters).

    Attributes:
        value: The raw identifier, stored unchanged.

    Raises:
        InvalidInsuredIdError: If empty, blank, not a string or not 5 characters.

    Example:
        >>> str(InsuredId("12345"))
        '12345'
        >>> InsuredId("123")
        Traceback (most recent call last):
        ...
        InvalidInsuredIdError: InsuredId must be exactly 5 characters
    """

    value: str

    def __post_init__(self) -> None:
        """Validate identifier after initialization.

        Raises:
            InvalidInsuredIdError: If the identifier is malformed.
        """
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidInsuredIdError("InsuredId cannot be empty")

        if len(self.value) != INSURED_ID_LENGTH:
            raise InvalidInsuredIdError(
                f"InsuredId must be exactly {INSURED_ID_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value

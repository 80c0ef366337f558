"""CountryISO value object with normalization.

Immutable value object restricting appointments to the supported countries.
"""

from dataclasses import dataclass

from src.domain.enums.country_code import CountryCode
from src.domain.errors.appointment_error import InvalidCountryError


@dataclass(frozen=True)
class CountryISO:
    """Supported country code.

    Input is normalized to uppercase before validation, so ``"pe"``,
    ``"Pe"`` and ``"PE"`` all produce the same value.

    Attributes:
        value: Uppercase country code (validated).

    Raises:
        InvalidCountryError: If not a string, blank, or unsupported.

    Example:
        >>> CountryISO("pe").value
        'PE'
        >>> CountryISO("AR")
        Traceback (most recent call last):
        ...
        InvalidCountryError: Country code 'AR' is not supported. Valid countries: PE, CL
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize and validate the country code.

        Raises:
            InvalidCountryError: If the code is not supported.
        """
        if not isinstance(self.value, str):
            raise InvalidCountryError("Country code must be a string")

        if not self.value.strip():
            raise InvalidCountryError("Country code cannot be empty")

        normalized = self.value.upper()
        if normalized not in CountryCode.values():
            raise InvalidCountryError(
                f"Country code '{self.value}' is not supported. "
                f"Valid countries: {', '.join(CountryCode.values())}"
            )

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", normalized)

    @property
    def code(self) -> CountryCode:
        """Return the value as a CountryCode enum member."""
        return CountryCode(self.value)

    @staticmethod
    def valid_countries() -> list[str]:
        """Return the supported country codes.

        Returns:
            Copy of the supported codes.
        """
        return CountryCode.values()

    def __str__(self) -> str:
        return self.value

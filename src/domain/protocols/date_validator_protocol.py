"""DateValidatorProtocol for appointment date format policy.

Injected into AppointmentDate so the accepted date format can change
without touching the value object.
"""

from typing import Protocol


class DateValidatorProtocol(Protocol):
    """Decides whether a raw string is an acceptable appointment date.

    Implementations MUST NOT raise; malformed input returns False.
    """

    def is_valid(self, date_string: str) -> bool:
        """Check a raw date string.

        Args:
            date_string: Candidate date or date-time text.

        Returns:
            True if the text parses as a real calendar date/time.
        """
        ...

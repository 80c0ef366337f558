"""ISO 8601 date validator.

Implements DateValidatorProtocol with datetime.fromisoformat. Accepts
calendar dates ("2025-12-25") and date-times with or without offset,
including the "Z" suffix that JavaScript clients send.
"""

from datetime import date, datetime


class IsoDateValidator:
    """Accept ISO 8601 dates and date-times that name a real calendar day.

    Implementation intentionally does NOT inherit from DateValidatorProtocol
    (PEP 544 structural subtyping).
    """

    def is_valid(self, date_string: str) -> bool:
        """Check whether the text parses as an ISO 8601 date or date-time.

        Args:
            date_string: Candidate text.

        Returns:
            True if parseable, False otherwise (never raises).
        """
        if not isinstance(date_string, str) or not date_string.strip():
            return False

        text = date_string.strip()
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"

        try:
            datetime.fromisoformat(text)
            return True
        except ValueError:
            pass

        try:
            date.fromisoformat(text)
            return True
        except ValueError:
            return False

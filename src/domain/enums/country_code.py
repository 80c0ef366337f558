"""Supported country codes.

The scheduling service only operates in the countries listed here; each one
has its own processing queue subscribed to the notification topic.
"""

from enum import Enum


class CountryCode(str, Enum):
    """ISO 3166-1 alpha-2 codes of the supported countries."""

    PE = "PE"  # Peru
    CL = "CL"  # Chile

    @classmethod
    def values(cls) -> list[str]:
        """Return the supported codes in declaration order.

        Returns:
            List of uppercase country codes.
        """
        return [code.value for code in cls]

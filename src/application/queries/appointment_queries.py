"""Appointment queries (CQRS read operations).

Queries represent requests for data. They are immutable and never change
state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class FindAppointments:
    """List every appointment of an insured person.

    Attributes:
        insured_id: Raw insured id (must be 5 characters).

    Example:
        >>> query = FindAppointments(insured_id="12345")
        >>> result = await handler.handle(query)
    """

    insured_id: str

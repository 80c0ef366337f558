"""Queries - Read operations that fetch data.

Queries represent requests for information. They are immutable dataclasses
with descriptive names (FindAppointments) and never change state.
"""

from src.application.queries.appointment_queries import FindAppointments

__all__ = [
    "FindAppointments",
]

"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.appointment import Appointment
from src.domain.entities.processed_message import ProcessedMessage

__all__ = [
    "Appointment",
    "ProcessedMessage",
]

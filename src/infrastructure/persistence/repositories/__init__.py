"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.processed_message_repository import (
    SQLAlchemyProcessedMessageRepository,
)

__all__ = [
    "SQLAlchemyProcessedMessageRepository",
]

"""ProcessedMessageRepository protocol for country processor persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol

from src.domain.entities.processed_message import ProcessedMessage


class ProcessedMessageRepository(Protocol):
    """Stores appointment details received by a country processor.

    Error contract:
        Database failures are wrapped in RepositoryError.
    """

    async def save(self, message: ProcessedMessage) -> str:
        """Persist the appointment details carried by a message.

        Args:
            message: Message received from the country queue.

        Returns:
            Generated record id, as text.

        Raises:
            RepositoryError: If the insert fails.
        """
        ...

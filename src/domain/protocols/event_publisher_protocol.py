"""EventPublisherProtocol for processor confirmations.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol

from src.domain.entities.processed_message import ProcessedMessage


class EventPublisherProtocol(Protocol):
    """Publishes "appointment stored" confirmations back to the scheduler.

    Error contract:
        Publishing failures are wrapped in NotificationError.
    """

    async def publish_success(self, message: ProcessedMessage, record_id: str) -> None:
        """Publish a confirmation for a stored message.

        Args:
            message: Message that was stored.
            record_id: Id generated by the processor's repository.

        Raises:
            NotificationError: If the event cannot be published.
        """
        ...

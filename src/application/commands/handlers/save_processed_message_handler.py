"""SaveProcessedMessage command handler.

Country processor use case: store the appointment details carried by a
queue message, then publish the confirmation that drives the appointment
to completed.

Flow:
1. Save the message through ProcessedMessageRepository (returns record id)
2. Publish the confirmation through EventPublisherProtocol
3. Return Success(record_id)
"""

from src.application.commands.appointment_commands import SaveProcessedMessage
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.event_publisher_protocol import EventPublisherProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.processed_message_repository import (
    ProcessedMessageRepository,
)


class SaveProcessedMessageHandler:
    """Handler for SaveProcessedMessage command.

    Dependencies (injected via constructor):
        - ProcessedMessageRepository: Relational store of the processor
        - EventPublisherProtocol: Confirmation publisher
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        message_repo: ProcessedMessageRepository,
        event_publisher: EventPublisherProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            message_repo: Processor repository.
            event_publisher: Confirmation publisher.
            logger: Structured logger.
        """
        self._message_repo = message_repo
        self._event_publisher = event_publisher
        self._logger = logger

    async def handle(self, cmd: SaveProcessedMessage) -> Result[str, DomainError]:
        """Handle SaveProcessedMessage command.

        Args:
            cmd: Command wrapping the mapped queue message.

        Returns:
            Success(record_id): Message stored and confirmation published.
            Failure(DomainError): Repository or publishing error.
        """
        message = cmd.message
        self._logger.info(
            "Saving processed message",
            message_id=message.id,
            queue_source=message.queue_source,
            schedule_id=message.schedule_id,
        )

        try:
            record_id = await self._message_repo.save(message)
            await self._event_publisher.publish_success(message, record_id)
        except DomainError as e:
            self._logger.error(
                "Processed message could not be saved",
                error=e,
                message_id=message.id,
            )
            return Failure(error=e)

        return Success(value=record_id)

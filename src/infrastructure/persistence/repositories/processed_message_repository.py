"""Processed message repository implementation.

SQLAlchemy implementation of the ProcessedMessageRepository protocol.
Maps a ProcessedMessage to an AppointmentDetails row.
"""

from sqlalchemy.exc import SQLAlchemyError

from src.domain.entities.processed_message import ProcessedMessage
from src.domain.errors import RepositoryError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models.appointment_details import (
    AppointmentDetails,
)

SAVED_STATUS = "DB_SAVED"


class SQLAlchemyProcessedMessageRepository:
    """SQLAlchemy implementation of ProcessedMessageRepository protocol.

    Every save runs in its own session so one failing message does not
    leave a half-open transaction behind for the next one.
    """

    def __init__(self, database: Database, logger: LoggerProtocol) -> None:
        """Initialize repository with database and logger.

        Args:
            database: Database providing async sessions.
            logger: Structured logger.
        """
        self._database = database
        self._logger = logger

    async def save(self, message: ProcessedMessage) -> str:
        """Insert the appointment details carried by the message.

        Args:
            message: Message received from the country queue.

        Returns:
            The generated row id, as text.

        Raises:
            RepositoryError: If the message lacks ids or the insert fails.
        """
        if message.schedule_id is None or message.insured_id is None:
            self._logger.error(
                "Message body is missing appointment ids",
                message_id=message.id,
            )
            raise RepositoryError(
                "Database persistence failed",
                ValueError("message body requires scheduleId and insuredId"),
            )

        try:
            async with self._database.get_session() as session:
                details = AppointmentDetails(
                    schedule_id=message.schedule_id,
                    insured_id=message.insured_id,
                    status=SAVED_STATUS,
                )
                session.add(details)
                await session.flush()
                record_id = str(details.id)
        except SQLAlchemyError as e:
            self._logger.error(
                "Failed to save message metadata to the database",
                error=e,
                message_id=message.id,
            )
            raise RepositoryError("Database persistence failed", e) from e

        self._logger.info(
            "Appointment details saved",
            message_id=message.id,
            schedule_id=message.schedule_id,
            record_id=record_id,
        )
        return record_id

"""Country processor entry point.

Consumes one country queue: every record is mapped to a ProcessedMessage,
stored, and confirmed on the event bus. The first failing record is raised
so SQS redelivers the batch.
"""

import asyncio
from functools import lru_cache
from typing import Any

from src.application.commands.appointment_commands import SaveProcessedMessage
from src.core.config import Settings
from src.core.container import ProcessorContainer, build_processor_container
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_container() -> ProcessorContainer:
    return build_processor_container(Settings())


async def process_records(
    event: dict[str, Any], container: ProcessorContainer, logger: LoggerProtocol
) -> None:
    """Process the batch sequentially.

    Raises:
        ValueError: If a record body is not a JSON object.
        DomainError: The failure returned by the save use case.
    """
    queue_name = container.record_mapper.queue_name
    try:
        for record in event.get("Records", []):
            message_id = record.get("messageId")
            logger.info(
                "Processing SQS record", message_id=message_id, queue_name=queue_name
            )

            try:
                message = container.record_mapper.to_processed_message(record)
            except ValueError as e:
                logger.error(
                    "Error processing message",
                    error=e,
                    message_id=message_id,
                    queue_name=queue_name,
                )
                raise

            result = await container.save_processed_message.handle(
                SaveProcessedMessage(message=message)
            )
            if isinstance(result, Failure):
                logger.error(
                    "Error processing message",
                    error=result.error,
                    message_id=message_id,
                    queue_name=queue_name,
                )
                raise result.error

            logger.info("Message processed successfully", message_id=message_id)
    finally:
        # Pooled connections are bound to this invocation's event loop
        await container.database.close()


def handler(event: dict[str, Any], context: Any) -> None:
    """Lambda handler."""
    container = get_container()
    logger = container.logger.bind(
        aws_request_id=getattr(context, "aws_request_id", None)
    )
    asyncio.run(process_records(event, container, logger))

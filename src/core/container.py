"""Composition root.

Builds the handlers of each Lambda function from an explicitly constructed
Settings value. Nothing here reads the environment: entry points call
Settings() once and pass it in.

Architecture:
    - One build function per deployed function
    - Adapters receive individual settings values through their constructors
    - boto3 clients share the configured region and optional endpoint override

Usage:
    from src.core.config import Settings
    from src.core.container import build_appointment_container

    container = build_appointment_container(Settings())
    result = await container.find_appointments.handle(FindAppointments(insured_id="12345"))
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import boto3
from sqlalchemy.engine import URL

from src.application.commands.handlers.process_appointment_notification_handler import (
    ProcessAppointmentNotificationHandler,
)
from src.application.commands.handlers.register_appointment_handler import (
    RegisterAppointmentHandler,
)
from src.application.commands.handlers.save_processed_message_handler import (
    SaveProcessedMessageHandler,
)
from src.application.queries.handlers.find_appointments_handler import (
    FindAppointmentsHandler,
)
from src.core.config import Settings
from src.core.result import Failure, Success
from src.infrastructure.logging.console_adapter import ConsoleAdapter
from src.infrastructure.messaging.eventbridge_publisher import EventBridgePublisher
from src.infrastructure.messaging.sns_appointment_notifier import (
    SNSAppointmentNotifier,
)
from src.infrastructure.messaging.sqs_record_mapper import SQSRecordMapper
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.dynamodb_appointment_repository import (
    DynamoDBAppointmentRepository,
)
from src.infrastructure.persistence.repositories.processed_message_repository import (
    SQLAlchemyProcessedMessageRepository,
)
from src.infrastructure.secrets.aws_adapter import AWSAdapter
from src.infrastructure.validation.iso_date_validator import IsoDateValidator

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.secrets_protocol import SecretsProtocol


@dataclass(frozen=True, kw_only=True)
class AppointmentContainer:
    """Handlers of the appointment function (action envelope and confirmation queue)."""

    logger: "LoggerProtocol"
    register_appointment: RegisterAppointmentHandler
    find_appointments: FindAppointmentsHandler
    process_notification: ProcessAppointmentNotificationHandler


@dataclass(frozen=True, kw_only=True)
class ProcessorContainer:
    """Handlers of a country processor function."""

    logger: "LoggerProtocol"
    record_mapper: SQSRecordMapper
    save_processed_message: SaveProcessedMessageHandler
    database: Database


def build_logger(settings: Settings) -> ConsoleAdapter:
    """Console logger: coloured in development, JSON everywhere else."""
    return ConsoleAdapter(use_json=not settings.is_development, level=settings.log_level)


def _aws_kwargs(settings: Settings) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"region_name": settings.aws_region}
    if settings.aws_endpoint_url:
        kwargs["endpoint_url"] = settings.aws_endpoint_url
    return kwargs


def build_appointment_container(settings: Settings) -> AppointmentContainer:
    """Wire the appointment function.

    Args:
        settings: Explicit configuration.

    Returns:
        AppointmentContainer with all three use case handlers.

    Raises:
        ValueError: If the table name or topic ARN is not configured.
    """
    if not settings.appointment_table_name:
        raise ValueError("APPOINTMENT_TABLE_NAME must be configured")
    if not settings.sns_topic_arn:
        raise ValueError("SNS_TOPIC_ARN must be configured")

    logger = build_logger(settings)
    date_validator = IsoDateValidator()

    dynamodb = boto3.resource("dynamodb", **_aws_kwargs(settings))
    repository = DynamoDBAppointmentRepository(
        table=dynamodb.Table(settings.appointment_table_name),
        date_validator=date_validator,
        logger=logger,
    )
    notifier = SNSAppointmentNotifier(
        client=boto3.client("sns", **_aws_kwargs(settings)),
        topic_arn=settings.sns_topic_arn,
        logger=logger,
    )

    return AppointmentContainer(
        logger=logger,
        register_appointment=RegisterAppointmentHandler(
            appointment_repo=repository,
            notifier=notifier,
            date_validator=date_validator,
            logger=logger,
        ),
        find_appointments=FindAppointmentsHandler(
            appointment_repo=repository,
            logger=logger,
        ),
        process_notification=ProcessAppointmentNotificationHandler(
            appointment_repo=repository,
            logger=logger,
        ),
    )


def resolve_database_url(
    settings: Settings, secrets: "SecretsProtocol | None" = None
) -> str:
    """Resolve the processor's SQLAlchemy URL.

    ``database_url`` wins when set. Otherwise host, port and schema come
    from settings and the credentials from the JSON secret
    ``db_secret_arn`` ({"username": ..., "password": ...}).

    Args:
        settings: Explicit configuration.
        secrets: Secrets adapter (built from settings when omitted).

    Returns:
        Database URL string.

    Raises:
        ValueError: If a required value is missing.
        SecretsError: If the secret cannot be read or parsed.
    """
    if settings.database_url:
        return settings.database_url

    missing = [
        name
        for name, value in (
            ("DB_HOST", settings.db_host),
            ("DB_NAME", settings.db_name),
            ("DB_SECRET_ARN", settings.db_secret_arn),
        )
        if not value
    ]
    if missing:
        raise ValueError(
            f"DATABASE_URL or {', '.join(missing)} must be configured"
        )

    if secrets is None:
        secrets = AWSAdapter(
            client=boto3.client("secretsmanager", **_aws_kwargs(settings))
        )

    match secrets.get_secret_json(settings.db_secret_arn):
        case Success(value=credentials):
            pass
        case Failure(error=error):
            raise error

    username = credentials.get("username")
    password = credentials.get("password")
    if not username or password is None:
        raise ValueError("Database secret must contain username and password")

    url = URL.create(
        "mysql+aiomysql",
        username=username,
        password=password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )
    return url.render_as_string(hide_password=False)


def build_processor_container(
    settings: Settings, secrets: "SecretsProtocol | None" = None
) -> ProcessorContainer:
    """Wire a country processor function.

    Args:
        settings: Explicit configuration.
        secrets: Optional secrets adapter override.

    Returns:
        ProcessorContainer with the record mapper and save handler.

    Raises:
        ValueError: If database settings are incomplete.
        SecretsError: If database credentials cannot be read.
    """
    logger = build_logger(settings)
    database = Database(resolve_database_url(settings, secrets), echo=settings.db_echo)

    return ProcessorContainer(
        logger=logger,
        record_mapper=SQSRecordMapper(queue_name=settings.sqs_queue_name, logger=logger),
        save_processed_message=SaveProcessedMessageHandler(
            message_repo=SQLAlchemyProcessedMessageRepository(
                database=database, logger=logger
            ),
            event_publisher=EventBridgePublisher(
                client=boto3.client("events", **_aws_kwargs(settings)),
                event_bus_name=settings.event_bus_name,
                logger=logger,
            ),
            logger=logger,
        ),
        database=database,
    )

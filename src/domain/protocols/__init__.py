"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Value objects and entities import protocol modules directly to avoid
circular imports through this package.

Usage:
    from src.domain.protocols import AppointmentRepository, LoggerProtocol
"""

# Service protocols
from src.domain.protocols.appointment_notifier_protocol import (
    AppointmentNotifierProtocol,
)
from src.domain.protocols.date_validator_protocol import DateValidatorProtocol
from src.domain.protocols.event_publisher_protocol import EventPublisherProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_protocol import SecretsProtocol

# Repository protocols
from src.domain.protocols.appointment_repository import AppointmentRepository
from src.domain.protocols.processed_message_repository import (
    ProcessedMessageRepository,
)

__all__ = [
    # Service protocols
    "AppointmentNotifierProtocol",
    "DateValidatorProtocol",
    "EventPublisherProtocol",
    "LoggerProtocol",
    "SecretsProtocol",
    # Repository protocols
    "AppointmentRepository",
    "ProcessedMessageRepository",
]

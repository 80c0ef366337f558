"""ProcessedMessage domain entity.

A scheduled-appointment message as received by a country processor.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class ProcessedMessage:
    """Queue message handed to the country processor use case.

    Attributes:
        id: Queue message id.
        data: Parsed message body (the Appointment.to_dict() payload).
        queue_source: Name of the country queue the message came from.
        timestamp: ISO-8601 time the message was sent to the queue.
    """

    id: str
    data: dict[str, Any]
    queue_source: str
    timestamp: str

    @property
    def insured_id(self) -> str | None:
        value = self.data.get("insuredId")
        return None if value is None else str(value)

    @property
    def schedule_id(self) -> str | None:
        value = self.data.get("scheduleId")
        return None if value is None else str(value)

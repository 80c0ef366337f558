"""Result types for railway-oriented programming.

Handlers return a Result instead of letting domain errors escape, so each
transport decides what a failure means for it: the request/response
controller turns it into a failure object, the queue controllers re-raise
it to get the batch redelivered.

Usage:
    async def handle(self, cmd: RegisterAppointment) -> Result[ScheduleAppointmentResult, DomainError]:
        try:
            insured_id = InsuredId(cmd.insured_id)
        except DomainError as e:
            return Failure(error=e)
        ...
        return Success(value=result)

    match await handler.handle(cmd):
        case Success(value=value):
            return value.to_dict()
        case Failure(error=error):
            raise error
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]

"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterAppointment, SaveProcessedMessage).

Each command has a corresponding handler that contains the orchestration
to execute the command.
"""

from src.application.commands.appointment_commands import (
    ProcessAppointmentNotification,
    RegisterAppointment,
    SaveProcessedMessage,
)

__all__ = [
    "ProcessAppointmentNotification",
    "RegisterAppointment",
    "SaveProcessedMessage",
]

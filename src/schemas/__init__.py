"""Inbound event schemas.

Pydantic models validating raw Lambda events at the transport boundary.
Schemas are kept separate from domain entities (transport concerns only).

Usage:
    from src.schemas import action_envelope_adapter, ConfirmationMessageBody
"""

from src.schemas.appointment_schemas import (
    SUPPORTED_ACTIONS,
    ActionEnvelope,
    ConfirmationDetail,
    ConfirmationMessageBody,
    FindEnvelope,
    RegisterAppointmentPayload,
    RegisterEnvelope,
    action_envelope_adapter,
)

__all__ = [
    "SUPPORTED_ACTIONS",
    "ActionEnvelope",
    "ConfirmationDetail",
    "ConfirmationMessageBody",
    "FindEnvelope",
    "RegisterAppointmentPayload",
    "RegisterEnvelope",
    "action_envelope_adapter",
]

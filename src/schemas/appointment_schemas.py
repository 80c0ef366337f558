"""Inbound payload schemas for the appointment Lambda.

Pydantic models validating raw Lambda events before they reach the
application layer. Kept separate from domain entities: these check the
shape and primitive types of the payload, while value objects still
enforce the business rules (length, positivity, supported country).

Envelopes:
    {"action": "register", "data": {<scheduling fields>}}
    {"action": "find", "data": "<insuredId>"}

Confirmation queue body (EventBridge event delivered through SQS):
    {"source": "...", "detail-type": "...", "detail": {"insuredId": ..., "scheduleId": ...}}
"""

import json
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    field_validator,
)

SUPPORTED_ACTIONS = ("register", "find")


# =============================================================================
# Request/response envelope
# =============================================================================


class RegisterAppointmentPayload(BaseModel):
    """Scheduling fields of a register request (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    insured_id: str = Field(..., alias="insuredId", description="5-character id")
    # Strict so JSON true/false is rejected instead of becoming 1/0
    schedule_id: StrictInt | StrictFloat = Field(..., alias="scheduleId")
    country_iso: str = Field(..., alias="countryISO", description="PE or CL")
    center_id: StrictInt | StrictFloat = Field(..., alias="centerId")
    specialty_id: StrictInt | StrictFloat = Field(..., alias="specialtyId")
    medic_id: StrictInt | StrictFloat = Field(..., alias="medicId")
    date: str = Field(..., description="ISO-8601 date or date-time")


class RegisterEnvelope(BaseModel):
    action: Literal["register"]
    data: RegisterAppointmentPayload


class FindEnvelope(BaseModel):
    action: Literal["find"]
    data: str = Field(..., description="Insured id to look up")


ActionEnvelope = Annotated[
    RegisterEnvelope | FindEnvelope,
    Field(discriminator="action"),
]

action_envelope_adapter: TypeAdapter[RegisterEnvelope | FindEnvelope] = TypeAdapter(
    ActionEnvelope
)


# =============================================================================
# Confirmation queue body
# =============================================================================


def _id_to_text(value: Any) -> Any:
    # Publishers may send numeric ids; bool is excluded because it is an int
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(int(value)) if float(value).is_integer() else str(value)
    return value


class ConfirmationDetail(BaseModel):
    """Identifiers carried in the event detail."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    insured_id: str = Field(..., alias="insuredId", min_length=1)
    schedule_id: str = Field(..., alias="scheduleId", min_length=1)

    @field_validator("insured_id", "schedule_id", mode="before")
    @classmethod
    def coerce_numeric_ids(cls, value: Any) -> Any:
        return _id_to_text(value)


class ConfirmationMessageBody(BaseModel):
    """EventBridge event as delivered in an SQS record body.

    ``detail`` arrives as an object when EventBridge targets the queue
    directly, and as a JSON string when it was re-serialized upstream.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    source: str | None = None
    detail_type: str | None = Field(None, alias="detail-type")
    detail: ConfirmationDetail

    @field_validator("detail", mode="before")
    @classmethod
    def parse_detail_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return json.loads(value)
        return value

"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Carried by every DomainError and surfaced verbatim to transport callers.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
- Infrastructure errors (REPOSITORY_*, NOTIFICATION_*)
- Secrets management errors (SECRET_*)
- Transport errors (UNSUPPORTED_ACTION, INVALID_REQUEST)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_INSURED_ID = "invalid_insured_id"
    INVALID_SCHEDULE_ID = "invalid_schedule_id"
    INVALID_CENTER_ID = "invalid_center_id"
    INVALID_SPECIALTY_ID = "invalid_specialty_id"
    INVALID_MEDIC_ID = "invalid_medic_id"
    INVALID_COUNTRY = "invalid_country"
    INVALID_DATE = "invalid_date"
    INVALID_APPOINTMENT_STATUS = "invalid_appointment_status"

    # Resource errors
    APPOINTMENT_NOT_FOUND = "appointment_not_found"

    # Infrastructure errors
    REPOSITORY_ERROR = "repository_error"
    NOTIFICATION_ERROR = "notification_error"

    # Secrets management errors
    SECRET_NOT_FOUND = "secret_not_found"
    SECRET_ACCESS_DENIED = "secret_access_denied"
    SECRET_INVALID_JSON = "secret_invalid_json"

    # Transport errors
    UNSUPPORTED_ACTION = "unsupported_action"
    INVALID_REQUEST = "invalid_request"

"""Transport-level errors for the request/response envelope.

Raised before any use case runs, so they never reach the application
layer. Both are DomainError subclasses so the failure object carries a
stable code like every other error.
"""

from src.core.enums import ErrorCode
from src.core.errors import ValidationError


class UnsupportedActionError(ValidationError):
    """Envelope action is not one of the supported actions."""

    code = ErrorCode.UNSUPPORTED_ACTION


class InvalidRequestError(ValidationError):
    """Event does not match the expected schema."""

    code = ErrorCode.INVALID_REQUEST

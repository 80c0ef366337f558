"""Common error classes used across all domains and layers.

These are generic error categories that concrete domain errors specialize.

Error Types:
- ValidationError: Input validation failures (also a ValueError)
- NotFoundError: Resource not found
- InfrastructureError: Failure of an external collaborator (store, topic, bus)

Usage:
    from src.core.errors import ValidationError

    class InvalidDateError(ValidationError):
        code = ErrorCode.INVALID_DATE
"""

from src.core.errors.domain_error import DomainError


class ValidationError(DomainError, ValueError):
    """Input validation failure.

    Raised by value objects when a raw primitive does not satisfy
    the object's invariants.
    """


class NotFoundError(DomainError):
    """Resource not found."""


class InfrastructureError(DomainError):
    """Failure in an external collaborator.

    Wraps the original exception message so diagnostics survive the
    translation into a domain error.
    """

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        *,
        details: dict[str, str] | None = None,
    ) -> None:
        """Initialize infrastructure error.

        Args:
            message: Context describing the failed operation.
            original_error: Collaborator exception being wrapped.
            details: Optional context for debugging.
        """
        if original_error is not None:
            message = f"{message}: {original_error}"
        super().__init__(message, details=details)
        self.original_error = original_error

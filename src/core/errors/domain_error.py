"""Base domain error class.

DomainError is the base class for ALL application errors (validation,
not-found, infrastructure). Value objects raise it at construction time;
handlers catch it and return it inside a Failure so transports can map
it to a response or re-raise it for queue redelivery.

Architecture:
- Base class for all error types (core, domain, infrastructure)
- Inherits from Exception (value objects raise it)
- Carries a stable machine-readable ErrorCode
- Type-safe with Result[T, DomainError]

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    class MyError(DomainError):
        code = ErrorCode.INVALID_DATE
"""

from src.core.enums import ErrorCode


class DomainError(Exception):
    """Base domain error.

    Subclasses set a class-level ``code``; it can be overridden per
    instance when one error type covers several codes (e.g. SecretsError).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | None = None,
        details: dict[str, str] | None = None,
    ) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            code: Overrides the class-level code when given.
            details: Optional context for debugging.
        """
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message

    def __repr__(self) -> str:
        """Return repr for debugging."""
        return f"{type(self).__name__}(code={self.code.value!r}, message={self.message!r})"

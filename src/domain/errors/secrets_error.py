"""Secrets management error types.

Used when secrets retrieval or parsing fails (database credentials for
the country processor).

Usage:
    from src.domain.errors import SecretsError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=SecretsError(
        "Secret not found: arn:aws:secretsmanager:...",
        code=ErrorCode.SECRET_NOT_FOUND,
    ))
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError


class SecretsError(DomainError):
    """Secrets management failure.

    Code is chosen per instance: SECRET_NOT_FOUND, SECRET_ACCESS_DENIED
    or SECRET_INVALID_JSON.
    """

    code = ErrorCode.SECRET_ACCESS_DENIED

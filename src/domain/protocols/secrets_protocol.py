"""Port for reading secrets.

Only the country processor needs it: when no explicit database URL is
configured, the processor reads ``{"username", "password"}`` from a
Secrets Manager secret. Implemented by
``src.infrastructure.secrets.AWSAdapter``.

Both operations return a Result; a missing or unreadable secret is a
Failure(SecretsError), never an exception.
"""

from typing import Any, Protocol

from src.core.result import Result
from src.domain.errors.secrets_error import SecretsError


class SecretsProtocol(Protocol):
    """Read-only access to named secrets."""

    def get_secret(self, secret_id: str) -> Result[str, SecretsError]:
        """Return the raw secret string for a name or ARN."""
        ...

    def get_secret_json(self, secret_id: str) -> Result[dict[str, Any], SecretsError]:
        """Return the secret parsed as a JSON object.

        Failure codes: SECRET_NOT_FOUND, SECRET_ACCESS_DENIED,
        SECRET_INVALID_JSON (not JSON, or JSON that is not an object).
        """
        ...

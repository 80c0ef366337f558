"""Shared JSON handling for secrets adapters.

Concrete adapters fetch raw strings (``get_secret``); this base turns them
into JSON objects so every backend reports malformed secrets the same way.
"""

import json
from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SecretsError


def parse_json_object(secret_id: str, raw: str) -> Result[dict[str, Any], SecretsError]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        parsed = None
    if not isinstance(parsed, dict):
        return Failure(
            error=SecretsError(
                f"Secret is not a valid JSON object: {secret_id}",
                code=ErrorCode.SECRET_INVALID_JSON,
            )
        )
    return Success(value=parsed)


class BaseSecretsAdapter:
    """Implements get_secret_json() on top of a subclass's get_secret()."""

    def get_secret(self, secret_id: str) -> Result[str, SecretsError]:
        raise NotImplementedError("Subclass must implement get_secret()")

    def get_secret_json(self, secret_id: str) -> Result[dict[str, Any], SecretsError]:
        """Fetch a secret and parse it as a JSON object.

        Example:
            >>> adapter.get_secret_json("arn:aws:secretsmanager:...:secret:db")
            Success(value={"username": "admin", "password": "..."})
        """
        match self.get_secret(secret_id):
            case Success(value=raw):
                return parse_json_object(secret_id, raw)
            case Failure(error=error):
                return Failure(error=error)

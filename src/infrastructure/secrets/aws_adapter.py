"""AWS Secrets Manager implementation of SecretsProtocol.

Secret strings are cached per adapter instance. The adapter is built once
per warm Lambda container, so each secret is read at most once per
container until refresh_cache() is called (e.g. after a rotation).
"""

from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SecretsError
from src.infrastructure.secrets.base_adapter import BaseSecretsAdapter

if TYPE_CHECKING:
    from mypy_boto3_secretsmanager import SecretsManagerClient

NOT_FOUND_ERROR_CODE = "ResourceNotFoundException"


class AWSAdapter(BaseSecretsAdapter):
    """Secrets Manager reader with an in-memory cache.

    Args:
        client: boto3 ``secretsmanager`` client.
    """

    def __init__(self, client: "SecretsManagerClient") -> None:
        self.client = client
        self._cache: dict[str, str] = {}

    def get_secret(self, secret_id: str) -> Result[str, SecretsError]:
        """Read a secret string by name or ARN.

        Failure codes:
            SECRET_NOT_FOUND: the secret does not exist.
            SECRET_ACCESS_DENIED: any other client or transport failure.
            SECRET_INVALID_JSON: the secret only has a binary value.
        """
        cached = self._cache.get(secret_id)
        if cached is not None:
            return Success(value=cached)

        try:
            response = self.client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == NOT_FOUND_ERROR_CODE:
                return Failure(
                    error=SecretsError(
                        f"Secret not found in AWS: {secret_id}",
                        code=ErrorCode.SECRET_NOT_FOUND,
                    )
                )
            return Failure(error=self._access_denied(secret_id, e))
        except BotoCoreError as e:
            return Failure(error=self._access_denied(secret_id, e))

        secret_string = response.get("SecretString")
        if secret_string is None:
            return Failure(
                error=SecretsError(
                    f"Secret has no string value: {secret_id}",
                    code=ErrorCode.SECRET_INVALID_JSON,
                )
            )

        self._cache[secret_id] = secret_string
        return Success(value=secret_string)

    def refresh_cache(self) -> None:
        self._cache.clear()

    @staticmethod
    def _access_denied(secret_id: str, error: Exception) -> SecretsError:
        return SecretsError(
            f"Failed to access AWS secret: {secret_id}",
            code=ErrorCode.SECRET_ACCESS_DENIED,
            details={"error": str(error)},
        )

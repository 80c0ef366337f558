"""Unit tests for the AWS Secrets Manager adapter.

Tests cover:
- Plain and JSON secrets
- Not-found, access and invalid JSON failures (Result, never raised)
- In-memory caching
"""

import json
from unittest.mock import Mock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.secrets.aws_adapter import AWSAdapter
from tests.conftest import AWS_REGION


@pytest.fixture
def secrets_client():
    with mock_aws():
        client = boto3.client("secretsmanager", region_name=AWS_REGION)
        client.create_secret(
            Name="db-credentials",
            SecretString=json.dumps({"username": "admin", "password": "s3cret"}),
        )
        client.create_secret(Name="plain", SecretString="not json")
        client.create_secret(Name="list", SecretString="[1, 2]")
        yield client


@pytest.mark.unit
class TestAWSAdapter:
    """Test AWSAdapter lookups."""

    def test_get_secret_returns_string(self, secrets_client):
        adapter = AWSAdapter(client=secrets_client)

        assert adapter.get_secret("plain") == Success(value="not json")

    def test_get_secret_json_parses_object(self, secrets_client):
        adapter = AWSAdapter(client=secrets_client)

        result = adapter.get_secret_json("db-credentials")

        assert result == Success(value={"username": "admin", "password": "s3cret"})

    def test_missing_secret_is_not_found(self, secrets_client):
        adapter = AWSAdapter(client=secrets_client)

        result = adapter.get_secret("missing")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SECRET_NOT_FOUND

    @pytest.mark.parametrize("secret_id", ["plain", "list"])
    def test_non_object_json_is_invalid(self, secrets_client, secret_id):
        adapter = AWSAdapter(client=secrets_client)

        result = adapter.get_secret_json(secret_id)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SECRET_INVALID_JSON

    def test_missing_secret_json_keeps_not_found(self, secrets_client):
        adapter = AWSAdapter(client=secrets_client)

        result = adapter.get_secret_json("missing")

        assert result.error.code == ErrorCode.SECRET_NOT_FOUND

    def test_other_client_errors_are_access_denied(self):
        client = Mock()
        client.get_secret_value.side_effect = ClientError(
            {"Error": {"Code": "AccessDeniedException", "Message": "nope"}},
            "GetSecretValue",
        )
        adapter = AWSAdapter(client=client)

        result = adapter.get_secret("db-credentials")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SECRET_ACCESS_DENIED

    def test_values_are_cached_until_refresh(self):
        client = Mock()
        client.get_secret_value.return_value = {"SecretString": "value"}
        adapter = AWSAdapter(client=client)

        adapter.get_secret("id")
        adapter.get_secret("id")
        assert client.get_secret_value.call_count == 1

        adapter.refresh_cache()
        adapter.get_secret("id")
        assert client.get_secret_value.call_count == 2

"""Secrets infrastructure package.

This package provides secrets management adapters implementing SecretsProtocol.
The country processor reads its database credentials through them when no
explicit database URL is configured.

Architecture:
- BaseSecretsAdapter: Shared functionality (get_secret_json implementation)
- AWSAdapter: AWS Secrets Manager with caching, inherits from BaseSecretsAdapter

Security:
- Read-only protocol (apps cannot modify secrets)
- Caching in adapters (one lookup per warm Lambda container)
"""

from src.infrastructure.secrets.aws_adapter import AWSAdapter
from src.infrastructure.secrets.base_adapter import BaseSecretsAdapter

__all__ = [
    "BaseSecretsAdapter",
    "AWSAdapter",
]

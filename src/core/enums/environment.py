"""Application environment types.

Defines the runtime environments the functions are deployed to.
Used by Settings to pick log rendering and adapter behaviour.

Environments:
- DEVELOPMENT: Local runs against a local AWS stack, human-readable logs
- TESTING: Automated test execution with mocked AWS services
- CI: Continuous integration environment
- PRODUCTION: Deployed Lambda functions
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

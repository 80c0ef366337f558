"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Async tests are marked automatically
2. AWS clients never reach a real account (fake credentials, moto)
3. Appointment factories shared across test modules
"""

import asyncio
from typing import Any
from unittest.mock import Mock

import pytest

from src.domain.entities.appointment import Appointment
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import (
    AppointmentDate,
    CenterId,
    CountryISO,
    InsuredId,
    MedicId,
    ScheduleId,
    SpecialtyId,
)
from src.infrastructure.validation.iso_date_validator import IsoDateValidator

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

AWS_REGION = "us-east-1"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never signs with a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", AWS_REGION)


@pytest.fixture
def mock_logger() -> Mock:
    """Logger mock whose bind() returns itself."""
    logger = Mock(spec=LoggerProtocol)
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def date_validator() -> IsoDateValidator:
    return IsoDateValidator()


# Test helper functions for domain entities


def make_appointment(**overrides: Any) -> Appointment:
    """Helper to create a valid Appointment for testing.

    Args:
        **overrides: Raw field values replacing the defaults
            (insured_id, schedule_id, country, center_id, specialty_id,
            medic_id, date, status).

    Returns:
        Appointment in pending status unless ``status`` is given.

    Usage:
        appointment = make_appointment()
        chilean = make_appointment(country="CL", schedule_id=7)
    """
    raw: dict[str, Any] = {
        "insured_id": "12345",
        "schedule_id": 98701,
        "country": "PE",
        "center_id": 101,
        "specialty_id": 105,
        "medic_id": 201,
        "date": "2025-12-25T10:00:00Z",
    }
    status = overrides.pop("status", None)
    raw.update(overrides)

    appointment = Appointment(
        insured_id=InsuredId(raw["insured_id"]),
        schedule_id=ScheduleId(raw["schedule_id"]),
        country=CountryISO(raw["country"]),
        center_id=CenterId(raw["center_id"]),
        specialty_id=SpecialtyId(raw["specialty_id"]),
        medic_id=MedicId(raw["medic_id"]),
        date=AppointmentDate(raw["date"], IsoDateValidator()),
    )
    if status is not None:
        appointment.assign_status(status)
    return appointment


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)

"""Database persistence infrastructure.

This module provides persistence functionality including:
- Base model for relational entities
- Database connection and session management
- DynamoDB appointment repository
- SQLAlchemy repository for the country processor
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.dynamodb_appointment_repository import (
    DynamoDBAppointmentRepository,
)

__all__ = [
    "BaseModel",
    "Database",
    "DynamoDBAppointmentRepository",
]

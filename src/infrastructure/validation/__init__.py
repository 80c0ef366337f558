"""Validation adapters."""

from src.infrastructure.validation.iso_date_validator import IsoDateValidator

__all__ = ["IsoDateValidator"]

"""Declarative base for the processor's relational tables.

Database models live in the infrastructure layer only; domain entities are
plain dataclasses mapped by repositories. Columns use portable types
because the same models run on MySQL (deployed) and SQLite (tests).

Column names follow the camelCase convention of the deployed schema
(``createdAt``, ``scheduleId``) while attributes stay snake_case.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Abstract base adding an auto-increment ``id`` and ``createdAt``."""

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"

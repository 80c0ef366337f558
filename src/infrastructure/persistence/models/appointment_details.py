"""AppointmentDetails database model.

Row written by a country processor for every scheduled appointment it
receives from its queue.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class AppointmentDetails(BaseModel):
    """Appointment details stored by the country processor.

    Fields:
        id: Auto-increment primary key (from BaseModel)
        created_at: Insert timestamp (from BaseModel)
        schedule_id: Schedule slot identifier, as text
        insured_id: Insured person identifier
        status: Processing status (always "DB_SAVED" when written)

    Example:
        details = AppointmentDetails(
            schedule_id="100",
            insured_id="00012",
            status="DB_SAVED",
        )
        session.add(details)
        await session.flush()  # details.id is populated
    """

    __tablename__ = "AppointmentDetails"

    schedule_id: Mapped[str] = mapped_column(
        "scheduleId",
        String(255),
        nullable=False,
    )

    insured_id: Mapped[str] = mapped_column(
        "insuredId",
        String(255),
        nullable=False,
    )

    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

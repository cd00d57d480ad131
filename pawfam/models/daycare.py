# pawfam/models/daycare.py
import uuid
from datetime import date, datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class DaycareBooking(SQLModel, table=True):
    """
    A customer's stay booking at a daycare center.
    """

    __tablename__ = "daycare_bookings"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    daycare_center: str | None = Field(
        default=None,
        max_length=100,
        description="Provider name; shown as 'Unknown Center' when missing",
    )

    pet_name: str = Field(max_length=100)
    pet_type: str = Field(max_length=50)

    start_date: date
    end_date: date

    total_amount: float = Field(
        default=0.0,
        ge=0,
        description="Amount charged for the stay",
    )

    # confirmed | canceled | completed
    status: str = Field(default="confirmed", index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        description="Creation timestamp (UTC)",
    )

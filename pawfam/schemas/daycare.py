# pawfam/schemas/daycare.py
import datetime as dt
import uuid
from typing import Literal

from pydantic import ConfigDict, field_validator, model_validator
from sqlmodel import SQLModel, Field

BookingStatus = Literal["confirmed", "canceled", "completed"]


class BookingCreate(SQLModel):
    """
    Payload for booking a daycare stay.

    Backend derives:
      - user_id from token
      - status = 'confirmed'
    """

    model_config = ConfigDict(extra="forbid")

    daycare_center: str | None = Field(default=None, max_length=100)
    pet_name: str = Field(max_length=100)
    pet_type: str = Field(max_length=50)
    start_date: dt.date
    end_date: dt.date
    total_amount: float = Field(ge=0)

    @field_validator("pet_name", "pet_type")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @model_validator(mode="after")
    def check_dates(self) -> "BookingCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class BookingRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    daycare_center: str | None
    pet_name: str
    pet_type: str
    start_date: dt.date
    end_date: dt.date
    total_amount: float
    status: BookingStatus
    created_at: dt.datetime

# pawfam/schemas/profile.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class ProfileUpdate(SQLModel):
    """Full upsert of the caller's profile."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    mobile_number: str | None = Field(default=None, max_length=20)
    residential_address: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class ProfileRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    mobile_number: str | None
    residential_address: str | None
    updated_at: datetime


class ProfileResponse(SQLModel):
    has_profile: bool
    profile: ProfileRead | None = None

# pawfam/models/adoption.py
import uuid
from datetime import date, datetime, time, timezone

from sqlmodel import SQLModel, Field


class VendorPet(SQLModel, table=True):
    """
    Adoption post published by a vendor.

    Column names follow the listing shape the adoption page normalizes,
    so rows can be fed through the same normalizer as the remote feed.
    """

    __tablename__ = "vendor_pets"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    vendor_id: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    name: str = Field(max_length=100)
    animal_type: str = Field(max_length=50, description="Dog, Cat, ...")
    breed: str = Field(default="", max_length=100)
    age: str = Field(default="", max_length=50, description="Free text, e.g. '2 years'")
    gender: str = Field(default="", max_length=20)
    size: str = Field(default="", max_length=20)
    description: str = Field(default="")
    image: str | None = Field(default=None)

    status: str = Field(default="Available", index=True)

    shelter: str = Field(
        max_length=100,
        description="Display name of the shelter / vendor",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )


class AdoptionApplication(SQLModel, table=True):
    """
    Adoption request submitted by a user for one listing.

    The request payload is nested (pet / personal info / experience /
    visit schedule); it is stored flattened here.
    """

    __tablename__ = "adoption_applications"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    # Pet summary (snapshot of the listing at submission time)
    pet_id: str = Field(index=True)
    pet_name: str
    pet_type: str
    pet_breed: str = Field(default="")
    pet_age: str = Field(default="")
    pet_shelter: str = Field(default="")

    # Personal info
    full_name: str
    email: str
    phone: str
    address: str

    # Experience
    experience_level: str
    experience_details: str | None = None
    other_pets: str | None = None
    other_pets_details: str | None = None

    # Visit schedule
    visit_date: date
    visit_time: time

    adoption_reason: str

    # pending | approved | rejected
    status: str = Field(default="pending", index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
